"""Destinations for rendered notes.

Two sinks exist, and exactly one receives each rendered note:

- CursorInsertSink: splice text into the active document at the cursor
- NoteFileSink: create a new Markdown note inside the vault

Both write through a temp file + rename so a failure never leaves a
half-written file behind.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field

from podnote.utils.errors import (
    NoActiveDocumentError,
    NoteExistsError,
    OutputError,
    SecurityError,
)

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".md"


class CursorSink(Protocol):
    """Receives text at the current editing position."""

    def insert_at_cursor(self, text: str) -> Path: ...


class NoteSink(Protocol):
    """Creates new persisted notes."""

    def create_note(self, path: str, text: str) -> Path: ...


class ActiveDocument(BaseModel):
    """The document being edited and the cursor position inside it.

    Lines and columns are zero-based, as in most editor APIs.
    """

    path: Path = Field(..., description="Markdown file being edited")
    line: int = Field(0, ge=0, description="Cursor line")
    column: int = Field(0, ge=0, description="Cursor column")


def note_path(folder: str, file_name: str) -> str:
    """Build a vault-relative note path: folder + file name + extension."""
    return f"{folder}{file_name}{NOTE_EXTENSION}"


def write_file_atomic(file_path: Path, content: str) -> None:
    """Write file atomically with guaranteed durability.

    Writes to a temporary file in the same directory, fsyncs, then renames
    over the target.

    Args:
        file_path: Target file path
        content: File content

    Raises:
        OSError: If write or sync fails
    """
    temp_fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent, prefix=".tmp_", suffix=NOTE_EXTENSION
    )

    try:
        with open(temp_fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        Path(temp_path).replace(file_path)
    except Exception:
        Path(temp_path).unlink(missing_ok=True)
        raise


class CursorInsertSink:
    """Insert text at the cursor of the active document."""

    def __init__(self, document: ActiveDocument | None = None) -> None:
        self.document = document

    def insert_at_cursor(self, text: str) -> Path:
        """Insert ``text`` at the cursor position.

        A cursor past the end of a line is clamped to the line end, and a
        cursor past the last line appends to the document.

        Raises:
            NoActiveDocumentError: If there is no active document
            OutputError: If the document is not valid UTF-8
        """
        if self.document is None or not self.document.path.is_file():
            raise NoActiveDocumentError("No active document to insert into")

        path = self.document.path
        try:
            content = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise OutputError(f"Active document is not valid UTF-8: {path}") from e

        # Only "\n" separates lines; CRLF endings are kept as they are on disk
        lines = content.split("\n")
        if self.document.line >= len(lines):
            offset = len(content)
        else:
            offset = sum(len(line) + 1 for line in lines[: self.document.line])
            current = lines[self.document.line].removesuffix("\r")
            offset += min(self.document.column, len(current))

        write_file_atomic(path, content[:offset] + text + content[offset:])
        logger.info(f"Inserted note into {path} at line {self.document.line}")
        return path


class NoteFileSink:
    """Create new notes inside a vault directory.

    Example:
        >>> sink = NoteFileSink(vault_dir=Path("~/notes").expanduser())
        >>> sink.create_note("Podcasts/Ep 1.md", "# Ep 1")
        PosixPath('/home/me/notes/Podcasts/Ep 1.md')
    """

    def __init__(self, vault_dir: Path) -> None:
        self.vault_dir = vault_dir

    def create_note(self, path: str, text: str) -> Path:
        """Create a note at ``path`` relative to the vault.

        Raises:
            SecurityError: If the path resolves outside the vault
            NoteExistsError: If a note already exists at the path
        """
        target = self.vault_dir / path

        try:
            target.resolve().relative_to(self.vault_dir.resolve())
        except ValueError:
            raise SecurityError(
                f"Invalid note path: {path}. Resolved path is outside the vault."
            )

        if target.exists():
            raise NoteExistsError(f"Note already exists: {target}")

        target.parent.mkdir(parents=True, exist_ok=True)
        write_file_atomic(target, text)
        logger.info(f"Created note {target}")
        return target
