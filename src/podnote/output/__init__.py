"""Output sinks for rendered podcast notes."""

from podnote.output.sinks import (
    NOTE_EXTENSION,
    ActiveDocument,
    CursorInsertSink,
    CursorSink,
    NoteFileSink,
    NoteSink,
    note_path,
)

__all__ = [
    "NOTE_EXTENSION",
    "ActiveDocument",
    "CursorSink",
    "NoteSink",
    "CursorInsertSink",
    "NoteFileSink",
    "note_path",
]
