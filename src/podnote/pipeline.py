"""Extraction pipeline: URL in, rendered note delivered to one sink.

Each run walks resolve -> fetch -> parse -> extract -> render -> deliver.
Every failure is turned into a PipelineResult in the ``failed`` state with a
single user notice, and the orchestrator always ends back in ``idle``.
"""

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field

from podnote.config.schema import PodnoteConfig
from podnote.extraction.extractors import extract_metadata
from podnote.extraction.models import RenderedNote
from podnote.output.sinks import CursorSink, NoteSink, note_path
from podnote.services.document import DocumentTree, parse_document
from podnote.services.resolver import PodcastService, resolve_url
from podnote.templates.engine import render_filename, render_template, sanitize_filename
from podnote.utils.errors import (
    MalformedDocumentError,
    NetworkError,
    OutputError,
    PipelineBusyError,
    UnsupportedServiceError,
)

logger = logging.getLogger(__name__)

NOTICE_UNSUPPORTED = "This is not a valid podcast service."
NOTICE_LOADING = "Loading podcast info"
NOTICE_NETWORK = "Could not reach the podcast service."
NOTICE_INVALID = "The URL is invalid."
NOTICE_DELIVERY = "Could not save the podcast note."


class PipelineState(str, Enum):
    """Orchestrator states."""

    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    PARSING = "parsing"
    EXTRACTING = "extracting"
    RENDERING = "rendering"
    DELIVERED = "delivered"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Why a run ended in the failed state."""

    UNSUPPORTED_SERVICE = "unsupported_service"
    NETWORK_ERROR = "network_error"
    MALFORMED_DOCUMENT = "malformed_document"
    DELIVERY_ERROR = "delivery_error"


class PipelineResult(BaseModel):
    """Outcome of one orchestrator run."""

    state: PipelineState
    failure: FailureReason | None = None
    note: RenderedNote | None = None
    output_path: Path | None = None
    states: list[PipelineState] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state == PipelineState.DELIVERED


class TriggerContext:
    """The UI surface that started a run.

    The trigger is usually dismissed right after dispatch, long before the
    fetch completes. Notices are only shown while it is alive.
    """

    def __init__(self) -> None:
        self.alive = True

    def dispose(self) -> None:
        self.alive = False


class Fetcher(Protocol):
    def fetch_body(self, host: str, path: str) -> Awaitable[str]: ...


Notifier = Callable[[str], None]
ConfigSaver = Callable[[PodnoteConfig], None]
DocumentParser = Callable[[str], DocumentTree]


class ExtractionOrchestrator:
    """Run the extraction pipeline for one URL at a time.

    Example:
        >>> orchestrator = ExtractionOrchestrator(
        ...     config=config,
        ...     fetcher=PageFetcher(),
        ...     cursor_sink=CursorInsertSink(document),
        ...     note_sink=NoteFileSink(config.vault_path),
        ...     notify=console.print,
        ... )
        >>> result = await orchestrator.run("https://open.spotify.com/episode/abc123")
    """

    def __init__(
        self,
        config: PodnoteConfig,
        fetcher: Fetcher,
        cursor_sink: CursorSink,
        note_sink: NoteSink,
        notify: Notifier,
        parser: DocumentParser = parse_document,
        save_config: ConfigSaver | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            config: Shared configuration, read at each step
            fetcher: Page retrieval collaborator
            cursor_sink: Used when ``config.at_cursor`` is true
            note_sink: Used when ``config.at_cursor`` is false
            notify: Shows a one-line notice to the user
            parser: Turns a page body into a DocumentTree
            save_config: Persists the config after the active service changes
            clock: Source of the retrieval timestamp
        """
        self.config = config
        self.fetcher = fetcher
        self.cursor_sink = cursor_sink
        self.note_sink = note_sink
        self.notify = notify
        self.parser = parser
        self.save_config = save_config
        self.clock = clock

        self.state = PipelineState.IDLE
        self._busy = False
        self._states: list[PipelineState] = []

    def _enter(self, state: PipelineState) -> None:
        logger.debug(f"Pipeline state: {self.state.value} -> {state.value}")
        self.state = state
        self._states.append(state)

    def _notice(self, message: str, trigger: TriggerContext | None) -> None:
        if trigger is not None and not trigger.alive:
            logger.debug(f"Trigger dismissed, notice not shown: {message}")
            return
        self.notify(message)

    def _fail(
        self,
        reason: FailureReason,
        notice: str,
        trigger: TriggerContext | None,
        note: RenderedNote | None = None,
    ) -> PipelineResult:
        self._enter(PipelineState.FAILED)
        self._notice(notice, trigger)
        return PipelineResult(
            state=PipelineState.FAILED,
            failure=reason,
            note=note,
            states=list(self._states),
        )

    async def run(self, url: str, trigger: TriggerContext | None = None) -> PipelineResult:
        """Run the pipeline once for ``url``.

        Args:
            url: Episode URL exactly as entered
            trigger: Context that started the run, if any

        Returns:
            PipelineResult describing the final state

        Raises:
            PipelineBusyError: If a run is already in flight
        """
        if self._busy:
            raise PipelineBusyError("An extraction is already running")

        self._busy = True
        self._states = []
        try:
            return await self._run(url, trigger)
        finally:
            self.state = PipelineState.IDLE
            self._busy = False

    async def _run(self, url: str, trigger: TriggerContext | None) -> PipelineResult:
        self._enter(PipelineState.RESOLVING)
        try:
            request = resolve_url(url)
        except UnsupportedServiceError as e:
            logger.info(str(e))
            return self._fail(FailureReason.UNSUPPORTED_SERVICE, NOTICE_UNSUPPORTED, trigger)

        self._remember_service(request.service)

        self._enter(PipelineState.FETCHING)
        self._notice(NOTICE_LOADING, trigger)
        try:
            body = await self.fetcher.fetch_body(request.host, request.path)
        except NetworkError as e:
            logger.warning(f"Fetch failed: {e}")
            return self._fail(FailureReason.NETWORK_ERROR, NOTICE_NETWORK, trigger)

        self._enter(PipelineState.PARSING)
        tree = self.parser(body)

        self._enter(PipelineState.EXTRACTING)
        try:
            metadata = extract_metadata(tree, request.service, url, now=self.clock())
        except MalformedDocumentError as e:
            logger.debug(f"Extraction failed for {url}: missing {e.field} ({e})")
            return self._fail(FailureReason.MALFORMED_DOCUMENT, NOTICE_INVALID, trigger)

        self._enter(PipelineState.RENDERING)
        text = render_template(self.config.podcast_template, metadata, url)
        file_name = ""
        if not self.config.at_cursor:
            file_name = render_filename(self.config.file_name, metadata)
            if not file_name.strip():
                file_name = sanitize_filename(metadata.title)
        note = RenderedNote(text=text, suggested_title=metadata.title, file_name=file_name)

        try:
            if self.config.at_cursor:
                output_path = self.cursor_sink.insert_at_cursor(note.text)
            else:
                output_path = self.note_sink.create_note(
                    note_path(self.config.folder, note.file_name), note.text
                )
        except (OutputError, OSError) as e:
            logger.warning(f"Delivery failed: {e}")
            return self._fail(FailureReason.DELIVERY_ERROR, NOTICE_DELIVERY, trigger, note=note)

        self._enter(PipelineState.DELIVERED)
        return PipelineResult(
            state=PipelineState.DELIVERED,
            note=note,
            output_path=output_path,
            states=list(self._states),
        )

    def _remember_service(self, service: PodcastService) -> None:
        """Record the resolved service as the configured default."""
        if self.config.podcast_service == service:
            return

        self.config.podcast_service = service
        if self.save_config is None:
            return
        try:
            self.save_config(self.config)
        except OSError as e:
            logger.warning(f"Could not persist podcast service: {e}")
