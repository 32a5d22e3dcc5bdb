"""
Turns the raw text of an in-flight generation into documents the editor can show.

The model streams a full HTML page, usually preceded by some chatter. While
text arrives we keep cutting out everything from <!DOCTYPE html> onward,
close it with </html> so the preview does not render half-finished markup, and
hand it to the editor no more than once every RENDER_INTERVAL seconds. Once a
real </html> shows up the page is done and the stream is finalized, even if
the transport still has trailing text queued.
"""

import asyncio
import re
import time
from enum import Enum
from typing import AsyncIterator, Callable, Optional

from semphcode.models import StreamOutcome
from semphcode.logger import get_logger

logger = get_logger(__name__)

DOCUMENT_START = "<!DOCTYPE html>"
DOCUMENT_END = "</html>"
RENDER_INTERVAL = 0.3
SCROLL_THRESHOLD = 200

PARTIAL_DOCUMENT_PATTERN = re.compile(r"<!DOCTYPE html>[\s\S]*")
FULL_DOCUMENT_PATTERN = re.compile(r"<!DOCTYPE html>[\s\S]*</html>")


class TransportError(Exception):
    """Raised when the completion transport fails or sends something unreadable"""


class StreamStateError(Exception):
    """Raised when a stream is driven from the wrong state"""


class StreamState(str, Enum):
    IDLE = "idle"
    STREAMING = "streaming"
    FINALIZING = "finalizing"
    ERRORED = "errored"


class StreamNormalizer:
    """State machine for one generation request at a time.

    on_render receives display candidates and the final document,
    on_scroll is called whenever the candidate is long enough to scroll the
    editor to the end, on_error receives the user-visible failure message.
    """

    def __init__(
        self,
        on_render: Callable[[str], None],
        on_scroll: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
        clock: Callable[[], float] = time.monotonic,
        render_interval: float = RENDER_INTERVAL,
    ):
        self.on_render = on_render
        self.on_scroll = on_scroll
        self.on_error = on_error
        self.clock = clock
        self.render_interval = render_interval

        self.state = StreamState.IDLE
        self.buffer = ""
        self.display_candidate: Optional[str] = None
        self.last_rendered: Optional[str] = None
        self.last_render_time: Optional[float] = None

    def begin(self):
        if self.state != StreamState.IDLE:
            raise StreamStateError(f"Cannot start a stream while {self.state.value}")
        self.buffer = ""
        self.display_candidate = None
        self.last_rendered = None
        self.last_render_time = None
        self.state = StreamState.STREAMING
        logger.debug("Stream started")

    def feed(self, chunk: str) -> bool:
        """Apply one chunk. Returns True once the buffer holds a closed document."""
        if self.state != StreamState.STREAMING:
            raise StreamStateError(f"Cannot accept chunks while {self.state.value}")

        self.buffer += chunk

        match = PARTIAL_DOCUMENT_PATTERN.search(self.buffer)
        if match:
            candidate = match.group(0)
            if DOCUMENT_END not in candidate:
                candidate += f"\n{DOCUMENT_END}"
            self.display_candidate = candidate

            now = self.clock()
            if (
                self.last_render_time is None
                or now - self.last_render_time > self.render_interval
            ):
                self._render(candidate)
                self.last_render_time = now

            if len(candidate) > SCROLL_THRESHOLD and self.on_scroll:
                self.on_scroll()

        return DOCUMENT_END in self.buffer

    def finalize(self, early: bool = False) -> StreamOutcome:
        if self.state != StreamState.STREAMING:
            raise StreamStateError(f"Cannot finalize while {self.state.value}")
        self.state = StreamState.FINALIZING

        match = FULL_DOCUMENT_PATTERN.search(self.buffer)
        if match:
            document = match.group(0)
        else:
            logger.warning(
                f"Stream ended without a complete document ({len(self.buffer)} chars received)"
            )
            document = self.display_candidate or ""

        if document and document != self.last_rendered:
            self._render(document)

        self.state = StreamState.IDLE
        logger.info(
            f"Stream finalized: document length {len(document)}, early={early}"
        )
        return StreamOutcome(
            status="completed", document=document, early_terminated=early
        )

    def fail(self, message: str) -> StreamOutcome:
        """Surface a transport failure; whatever was rendered stays in place"""
        self.state = StreamState.ERRORED
        logger.error(f"Stream failed: {message}")
        if self.on_error:
            self.on_error(message)
        self.state = StreamState.IDLE
        return StreamOutcome(
            status="error", document=self.last_rendered or "", message=message
        )

    def cancel(self) -> StreamOutcome:
        logger.info("Stream cancelled")
        self.state = StreamState.IDLE
        return StreamOutcome(
            status="cancelled",
            document=self.last_rendered or "",
            message="Generation cancelled",
        )

    async def consume(self, chunks: AsyncIterator[str]) -> StreamOutcome:
        """Drive a whole stream from an async iterator of text chunks"""
        self.begin()
        early = False
        try:
            async for chunk in chunks:
                if self.feed(chunk):
                    early = True
                    break
        except TransportError as e:
            return self.fail(str(e))
        except asyncio.CancelledError:
            self.cancel()
            raise
        finally:
            aclose = getattr(chunks, "aclose", None)
            if aclose is not None:
                await aclose()

        return self.finalize(early=early)

    def _render(self, document: str):
        self.last_rendered = document
        self.on_render(document)
