"""Editor session: the current page, its separated files and the AI request guard"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from semphcode.models import GenerationRequest
from semphcode.normalizer import StreamNormalizer
from semphcode.prompt import DEFAULT_HTML
from semphcode.separator import decompose, compose
from semphcode.transport import RelayClient
from semphcode.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ProcessingResult:
    """Result of asking the AI for a new version of the page"""

    status: str  # "success", "error" or "ignored"
    message: str
    updated_html: Optional[str] = None


class EditorSession:
    """Holds one editing session in memory.

    Only one generation may be in flight; is_ai_working is the guard. Every
    time the page changes the separated files are rebuilt from scratch.
    """

    def __init__(
        self,
        relay: Optional[RelayClient] = None,
        html: str = DEFAULT_HTML,
        on_scroll: Optional[Callable[[], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.relay = relay or RelayClient()
        self.on_scroll = on_scroll
        self.clock = clock
        self.previous_prompt = ""
        self.is_ai_working = False
        self.set_html(html)

    def set_html(self, html: str):
        self.html = html
        self.files = decompose(html)

    @property
    def preview(self) -> str:
        return compose(self.files)

    def update_file(
        self,
        file_type: str,
        value: str,
        index: Optional[int] = None,
        name: Optional[str] = None,
    ):
        """Apply an edit made to one of the separated files"""
        if file_type == "html":
            self.files.skeleton = value
        elif file_type == "css" and index is not None:
            self._check_index(self.files.styles, index, file_type)
            self.files.styles[index] = value
        elif file_type == "js" and index is not None:
            self._check_index(self.files.scripts, index, file_type)
            self.files.scripts[index] = value
        elif file_type == "component" and name:
            self.files.components[name] = value
        else:
            raise ValueError(f"Cannot edit file of type {file_type!r}")

    @staticmethod
    def _check_index(blocks, index: int, file_type: str):
        if not 0 <= index < len(blocks):
            raise ValueError(f"No {file_type} file at index {index}")

    def reset(self):
        self.previous_prompt = ""
        self.set_html(DEFAULT_HTML)

    async def ask(self, prompt: str) -> ProcessingResult:
        """Stream a new version of the page from the relay"""
        if self.is_ai_working or not prompt.strip():
            return ProcessingResult(
                status="ignored", message="A generation is already running or prompt is empty"
            )

        self.is_ai_working = True
        request = GenerationRequest(
            prompt=prompt,
            html=self.html,
            previous_prompt=self.previous_prompt or None,
        )
        normalizer = StreamNormalizer(
            on_render=self.set_html, on_scroll=self.on_scroll, clock=self.clock
        )

        try:
            outcome = await normalizer.consume(self.relay.stream(request))
        finally:
            self.is_ai_working = False

        if outcome.status == "error":
            return ProcessingResult(status="error", message=outcome.message)

        self.previous_prompt = prompt
        logger.info(f"Generation finished, page length: {len(self.html)}")
        return ProcessingResult(
            status="success",
            message="AI responded successfully",
            updated_html=self.html,
        )
