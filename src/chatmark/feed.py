"""Simulated streaming: reveal a message one character per tick."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chatmark.parser.base import BlockNode, Parser
from chatmark.parser.md_parser import MarkdownParser

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 0.015


@dataclass(slots=True)
class Frame:
    text: str
    blocks: list[BlockNode] = field(default_factory=list)
    streaming: bool = False


class FeedDriver:
    """Grow a displayed prefix of ``target`` by one character every ``interval`` seconds.

    Each tick re-parses the prefix and passes a :class:`Frame` to ``on_frame``.
    The run is a single asyncio task that ends on its own once the whole
    target is shown, or is cancelled by :meth:`close`. Feeding a different
    target restarts from an empty prefix.
    """

    def __init__(
        self,
        on_frame: Callable[[Frame], None],
        *,
        interval: float = DEFAULT_INTERVAL,
        parser: Parser | None = None,
    ) -> None:
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self._on_frame = on_frame
        self._interval = interval
        self._parser = parser or MarkdownParser()
        self._target = ""
        self._current_length = 0
        self._is_complete = False
        self._task: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def target(self) -> str:
        return self._target

    @property
    def current_length(self) -> int:
        return self._current_length

    @property
    def displayed_text(self) -> str:
        return self._target[: self._current_length]

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def streaming(self) -> bool:
        """Whether the trailing streaming indicator should be shown."""
        return not self._is_complete and self._current_length < len(self._target)

    def feed(self, text: str, *, is_complete: bool = False) -> None:
        """Set the final text to reveal.

        Must be called from a running event loop. The same text fed again
        only updates the completion flag and re-emits the current frame.
        """
        if self._closed:
            raise RuntimeError("feed driver is closed")

        if text == self._target and (self.running or self._current_length > 0):
            if is_complete != self._is_complete:
                self._is_complete = is_complete
                self._emit()
            return

        loop = asyncio.get_running_loop()
        self._cancel()
        self._target = text
        self._current_length = 0
        self._is_complete = is_complete
        if not text:
            return

        logger.debug("feed run started (%d chars, interval=%.3fs)", len(text), self._interval)
        task = loop.create_task(self._run())
        task.add_done_callback(self._on_done)
        self._task = task

    async def wait(self) -> None:
        """Wait until the current run finishes; re-raise a display failure."""
        task = self._task
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()

    def close(self) -> None:
        """Stop any pending tick. Safe to call more than once."""
        self._cancel()
        self._closed = True

    async def __aenter__(self) -> FeedDriver:
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    async def _run(self) -> None:
        while self._current_length < len(self._target):
            await asyncio.sleep(self._interval)
            self._current_length += 1
            self._emit()

    def _emit(self) -> None:
        text = self.displayed_text
        self._on_frame(Frame(text=text, blocks=self._parser.parse(text), streaming=self.streaming))

    def _cancel(self) -> None:
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("feed run cancelled at %d/%d chars", self._current_length, len(self._target))

    def _on_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        if task.exception() is not None:
            logger.error("feed run failed: %r", task.exception())
            return
        logger.debug("feed run completed (%d chars)", self._current_length)
