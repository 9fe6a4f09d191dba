"""Render adapter boundary between the layout engine and any drawing surface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from lighthousegraph.errors import GraphError
from lighthousegraph.models.frame import RenderFrame


class RenderAdapter(ABC):
    """Base class for anything that draws RenderFrames."""

    @abstractmethod
    def render(self, frame: RenderFrame) -> None:
        """Draw or update primitives for one tick."""
        ...

    def render_error(self, error: GraphError) -> None:
        """Show a fallback state after a failed rebuild."""

    def clear(self) -> None:
        """Drop whatever is currently drawn."""


class FrameBuffer(RenderAdapter):
    """Keeps the most recent frames in memory.

    Handy for headless hosts and tests that step the engine synchronously.
    """

    def __init__(self, maxlen: int = 1) -> None:
        self.frames: deque[RenderFrame] = deque(maxlen=maxlen)
        self.errors: list[GraphError] = []

    @property
    def latest(self) -> RenderFrame | None:
        return self.frames[-1] if self.frames else None

    def render(self, frame: RenderFrame) -> None:
        self.frames.append(frame)

    def render_error(self, error: GraphError) -> None:
        self.errors.append(error)

    def clear(self) -> None:
        self.frames.clear()
