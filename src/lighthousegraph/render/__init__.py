"""Render adapters for layout frames."""

from lighthousegraph.render.base import FrameBuffer, RenderAdapter
from lighthousegraph.render.html_renderer import HtmlGraphRenderer

__all__ = ["RenderAdapter", "FrameBuffer", "HtmlGraphRenderer"]
