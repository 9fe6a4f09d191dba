"""HTML renderer: writes a RenderFrame as a self-contained SVG page."""

from __future__ import annotations

import html
import logging
from pathlib import Path

from lighthousegraph.config import RenderSettings
from lighthousegraph.errors import GraphError
from lighthousegraph.models.frame import RenderFrame
from lighthousegraph.render.base import RenderAdapter
from lighthousegraph.render.html_template import HTML_TEMPLATE

logger = logging.getLogger(__name__)

DEPENDENCY_FILL = "#EC5800"
DEFAULT_FILL = "currentColor"
LINK_STROKE = "#555"
LABEL_FILL = "#2c3e50"
DEPENDENCY_LABEL_FILL = "#34495e"


class HtmlGraphRenderer(RenderAdapter):
    """Renders the latest frame as HTML with an inline SVG graph.

    As a RenderAdapter it only remembers the last frame; call to_html()
    or write() to produce output.
    """

    def __init__(
        self,
        settings: RenderSettings | None = None,
        title: str = "Model Dependency Graph",
    ) -> None:
        self.settings = settings or RenderSettings()
        self.title = title
        self.frame: RenderFrame | None = None
        self.error: GraphError | None = None

    def render(self, frame: RenderFrame) -> None:
        self.frame = frame
        self.error = None

    def render_error(self, error: GraphError) -> None:
        self.error = error

    def clear(self) -> None:
        self.frame = None

    def to_html(self, frame: RenderFrame | None = None) -> str:
        """Render a frame (the last one received if None) as an HTML page."""
        if frame is None:
            frame = self.frame
        if frame is None:
            body = self._error_svg(self.error)
            summary = "No graph available"
        else:
            body = self.to_svg(frame)
            targets = sum(1 for n in frame.nodes if n.is_dependency_target)
            summary = (
                f"{len(frame.nodes)} nodes, {len(frame.edges)} edges, "
                f"{targets} dependencies (tick {frame.tick}, alpha {frame.alpha:.3f})"
            )

        return (
            HTML_TEMPLATE.replace("{{TITLE}}", html.escape(self.title))
            .replace("{{SUMMARY}}", html.escape(summary))
            .replace("{{SVG}}", body)
        )

    def write(self, output_path: Path | str, frame: RenderFrame | None = None) -> Path:
        path = Path(output_path)
        path.write_text(self.to_html(frame))
        logger.info("Graph snapshot written to %s", path)
        return path

    def view_box(self, frame: RenderFrame) -> tuple[float, float, float, float]:
        """Viewport centred on the origin, grown to fit every node."""
        s = self.settings
        half_w = (s.width - 2 * s.margin) / 2
        half_h = (s.height - 2 * s.margin) / 2
        min_x, min_y, max_x, max_y = frame.bounds()
        # Labels sit to the right of each node
        pad = s.node_radius + s.margin
        half_w = max(half_w, abs(min_x) + pad, abs(max_x) + pad + 8 * s.font_size)
        half_h = max(half_h, abs(min_y) + pad, abs(max_y) + pad)
        return -half_w, -half_h, 2 * half_w, 2 * half_h

    def to_svg(self, frame: RenderFrame) -> str:
        s = self.settings
        vx, vy, vw, vh = self.view_box(frame)
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{s.width}" height="{s.height}" '
            f'viewBox="{vx:.2f} {vy:.2f} {vw:.2f} {vh:.2f}">',
            f'<g class="links" stroke="{LINK_STROKE}" stroke-opacity="0.8">',
        ]
        for e in frame.edges:
            lines.append(
                f'<line x1="{e.x1:.2f}" y1="{e.y1:.2f}" x2="{e.x2:.2f}" y2="{e.y2:.2f}" '
                f'stroke-width="1"><title>{html.escape(e.source)} &#8594; '
                f"{html.escape(e.target)}</title></line>"
            )
        lines.append("</g>")
        lines.append('<g class="nodes">')
        for n in frame.nodes:
            fill = DEPENDENCY_FILL if n.is_dependency_target else DEFAULT_FILL
            label_fill = DEPENDENCY_LABEL_FILL if n.is_dependency_target else LABEL_FILL
            name = html.escape(n.name)
            glyph = (
                f'<circle cx="{n.x:.2f}" cy="{n.y:.2f}" r="{s.node_radius}" fill="{fill}" '
                f'stroke="#fff" stroke-width="1.5"><title>{name}</title></circle>'
                f'<text x="{n.x:.2f}" y="{n.y:.2f}" dx="14" dy="4" font-size="{s.font_size}" '
                f'fill="{label_fill}">{name}</text>'
            )
            if n.detail_url is not None:
                href = html.escape(n.detail_url, quote=True)
                glyph = f'<a href="{href}" target="_blank">{glyph}</a>'
            lines.append(glyph)
        lines.append("</g>")
        lines.append("</svg>")
        return "\n".join(lines)

    def _error_svg(self, error: GraphError | None) -> str:
        message = html.escape(str(error)) if error else "Nothing to display"
        s = self.settings
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{s.width}" height="{s.height}">'
            f'<text x="{s.margin}" y="{s.margin + s.font_size}" font-size="{s.font_size}" '
            f'fill="#f85149">{message}</text></svg>'
        )
