"""Tests for render adapters."""

from pathlib import Path

import pytest

from lighthousegraph.config import RenderSettings
from lighthousegraph.errors import FetchError
from lighthousegraph.models.frame import NodeFrame, RenderFrame
from lighthousegraph.render.base import FrameBuffer, RenderAdapter
from lighthousegraph.render.html_renderer import (
    DEFAULT_FILL,
    DEPENDENCY_FILL,
    HtmlGraphRenderer,
)


@pytest.fixture
def frame(engine) -> RenderFrame:
    return engine.frame()


@pytest.fixture
def renderer() -> HtmlGraphRenderer:
    return HtmlGraphRenderer(title="Test Graph")


class TestHtmlGraphRenderer:
    def test_renders_every_node_and_edge(self, renderer, frame):
        svg = renderer.to_svg(frame)
        assert svg.count("<circle") == len(frame.nodes)
        assert svg.count("<line") == len(frame.edges)
        assert ">llama-2-7b</text>" in svg

    def test_dependency_colouring(self, renderer, frame):
        svg = renderer.to_svg(frame)
        assert svg.count(f'fill="{DEPENDENCY_FILL}"') == 4
        assert svg.count(f'fill="{DEFAULT_FILL}"') == 2
        assert 'stroke="#555"' in svg

    def test_only_tracked_nodes_link_out(self, renderer, frame):
        svg = renderer.to_svg(frame)
        assert svg.count("<a href=") == 4
        assert '<a href="/BeSLighthouse/model_report/vicuna-7b" target="_blank">' in svg
        assert "/BeSLighthouse/model_report/sentencepiece" not in svg

    def test_names_escaped(self, renderer):
        frame = RenderFrame(nodes=[NodeFrame(name="<script>", x=0, y=0)])
        svg = renderer.to_svg(frame)
        assert "<script>" not in svg
        assert "&lt;script&gt;" in svg

    def test_view_box_fits_far_nodes(self, renderer):
        frame = RenderFrame(nodes=[NodeFrame(name="far", x=-2000, y=1500)])
        vx, vy, vw, vh = renderer.view_box(frame)
        assert vx < -2000 and vx + vw > 2000
        assert vy + vh > 1500

    def test_html_page(self, renderer, frame):
        renderer.render(frame)
        page = renderer.to_html()
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Test Graph</title>" in page
        assert "6 nodes, 6 edges, 4 dependencies" in page
        assert "{{" not in page

    def test_error_page(self, renderer):
        renderer.render_error(FetchError("Failed to fetch data. Status: 500", status_code=500))
        page = renderer.to_html()
        assert "No graph available" in page
        assert "Status: 500" in page

    def test_render_clears_error(self, renderer, frame):
        renderer.render_error(FetchError("boom"))
        renderer.render(frame)
        assert renderer.error is None

    def test_error_keeps_last_frame(self, renderer, frame):
        renderer.render(frame)
        renderer.render_error(FetchError("boom"))
        assert renderer.frame is frame

    def test_write(self, renderer, frame, tmp_path: Path):
        out = renderer.write(tmp_path / "graph.html", frame)
        assert out.exists()
        assert "<svg" in out.read_text()

    def test_custom_sizes(self, frame):
        renderer = HtmlGraphRenderer(RenderSettings(width=400, height=300, node_radius=4.5))
        svg = renderer.to_svg(frame)
        assert 'width="400" height="300"' in svg
        assert 'r="4.5"' in svg


class TestFrameBuffer:
    def test_keeps_latest(self, engine):
        buffer = FrameBuffer(maxlen=2)
        engine.add_listener(buffer.render)
        for _ in range(3):
            engine.step()
        assert [f.tick for f in buffer.frames] == [2, 3]
        assert buffer.latest.tick == 3

    def test_errors_and_clear(self, frame):
        buffer = FrameBuffer()
        buffer.render(frame)
        buffer.render_error(FetchError("boom"))
        buffer.clear()
        assert buffer.latest is None
        assert len(buffer.errors) == 1

    def test_adapter_defaults_are_noops(self, frame):
        class Recorder(RenderAdapter):
            def __init__(self):
                self.frames = []

            def render(self, frame):
                self.frames.append(frame)

        recorder = Recorder()
        recorder.render(frame)
        recorder.render_error(FetchError("boom"))
        recorder.clear()
        assert recorder.frames == [frame]
