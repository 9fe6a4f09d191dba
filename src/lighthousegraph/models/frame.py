"""Per-tick snapshot handed to render adapters."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NodeFrame(BaseModel):
    """Node position plus the data a renderer needs to style it."""

    name: str
    x: float
    y: float
    is_dependency_target: bool = False
    detail_url: str | None = None


class EdgeFrame(BaseModel):
    """Edge endpoints resolved to the current node positions."""

    source: str
    target: str
    x1: float
    y1: float
    x2: float
    y2: float


class RenderFrame(BaseModel):
    """Positions of every node and edge after one simulation tick."""

    tick: int = 0
    alpha: float = 0.0
    nodes: list[NodeFrame] = Field(default_factory=list)
    edges: list[EdgeFrame] = Field(default_factory=list)

    def node(self, name: str) -> NodeFrame | None:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box (min_x, min_y, max_x, max_y); all zero for an empty frame."""
        if not self.nodes:
            return 0.0, 0.0, 0.0, 0.0
        xs = [n.x for n in self.nodes]
        ys = [n.y for n in self.nodes]
        return min(xs), min(ys), max(xs), max(ys)
