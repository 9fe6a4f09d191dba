"""Graph models: an indexed node arena with index-based edges."""

from __future__ import annotations

from pydantic import BaseModel, Field, PrivateAttr

from lighthousegraph.errors import DataShapeError


class GraphNode(BaseModel):
    """A uniquely named vertex plus its simulation state.

    Position and velocity belong to the layout engine. The pin (fx, fy)
    is only written through pin()/unpin() by the interaction controller.
    """

    name: str
    index: int = Field(ge=0, description="Position in DependencyGraph.nodes")
    is_dependency_target: bool = False
    detail_url: str | None = None
    x: float | None = None
    y: float | None = None
    vx: float = 0.0
    vy: float = 0.0
    fx: float | None = None
    fy: float | None = None

    @property
    def is_pinned(self) -> bool:
        return self.fx is not None and self.fy is not None

    def pin(self, x: float, y: float) -> None:
        """Fix the node at (x, y) until unpin() is called."""
        self.fx = float(x)
        self.fy = float(y)

    def unpin(self) -> None:
        """Return the node to free simulation."""
        self.fx = None
        self.fy = None


class GraphEdge(BaseModel):
    """Directed edge from a dependent entity to one of its dependencies."""

    source: int = Field(ge=0)
    target: int = Field(ge=0)
    source_name: str
    target_name: str


class DependencyGraph(BaseModel):
    """Node arena and edge list built from one fetch of dependency records."""

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    _index: dict[str, int] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: object) -> None:
        self._index = {node.name: node.index for node in self.nodes}

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def index_of(self, name: str) -> int:
        """Arena index for a node name.

        Raises:
            KeyError: If no node has that name
        """
        return self._index[name]

    def get(self, name: str) -> GraphNode | None:
        """Get a node by name."""
        idx = self._index.get(name)
        return self.nodes[idx] if idx is not None else None

    def node_names(self) -> list[str]:
        return [node.name for node in self.nodes]

    def edge_pairs(self) -> list[tuple[str, str]]:
        return [(edge.source_name, edge.target_name) for edge in self.edges]

    def dependency_targets(self) -> list[str]:
        """Names of nodes some other node depends on."""
        return [node.name for node in self.nodes if node.is_dependency_target]

    def check_integrity(self) -> None:
        """Check arena consistency.

        Raises:
            DataShapeError: On duplicate names, misplaced indices or an edge
                whose endpoint is not in the node set
        """
        if len(self._index) != len(self.nodes):
            raise DataShapeError("Duplicate node names in graph")

        for position, node in enumerate(self.nodes):
            if node.index != position:
                raise DataShapeError(
                    f"Node '{node.name}' has index {node.index}, expected {position}"
                )

        count = len(self.nodes)
        for edge in self.edges:
            for idx, name in ((edge.source, edge.source_name), (edge.target, edge.target_name)):
                if idx >= count or self.nodes[idx].name != name:
                    raise DataShapeError(
                        f"Dangling edge {edge.source_name} -> {edge.target_name}: "
                        f"'{name}' is not in the node set"
                    )
