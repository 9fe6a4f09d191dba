"""Graph builder: turns flat dependency records into a node arena and edge list."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from lighthousegraph.errors import DataShapeError
from lighthousegraph.models.graph import DependencyGraph, GraphEdge, GraphNode
from lighthousegraph.models.records import DependencyRecord

logger = logging.getLogger(__name__)

DEFAULT_DETAIL_BASE_PATH = "/BeSLighthouse/model_report/"


class GraphBuilder:
    """Builds a DependencyGraph from `{name, dependencies[]}` records.

    Construction is all-or-nothing: every record is validated before any
    node is created, and the finished graph is checked for dangling edges.
    """

    def __init__(self, detail_base_path: str = DEFAULT_DETAIL_BASE_PATH) -> None:
        """Initialize builder.

        Args:
            detail_base_path: Prefix joined with a node name to form its detail URL
        """
        self.detail_base_path = detail_base_path

    def build(self, records: Any) -> DependencyGraph:
        """Build a graph from raw records.

        Args:
            records: Sequence of mappings (decoded JSON) or DependencyRecord

        Returns:
            Validated dependency graph

        Raises:
            DataShapeError: If the input is not a list of well-formed records
        """
        parsed = self.parse_records(records)

        recorded = {record.name for record in parsed}
        index: dict[str, int] = {}
        nodes: list[GraphNode] = []

        def _intern(name: str) -> int:
            if name not in index:
                index[name] = len(nodes)
                nodes.append(
                    GraphNode(
                        name=name,
                        index=index[name],
                        detail_url=self.detail_url(name) if name in recorded else None,
                    )
                )
            return index[name]

        edges: list[GraphEdge] = []
        for record in parsed:
            source = _intern(record.name)
            for dep in record.dependencies:
                target = _intern(dep)
                edges.append(
                    GraphEdge(
                        source=source,
                        target=target,
                        source_name=record.name,
                        target_name=dep,
                    )
                )
                nodes[target].is_dependency_target = True

        graph = DependencyGraph(nodes=nodes, edges=edges)
        graph.check_integrity()

        logger.debug(
            "Built graph from %d records: %d nodes, %d edges",
            len(parsed), len(nodes), len(edges),
        )
        return graph

    def detail_url(self, name: str) -> str:
        return f"{self.detail_base_path}{name}"

    def parse_records(self, records: Any) -> list[DependencyRecord]:
        """Validate raw input into DependencyRecord instances.

        Raises:
            DataShapeError: On the first malformed record, with its index
        """
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
            raise DataShapeError(
                f"Expected a list of dependency records, got {type(records).__name__}"
            )

        parsed: list[DependencyRecord] = []
        for i, raw in enumerate(records):
            if isinstance(raw, DependencyRecord):
                parsed.append(raw)
                continue
            if not isinstance(raw, Mapping):
                raise DataShapeError(
                    f"Record {i} is a {type(raw).__name__}, expected an object",
                    record_index=i,
                )
            try:
                parsed.append(DependencyRecord.model_validate(dict(raw)))
            except ValidationError as e:
                problems = "; ".join(
                    f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                    for err in e.errors()
                )
                raise DataShapeError(
                    f"Record {i} is malformed ({problems})", record_index=i
                ) from e
        return parsed
