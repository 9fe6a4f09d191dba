"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lighthousegraph.graph.builder import GraphBuilder
from lighthousegraph.layout.engine import ForceLayoutEngine
from lighthousegraph.models.graph import DependencyGraph

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def builder() -> GraphBuilder:
    return GraphBuilder("/BeSLighthouse/model_report/")


@pytest.fixture
def simple_records() -> list[dict]:
    return [
        {"name": "A", "dependencies": ["B"]},
        {"name": "B", "dependencies": []},
    ]


@pytest.fixture
def simple_graph(builder, simple_records) -> DependencyGraph:
    return builder.build(simple_records)


@pytest.fixture
def metadata_path() -> Path:
    return FIXTURES_DIR / "model_metadata.json"


@pytest.fixture
def metadata_records(metadata_path) -> list[dict]:
    return json.loads(metadata_path.read_text())


@pytest.fixture
def metadata_graph(builder, metadata_records) -> DependencyGraph:
    return builder.build(metadata_records)


@pytest.fixture
def engine(metadata_graph) -> ForceLayoutEngine:
    return ForceLayoutEngine(metadata_graph, seed=7)
