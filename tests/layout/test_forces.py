"""Tests for individual layout forces."""

import random

import pytest

from lighthousegraph.layout.forces import AxisForce, LinkForce, ManyBodyForce, jiggle


def _place(graph, positions):
    for node, (x, y) in zip(graph.nodes, positions):
        node.x, node.y = float(x), float(y)
        node.vx = node.vy = 0.0


class TestManyBodyForce:
    def test_negative_strength_repels(self, simple_graph):
        _place(simple_graph, [(0, 0), (10, 0)])
        force = ManyBodyForce(strength=-250)
        force.initialize(simple_graph, random.Random(0))
        force.apply(alpha=1.0)

        a, b = simple_graph.nodes
        # strength * alpha / d^2 * dx = -250 / 100 * 10
        assert a.vx == pytest.approx(-25.0)
        assert b.vx == pytest.approx(25.0)
        assert abs(a.vy) < 1e-3

    def test_scales_with_alpha(self, simple_graph):
        _place(simple_graph, [(0, 0), (10, 0)])
        force = ManyBodyForce(strength=-250)
        force.initialize(simple_graph, random.Random(0))
        force.apply(alpha=0.1)
        assert simple_graph.nodes[0].vx == pytest.approx(-2.5)

    def test_weaker_with_distance(self, simple_graph):
        force = ManyBodyForce(strength=-250)
        force.initialize(simple_graph, random.Random(0))

        _place(simple_graph, [(0, 0), (10, 0)])
        force.apply(alpha=1.0)
        near = abs(simple_graph.nodes[0].vx)

        _place(simple_graph, [(0, 0), (40, 0)])
        force.apply(alpha=1.0)
        far = abs(simple_graph.nodes[0].vx)
        assert far < near

    def test_distance_max_cuts_off(self, simple_graph):
        _place(simple_graph, [(0, 0), (100, 0)])
        force = ManyBodyForce(strength=-250, distance_max=50)
        force.initialize(simple_graph, random.Random(0))
        force.apply(alpha=1.0)
        assert simple_graph.nodes[0].vx == 0.0

    def test_coincident_nodes_separate(self, simple_graph):
        _place(simple_graph, [(0, 0), (0, 0)])
        force = ManyBodyForce(strength=-250)
        force.initialize(simple_graph, random.Random(3))
        force.apply(alpha=1.0)
        a, b = simple_graph.nodes
        assert (a.vx, a.vy) != (0.0, 0.0)
        assert (a.vx, a.vy) != (b.vx, b.vy)


class TestLinkForce:
    def test_stretched_link_contracts(self, simple_graph):
        _place(simple_graph, [(0, 0), (100, 0)])
        force = LinkForce(distance=30)
        force.initialize(simple_graph, random.Random(0))
        force.apply(alpha=1.0)

        source, target = simple_graph.nodes
        # (100 - 30) / 100 * 100 split evenly between equal-degree ends
        assert source.vx == pytest.approx(35.0)
        assert target.vx == pytest.approx(-35.0)

    def test_compressed_link_expands(self, simple_graph):
        _place(simple_graph, [(0, 0), (10, 0)])
        force = LinkForce(distance=30)
        force.initialize(simple_graph, random.Random(0))
        force.apply(alpha=1.0)
        source, target = simple_graph.nodes
        assert source.vx < 0
        assert target.vx > 0

    def test_at_rest_length_no_force(self, simple_graph):
        _place(simple_graph, [(0, 0), (30, 0)])
        force = LinkForce(distance=30)
        force.initialize(simple_graph, random.Random(0))
        force.apply(alpha=1.0)
        assert simple_graph.nodes[0].vx == pytest.approx(0.0, abs=1e-6)

    def test_hub_moves_less(self, builder):
        graph = builder.build([{"name": "hub", "dependencies": ["a", "b", "c"]}])
        _place(graph, [(0, 0), (100, 0), (0, 100), (-100, 0)])
        force = LinkForce(distance=30)
        force.initialize(graph, random.Random(0))
        force.apply(alpha=1.0)
        hub, a = graph.nodes[0], graph.nodes[1]
        # Degree bias: the leaf takes 3/4 of each correction
        assert abs(a.vx) > 2 * abs(hub.vx)


class TestAxisForce:
    def test_pulls_toward_origin(self, simple_graph):
        _place(simple_graph, [(10, -20), (0, 0)])
        fx = AxisForce("x", strength=0.1)
        fy = AxisForce("y", strength=0.1)
        for f in (fx, fy):
            f.initialize(simple_graph, random.Random(0))
            f.apply(alpha=1.0)
        node = simple_graph.nodes[0]
        assert node.vx == pytest.approx(-1.0)
        assert node.vy == pytest.approx(2.0)

    def test_axes_independent(self, simple_graph):
        _place(simple_graph, [(10, -20), (0, 0)])
        f = AxisForce("x", strength=0.1)
        f.initialize(simple_graph, random.Random(0))
        f.apply(alpha=1.0)
        assert simple_graph.nodes[0].vy == 0.0

    def test_invalid_axis(self):
        with pytest.raises(ValueError):
            AxisForce("z")


def test_jiggle_is_tiny():
    rng = random.Random(1)
    values = [jiggle(rng) for _ in range(100)]
    assert all(abs(v) <= 5e-7 for v in values)
    assert any(v != 0 for v in values)
