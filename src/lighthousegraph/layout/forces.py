"""Forces for the layout simulation.

Each force adds to node velocities in place; the engine integrates
velocities into positions afterwards.
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod

from lighthousegraph.models.graph import DependencyGraph, GraphNode


def jiggle(rng: random.Random) -> float:
    """Tiny random offset used to separate coincident points."""
    return (rng.random() - 0.5) * 1e-6


class Force(ABC):
    """Abstract force acting on the nodes of one graph."""

    def __init__(self) -> None:
        self._graph: DependencyGraph | None = None
        self._rng: random.Random = random.Random()

    def initialize(self, graph: DependencyGraph, rng: random.Random) -> None:
        """Bind the force to a graph before the first tick.

        Args:
            graph: Graph whose nodes the force acts on
            rng: Seeded random source shared with the engine
        """
        self._graph = graph
        self._rng = rng

    @property
    def nodes(self) -> list[GraphNode]:
        return self._graph.nodes if self._graph is not None else []

    @abstractmethod
    def apply(self, alpha: float) -> None:
        """Accumulate this force into node velocities.

        Args:
            alpha: Current simulation heat; forces scale with it
        """
        ...


class ManyBodyForce(Force):
    """Pairwise charge between all nodes; negative strength repels.

    Each pair contributes `strength * alpha / d^2` times the separation
    vector, so magnitude falls off with distance.
    """

    def __init__(
        self,
        strength: float = -250.0,
        distance_min: float = 1.0,
        distance_max: float | None = None,
    ) -> None:
        super().__init__()
        self.strength = strength
        self.distance_min2 = distance_min * distance_min
        self.distance_max2 = distance_max * distance_max if distance_max is not None else math.inf

    def apply(self, alpha: float) -> None:
        nodes = self.nodes
        for node in nodes:
            for other in nodes:
                if other is node:
                    continue
                dx = other.x - node.x
                dy = other.y - node.y
                if dx == 0:
                    dx = jiggle(self._rng)
                if dy == 0:
                    dy = jiggle(self._rng)
                dist2 = dx * dx + dy * dy
                if dist2 >= self.distance_max2:
                    continue
                # Soften very close pairs instead of blowing up
                if dist2 < self.distance_min2:
                    dist2 = math.sqrt(self.distance_min2 * dist2)
                w = self.strength * alpha / dist2
                node.vx += dx * w
                node.vy += dy * w


class LinkForce(Force):
    """Spring pulling each edge's endpoints toward a target separation.

    Stiffness defaults to 1 / min(degree(source), degree(target)) so hubs
    are not torn apart; the correction is split by relative degree.
    """

    def __init__(
        self,
        distance: float = 30.0,
        strength_scale: float = 1.0,
        iterations: int = 1,
    ) -> None:
        super().__init__()
        self.distance = distance
        self.strength_scale = strength_scale
        self.iterations = iterations
        self._strengths: list[float] = []
        self._bias: list[float] = []

    def initialize(self, graph: DependencyGraph, rng: random.Random) -> None:
        super().initialize(graph, rng)
        degree = [0] * len(graph.nodes)
        for edge in graph.edges:
            degree[edge.source] += 1
            degree[edge.target] += 1

        self._strengths = []
        self._bias = []
        for edge in graph.edges:
            s, t = degree[edge.source], degree[edge.target]
            self._strengths.append(self.strength_scale / min(s, t))
            self._bias.append(s / (s + t))

    def apply(self, alpha: float) -> None:
        if self._graph is None:
            return
        nodes = self._graph.nodes
        for _ in range(self.iterations):
            for i, edge in enumerate(self._graph.edges):
                source = nodes[edge.source]
                target = nodes[edge.target]
                dx = target.x + target.vx - source.x - source.vx
                dy = target.y + target.vy - source.y - source.vy
                if dx == 0:
                    dx = jiggle(self._rng)
                if dy == 0:
                    dy = jiggle(self._rng)
                length = math.sqrt(dx * dx + dy * dy)
                k = (length - self.distance) / length * alpha * self._strengths[i]
                dx *= k
                dy *= k
                b = self._bias[i]
                target.vx -= dx * b
                target.vy -= dy * b
                source.vx += dx * (1 - b)
                source.vy += dy * (1 - b)


class AxisForce(Force):
    """Weak pull of every node toward a coordinate on one axis."""

    def __init__(self, axis: str, position: float = 0.0, strength: float = 0.1) -> None:
        super().__init__()
        if axis not in ("x", "y"):
            raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")
        self.axis = axis
        self.position = position
        self.strength = strength

    def apply(self, alpha: float) -> None:
        k = self.strength * alpha
        if self.axis == "x":
            for node in self.nodes:
                node.vx += (self.position - node.x) * k
        else:
            for node in self.nodes:
                node.vy += (self.position - node.y) * k
