"""Force layout engine: alpha-cooled physics simulation over a dependency graph."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable

from lighthousegraph.config import LayoutSettings
from lighthousegraph.layout.forces import AxisForce, Force, LinkForce, ManyBodyForce
from lighthousegraph.models.frame import EdgeFrame, NodeFrame, RenderFrame
from lighthousegraph.models.graph import DependencyGraph

logger = logging.getLogger(__name__)

INITIAL_RADIUS = 10.0
INITIAL_ANGLE = math.pi * (3.0 - math.sqrt(5.0))

TickListener = Callable[[RenderFrame], None]


class ForceLayoutEngine:
    """Iterative 2D layout driven externally through step().

    Alpha is the simulation heat. Each step moves it toward alpha_target by
    alpha_decay; once it falls below alpha_min the engine idles and step()
    does nothing until restart() or reheat().
    """

    def __init__(
        self,
        graph: DependencyGraph,
        settings: LayoutSettings | None = None,
        seed: int | None = None,
        forces: list[Force] | None = None,
    ) -> None:
        """Initialize engine and seed node positions.

        Args:
            graph: Graph to lay out (checked for dangling edges)
            settings: Simulation constants (defaults if None)
            seed: Random seed for jiggle (nondeterministic if None)
            forces: Replacement force list (link, charge, x, y if None)

        Raises:
            DataShapeError: If the graph fails its integrity check
        """
        graph.check_integrity()
        self.graph = graph
        self.settings = settings or LayoutSettings()

        self.alpha = self.settings.alpha_start
        self.alpha_min = self.settings.alpha_min
        self.alpha_decay = self.settings.effective_alpha_decay
        self.alpha_target = self.settings.alpha_target
        self.velocity_decay = self.settings.velocity_decay
        self.tick_count = 0

        self._rng = random.Random(seed)
        self._running = True
        self._listeners: list[TickListener] = []

        self._initialize_nodes()
        self.forces = forces if forces is not None else self._default_forces()
        for force in self.forces:
            force.initialize(graph, self._rng)

    def _default_forces(self) -> list[Force]:
        s = self.settings
        return [
            LinkForce(distance=s.link_distance, strength_scale=s.link_strength_scale),
            ManyBodyForce(
                strength=s.charge_strength,
                distance_min=s.charge_distance_min,
                distance_max=s.charge_distance_max,
            ),
            AxisForce("x", strength=s.center_strength),
            AxisForce("y", strength=s.center_strength),
        ]

    def _initialize_nodes(self) -> None:
        """Place unpositioned nodes on a phyllotaxis spiral around the origin."""
        for i, node in enumerate(self.graph.nodes):
            if node.fx is not None:
                node.x = node.fx
            if node.fy is not None:
                node.y = node.fy
            if node.x is None or node.y is None:
                radius = INITIAL_RADIUS * math.sqrt(0.5 + i)
                angle = i * INITIAL_ANGLE
                node.x = radius * math.cos(angle)
                node.y = radius * math.sin(angle)
            node.vx = 0.0
            node.vy = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def add_listener(self, listener: TickListener) -> None:
        """Register a callback receiving the RenderFrame after every step."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: TickListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def step(self) -> RenderFrame | None:
        """Advance one tick and notify listeners.

        Returns:
            The new frame, or None if the engine is idle
        """
        if not self._running:
            return None

        self.tick()
        frame = self.frame()
        for listener in list(self._listeners):
            listener(frame)

        if self.alpha < self.alpha_min:
            self._running = False
            logger.debug("Layout settled after %d ticks (alpha=%.5f)", self.tick_count, self.alpha)
        return frame

    def tick(self, iterations: int = 1) -> None:
        """Advance the simulation without stop checks or listener calls.

        Useful for pre-warming a layout before it is first displayed.
        """
        nodes = self.graph.nodes
        for _ in range(iterations):
            self.alpha += (self.alpha_target - self.alpha) * self.alpha_decay

            for force in self.forces:
                force.apply(self.alpha)

            keep = 1.0 - self.velocity_decay
            for node in nodes:
                if node.fx is None:
                    node.vx *= keep
                    node.x += node.vx
                else:
                    node.x = node.fx
                    node.vx = 0.0
                if node.fy is None:
                    node.vy *= keep
                    node.y += node.vy
                else:
                    node.y = node.fy
                    node.vy = 0.0

            self.tick_count += 1

    def frame(self) -> RenderFrame:
        """Snapshot current node and edge positions."""
        nodes = self.graph.nodes
        return RenderFrame(
            tick=self.tick_count,
            alpha=self.alpha,
            nodes=[
                NodeFrame(
                    name=n.name,
                    x=n.x,
                    y=n.y,
                    is_dependency_target=n.is_dependency_target,
                    detail_url=n.detail_url,
                )
                for n in nodes
            ],
            edges=[
                EdgeFrame(
                    source=e.source_name,
                    target=e.target_name,
                    x1=nodes[e.source].x,
                    y1=nodes[e.source].y,
                    x2=nodes[e.target].x,
                    y2=nodes[e.target].y,
                )
                for e in self.graph.edges
            ],
        )

    def restart(self) -> None:
        """Resume ticking without touching alpha."""
        if not self._running:
            logger.debug("Layout restarted at alpha=%.5f", self.alpha)
        self._running = True

    def stop(self) -> None:
        self._running = False

    def reheat(self, alpha_target: float) -> None:
        """Raise the alpha target and resume ticking.

        Alpha climbs toward the target on subsequent steps; it never drops
        below alpha_min while the target is above it.
        """
        self.alpha_target = alpha_target
        self.restart()

    def release(self) -> None:
        """Let alpha decay back toward zero; does not bump alpha."""
        self.alpha_target = self.settings.alpha_target

    def set_alpha(self, alpha: float) -> None:
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"Alpha must be in [0.0, 1.0], got {alpha}")
        self.alpha = alpha
