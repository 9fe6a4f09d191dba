"""Interaction controller: pointer gestures to pins, reheats and navigation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from lighthousegraph.layout.engine import ForceLayoutEngine
from lighthousegraph.models.enums import DragState
from lighthousegraph.models.frame import RenderFrame
from lighthousegraph.models.graph import GraphNode

logger = logging.getLogger(__name__)

Navigator = Callable[[str], None]


class InteractionController:
    """Per-node FREE -> DRAGGING -> FREE state machine.

    Dragging pins a node to the pointer. The first concurrent drag
    reheats the engine; the last one to end releases the alpha target
    without bumping alpha. Clicks navigate to a node's detail URL unless
    that node is mid-drag or the click completes a drag gesture.
    """

    def __init__(
        self,
        engine: ForceLayoutEngine,
        navigate: Navigator | None = None,
        drag_alpha_target: float = 0.5,
    ) -> None:
        """Initialize controller and start listening to engine ticks.

        Args:
            engine: Engine whose graph nodes get pinned
            navigate: Callback receiving a detail URL on qualifying clicks
            drag_alpha_target: Alpha target while any drag is active
        """
        self.engine = engine
        self.navigate = navigate
        self.drag_alpha_target = drag_alpha_target

        self._states: dict[str, DragState] = {}
        self._moved: set[str] = set()
        self._suppress_click: set[str] = set()
        self._attached = True
        engine.add_listener(self._on_tick)

    def _node(self, name: str) -> GraphNode:
        node = self.engine.graph.get(name)
        if node is None:
            raise KeyError(f"Unknown node '{name}'")
        return node

    def state(self, name: str) -> DragState:
        self._node(name)
        return self._states.get(name, DragState.FREE)

    @property
    def active_drags(self) -> int:
        return sum(1 for s in self._states.values() if s == DragState.DRAGGING)

    def is_clickable(self, name: str) -> bool:
        """Whether a render adapter should show a clickable affordance."""
        return self._node(name).detail_url is not None

    def on_drag_start(self, name: str) -> None:
        node = self._node(name)
        if self._states.get(name) == DragState.DRAGGING:
            return

        if self.active_drags == 0:
            self.engine.reheat(self.drag_alpha_target)

        node.pin(node.x, node.y)
        self._states[name] = DragState.DRAGGING
        self._moved.discard(name)
        self._suppress_click.discard(name)
        logger.debug("Drag started on '%s' at (%.1f, %.1f)", name, node.x, node.y)

    def on_drag_move(self, name: str, x: float, y: float) -> None:
        node = self._node(name)
        if self._states.get(name) != DragState.DRAGGING:
            logger.debug("Ignoring drag move on '%s' outside a drag", name)
            return
        node.pin(x, y)
        self._moved.add(name)

    def on_drag_end(self, name: str) -> None:
        node = self._node(name)
        if self._states.get(name) != DragState.DRAGGING:
            return

        node.unpin()
        self._states[name] = DragState.FREE
        if name in self._moved:
            self._moved.discard(name)
            self._suppress_click.add(name)

        if self.active_drags == 0:
            self.engine.release()
        logger.debug("Drag ended on '%s'", name)

    def on_click(self, name: str) -> bool:
        """Handle a click on a node.

        Returns:
            True if a navigation request was emitted
        """
        node = self._node(name)
        if self._states.get(name) == DragState.DRAGGING:
            return False
        if name in self._suppress_click:
            self._suppress_click.discard(name)
            return False
        if node.detail_url is None:
            return False

        logger.info("Navigating to %s", node.detail_url)
        if self.navigate is not None:
            self.navigate(node.detail_url)
        return True

    def _on_tick(self, frame: RenderFrame) -> None:
        # A click completing a drag arrives before the next tick
        self._suppress_click.clear()

    def detach(self) -> None:
        """Release every pinned node and stop listening to the engine."""
        if not self._attached:
            return
        for name, state in self._states.items():
            if state == DragState.DRAGGING:
                node = self.engine.graph.get(name)
                if node is not None:
                    node.unpin()
        if self.active_drags:
            self.engine.release()
        self._states.clear()
        self._moved.clear()
        self._suppress_click.clear()
        self.engine.remove_listener(self._on_tick)
        self._attached = False
