"""Graph view: one fetched, laid-out activation of the dependency graph."""

from __future__ import annotations

import logging
from pathlib import Path

from lighthousegraph.config import GraphSettings
from lighthousegraph.datastore.fetcher import DependencyFetcher
from lighthousegraph.errors import GraphError
from lighthousegraph.graph.builder import GraphBuilder
from lighthousegraph.interaction.controller import InteractionController, Navigator
from lighthousegraph.layout.engine import ForceLayoutEngine
from lighthousegraph.layout.scheduler import TickLoop
from lighthousegraph.models.frame import RenderFrame
from lighthousegraph.models.graph import DependencyGraph
from lighthousegraph.render.base import RenderAdapter

logger = logging.getLogger(__name__)


class GraphView:
    """Hosts one graph per view activation.

    Every refresh() replaces the graph, engine and controller wholesale.
    A generation counter guards against out-of-order fetches: a response
    that arrives after a newer refresh started, or after close(), is
    discarded.
    """

    def __init__(
        self,
        settings: GraphSettings | None = None,
        source: str | Path | None = None,
        fetcher: DependencyFetcher | None = None,
        builder: GraphBuilder | None = None,
        adapters: list[RenderAdapter] | None = None,
        navigate: Navigator | None = None,
        seed: int | None = None,
        clear_on_error: bool = False,
    ) -> None:
        """Initialize view.

        Args:
            settings: Loaded settings (defaults if None)
            source: Records URL or file (settings.data_store.url if None)
            fetcher: Record fetcher (httpx-backed default if None)
            builder: Graph builder (uses settings' detail base path if None)
            adapters: Render adapters receiving every frame
            navigate: Callback for node clicks with a detail URL
            seed: Layout random seed
            clear_on_error: Drop the current graph when a refresh fails
        """
        self.settings = settings or GraphSettings()
        self.source = source if source is not None else self.settings.data_store.url
        self.fetcher = fetcher or DependencyFetcher(timeout=self.settings.data_store.timeout_seconds)
        self.builder = builder or GraphBuilder(self.settings.data_store.detail_base_path)
        self.adapters: list[RenderAdapter] = list(adapters or [])
        self.navigate = navigate
        self.seed = seed
        self.clear_on_error = clear_on_error

        self.graph: DependencyGraph | None = None
        self.engine: ForceLayoutEngine | None = None
        self.controller: InteractionController | None = None
        self.loop: TickLoop | None = None
        self.last_error: GraphError | None = None

        self._generation = 0
        self._closed = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def closed(self) -> bool:
        return self._closed

    async def refresh(self) -> bool:
        """Fetch records and rebuild the graph.

        Returns:
            True if the new graph was activated, False if the response
            went stale before it arrived

        Raises:
            FetchError: Retrieval failed (current response only)
            DataShapeError: Records were malformed (current response only)
            RuntimeError: The view has been closed
        """
        if self._closed:
            raise RuntimeError("Cannot refresh a closed graph view")

        self._generation += 1
        generation = self._generation

        try:
            records = await self.fetcher.load(self.source)
            if generation != self._generation:
                logger.debug("Discarding stale response for generation %d", generation)
                return False
            graph = self.builder.build(records)
        except GraphError as e:
            if generation != self._generation:
                logger.debug("Discarding stale failure for generation %d: %s", generation, e)
                return False
            self._fail(e)
            raise

        self._activate(graph)
        logger.info(
            "Graph view activated generation %d: %d nodes, %d edges",
            generation, len(graph.nodes), len(graph.edges),
        )
        return True

    def _fail(self, error: GraphError) -> None:
        logger.error("Graph refresh from %s failed: %s", self.source, error)
        self.last_error = error
        if self.clear_on_error:
            self._teardown_layout()
            self.graph = None
            for adapter in self.adapters:
                adapter.clear()
        for adapter in self.adapters:
            adapter.render_error(error)

    def _activate(self, graph: DependencyGraph) -> None:
        self._teardown_layout()
        self.graph = graph
        self.last_error = None

        self.engine = ForceLayoutEngine(graph, self.settings.layout, seed=self.seed)
        self.engine.add_listener(self._dispatch)
        self.controller = InteractionController(
            self.engine,
            navigate=self.navigate,
            drag_alpha_target=self.settings.interaction.drag_alpha_target,
        )
        self.loop = TickLoop(self.engine)
        self._dispatch(self.engine.frame())

    def _dispatch(self, frame: RenderFrame) -> None:
        for adapter in self.adapters:
            adapter.render(frame)

    def _teardown_layout(self) -> None:
        if self.loop is not None:
            self.loop.stop()
        if self.controller is not None:
            self.controller.detach()
        if self.engine is not None:
            self.engine.stop()
            self.engine.remove_listener(self._dispatch)
        self.loop = None
        self.controller = None
        self.engine = None

    def step(self) -> RenderFrame | None:
        """Advance the current layout one tick (None when idle or empty)."""
        if self.engine is None:
            return None
        return self.engine.step()

    def close(self) -> None:
        """Stop the simulation, detach listeners and invalidate in-flight fetches."""
        if self._closed:
            return
        self._generation += 1
        self._teardown_layout()
        self._closed = True
        logger.debug("Graph view closed")
