"""Host loops that drive ForceLayoutEngine.step()."""

from __future__ import annotations

import asyncio
import logging

from lighthousegraph.layout.engine import ForceLayoutEngine

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0 / 60.0


class TickLoop:
    """Advances an engine either synchronously or as an asyncio task.

    Steps run one at a time on the calling thread or event loop, so
    pointer handlers scheduled on the same loop interleave with ticks in
    arrival order.
    """

    def __init__(self, engine: ForceLayoutEngine, interval: float = DEFAULT_INTERVAL) -> None:
        """Initialize loop.

        Args:
            engine: Engine to drive
            interval: Seconds between ticks when running on asyncio
        """
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self.engine = engine
        self.interval = interval
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def run_until_idle(self, max_ticks: int = 1000) -> int:
        """Step until the engine idles or max_ticks is reached.

        Returns:
            Number of ticks executed
        """
        ticks = 0
        while ticks < max_ticks and not self._stopped and self.engine.running:
            self.engine.step()
            ticks += 1
        return ticks

    async def run(self) -> None:
        """Tick every interval until stop() is called.

        An idle engine is polled rather than stepped, so a reheat from a
        drag resumes motion on the next interval. A stopped loop does not
        start again.
        """
        logger.debug("Tick loop started (interval=%.4fs)", self.interval)
        while not self._stopped:
            if self.engine.running:
                self.engine.step()
            await asyncio.sleep(self.interval)
        logger.debug("Tick loop stopped after tick %d", self.engine.tick_count)

    def stop(self) -> None:
        self._stopped = True
