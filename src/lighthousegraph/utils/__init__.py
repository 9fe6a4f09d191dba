"""Utility functions for lighthousegraph."""

from lighthousegraph.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
