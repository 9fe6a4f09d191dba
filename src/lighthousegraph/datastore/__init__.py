"""Retrieval of raw dependency records."""

from lighthousegraph.datastore.fetcher import DependencyFetcher

__all__ = ["DependencyFetcher"]
