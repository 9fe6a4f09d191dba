"""Error taxonomy for graph construction and data retrieval."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for failures scoped to a single graph view."""


class FetchError(GraphError):
    """Retrieving the raw dependency records failed.

    Covers transport failures, non-200 responses and undecodable payloads.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DataShapeError(GraphError):
    """Dependency records do not have the expected shape.

    Also raised when a built graph holds an edge whose endpoint is not
    in the node set.
    """

    def __init__(self, message: str, record_index: int | None = None) -> None:
        super().__init__(message)
        self.record_index = record_index
