"""Dependency record fetcher: HTTP GET against the assets store, or a local file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from lighthousegraph.errors import FetchError

logger = logging.getLogger(__name__)


class DependencyFetcher:
    """Retrieve the raw JSON array of `{name, dependencies[]}` records.

    Only transport, status and decoding are checked here; record shape is
    validated by GraphBuilder. No retries.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (e.g. MockTransport in tests)
        """
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> Any:
        """GET the records from url.

        Raises:
            FetchError: On connection failure, non-200 status or invalid JSON
        """
        logger.info("Fetching dependency records from %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FetchError(f"Failed to fetch data from {url}: {e}", url=url) from e

        if response.status_code != 200:
            raise FetchError(
                f"Failed to fetch data. Status: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {url}: {e}", status_code=200, url=url) from e

        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return data

    def load_file(self, path: Path | str) -> Any:
        """Read the same JSON format from disk.

        Raises:
            FetchError: If the file is missing, unreadable or not valid JSON
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise FetchError(f"Failed to read {path}: {e}", url=str(path)) from e
        except UnicodeDecodeError as e:
            raise FetchError(f"{path} is not UTF-8 text: {e}", url=str(path)) from e

        try:
            return json.loads(text)
        except ValueError as e:
            raise FetchError(f"Invalid JSON in {path}: {e}", url=str(path)) from e

    async def load(self, source: str | Path) -> Any:
        """Fetch over HTTP for http(s) URLs, otherwise read a local file."""
        if isinstance(source, str) and source.startswith(("http://", "https://")):
            return await self.fetch(source)
        return self.load_file(source)
