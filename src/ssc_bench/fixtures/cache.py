"""Shared on-disk cache of benchmark fixtures.

Each fixture is stored as ``<cache_dir>/<identifier>`` where the identifier
is the final path segment of its URL. Entries never expire: once a file is
cached the benchmark keeps measuring that exact input on every run.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from pathlib import Path
from urllib.parse import urlsplit

import httpx

from ssc_bench.config import BenchConfig
from ssc_bench.console import console
from ssc_bench.domain.errors import CacheFailure, FetchFailure
from ssc_bench.domain.models import Fixture

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 30.0


def fixture_identifier(url: str) -> str:
    """Derive the fixture name (and cache file name) from a URL."""
    identifier = urlsplit(url).path.rsplit("/", 1)[-1]
    if not identifier:
        raise ValueError(f"cannot derive a fixture name from {url!r}")
    return identifier


class FixtureCache:
    """Resolves fixture URLs to their content, downloading on cache miss."""

    def __init__(self, config: BenchConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client

    @property
    def cache_dir(self) -> Path:
        return self._config.cache_dir

    async def resolve(self, urls: Sequence[str]) -> list[Fixture]:
        """Resolve every URL concurrently, preserving input order.

        The first failure cancels the remaining resolutions and propagates.
        """
        identifiers = [fixture_identifier(url) for url in urls]
        seen: set[str] = set()
        for url, identifier in zip(urls, identifiers, strict=True):
            if identifier in seen:
                raise ValueError(f"duplicate fixture name {identifier!r} (from {url})")
            seen.add(identifier)

        async with self._client_scope() as client:
            tasks = [
                asyncio.ensure_future(self._resolve_one(client, url, identifier))
                for url, identifier in zip(urls, identifiers, strict=True)
            ]
            try:
                contents = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        return [
            Fixture(identifier=identifier, content=content)
            for identifier, content in zip(identifiers, contents, strict=True)
        ]

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(follow_redirects=True, timeout=FETCH_TIMEOUT) as client:
            yield client

    async def _resolve_one(self, client: httpx.AsyncClient, url: str, identifier: str) -> str:
        path = self._config.cache_dir / identifier
        try:
            raw = await asyncio.to_thread(path.read_bytes)
        except OSError:
            pass
        else:
            try:
                content = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise CacheFailure(f"cached fixture {path} is not valid UTF-8: {exc}") from exc
            logger.info("Found cached file: %s", identifier)
            if self._config.is_ci:
                console.info(f"Found cached file: {identifier}")
            return content

        logger.info("Downloading: %s", url)
        if self._config.is_ci:
            console.info(f"Downloading: {identifier}")
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise FetchFailure(url, str(exc)) from exc

        content = response.text
        try:
            await asyncio.to_thread(_store, path, content.encode("utf-8"))
        except OSError as exc:
            raise CacheFailure(f"cannot store fixture in {path}: {exc}") from exc
        logger.debug("Cached %s (%d bytes)", path, len(content))
        return content


def _store(path: Path, data: bytes) -> None:
    """Write a cache entry atomically (write to temp, then rename)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(f".{path.name}.tmp")
    tmp.write_bytes(data)
    tmp.replace(path)
