"""Fixture URL lists: the pinned defaults and YAML manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ssc_bench.domain.errors import ManifestError
from ssc_bench.fixtures.cache import fixture_identifier

_LEARN_SVELTE = (
    "https://raw.githubusercontent.com/sveltejs/learn.svelte.dev/"
    "766e768fd0de3168c37c297e41162349f0a8f8a6/src/routes/tutorial/%5Bslug%5D"
)

DEFAULT_FIXTURE_URLS: tuple[str, ...] = (
    f"{_LEARN_SVELTE}/Menu.svelte",
    f"{_LEARN_SVELTE}/Editor.svelte",
    f"{_LEARN_SVELTE}/Output.svelte",
)


def load_manifest(path: Path) -> list[str]:
    """Load fixture URLs from a YAML manifest.

    The manifest is a mapping with a non-empty ``urls`` list::

        urls:
          - https://example.com/App.svelte

    Every URL must end in a file name, and no two URLs may share one, since
    the name is the cache key and the task label.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"cannot read fixture manifest {path}: {exc}") from exc
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"invalid YAML in {path}: {exc}") from exc

    urls = data.get("urls") if isinstance(data, dict) else None
    if not isinstance(urls, list) or not urls:
        raise ManifestError(f"{path} must define a non-empty 'urls' list")
    if not all(isinstance(u, str) and u for u in urls):
        raise ManifestError(f"{path}: every entry in 'urls' must be a non-empty string")
    seen: dict[str, str] = {}
    for url in urls:
        try:
            identifier = fixture_identifier(url)
        except ValueError as exc:
            raise ManifestError(f"{path}: {exc}") from exc
        if identifier in seen:
            raise ManifestError(
                f"{path}: {url} and {seen[identifier]} share the fixture name {identifier!r}"
            )
        seen[identifier] = url
    return list(urls)
