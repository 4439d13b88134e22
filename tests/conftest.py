"""Shared pytest fixtures for ssc-bench tests.

Provides:
- A fake Parser implementation with configurable outcomes
- A fake binding module factory for NativeParser and CLI tests
- Factories for configs, outcomes and fixtures
"""

from __future__ import annotations

import json
import sys
import types
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ssc_bench import config as cfg
from ssc_bench.config import BenchConfig
from ssc_bench.domain.models import BenchmarkProfile, Comment, Fixture, ParseOutcome

# ---------------------------------------------------------------------------
# Outcome factories
# ---------------------------------------------------------------------------


def make_root(nodes: int = 1) -> str:
    """Serialize a minimal tree with *nodes* fragment nodes."""
    return json.dumps(
        {
            "type": "Root",
            "fragment": {
                "type": "Fragment",
                "nodes": [{"type": "Text", "data": " foo"} for _ in range(nodes)],
            },
        }
    )


def make_outcome(
    *,
    nodes: int = 1,
    errors: tuple[str, ...] = (),
    comments: int = 1,
    root: str | None = None,
) -> ParseOutcome:
    """Create a ParseOutcome; defaults satisfy the binding contract."""
    return ParseOutcome(
        root=make_root(nodes) if root is None else root,
        errors=errors,
        comments=tuple(Comment(value=" comment ", start=0, end=16) for _ in range(comments)),
    )


def make_raw_result(**overrides: Any) -> dict[str, Any]:
    """Create a binding-shaped result dict, as returned by parse_sync."""
    raw: dict[str, Any] = {
        "root": make_root(),
        "errors": [],
        "comments": [{"value": " comment ", "start": 0, "end": 16}],
    }
    raw.update(overrides)
    return raw


# ---------------------------------------------------------------------------
# Fake Parser
# ---------------------------------------------------------------------------


class FakeParser:
    """Parser double with separate outcomes per calling convention.

    Every call is appended to ``calls`` as ``(mode, source_text)``.
    """

    def __init__(
        self,
        outcome: ParseOutcome | None = None,
        *,
        deferred_outcome: ParseOutcome | None = None,
        raise_exc: Exception | None = None,
    ) -> None:
        self._outcome = outcome or make_outcome()
        self._deferred_outcome = deferred_outcome or self._outcome
        self._raise_exc = raise_exc
        self.calls: list[tuple[str, str]] = []

    def parse_blocking(self, source_text: str) -> ParseOutcome:
        self.calls.append(("blocking", source_text))
        if self._raise_exc is not None:
            raise self._raise_exc
        return self._outcome

    async def parse_deferred(self, source_text: str) -> ParseOutcome:
        self.calls.append(("deferred", source_text))
        if self._raise_exc is not None:
            raise self._raise_exc
        return self._deferred_outcome


@pytest.fixture()
def fake_parser() -> FakeParser:
    """A FakeParser whose outcomes satisfy the contract."""
    return FakeParser()


# ---------------------------------------------------------------------------
# Fake binding modules
# ---------------------------------------------------------------------------


def make_binding(
    name: str = "fake_ssc",
    *,
    result: Any = None,
    async_result: Any = None,
) -> types.ModuleType:
    """Build a module exposing ``parse_sync`` and ``parse_async``."""
    sync_value = make_raw_result() if result is None else result
    async_value = sync_value if async_result is None else async_result
    module = types.ModuleType(name)

    def parse_sync(source_text: str) -> Any:
        return sync_value

    async def parse_async(source_text: str) -> Any:
        return async_value

    module.parse_sync = parse_sync  # type: ignore[attr-defined]
    module.parse_async = parse_async  # type: ignore[attr-defined]
    return module


@pytest.fixture()
def install_binding(monkeypatch: pytest.MonkeyPatch) -> Callable[..., types.ModuleType]:
    """Register a fake binding in sys.modules so importlib can find it."""

    def _install(name: str = "fake_ssc", **kwargs: Any) -> types.ModuleType:
        module = make_binding(name, **kwargs)
        monkeypatch.setitem(sys.modules, name, module)
        return module

    return _install


# ---------------------------------------------------------------------------
# Config and fixture factories
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_config(tmp_path: Path) -> Callable[..., BenchConfig]:
    """Factory for BenchConfig rooted in tmp_path."""

    def _factory(
        *,
        is_ci: bool = False,
        accurate: bool = False,
        cache_dir: Path | None = None,
        data_dir: Path | None = None,
    ) -> BenchConfig:
        return BenchConfig(
            is_ci=is_ci,
            accurate=accurate,
            cache_dir=cache_dir or tmp_path / "target",
            data_dir=data_dir,
        )

    return _factory


def make_fixture(identifier: str = "Menu.svelte", content: str = "<nav>menu</nav>") -> Fixture:
    """Create a Fixture with sensible defaults."""
    return Fixture(identifier=identifier, content=content)


@pytest.fixture()
def fast_profiles(monkeypatch: pytest.MonkeyPatch) -> None:
    """Shrink both presets so real-clock benchmark runs finish instantly."""
    monkeypatch.setattr(cfg, "QUICK_PROFILE", BenchmarkProfile("quick", 1, 0, 2))
    monkeypatch.setattr(cfg, "ACCURATE_PROFILE", BenchmarkProfile("accurate", 1, 0, 3))


class StepClock:
    """Deterministic perf_counter_ns replacement advancing a fixed step per call."""

    def __init__(self, step_ns: int) -> None:
        self.step_ns = step_ns
        self.now = 0

    def __call__(self) -> int:
        self.now += self.step_ns
        return self.now
