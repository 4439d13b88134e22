"""Adapter over the native ``ssc`` binding module."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ssc_bench.domain.errors import ParseFailure, ParserUnavailable
from ssc_bench.domain.models import Comment, ParseOutcome

logger = logging.getLogger(__name__)

_REQUIRED_ENTRY_POINTS = ("parse_sync", "parse_async")


def _get(raw: Any, key: str, default: Any = None) -> Any:
    """Read *key* from a mapping or an attribute object."""
    if isinstance(raw, Mapping):
        return raw.get(key, default)
    return getattr(raw, key, default)


def _to_comment(raw: Any) -> Comment:
    return Comment(
        value=str(_get(raw, "value", "")),
        start=int(_get(raw, "start", 0)),
        end=int(_get(raw, "end", 0)),
    )


def to_outcome(raw: Any) -> ParseOutcome:
    """Normalize a raw binding result into a ParseOutcome."""
    root = _get(raw, "root")
    if not isinstance(root, str):
        raise ParseFailure(f"parser returned a non-string root: {type(root).__name__}")
    errors: Iterable[Any] = _get(raw, "errors") or ()
    comments: Iterable[Any] = _get(raw, "comments") or ()
    try:
        return ParseOutcome(
            root=root,
            errors=tuple(str(e) for e in errors),
            comments=tuple(_to_comment(c) for c in comments),
        )
    except (TypeError, ValueError) as exc:
        raise ParseFailure(f"parser returned malformed errors or comments: {exc}") from exc


class NativeParser:
    """Parser implementation backed by the compiled binding module."""

    def __init__(self, binding: Any) -> None:
        missing = [name for name in _REQUIRED_ENTRY_POINTS if not hasattr(binding, name)]
        if missing:
            name = getattr(binding, "__name__", type(binding).__name__)
            raise ParserUnavailable(f"binding {name} lacks {', '.join(missing)}")
        self._binding = binding

    @classmethod
    def load(cls, module_name: str) -> NativeParser:
        """Import the binding module by name."""
        try:
            binding = importlib.import_module(module_name)
        except ImportError as exc:
            raise ParserUnavailable(f"cannot import parser binding {module_name!r}: {exc}") from exc
        logger.debug("Loaded parser binding %s", module_name)
        return cls(binding)

    def parse_blocking(self, source_text: str) -> ParseOutcome:
        """Call ``parse_sync`` and normalize its result."""
        try:
            raw = self._binding.parse_sync(source_text)
        except Exception as exc:
            raise ParseFailure(f"parse_sync raised {type(exc).__name__}: {exc}") from exc
        return to_outcome(raw)

    async def parse_deferred(self, source_text: str) -> ParseOutcome:
        """Await ``parse_async`` and normalize its result."""
        try:
            raw = await self._binding.parse_async(source_text)
        except Exception as exc:
            raise ParseFailure(f"parse_async raised {type(exc).__name__}: {exc}") from exc
        return to_outcome(raw)
