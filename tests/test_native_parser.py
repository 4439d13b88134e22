"""Tests for the native binding adapter (fake binding modules)."""

import types
from collections.abc import Callable

import pytest
from conftest import make_binding, make_raw_result, make_root

from ssc_bench.domain.errors import ParseFailure, ParserUnavailable
from ssc_bench.domain.models import Comment
from ssc_bench.parser.native import NativeParser, to_outcome


class TestToOutcome:
    def test_from_mapping(self) -> None:
        outcome = to_outcome(make_raw_result(errors=["x: unexpected token"]))
        assert outcome.root == make_root()
        assert outcome.errors == ("x: unexpected token",)
        assert outcome.comments == (Comment(value=" comment ", start=0, end=16),)

    def test_from_attribute_object(self) -> None:
        raw = types.SimpleNamespace(
            root=make_root(),
            errors=[],
            comments=[types.SimpleNamespace(value="c", start=1, end=9)],
        )
        outcome = to_outcome(raw)
        assert outcome.errors == ()
        assert outcome.comments == (Comment(value="c", start=1, end=9),)

    def test_missing_lists_default_to_empty(self) -> None:
        outcome = to_outcome({"root": "{}"})
        assert outcome.errors == ()
        assert outcome.comments == ()

    def test_non_string_root(self) -> None:
        with pytest.raises(ParseFailure, match="non-string root"):
            to_outcome({"root": {"fragment": {}}})

    def test_malformed_comment(self) -> None:
        with pytest.raises(ParseFailure, match="malformed"):
            to_outcome(make_raw_result(comments=[{"value": "c", "start": "x", "end": 2}]))


class TestNativeParser:
    def test_requires_both_entry_points(self) -> None:
        module = types.ModuleType("half_binding")
        module.parse_sync = lambda text: make_raw_result()  # type: ignore[attr-defined]
        with pytest.raises(ParserUnavailable, match="parse_async"):
            NativeParser(module)

    def test_load_missing_module(self) -> None:
        with pytest.raises(ParserUnavailable, match="cannot import"):
            NativeParser.load("ssc_bench_no_such_binding")

    def test_load_registered_module(
        self, install_binding: Callable[..., types.ModuleType]
    ) -> None:
        install_binding("fake_ssc")
        parser = NativeParser.load("fake_ssc")
        assert parser.parse_blocking("<p/>").root == make_root()

    def test_parse_blocking_wraps_exceptions(self) -> None:
        module = make_binding()

        def boom(source_text: str) -> object:
            raise RuntimeError("allocator exhausted")

        module.parse_sync = boom  # type: ignore[attr-defined]
        with pytest.raises(ParseFailure, match="parse_sync raised RuntimeError"):
            NativeParser(module).parse_blocking("<p/>")

    async def test_parse_deferred_awaits_binding(self) -> None:
        module = make_binding(async_result=make_raw_result(root=make_root(2)))
        outcome = await NativeParser(module).parse_deferred("<p/>")
        assert outcome.root == make_root(2)

    async def test_parse_deferred_wraps_exceptions(self) -> None:
        module = make_binding()

        async def boom(source_text: str) -> object:
            raise RuntimeError("runtime crashed")

        module.parse_async = boom  # type: ignore[attr-defined]
        with pytest.raises(ParseFailure, match="parse_async raised RuntimeError"):
            await NativeParser(module).parse_deferred("<p/>")
