"""Protocol interfaces for ssc-bench components."""

from __future__ import annotations

from typing import Protocol

from ssc_bench.domain.models import ParseOutcome


class Parser(Protocol):
    """Interface for the two calling conventions of the native parser."""

    def parse_blocking(self, source_text: str) -> ParseOutcome:
        """Parse and return the outcome directly."""
        ...

    async def parse_deferred(self, source_text: str) -> ParseOutcome:
        """Parse and deliver the outcome through an awaitable."""
        ...
