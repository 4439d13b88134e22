"""Parse a single file and report timing, comments and errors."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from ssc_bench.domain.models import ParseOutcome
from ssc_bench.domain.protocols import Parser
from ssc_bench.parser.decode import decode_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Inspection:
    """Result of parsing one file through the blocking entry point."""

    path: Path
    elapsed_ms: float
    outcome: ParseOutcome
    tree: object

    @property
    def ok(self) -> bool:
        return not self.outcome.errors


def inspect_file(parser: Parser, path: Path) -> Inspection:
    """Parse *path* once and decode its tree.

    Raises:
        OSError: the file cannot be read.
        ParseFailure: the parser raised or returned an undecodable root.
    """
    source_text = path.read_text(encoding="utf-8")
    start = time.perf_counter()
    outcome = parser.parse_blocking(source_text)
    elapsed_ms = (time.perf_counter() - start) * 1000
    tree = decode_root(outcome.root)
    logger.info("Parsed %s in %.2fms with %d error(s)", path, elapsed_ms, len(outcome.errors))
    return Inspection(path=path, elapsed_ms=elapsed_ms, outcome=outcome, tree=tree)
