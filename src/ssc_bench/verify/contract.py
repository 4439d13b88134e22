"""Binding contract checks for both calling conventions of the parser.

The same assertions apply to the blocking and the deferred entry point: for
``SAMPLE_SOURCE`` the parser must report exactly one fragment node, no
errors and exactly one comment.
"""

from __future__ import annotations

import logging

from ssc_bench.domain.errors import ContractViolation
from ssc_bench.domain.models import CallMode, ContractReport, ParseOutcome
from ssc_bench.domain.protocols import Parser
from ssc_bench.parser.decode import decode_root, fragment_node_count

logger = logging.getLogger(__name__)

SAMPLE_SOURCE = "<!-- comment --> foo"

EXPECTED_FRAGMENT_NODES = 1
EXPECTED_ERRORS = 0
EXPECTED_COMMENTS = 1


def check(outcome: ParseOutcome, mode: CallMode) -> ContractReport:
    """Assert the contract on one outcome.

    Raises:
        ParseFailure: ``root`` cannot be decoded or has no fragment nodes list.
        ContractViolation: any cardinality differs from the expected value.
    """
    logger.debug("%s outcome: %r", mode.value, outcome)
    nodes = fragment_node_count(decode_root(outcome.root))

    violations: list[str] = []
    if nodes != EXPECTED_FRAGMENT_NODES:
        violations.append(f"expected {EXPECTED_FRAGMENT_NODES} fragment node(s), got {nodes}")
    if len(outcome.errors) != EXPECTED_ERRORS:
        violations.append(f"expected {EXPECTED_ERRORS} error(s), got {len(outcome.errors)}")
    if len(outcome.comments) != EXPECTED_COMMENTS:
        violations.append(
            f"expected {EXPECTED_COMMENTS} comment(s), got {len(outcome.comments)}"
        )

    report = ContractReport(
        mode=mode,
        fragment_nodes=nodes,
        errors=len(outcome.errors),
        comments=len(outcome.comments),
        violations=tuple(violations),
    )
    if violations:
        logger.error("%s contract violated: %s", mode.value, "; ".join(violations))
        raise ContractViolation(report)
    return report


class ContractVerifier:
    """Exercises both entry points of a Parser against the fixed sample."""

    def __init__(self, parser: Parser, source_text: str = SAMPLE_SOURCE) -> None:
        self._parser = parser
        self._source_text = source_text

    def verify_blocking(self) -> ContractReport:
        return check(self._parser.parse_blocking(self._source_text), CallMode.BLOCKING)

    async def verify_deferred(self) -> ContractReport:
        outcome = await self._parser.parse_deferred(self._source_text)
        return check(outcome, CallMode.DEFERRED)

    async def verify(self) -> list[ContractReport]:
        """Check the blocking path, then the deferred path. Stops at the first failure."""
        reports = [self.verify_blocking()]
        reports.append(await self.verify_deferred())
        logger.info("Contract satisfied for %d calling convention(s)", len(reports))
        return reports
