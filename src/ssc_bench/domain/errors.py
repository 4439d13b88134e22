"""Error taxonomy for ssc-bench.

Every failure is fatal: nothing below is caught inside the harness except at
the CLI boundary, which turns it into a non-zero exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ssc_bench.domain.models import ContractReport


class HarnessError(Exception):
    """Base class for all ssc-bench failures."""


class FetchFailure(HarnessError):
    """Raised when a fixture cannot be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"failed to fetch {url}: {reason}")
        self.url = url


class ParseFailure(HarnessError):
    """Raised when the parser throws or returns a malformed outcome."""


class ContractViolation(HarnessError):
    """Raised when a parse outcome breaks the binding contract.

    ``report`` holds the observed cardinalities and every violation found.
    """

    def __init__(self, report: ContractReport) -> None:
        self.report = report
        self.mode = report.mode.value
        self.violations = report.violations
        super().__init__(f"{self.mode} contract violated: {'; '.join(self.violations)}")


class ArtifactWriteFailure(HarnessError):
    """Raised when the CI results artifact cannot be written."""


class ParserUnavailable(HarnessError):
    """Raised when the native binding module cannot be loaded."""


class ManifestError(HarnessError):
    """Raised when a fixture manifest is unreadable or malformed."""


class CacheFailure(HarnessError):
    """Raised when a cache entry cannot be decoded or stored."""
