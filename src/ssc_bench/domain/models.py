"""Core data models for ssc-bench."""

from dataclasses import dataclass, field
from enum import Enum


class CallMode(Enum):
    """Calling convention used to reach the parser."""

    BLOCKING = "blocking"
    DEFERRED = "deferred"


@dataclass(frozen=True)
class Fixture:
    """A named sample input text used to drive the benchmark."""

    identifier: str
    content: str


@dataclass(frozen=True)
class BenchmarkProfile:
    """Warm-up and measurement parameters for one benchmark run."""

    name: str
    warmup_iterations: int
    measured_duration_ms: int
    min_iterations: int


@dataclass(frozen=True)
class TaskResult:
    """Timing collected for one benchmark task."""

    label: str
    period_us: float
    samples: tuple[float, ...] = ()

    @property
    def runs(self) -> int:
        """Number of measured iterations."""
        return len(self.samples)


@dataclass(frozen=True)
class Comment:
    """A comment reported by the parser, with its source span."""

    value: str
    start: int
    end: int


@dataclass(frozen=True)
class ParseOutcome:
    """The parser's result: serialized tree, error list and comment list."""

    root: str
    errors: tuple[str, ...] = ()
    comments: tuple[Comment, ...] = ()


@dataclass(frozen=True)
class ArtifactRecord:
    """One entry of the CI results artifact."""

    filename: str
    duration: float

    def to_dict(self) -> dict[str, object]:
        return {"filename": self.filename, "duration": self.duration}


@dataclass(frozen=True)
class ContractReport:
    """Observed cardinalities for one calling convention of the parser."""

    mode: CallMode
    fragment_nodes: int
    errors: int
    comments: int
    violations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return not self.violations
