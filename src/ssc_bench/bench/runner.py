"""Benchmark runner: one timed task per fixture, warm-up then measurement."""

from __future__ import annotations

import logging
import math
import statistics
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ssc_bench.config import BenchConfig
from ssc_bench.domain.errors import ParseFailure
from ssc_bench.domain.models import BenchmarkProfile, Fixture, TaskResult
from ssc_bench.domain.protocols import Parser
from ssc_bench.parser.decode import decode_root

logger = logging.getLogger(__name__)

LABEL_PREFIX = "parser_py"

# Two-sided 95% critical value used for the margin of error column.
_Z_95 = 1.96

TABLE_HEADERS = ["Task Name", "ops/sec", "Average Time (µs)", "Margin", "Samples"]


def task_label(identifier: str) -> str:
    """Return the benchmark label for a fixture, e.g. ``parser_py[Menu.svelte]``."""
    return f"{LABEL_PREFIX}[{identifier}]"


@dataclass(frozen=True)
class BenchmarkTask:
    """A registered unit of timed work."""

    label: str
    fixture: Fixture
    body: Callable[[], object]


def _parse_and_decode(parser: Parser, source_text: str) -> Callable[[], object]:
    def body() -> object:
        outcome = parser.parse_blocking(source_text)
        return decode_root(outcome.root)

    return body


class BenchmarkRunner:
    """Runs the parser benchmark suite under the configured profile."""

    def __init__(
        self,
        config: BenchConfig,
        parser: Parser,
        *,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self._profile = config.profile
        self._parser = parser
        self._clock = clock
        self._tasks: list[BenchmarkTask] = []
        self._warmed_up = False

    @property
    def profile(self) -> BenchmarkProfile:
        return self._profile

    @property
    def tasks(self) -> tuple[BenchmarkTask, ...]:
        return tuple(self._tasks)

    def add_fixtures(self, fixtures: Iterable[Fixture]) -> None:
        """Register one task per fixture, in order."""
        for fixture in fixtures:
            self.add(fixture)

    def add(self, fixture: Fixture) -> BenchmarkTask:
        """Register the parse-and-decode task for *fixture*."""
        label = task_label(fixture.identifier)
        if any(t.label == label for t in self._tasks):
            raise ValueError(f"task {label} is already registered")
        task = BenchmarkTask(
            label=label,
            fixture=fixture,
            body=_parse_and_decode(self._parser, fixture.content),
        )
        self._tasks.append(task)
        return task

    def warmup(self) -> None:
        """Exercise every task without recording timings."""
        for task in self._tasks:
            for _ in range(self._profile.warmup_iterations):
                self._invoke(task)
        self._warmed_up = True
        logger.info(
            "Warm-up done: %d task(s) x %d iteration(s)",
            len(self._tasks),
            self._profile.warmup_iterations,
        )

    def run(self) -> list[TaskResult]:
        """Measure every task and return one result per task, in registration order.

        Runs the warm-up phase first if it has not happened yet.
        """
        if not self._warmed_up:
            self.warmup()
        return [self._measure(task) for task in self._tasks]

    def _measure(self, task: BenchmarkTask) -> TaskResult:
        budget_ns = self._profile.measured_duration_ms * 1_000_000
        min_runs = self._profile.min_iterations
        samples: list[float] = []
        total_ns = 0
        while not samples or total_ns < budget_ns or len(samples) < min_runs:
            start = self._clock()
            self._invoke(task)
            elapsed = self._clock() - start
            total_ns += elapsed
            samples.append(elapsed / 1_000)

        period_us = total_ns / 1_000 / len(samples)
        logger.info("%s: %.2fus over %d run(s)", task.label, period_us, len(samples))
        return TaskResult(label=task.label, period_us=period_us, samples=tuple(samples))

    @staticmethod
    def _invoke(task: BenchmarkTask) -> None:
        try:
            task.body()
        except Exception as exc:
            raise ParseFailure(f"{task.label}: {exc}") from exc


def margin_of_error(samples: tuple[float, ...]) -> float:
    """Relative margin of error (percent) of the sample mean."""
    if len(samples) < 2:
        return 0.0
    mean = statistics.fmean(samples)
    if mean == 0:
        return 0.0
    sem = statistics.stdev(samples) / math.sqrt(len(samples))
    return _Z_95 * sem / mean * 100


def results_table(results: Iterable[TaskResult]) -> list[list[str]]:
    """Format results as console table rows matching TABLE_HEADERS."""
    rows: list[list[str]] = []
    for result in results:
        ops = 1_000_000 / result.period_us if result.period_us else math.inf
        rows.append(
            [
                result.label,
                f"{ops:,.0f}",
                f"{result.period_us:,.2f}",
                f"±{margin_of_error(result.samples):.2f}%",
                str(result.runs),
            ]
        )
    return rows
