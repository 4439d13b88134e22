"""Path constants, benchmark profiles and run configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ssc_bench.domain.models import BenchmarkProfile

# Same directory the native benchmarks use for downloaded files
CACHE_DIR_NAME = "target"
ARTIFACT_FILE = "results.json"
DEFAULT_PARSER_MODULE = "ssc"

CI_VAR = "CI"
ACCURATE_VAR = "ACCURATE"
DATA_DIR_VAR = "DATA_DIR"

QUICK_PROFILE = BenchmarkProfile(
    name="quick",
    warmup_iterations=5,
    measured_duration_ms=500,
    min_iterations=10,
)

ACCURATE_PROFILE = BenchmarkProfile(
    name="accurate",
    warmup_iterations=20,
    measured_duration_ms=5000,
    min_iterations=100,
)


def cache_dir(project_root: Path) -> Path:
    """Return the shared fixture cache directory for a project."""
    return project_root / CACHE_DIR_NAME


def artifact_file(data_dir: Path) -> Path:
    """Return the CI results artifact path."""
    return data_dir / ARTIFACT_FILE


def select_profile(is_ci: bool, accurate: bool) -> BenchmarkProfile:
    """Pick the accurate profile in CI or when explicitly requested."""
    if is_ci or accurate:
        return ACCURATE_PROFILE
    return QUICK_PROFILE


@dataclass(frozen=True)
class BenchConfig:
    """Run configuration, built once at process entry."""

    is_ci: bool
    accurate: bool
    cache_dir: Path
    data_dir: Path | None = None

    @property
    def profile(self) -> BenchmarkProfile:
        return select_profile(self.is_ci, self.accurate)

    @classmethod
    def from_env(cls, environ: Mapping[str, str], *, cache_dir: Path) -> BenchConfig:
        """Build a config from environment variables.

        ``CI`` and ``ACCURATE`` count as set when they hold any non-empty
        value. ``DATA_DIR`` is only consulted by the CI artifact writer.
        """
        data_dir = environ.get(DATA_DIR_VAR)
        return cls(
            is_ci=bool(environ.get(CI_VAR)),
            accurate=bool(environ.get(ACCURATE_VAR)),
            cache_dir=cache_dir,
            data_dir=Path(data_dir) if data_dir else None,
        )
