"""CI results artifact: per-fixture timings serialized for downstream jobs."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path

from ssc_bench.config import DATA_DIR_VAR, BenchConfig, artifact_file
from ssc_bench.domain.errors import ArtifactWriteFailure
from ssc_bench.domain.models import ArtifactRecord, TaskResult

logger = logging.getLogger(__name__)

_LABEL_RE = re.compile(r"\[(.+)\]$")


def filename_from_label(label: str) -> str:
    """Recover the fixture filename from a task label such as ``parser_py[Menu.svelte]``."""
    match = _LABEL_RE.search(label)
    if match is None:
        raise ValueError(f"task label {label!r} does not name a fixture")
    return match.group(1)


def build_records(results: Iterable[TaskResult]) -> list[ArtifactRecord]:
    """Convert task results into artifact records (durations in seconds)."""
    return [
        ArtifactRecord(
            filename=filename_from_label(result.label),
            duration=result.period_us / 1_000_000,
        )
        for result in results
    ]


class CIArtifactWriter:
    """Writes ``results.json`` into ``DATA_DIR`` when running on CI."""

    def __init__(self, config: BenchConfig) -> None:
        self._config = config

    @property
    def active(self) -> bool:
        return self._config.is_ci

    def destination(self) -> Path:
        """Return the artifact path, checking the data directory exists."""
        data_dir = self._config.data_dir
        if data_dir is None:
            raise ArtifactWriteFailure(f"{DATA_DIR_VAR} must be set when running on CI")
        if not data_dir.is_dir():
            raise ArtifactWriteFailure(f"{DATA_DIR_VAR} {data_dir} is not a directory")
        return artifact_file(data_dir)

    def preflight(self) -> None:
        """Fail early if a CI run would be unable to write its artifact."""
        if self.active:
            self.destination()

    def write(self, results: Iterable[TaskResult]) -> Path | None:
        """Serialize all results in one write. Returns the path, or None outside CI."""
        if not self.active:
            logger.debug("Not on CI, skipping results artifact")
            return None

        path = self.destination()
        records = [record.to_dict() for record in build_records(results)]
        try:
            path.write_text(json.dumps(records, separators=(",", ":")), encoding="utf-8")
        except OSError as exc:
            raise ArtifactWriteFailure(f"cannot write {path}: {exc}") from exc
        logger.info("Wrote %d result(s) to %s", len(records), path)
        return path
