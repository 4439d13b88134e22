"""Tests for run configuration and profile selection."""

from pathlib import Path

import pytest

from ssc_bench.config import (
    ACCURATE_PROFILE,
    QUICK_PROFILE,
    BenchConfig,
    artifact_file,
    cache_dir,
    select_profile,
)


class TestSelectProfile:
    @pytest.mark.parametrize(
        ("is_ci", "accurate", "expected"),
        [
            (False, False, QUICK_PROFILE),
            (True, False, ACCURATE_PROFILE),
            (False, True, ACCURATE_PROFILE),
            (True, True, ACCURATE_PROFILE),
        ],
    )
    def test_truth_table(self, is_ci: bool, accurate: bool, expected: object) -> None:
        assert select_profile(is_ci, accurate) == expected

    def test_repeated_calls_agree(self) -> None:
        assert select_profile(True, False) is select_profile(True, False)

    def test_accurate_is_heavier_than_quick(self) -> None:
        assert ACCURATE_PROFILE.warmup_iterations > QUICK_PROFILE.warmup_iterations
        assert ACCURATE_PROFILE.measured_duration_ms > QUICK_PROFILE.measured_duration_ms
        assert ACCURATE_PROFILE.min_iterations > QUICK_PROFILE.min_iterations


class TestBenchConfigFromEnv:
    def test_empty_environment(self, tmp_path: Path) -> None:
        config = BenchConfig.from_env({}, cache_dir=tmp_path)
        assert config.is_ci is False
        assert config.accurate is False
        assert config.data_dir is None
        assert config.cache_dir == tmp_path
        assert config.profile == QUICK_PROFILE

    def test_ci_selects_accurate(self, tmp_path: Path) -> None:
        config = BenchConfig.from_env({"CI": "true", "DATA_DIR": "/data"}, cache_dir=tmp_path)
        assert config.is_ci is True
        assert config.data_dir == Path("/data")
        assert config.profile == ACCURATE_PROFILE

    def test_accurate_override(self, tmp_path: Path) -> None:
        config = BenchConfig.from_env({"ACCURATE": "1"}, cache_dir=tmp_path)
        assert config.is_ci is False
        assert config.profile == ACCURATE_PROFILE

    def test_empty_values_count_as_unset(self, tmp_path: Path) -> None:
        config = BenchConfig.from_env({"CI": "", "ACCURATE": "", "DATA_DIR": ""}, cache_dir=tmp_path)
        assert config.is_ci is False
        assert config.accurate is False
        assert config.data_dir is None

    def test_unrelated_variables_ignored(self, tmp_path: Path) -> None:
        config = BenchConfig.from_env({"GITHUB_ACTIONS": "true"}, cache_dir=tmp_path)
        assert config.profile == QUICK_PROFILE


class TestPaths:
    def test_cache_dir(self, tmp_path: Path) -> None:
        assert cache_dir(tmp_path) == tmp_path / "target"

    def test_artifact_file(self, tmp_path: Path) -> None:
        assert artifact_file(tmp_path) == tmp_path / "results.json"
