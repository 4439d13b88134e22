"""
ssc-bench CLI -- benchmark and contract checks for the ssc parser binding.

Usage:
  ssc-bench bench [--fixtures FILE] [--cache-dir DIR] [--parser-module NAME]
  ssc-bench verify [--parser-module NAME]
  ssc-bench inspect FILE [--ast] [--parser-module NAME]

Environment (bench only):
  CI        any non-empty value: accurate profile and results artifact
  ACCURATE  any non-empty value: accurate profile
  DATA_DIR  directory receiving results.json on CI
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import platform
import sys
from collections.abc import Mapping
from pathlib import Path

from ssc_bench import config as cfg
from ssc_bench.bench.artifact import CIArtifactWriter
from ssc_bench.bench.runner import TABLE_HEADERS, BenchmarkRunner, results_table
from ssc_bench.config import BenchConfig
from ssc_bench.console import configure, console
from ssc_bench.domain.errors import HarnessError
from ssc_bench.fixtures.cache import FixtureCache
from ssc_bench.fixtures.manifest import DEFAULT_FIXTURE_URLS, load_manifest
from ssc_bench.parser.inspector import inspect_file
from ssc_bench.parser.native import NativeParser
from ssc_bench.verify.contract import ContractVerifier

logger = logging.getLogger("ssc_bench")

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


def cmd_bench(args: argparse.Namespace, environ: Mapping[str, str]) -> int:
    """Fetch fixtures, run the benchmark suite and write the CI artifact."""
    config = BenchConfig.from_env(
        environ,
        cache_dir=args.cache_dir or cfg.cache_dir(Path.cwd()),
    )
    writer = CIArtifactWriter(config)
    writer.preflight()

    urls = load_manifest(args.fixtures) if args.fixtures else list(DEFAULT_FIXTURE_URLS)
    parser = NativeParser.load(args.parser_module)
    fixtures = asyncio.run(FixtureCache(config).resolve(urls))

    runner = BenchmarkRunner(config, parser)
    runner.add_fixtures(fixtures)
    console.kv(
        {
            "Profile": runner.profile.name,
            "Fixtures": str(len(fixtures)),
            "Cache": str(config.cache_dir),
        },
        title="Run",
    )

    console.step("Warming up")
    runner.warmup()
    console.step("Running benchmarks")
    results = runner.run()
    console.table(TABLE_HEADERS, results_table(results))

    path = writer.write(results)
    if path is not None:
        console.success(f"Results written to {path}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Check both calling conventions of the binding against the sample input."""
    console.info(f"Testing on {sys.platform}-{platform.machine()}")
    parser = NativeParser.load(args.parser_module)
    reports = asyncio.run(ContractVerifier(parser).verify())
    for report in reports:
        console.success(
            f"{report.mode.value}: {report.fragment_nodes} fragment node(s), "
            f"{report.errors} error(s), {report.comments} comment(s)"
        )
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    """Parse one file and print timing, tree, comments and errors."""
    parser = NativeParser.load(args.parser_module)
    try:
        inspection = inspect_file(parser, args.file)
    except OSError:
        console.error(f"Missing '{args.file}'")
        return 1

    console.info(f"{inspection.elapsed_ms:.2f}ms.")
    if args.ast:
        console.block(json.dumps(inspection.tree, indent=2), title="AST")
    comments = [c.value for c in inspection.outcome.comments]
    console.info(f"Comments: {comments!r}")

    for error in inspection.outcome.errors:
        console.warning(error)
    if inspection.ok:
        console.success("Parsed Successfully.")
    else:
        console.warning("Parsed with Errors.")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _setup_logging(verbosity: int, log_file: Path | None) -> None:
    """Send logs to *log_file* if given, else to stderr."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(format=_LOG_FORMAT, level=level, handlers=[handler], force=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssc-bench",
        description="Benchmark and contract checks for the ssc parser binding",
    )
    parser.add_argument(
        "--console",
        choices=("auto", "rich", "plain"),
        default="auto",
        help="Terminal output backend (default: auto)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)"
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file")

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "--parser-module",
        default=cfg.DEFAULT_PARSER_MODULE,
        help=f"Import name of the parser binding (default: {cfg.DEFAULT_PARSER_MODULE})",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # ssc-bench bench
    bench_p = sub.add_parser("bench", parents=[shared], help="Run the parser benchmark")
    bench_p.add_argument(
        "--fixtures", type=Path, default=None, help="YAML manifest with a 'urls' list"
    )
    bench_p.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help=f"Fixture cache directory (default: ./{cfg.CACHE_DIR_NAME})",
    )

    # ssc-bench verify
    sub.add_parser("verify", parents=[shared], help="Verify the binding contract")

    # ssc-bench inspect
    inspect_p = sub.add_parser("inspect", parents=[shared], help="Parse a single file")
    inspect_p.add_argument("file", type=Path, help="Svelte file to parse")
    inspect_p.add_argument("--ast", action="store_true", help="Print the parsed tree")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    configure(backend=args.console)
    _setup_logging(args.verbose, args.log_file)

    try:
        if args.command == "bench":
            return cmd_bench(args, os.environ)
        if args.command == "verify":
            return cmd_verify(args)
        return cmd_inspect(args)
    except HarnessError as exc:
        logger.debug("%s aborted", args.command, exc_info=True)
        console.error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
