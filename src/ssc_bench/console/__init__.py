"""ssc_bench.console -- terminal output for the harness.

Usage (any module)::

    from ssc_bench.console import console

    console.info("Warming up")
    console.table(["Task Name", "Samples"], [["parser_py[Menu.svelte]", "120"]])

Configuration (call once in ``cli.py:main()``)::

    from ssc_bench.console import configure

    configure(backend="auto")  # "rich" | "plain" | "auto"
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ssc_bench.console._plain import PlainBackend

if TYPE_CHECKING:
    from ssc_bench.console._protocol import ConsoleProtocol

# ---------------------------------------------------------------------------
# Global singleton -- defaults to PlainBackend until configure() runs
# ---------------------------------------------------------------------------

_backend: ConsoleProtocol = PlainBackend()


def configure(*, backend: str = "auto") -> None:
    """Select the console backend.

    Should be called **once** at startup (in ``cli.py:main()``).

    Args:
        backend: ``"rich"`` -- always use Rich.
                 ``"plain"`` -- always use plain text.
                 ``"auto"`` (default) -- Rich when stdout is a TTY,
                 plain otherwise (CI logs stay free of escape codes).
    """
    global _backend  # noqa: PLW0603

    if backend == "auto":
        backend = "rich" if sys.stdout.isatty() else "plain"

    if backend == "plain":
        _backend = PlainBackend()
    elif backend == "rich":
        from ssc_bench.console._rich import RichBackend

        _backend = RichBackend()
    else:
        raise ValueError(f"Unknown console backend: {backend!r}")


def get_console() -> ConsoleProtocol:
    """Return the current backend instance."""
    return _backend


# ---------------------------------------------------------------------------
# Proxy object -- ``from ssc_bench.console import console``
# ---------------------------------------------------------------------------


class _ConsoleProxy:
    """Transparent proxy that delegates to the current ``_backend``.

    This lets callers import ``console`` once at module level and
    automatically pick up any later ``configure()`` call.
    """

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _ConsoleProxy()  # type: ignore[assignment]
