"""ssc_bench.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the harness terminal output.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """Terminal output protocol.

    **General messages**::

        console.info("Warming up")
        console.success("blocking contract satisfied")
        console.warning("Downloading: Menu.svelte")
        console.error("failed to fetch ...")

    **Structured output**::

        console.table(["Task Name", "ops/sec"], [["parser_py[a]", "1,204"]])
        console.kv({"Profile": "accurate"}, title="Run")
        console.block("{...}", title="AST")
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured output --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

    def block(self, content: str, *, title: str = "") -> None:
        """Display preformatted *content* verbatim under an optional title."""
        ...

    def step(self, message: str) -> None:
        """Display a phase heading such as ``Running benchmarks``."""
        ...
