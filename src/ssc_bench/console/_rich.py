"""ssc_bench.console._rich -- Rich-based terminal backend."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "blue",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "step": "bold cyan",
    }
)


def _themed(console: Console | None, *, stderr: bool) -> Console:
    if console is None:
        return Console(theme=_THEME, highlight=False, stderr=stderr)
    console.push_theme(_THEME)
    return console


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self._con = _themed(console, stderr=False)
        self._err = _themed(err_console, stderr=True)

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        self._con.print(f"  {message}", style="info", markup=False)

    def success(self, message: str) -> None:
        self._con.print(f"  ✓ {message}", style="success", markup=False)

    def warning(self, message: str) -> None:
        self._con.print(f"  ⚠ {message}", style="warning", markup=False)

    def error(self, message: str) -> None:
        self._err.print(f"  ✗ {message}", style="error", markup=False)

    # -- Structured output --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        t = Table(title=title or None, box=box.SIMPLE, show_edge=False, pad_edge=True)
        for i, h in enumerate(headers):
            t.add_column(h, justify="left" if i == 0 else "right")
        for r in rows:
            t.add_row(*(escape(cell) for cell in r))
        self._con.print(t)

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        t = Table(
            title=title or None,
            box=box.SIMPLE,
            show_header=False,
            show_edge=False,
            pad_edge=True,
        )
        t.add_column("Key", style="bold", justify="right")
        t.add_column("Value")
        for k, v in data.items():
            t.add_row(escape(k), escape(v))
        self._con.print(t)

    def block(self, content: str, *, title: str = "") -> None:
        if title:
            self._con.print(f"{title}:", style="step", markup=False)
        self._con.print(Syntax(content, "json", word_wrap=True))

    def step(self, message: str) -> None:
        self._con.print(f"\n  {message}", style="step", markup=False)
