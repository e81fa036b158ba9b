"""Diagnostic sinks for failed matches."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ReportConfig
from .results import MatchResult, short_repr


def failure_table(result: MatchResult, config: ReportConfig) -> Table:
    """Build a rich table with one row per recorded failure."""
    limit = config.max_repr_length
    table = Table(title=config.title, show_lines=True)
    table.add_column("Path", style="bold cyan")
    table.add_column("Problem", style="red")
    table.add_column("Expected")
    table.add_column("Actual")

    for failure in result.failures:
        problem = failure.problem(limit)
        table.add_row(
            escape(failure.path),
            escape(problem),
            escape(short_repr(failure.pattern, limit)),
            escape(short_repr(failure.actual, limit)),
        )
    return table


def format_failure(result: MatchResult, config: ReportConfig | None = None) -> str:
    """Plain-text rendering of a failed match, used in assertion messages."""
    config = config or ReportConfig()
    limit = config.max_repr_length
    lines = [config.title]
    lines.extend(f"  {f.describe(limit)}" for f in result.failures)
    if config.show_snapshots:
        lines.append(f"pattern: {short_repr(result.pattern, limit)}")
        lines.append(f" actual: {short_repr(result.actual, limit)}")
    return "\n".join(lines)


class ConsoleReporter:
    """Prints failed matches to a rich console (stderr by default)."""

    def __init__(self, config: ReportConfig | None = None, console: Console | None = None) -> None:
        self._config = config or ReportConfig()
        self._console = console or Console(stderr=self._config.stderr)

    @property
    def console(self) -> Console:
        return self._console

    def __call__(self, result: MatchResult) -> None:
        if result.matched:
            return
        limit = self._config.max_repr_length
        if result.failures:
            self._console.print(failure_table(result, self._config))
        else:
            self._console.print(f"[red]{escape(self._config.title)}[/]")
        if self._config.show_snapshots:
            self._console.print(f"[bold]pattern:[/] {escape(short_repr(result.pattern, limit))}", highlight=False)
            self._console.print(f"[bold] actual:[/] {escape(short_repr(result.actual, limit))}", highlight=False)


class CollectingReporter:
    """Keeps every reported result, for later inspection."""

    def __init__(self) -> None:
        self.results: list[MatchResult] = []

    def __call__(self, result: MatchResult) -> None:
        self.results.append(result)

    def __len__(self) -> int:
        return len(self.results)

    def clear(self) -> None:
        self.results.clear()
