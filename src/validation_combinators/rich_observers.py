"""Rich-based display of validation failures.

Provides a live observer printing failed checks as a suite runs, and a
table renderer for finished reports.

Requires the 'rich' package: pip install rich
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from validation_combinators.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console
    from rich.table import Table

    from validation_combinators.report import ValidationReport

__all__ = ["RichFailureObserver", "build_report_table", "render_report"]


class RichFailureObserver(ValidationObserver):
    """Print each failed check and a summary line per validated item.

    Example:
        observer = RichFailureObserver()
        suite.add_observer(observer)
        suite.run(address)

    Requires:
        pip install rich
    """

    def __init__(self, console: Console | None = None, show_passed: bool = False) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            show_passed: Also print a line for each passing check.
        """
        from rich.console import Console

        self._console = console or Console()
        self._show_passed = show_passed
        self._failed = 0
        self._passed = 0

    @property
    def console(self) -> Console:
        return self._console

    @property
    def failed(self) -> int:
        """Failed checks seen since the last VALIDATION_STARTED."""
        return self._failed

    @property
    def passed(self) -> int:
        """Passed checks seen since the last VALIDATION_STARTED."""
        return self._passed

    def on_event(self, event: ValidationEvent) -> None:
        """Handle validation events to print progress.

        Args:
            event: The validation event to handle.
        """
        data = event.data
        if event.event_type == ValidationEventType.VALIDATION_STARTED:
            self._failed = 0
            self._passed = 0

        elif event.event_type == ValidationEventType.CHECK_FAILED:
            self._failed += 1
            self._console.print(
                f"[red]✗[/] [bold]{data.get('validation_name')}[/]: {data.get('reason')}",
                highlight=False,
            )

        elif event.event_type == ValidationEventType.CHECK_PASSED:
            self._passed += 1
            if self._show_passed:
                self._console.print(
                    f"[green]✓[/] {data.get('validation_name')}", highlight=False
                )

        elif event.event_type == ValidationEventType.VALIDATION_COMPLETED:
            status = "[green]valid[/]" if data.get("is_valid") else "[red]invalid[/]"
            self._console.print(
                f"{data.get('suite_name')}: {status} "
                f"([green]✓{self._passed}[/] [red]✗{self._failed}[/])",
                highlight=False,
            )


def build_report_table(report: ValidationReport, title: str = "Validation Failures") -> Table:
    """Build a Rich table with one row per failed validation."""
    from rich.table import Table

    table = Table(title=title, expand=True)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Validation", style="cyan")
    table.add_column("Reason", style="yellow")

    for i, entry in enumerate(report.entries, 1):
        table.add_row(str(i), entry.name, entry.reason)

    return table


def render_report(
    report: ValidationReport,
    console: Console | None = None,
    title: str = "Validation Failures",
) -> None:
    """Print a report to the console.

    Valid reports print a single success line instead of an empty table.
    """
    from rich.console import Console

    console = console or Console()
    if report.is_valid:
        console.print("[green]✓ All validations passed[/]")
        return
    console.print(build_report_table(report, title=title))
