"""Rich-powered console output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wiredriver.models import Status

_console = Console()


def print_banner(executor: str) -> None:
    """Display the startup banner."""
    _console.print(
        Panel.fit(
            f"[bold cyan]wiredriver[/bold cyan]  remote end: {executor}",
            border_style="cyan",
        )
    )


def build_status_table(status: Status) -> Table:
    table = Table(title="Server Status", show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Build version", status.build_version or "-")
    table.add_row("Build revision", status.build_revision or "-")
    table.add_row("Build time", status.build_time or "-")
    table.add_row("OS", " ".join(p for p in (status.os_name, status.os_version, status.os_arch) if p) or "-")
    table.add_row("Java", status.java_version or "-")
    if status.ready is not None:
        table.add_row("Ready", "yes" if status.ready else "no")
    if status.message:
        table.add_row("Message", status.message)
    return table


def print_status_report(status: Status) -> None:
    """Display the server status table."""
    _console.print()
    _console.print(build_status_table(status))
    _console.print()


def print_failure(message: str) -> None:
    _console.print(f"[bold red]error[/bold red]  {message}")
