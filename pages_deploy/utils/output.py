"""Console output helpers"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from ..constants import EMOJI_ERROR, EMOJI_LINK, EMOJI_REPORT, EMOJI_SUCCESS, EMOJI_WARNING
from ..models.result import DeploymentReport, FileCheckReport, RepositoryStatus

console = Console()


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red][ERROR][/red] {escape(message)}: {escape(str(error))}")
    else:
        console.print(f"[red][ERROR][/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow][WARNING][/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message"""
    console.print(f"[cyan][INFO][/cyan] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green][SUCCESS][/green] {escape(message)}")


def format_report(report: DeploymentReport) -> None:
    """Format and display a deployment report"""
    ok = report.is_success
    status = f"[green]{report.status.value}[/green]" if ok else f"[red]{report.status.value}[/red]"

    lines = [
        f"[bold]Status:[/bold] {status}",
        f"[bold]Timestamp:[/bold] {report.timestamp}",
    ]

    if report.failed_stage:
        lines.append(f"[bold]Failed stage:[/bold] {report.failed_stage.value}")

    if report.errors:
        lines.append("")
        lines.append(f"[bold red]{EMOJI_ERROR} Errors:[/bold red]")
        for error in report.errors:
            lines.append(f"  - {escape(error)}")

    if report.warnings:
        lines.append("")
        lines.append(f"[bold yellow]{EMOJI_WARNING} Warnings:[/bold yellow]")
        for warning in report.warnings:
            lines.append(f"  - {escape(warning)}")

    if report.info:
        lines.append("")
        lines.append("[bold]Notes:[/bold]")
        for note in report.info:
            lines.append(f"  - {escape(note)}")

    lines.append("")
    lines.append("[bold]Next Steps:[/bold]")
    for index, step in enumerate(report.next_steps, 1):
        lines.append(f"  {index}. {escape(step)}")

    if report.verification_urls:
        lines.append("")
        lines.append(f"[bold]{EMOJI_LINK} URLs:[/bold]")
        for url in report.verification_urls:
            lines.append(f"  - {escape(url)}")

    panel = Panel(
        "\n".join(lines),
        title=f"{EMOJI_REPORT} Deployment Report",
        border_style="green" if ok else "red"
    )
    console.print(panel)


def format_file_check(check: FileCheckReport) -> None:
    """Format and display a precondition check"""
    table = Table(title="Required Files", box=box.SIMPLE)
    table.add_column("File", style="cyan")
    table.add_column("Status")

    for path in check.checked:
        if path in check.present:
            table.add_row(escape(path), f"[green]{EMOJI_SUCCESS} present[/green]")
        else:
            table.add_row(escape(path), f"[red]{EMOJI_ERROR} missing[/red]")

    console.print(table)


def format_repository_status(status: RepositoryStatus) -> None:
    """Format and display repository state"""
    expected = "[green]Yes[/green]" if status.is_expected_repository else "[red]No[/red]"
    lines = [
        f"[bold]Branch:[/bold] {escape(status.current_branch)}",
        f"[bold]Remote:[/bold] {escape(status.remote_url or 'N/A')}",
        f"[bold]Expected repository:[/bold] {expected}",
        f"[bold]Changes:[/bold] {len(status.changed_paths)}",
    ]

    for path in status.changed_paths[:10]:
        lines.append(f"  • {escape(path)}")
    if len(status.changed_paths) > 10:
        lines.append(f"  [dim]... and {len(status.changed_paths) - 10} more[/dim]")

    console.print(Panel(
        "\n".join(lines),
        title="Repository Status",
        border_style="blue"
    ))
