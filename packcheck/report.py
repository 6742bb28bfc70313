from rich.console import Console
from rich.panel import Panel

from .models import ERROR, OK, WARN, ValidationReport

NEXT_STEP = "packwiz modrinth export"


def print_summary(report: ValidationReport, console: Console) -> int:
    """Print the final pass/fail summary and return the process exit code."""
    console.print(
        f"\n[green]{report.count(OK)} passed[/], "
        f"[yellow]{report.count(WARN)} warnings[/], "
        f"[red]{report.count(ERROR)} errors[/]"
    )

    if report.has_errors:
        console.print(Panel.fit(
            "[red]Validation failed.[/] Fix the errors above before publishing.",
            title="[bold red]FAILED[/]",
        ))
        return 1

    console.print(Panel.fit(
        f"[green]All checks passed.[/]\nNext: run [bold]{NEXT_STEP}[/] to build the pack.",
        title="[bold green]PASSED[/]",
    ))
    return 0
