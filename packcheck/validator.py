from pathlib import Path
from typing import Optional, Sequence

import requests
from rich.console import Console

from .compatibility import check_incompatibilities
from .duplicates import check_duplicate_filenames, check_duplicate_ids
from .index import CommandRunner, SubprocessRunner, check_index_consistency, refresh_index
from .models import ManifestFile, ValidationReport
from .urls import Sampler, check_urls, sample_mods


def run_checks(
    root: Path,
    mods: Sequence[ManifestFile],
    runner: Optional[CommandRunner] = None,
    sampler: Sampler = sample_mods,
    session=requests,
    console: Optional[Console] = None,
) -> ValidationReport:
    """Run every pack check in order and return the collected report.

    Each check runs regardless of how the previous ones went. ``runner``,
    ``sampler`` and ``session`` replace the packwiz process, the random URL
    sample and the HTTP client respectively.
    """
    runner = runner or SubprocessRunner()
    report = ValidationReport(console=console)

    def section(title: str) -> None:
        if console is not None:
            console.print(f"\n[bold cyan]{title}[/]")

    section("Checking for duplicate mod ids...")
    check_duplicate_ids(mods, report)

    section("Checking for duplicate filenames...")
    check_duplicate_filenames(mods, report)

    section("Refreshing index...")
    refresh_index(root, report, runner)

    section("Checking index consistency...")
    check_index_consistency(root, mods, report)

    section("Checking for incompatible mods...")
    check_incompatibilities(mods, report)

    section("Spot-checking download URLs...")
    check_urls(mods, report, sampler, session)

    return report
