import sys
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from packcheck.loader import MODS_DIR, load_mod_set
from packcheck.report import print_summary
from packcheck.utils import console
from packcheck.validator import run_checks


def main() -> int:
    root = Path.cwd()
    console.print(Panel.fit(
        f"[blue]{escape(str(root))}[/]\nValidating pack manifests before publishing",
        title="[bold green]Modpack Validator[/]",
    ))

    try:
        mods = load_mod_set(root)
    except OSError as e:
        console.print(f"[red]\\[ERROR][/] Cannot read {MODS_DIR}/: {escape(str(e))}")
        return 1

    report = run_checks(root, mods, console=console)
    return print_summary(report, console)


if __name__ == "__main__":
    sys.exit(main())
