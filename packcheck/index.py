import subprocess
from pathlib import Path
from typing import List, Protocol, Sequence, Tuple

from .loader import ARCHIVE_SUFFIX, MANIFEST_SUFFIX, MODS_DIR, count_archives
from .models import ManifestFile, ValidationReport
from .utils import read_toml

INDEX_FILE = "index.toml"
REFRESH_COMMAND = ["packwiz", "refresh"]


class CommandRunner(Protocol):
    def execute(self, command: List[str], cwd: Path) -> Tuple[str, int]:
        ...


class SubprocessRunner:
    """Runs a command and returns its merged stdout/stderr and exit status."""

    def execute(self, command: List[str], cwd: Path) -> Tuple[str, int]:
        result = subprocess.run(
            command,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
        return result.stdout or "", result.returncode


def refresh_index(root: Path, report: ValidationReport, runner: CommandRunner) -> ValidationReport:
    command = " ".join(REFRESH_COMMAND)
    try:
        output, status = runner.execute(REFRESH_COMMAND, Path(root))
    except OSError as e:
        report.error(f"Could not run '{command}': {e}")
        return report

    if status != 0:
        report.error(f"'{command}' failed with exit code {status}:\n{output.strip()}")
    else:
        report.ok(f"'{command}' completed")
    return report


def count_index_refs(index: dict) -> Tuple[int, int]:
    """Return (manifest refs, archive refs) for the index's [[files]] under mods/."""
    manifests = 0
    archives = 0
    for entry in index.get("files", []):
        if not isinstance(entry, dict):
            continue
        file = str(entry.get("file", ""))
        if not file.startswith(f"{MODS_DIR}/"):
            continue
        if file.endswith(MANIFEST_SUFFIX):
            manifests += 1
        elif file.endswith(ARCHIVE_SUFFIX):
            archives += 1
    return manifests, archives


def check_index_consistency(root: Path, mods: Sequence[ManifestFile], report: ValidationReport) -> ValidationReport:
    index_path = Path(root) / INDEX_FILE
    try:
        text = index_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        report.error(f"Could not read {INDEX_FILE}: {e}")
        return report

    index = read_toml(text)
    if index is None:
        report.error(f"{INDEX_FILE} is not valid TOML")
        return report

    manifest_refs, archive_refs = count_index_refs(index)
    if manifest_refs != len(mods):
        report.error(f"{INDEX_FILE} lists {manifest_refs} {MANIFEST_SUFFIX} files but mods/ has {len(mods)}")
        return report

    try:
        archives = count_archives(root)
    except OSError as e:
        report.error(f"Could not scan mods/ for {ARCHIVE_SUFFIX} files: {e}")
        return report
    if archive_refs != archives:
        report.error(f"{INDEX_FILE} lists {archive_refs} {ARCHIVE_SUFFIX} files but mods/ has {archives}")
        return report

    report.ok(f"{INDEX_FILE} matches mods/ ({manifest_refs + archive_refs} mods)")
    return report
