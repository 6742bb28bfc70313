from typing import Callable, Dict, Optional, Sequence

from .models import ManifestFile, ValidationReport


def _check_unique(
    mods: Sequence[ManifestFile],
    report: ValidationReport,
    field_of: Callable[[ManifestFile], Optional[str]],
    label: str,
) -> ValidationReport:
    owners: Dict[str, str] = {}
    for mod in mods:
        value = field_of(mod)
        if value is None:
            continue
        if value in owners:
            report.error(f"Duplicate {label} '{value}' in {mod.name} (already declared by {owners[value]})")
            continue
        owners[value] = mod.name

    if not report.has_errors:
        report.ok(f"No duplicate {label}s across {len(mods)} mods")
    return report


def check_duplicate_ids(mods: Sequence[ManifestFile], report: ValidationReport) -> ValidationReport:
    return _check_unique(mods, report, lambda m: m.mod_id, "mod id")


def check_duplicate_filenames(mods: Sequence[ManifestFile], report: ValidationReport) -> ValidationReport:
    return _check_unique(mods, report, lambda m: m.filename, "filename")
