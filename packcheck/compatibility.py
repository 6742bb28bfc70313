from typing import Sequence, Tuple

from .models import ManifestFile, ValidationReport

# Pairs of manifest base names that are known to break when installed together.
INCOMPATIBLE_MODS: Tuple[Tuple[str, str], ...] = (
    ("optifine", "sodium"),
    ("optifine", "iris"),
    ("optifabric", "sodium"),
    ("sodium", "rubidium"),
    ("sodium", "embeddium"),
    ("phosphor", "starlight"),
    ("lithium", "canary"),
    ("ok-zoomer", "zoomify"),
    ("entityculling", "moreculling"),
)


def check_incompatibilities(
    mods: Sequence[ManifestFile],
    report: ValidationReport,
    rules: Sequence[Tuple[str, str]] = INCOMPATIBLE_MODS,
) -> ValidationReport:
    names = {mod.base_name for mod in mods}
    for mod_a, mod_b in rules:
        if mod_a.lower() in names and mod_b.lower() in names:
            report.warn(f"{mod_a} and {mod_b} are known to be incompatible")
    report.ok("Compatibility check complete")
    return report
