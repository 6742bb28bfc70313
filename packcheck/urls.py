import random
from typing import Callable, List, Sequence

import requests

from .models import ManifestFile, ValidationReport

URL_SAMPLE_SIZE = 3
URL_TIMEOUT = 5  # seconds

Sampler = Callable[[Sequence[ManifestFile], int], List[ManifestFile]]


def sample_mods(mods: Sequence[ManifestFile], k: int) -> List[ManifestFile]:
    return random.sample(list(mods), min(k, len(mods)))


def check_url(mod: ManifestFile, report: ValidationReport, session=requests) -> None:
    try:
        response = session.head(mod.url, timeout=URL_TIMEOUT, allow_redirects=True)
    except requests.exceptions.RequestException as e:
        report.error(f"{mod.name}: {mod.url} unreachable ({e})")
        return

    if 200 <= response.status_code < 300:
        report.ok(f"{mod.name}: {mod.url} reachable")
    else:
        report.error(f"{mod.name}: {mod.url} returned HTTP {response.status_code}")


def check_urls(
    mods: Sequence[ManifestFile],
    report: ValidationReport,
    sampler: Sampler = sample_mods,
    session=requests,
) -> ValidationReport:
    """HEAD the download URL of a few sampled manifests, one request at a time."""
    for mod in sampler(mods, URL_SAMPLE_SIZE):
        if not mod.url:
            continue
        check_url(mod, report, session)
    return report
