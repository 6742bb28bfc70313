from pathlib import Path
from typing import Tuple

from .models import ManifestFile
from .utils import get_field, read_toml

MODS_DIR = "mods"
MANIFEST_SUFFIX = ".pw.toml"
ARCHIVE_SUFFIX = ".jar"


def _mods_dir(root: Path) -> Path:
    mods_dir = Path(root) / MODS_DIR
    if not mods_dir.exists():
        raise FileNotFoundError(f"Mods directory not found: {mods_dir}")
    if not mods_dir.is_dir():
        raise NotADirectoryError(f"Not a directory: {mods_dir}")
    return mods_dir


def parse_manifest(path: Path) -> ManifestFile:
    # undecodable bytes are dropped, the fields they held then read as absent
    text = path.read_bytes().decode("utf-8", errors="ignore")
    data = read_toml(text) or {}
    mod_id = get_field(data, "update", "modrinth", "mod-id")
    if mod_id is None:
        mod_id = get_field(data, "update", "curseforge", "project-id")
    return ManifestFile(
        name=path.name,
        path=path,
        text=text,
        mod_id=mod_id,
        filename=get_field(data, "filename"),
        url=get_field(data, "download", "url"),
    )


def load_mod_set(root: Path) -> Tuple[ManifestFile, ...]:
    """Read every manifest in the mods directory, ordered by file name.

    A missing mods directory is not handled here; the error reaches the caller.
    """
    mods_dir = _mods_dir(root)
    paths = sorted(mods_dir.glob(f"*{MANIFEST_SUFFIX}"), key=lambda p: p.name)
    return tuple(parse_manifest(p) for p in paths)


def count_archives(root: Path) -> int:
    return sum(1 for p in _mods_dir(root).glob(f"*{ARCHIVE_SUFFIX}") if p.is_file())
