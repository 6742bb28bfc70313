import tomllib
from typing import Any, Dict, Optional

from rich.console import Console

console = Console()


def read_toml(text: str) -> Optional[Dict[str, Any]]:
    """Decode TOML text, returning None when it is not valid TOML."""
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        return None


def get_field(data: Dict[str, Any], *keys: str) -> Optional[str]:
    """Walk nested tables by ``keys``; a missing key or table gives None."""
    value: Any = data
    for key in keys:
        if not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    if isinstance(value, (dict, list)):
        return None
    return str(value)
