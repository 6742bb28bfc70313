from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

OK = "OK"
WARN = "WARN"
ERROR = "ERROR"

SEVERITY_STYLES = {OK: "green", WARN: "yellow", ERROR: "red"}


@dataclass(frozen=True)
class ManifestFile:
    name: str
    path: Path
    text: str
    mod_id: Optional[str] = None
    filename: Optional[str] = None
    url: Optional[str] = None

    @property
    def base_name(self) -> str:
        return self.name.removesuffix(".pw.toml").lower()


@dataclass(frozen=True)
class Message:
    severity: str
    text: str


@dataclass
class ValidationReport:
    """Messages recorded by the checks, echoed to ``console`` when one is set."""

    console: Optional[Console] = None
    messages: List[Message] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(m.severity == ERROR for m in self.messages)

    def count(self, severity: str) -> int:
        return sum(1 for m in self.messages if m.severity == severity)

    def texts(self, severity: str) -> List[str]:
        return [m.text for m in self.messages if m.severity == severity]

    def add(self, severity: str, text: str) -> None:
        self.messages.append(Message(severity, text))
        if self.console is not None:
            style = SEVERITY_STYLES[severity]
            self.console.print(f"[{style}]\\[{severity}][/] {escape(text)}")

    def ok(self, text: str) -> None:
        self.add(OK, text)

    def warn(self, text: str) -> None:
        self.add(WARN, text)

    def error(self, text: str) -> None:
        self.add(ERROR, text)
