from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import List

_DIAGNOSTIC_LEVELS = ("warning", "error")
_PLAIN_DIAGNOSTIC = re.compile(r"^(warning|error)(\[\w+\])?:", re.IGNORECASE)


@dataclass(frozen=True)
class BuildDiagnostic:
    level: str
    message: str


@dataclass(frozen=True)
class BuildDiagnostics:
    items: List[BuildDiagnostic] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def clean(self) -> bool:
        return not self.items


def diagnostics_from_build_output(stdout: str, stderr: str = "") -> BuildDiagnostics:
    """
    Collect warning/error diagnostics from `cargo build --message-format=json`.

    stdout carries one JSON message per line; compiler diagnostics have
    reason "compiler-message". Cargo's own diagnostics (manifest warnings etc.)
    are plain `warning: ...` lines on stderr.
    """
    items: list[BuildDiagnostic] = []
    for line in stdout.splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            msg = json.loads(line)
        except json.JSONDecodeError:
            continue
        if not isinstance(msg, dict) or msg.get("reason") != "compiler-message":
            continue
        inner = msg.get("message")
        if not isinstance(inner, dict):
            continue
        level = str(inner.get("level") or "")
        if level in _DIAGNOSTIC_LEVELS:
            items.append(BuildDiagnostic(level=level, message=str(inner.get("rendered") or inner.get("message") or "")))

    for line in stderr.splitlines():
        m = _PLAIN_DIAGNOSTIC.match(line.strip())
        if m:
            items.append(BuildDiagnostic(level=m.group(1).lower(), message=line.strip()))

    return BuildDiagnostics(items=items)
