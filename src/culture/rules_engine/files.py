"""File discovery helpers shared by the file presence rules."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, Optional, Pattern

from .context import RuleContext
from .models import RuleOutcome


def file_present(path: Path, *, require_nonempty: bool = False) -> bool:
    try:
        if not path.is_file():
            return False
        return not require_nonempty or path.stat().st_size > 0
    except OSError:
        return False


def shallow_scan_dir_for_file_name_match(
    pattern: Pattern[str],
    directory: Path,
    *,
    require_nonempty: bool = True,
) -> RuleOutcome:
    """Look for a file directly inside `directory` whose name matches `pattern`.

    UNDETERMINED when the directory cannot be listed, or when no match was
    found but some entry could not be inspected.
    """
    if not directory.is_dir():
        return RuleOutcome.UNDETERMINED
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return RuleOutcome.UNDETERMINED

    entry_unreadable = False
    for entry in entries:
        if not pattern.match(entry.name):
            continue
        try:
            if not entry.is_file():
                continue
            if require_nonempty and entry.stat().st_size == 0:
                continue
        except OSError:
            entry_unreadable = True
            continue
        return RuleOutcome.SUCCESS

    return RuleOutcome.UNDETERMINED if entry_unreadable else RuleOutcome.FAILURE


def search_project_and_workspace_dirs(
    pattern: Pattern[str],
    ctx: RuleContext,
    *,
    require_nonempty: bool = True,
    search_workspace_root: bool = True,
) -> RuleOutcome:
    outcome = shallow_scan_dir_for_file_name_match(
        pattern, ctx.project_dir, require_nonempty=require_nonempty
    )
    if outcome == RuleOutcome.SUCCESS or not search_workspace_root:
        return outcome

    workspace_dir = ctx.workspace_dir
    if workspace_dir is None or _same_dir(workspace_dir, ctx.project_dir):
        return outcome
    workspace_outcome = shallow_scan_dir_for_file_name_match(
        pattern, workspace_dir, require_nonempty=require_nonempty
    )
    if workspace_outcome == RuleOutcome.SUCCESS:
        ctx.note(f"Found a match for {pattern.pattern} in workspace root {workspace_dir}")
        return RuleOutcome.SUCCESS
    return outcome


def any_relative_file_present(
    directory: Path,
    relative_names: Iterable[str],
    *,
    require_nonempty: bool = False,
) -> Optional[Path]:
    for name in relative_names:
        candidate = directory / name
        if file_present(candidate, require_nonempty=require_nonempty):
            return candidate
    return None


def prefix_pattern(prefix: str) -> Pattern[str]:
    return re.compile(rf"^{re.escape(prefix)}", re.IGNORECASE)


def ancestor_dirs(path: Path) -> Iterable[Path]:
    """Yield `path`'s parent directory and every ancestor above it."""
    current = path.parent
    while True:
        yield current
        if current.parent == current:
            return
        current = current.parent


def _same_dir(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return False
