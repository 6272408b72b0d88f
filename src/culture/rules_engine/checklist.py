"""Interpretation and filtering of rule description checklists.

A checklist is a plain text file with one rule description per line, matched
verbatim (after trimming) against each rule's `description`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .errors import ChecklistReadError, RequestedRuleNotFoundError
from .rule import Rule

logger = logging.getLogger(__name__)

DEFAULT_CHECKLIST_FILE_NAME = ".culture"


def filter_rules(
    catalog: Sequence[Rule],
    requested_descriptions: Iterable[str],
    *,
    strict: bool = False,
) -> List[Rule]:
    """Keep the rules of `catalog` whose description was requested.

    Catalog order is preserved, not request order. Requested descriptions
    matching no rule are dropped with a warning, or raise
    `RequestedRuleNotFoundError` when `strict`.
    """
    requested = list(requested_descriptions)
    wanted = set(requested)
    known = {rule.description for rule in catalog}
    for description in requested:
        if description in known:
            continue
        if strict:
            raise RequestedRuleNotFoundError(description)
        logger.warning("Requested rule not found, ignoring: %s", description)
    return [rule for rule in catalog if rule.description in wanted]


def read_checklist(path: Path) -> List[str]:
    try:
        with path.open(encoding="utf-8") as handle:
            lines = handle.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ChecklistReadError(
            f"Could not read the culture checklist file, {path}: {exc}"
        ) from exc
    return [line.strip() for line in lines if line.strip()]


def find_checklist_file(start: Path) -> Optional[Path]:
    """Return `start` if it is a file, else search upward for a `.culture` file.

    The search begins at `start` when it is a directory, or at its parent
    otherwise, and walks each ancestor directory.
    """
    if start.is_file():
        return start
    directory = start if start.is_dir() else start.parent
    directory = directory.resolve()
    while True:
        candidate = directory / DEFAULT_CHECKLIST_FILE_NAME
        if candidate.is_file():
            return candidate
        if directory.parent == directory:
            return None
        directory = directory.parent


def filter_rules_from_checklist_file(
    path: Path,
    catalog: Sequence[Rule],
    *,
    strict: bool = False,
) -> List[Rule]:
    return filter_rules(catalog, read_checklist(path), strict=strict)
