from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Optional

from ..config import ContinuousIntegrationRuleConfig
from ..context import RuleContext
from ..files import any_relative_file_present, file_present
from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

_WORKFLOW_SUFFIXES = (".yml", ".yaml")


@register_rule
class HAS_CONTINUOUS_INTEGRATION_FILE(Rule):
    rule_id = "HAS-CONTINUOUS-INTEGRATION-FILE"
    description = "Should have a file suggesting the use of a continuous integration system."
    config_model = ContinuousIntegrationRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, ContinuousIntegrationRuleConfig)
        if not ctx.project_dir.is_dir():
            ctx.note(f"Project directory {ctx.project_dir} is not a directory.")
            return RuleOutcome.UNDETERMINED

        search_dirs = [ctx.project_dir]
        workspace_dir = ctx.workspace_dir
        if cfg.search_workspace_root and workspace_dir is not None and workspace_dir != ctx.project_dir:
            search_dirs.append(workspace_dir)

        for directory in search_dirs:
            found = self._find_ci_file(directory, cfg)
            if found is not None:
                ctx.note(f"Found continuous integration file {found}")
                return RuleOutcome.SUCCESS
        return RuleOutcome.FAILURE

    def _find_ci_file(self, directory: Path, cfg: ContinuousIntegrationRuleConfig) -> Optional[Path]:
        if cfg.file_name_pattern:
            pattern = re.compile(cfg.file_name_pattern, re.IGNORECASE)
            found = _first_file(directory, lambda p: bool(pattern.match(p.name)), cfg.require_nonempty)
            if found is not None:
                return found

        found = any_relative_file_present(
            directory, cfg.file_names, require_nonempty=cfg.require_nonempty
        )
        if found is not None or not cfg.workflow_dir:
            return found
        return _first_file(
            directory / cfg.workflow_dir,
            lambda p: p.suffix.lower() in _WORKFLOW_SUFFIXES,
            cfg.require_nonempty,
        )


def _first_file(directory: Path, accept: Callable[[Path], bool], require_nonempty: bool) -> Optional[Path]:
    if not directory.is_dir():
        return None
    try:
        candidates = sorted(directory.iterdir())
    except OSError:
        return None
    for candidate in candidates:
        if accept(candidate) and file_present(candidate, require_nonempty=require_nonempty):
            return candidate
    return None
