from __future__ import annotations

from ..config import FilePresenceRuleConfig
from ..context import RuleContext
from ..files import prefix_pattern, search_project_and_workspace_dirs
from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

# README, README.md, readme.markdown, README.txt ...
HAS_README_FILE_PATTERN = prefix_pattern("README")


@register_rule
class HAS_README_FILE(Rule):
    rule_id = "HAS-README-FILE"
    description = "Should have a README.md file in the project directory."
    config_model = FilePresenceRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, FilePresenceRuleConfig)
        outcome = search_project_and_workspace_dirs(
            HAS_README_FILE_PATTERN,
            ctx,
            require_nonempty=cfg.require_nonempty,
            search_workspace_root=cfg.search_workspace_root,
        )
        if outcome == RuleOutcome.FAILURE:
            ctx.note(f"No README file found in {ctx.project_dir}")
        return outcome
