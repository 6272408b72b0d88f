from __future__ import annotations

from ..config import FilePresenceRuleConfig
from ..context import RuleContext
from ..files import prefix_pattern, search_project_and_workspace_dirs
from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

HAS_CONTRIBUTING_FILE_PATTERN = prefix_pattern("CONTRIBUTING")


@register_rule
class HAS_CONTRIBUTING_FILE(Rule):
    rule_id = "HAS-CONTRIBUTING-FILE"
    description = "Should have a CONTRIBUTING file in the project directory."
    config_model = FilePresenceRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, FilePresenceRuleConfig)
        return search_project_and_workspace_dirs(
            HAS_CONTRIBUTING_FILE_PATTERN,
            ctx,
            require_nonempty=cfg.require_nonempty,
            search_workspace_root=cfg.search_workspace_root,
        )
