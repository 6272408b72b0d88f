from __future__ import annotations

from ..config import UnderSourceControlRuleConfig
from ..context import RuleContext
from ..files import ancestor_dirs
from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class UNDER_SOURCE_CONTROL(Rule):
    rule_id = "UNDER-SOURCE-CONTROL"
    description = "Should be under source control."
    config_model = UnderSourceControlRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, UnderSourceControlRuleConfig)
        for directory in ancestor_dirs(ctx.manifest_path.resolve()):
            for vcs_dir in cfg.vcs_dirs:
                if (directory / vcs_dir).is_dir():
                    ctx.note(f"Found {vcs_dir} in {directory}")
                    return RuleOutcome.SUCCESS
        return RuleOutcome.FAILURE
