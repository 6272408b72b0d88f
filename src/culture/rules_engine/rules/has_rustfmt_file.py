from __future__ import annotations

import re

from ..config import FilePresenceRuleConfig
from ..context import RuleContext
from ..files import search_project_and_workspace_dirs
from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

HAS_RUSTFMT_FILE_PATTERN = re.compile(r"^\.?(legacy-)?rustfmt\.toml$")


@register_rule
class HAS_RUSTFMT_FILE(Rule):
    rule_id = "HAS-RUSTFMT-FILE"
    description = "Should have a rustfmt.toml file in the project directory."
    config_model = FilePresenceRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(
            self.rule_id,
            FilePresenceRuleConfig,
            # An empty rustfmt.toml is a valid "use the defaults" configuration.
            default=FilePresenceRuleConfig(require_nonempty=False),
        )
        return search_project_and_workspace_dirs(
            HAS_RUSTFMT_FILE_PATTERN,
            ctx,
            require_nonempty=cfg.require_nonempty,
            search_workspace_root=cfg.search_workspace_root,
        )
