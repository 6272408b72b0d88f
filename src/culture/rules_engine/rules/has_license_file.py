from __future__ import annotations

import re

from ..config import FilePresenceRuleConfig
from ..context import RuleContext
from ..files import search_project_and_workspace_dirs
from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

# LICENSE, LICENSE-MIT, LICENCE.txt, COPYING ...
HAS_LICENSE_FILE_PATTERN = re.compile(r"^(LICEN[CS]E|COPYING)", re.IGNORECASE)


@register_rule
class HAS_LICENSE_FILE(Rule):
    rule_id = "HAS-LICENSE-FILE"
    description = "Should have a LICENSE file in the project directory."
    config_model = FilePresenceRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, FilePresenceRuleConfig)
        return search_project_and_workspace_dirs(
            HAS_LICENSE_FILE_PATTERN,
            ctx,
            require_nonempty=cfg.require_nonempty,
            search_workspace_root=cfg.search_workspace_root,
        )
