from __future__ import annotations

import re

from ..config import UsesPropertyBasedTestLibraryRuleConfig
from ..context import RuleContext
from ..models import DependencyKind, RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class USES_PROPERTY_BASED_TEST_LIBRARY(Rule):
    rule_id = "USES-PROPERTY-BASED-TEST-LIBRARY"
    description = "Should be making an effort to use property based tests."
    config_model = UsesPropertyBasedTestLibraryRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, UsesPropertyBasedTestLibraryRuleConfig)
        metadata = ctx.metadata
        if metadata is None or not metadata.packages:
            ctx.note("No package metadata available to inspect dependencies.")
            return RuleOutcome.UNDETERMINED
        if not cfg.libraries:
            return RuleOutcome.UNDETERMINED

        # Prefix match: proptest-derive, quickcheck_macros, ... count too.
        library_pattern = re.compile(
            r"^(" + "|".join(re.escape(lib) for lib in cfg.libraries) + r")", re.IGNORECASE
        )
        for pkg in metadata.packages:
            deps = pkg.dependencies
            if cfg.dev_dependencies_only:
                deps = pkg.dependencies_of_kind(DependencyKind.DEV)
            if not any(library_pattern.match(dep.name) for dep in deps):
                ctx.note(f"Package {pkg.name} declares no property based testing library.")
                return RuleOutcome.FAILURE
        return RuleOutcome.SUCCESS
