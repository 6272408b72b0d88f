from __future__ import annotations

from ..context import RuleContext
from ..models import MetadataStatus, RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class CARGO_METADATA_READABLE(Rule):
    rule_id = "CARGO-METADATA-READABLE"
    description = "Should have a well-formed Cargo.toml file readable by `cargo metadata`"

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        result = ctx.metadata_result
        if result.status == MetadataStatus.OK:
            return RuleOutcome.SUCCESS
        if result.message:
            ctx.note(result.message)
        if result.status == MetadataStatus.INVALID:
            return RuleOutcome.FAILURE
        return RuleOutcome.UNDETERMINED
