from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, TextIO

from .catalog import default_rules
from .context import RuleContext
from .models import CultureRunReport, OutcomeRecord, OutcomeStats, RuleOutcome
from .rule import Rule

logger = logging.getLogger(__name__)


def evaluate_rules(
    rules: Iterable[Rule],
    ctx: RuleContext,
    print_output: Optional[TextIO] = None,
) -> List[OutcomeRecord]:
    """Evaluate `rules` in order against one shared context.

    Writes `<description> ... <ok|FAILED|undetermined>` per rule to
    `print_output` (the context's sink when not given) and returns the
    outcome records in the same order. A rule that raises is recorded as
    undetermined; the remaining rules still run.
    """
    out = print_output if print_output is not None else ctx.print_output
    records: List[OutcomeRecord] = []
    for rule in rules:
        out.write(rule.description)
        out.flush()
        outcome = _evaluate_one(rule, ctx)
        out.write(f" ... {outcome.label}\n")
        records.append(OutcomeRecord(description=rule.description, outcome=outcome))
    return records


def _evaluate_one(rule: Rule, ctx: RuleContext) -> RuleOutcome:
    try:
        outcome = rule.evaluate(ctx)
    except Exception:
        logger.exception("Rule %r raised instead of returning an outcome", rule.description)
        return RuleOutcome.UNDETERMINED
    if not isinstance(outcome, RuleOutcome):
        logger.error("Rule %r returned %r, not a RuleOutcome", rule.description, outcome)
        return RuleOutcome.UNDETERMINED
    return outcome


def write_summary(stats: OutcomeStats, out: TextIO) -> None:
    conclusion = RuleOutcome.SUCCESS.label if stats.is_success else RuleOutcome.FAILURE.label
    out.write(
        f"culture result: {conclusion}. {stats.success_count} passed. "
        f"{stats.fail_count} failed. {stats.undetermined_count} undetermined.\n"
    )


class RulesRunner:
    def __init__(self, rules: Optional[Sequence[Rule]] = None):
        self._rules = list(rules) if rules is not None else default_rules()

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def run(self, ctx: RuleContext, print_output: Optional[TextIO] = None) -> CultureRunReport:
        results = evaluate_rules(self._rules, ctx, print_output)
        return CultureRunReport(
            run_id=str(uuid.uuid4()),
            generated_at=datetime.now(timezone.utc),
            manifest_path=str(ctx.manifest_path),
            results=results,
            stats=OutcomeStats.from_records(results),
        )
