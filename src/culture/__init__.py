"""Check a Cargo project's repository against a set of best-practice rules.

Embed in a test suite::

    from culture import check_culture_default, outcomes_by_description

    records = check_culture_default(Path("Cargo.toml"), False, sys.stdout)
"""

from culture.pipelines.culture_check import (
    build_context,
    run_culture_check,
    check_culture,
    check_culture_default,
    check_culture_from_checklist,
)
from culture.rules_engine import (
    CultureError,
    OutcomeRecord,
    OutcomeStats,
    Rule,
    RuleContext,
    RuleOutcome,
    available_rules,
    default_rules,
    evaluate_rules,
    filter_rules,
    outcomes_by_description,
)

__version__ = "0.1.0"
