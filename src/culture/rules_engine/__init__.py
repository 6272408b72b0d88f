"""Rule evaluation engine for project culture checks.

This package contains the engine itself:
- Rules are evaluated against one immutable `RuleContext` per run.
- Subprocess plumbing lives in `culture.connectors`; output parsing in `culture.adapters`.
"""

from .checklist import (
    DEFAULT_CHECKLIST_FILE_NAME,
    filter_rules,
    filter_rules_from_checklist_file,
    find_checklist_file,
    read_checklist,
)
from .catalog import available_rules, default_rules, optional_rules
from .config import CultureRulesConfig
from .context import RuleContext
from .errors import (
    ChecklistReadError,
    CultureError,
    ManifestNotFoundError,
    RequestedRuleNotFoundError,
)
from .models import (
    CultureRunReport,
    MetadataQueryResult,
    MetadataStatus,
    OutcomeRecord,
    OutcomeStats,
    ProjectMetadata,
    RuleOutcome,
    outcomes_by_description,
)
from .rule import Rule
from .runner import RulesRunner, evaluate_rules, write_summary
