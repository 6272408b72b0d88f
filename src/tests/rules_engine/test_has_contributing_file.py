from culture.rules_engine.models import RuleOutcome
from culture.rules_engine.rules.has_contributing_file import HAS_CONTRIBUTING_FILE


def test_contributing_file_present(make_ctx, write_file):
    write_file("CONTRIBUTING.md", "Send patches.")
    assert HAS_CONTRIBUTING_FILE().evaluate(make_ctx()) == RuleOutcome.SUCCESS


def test_contributing_prefix_is_case_insensitive(make_ctx, write_file):
    write_file("contributing", "Send patches.")
    assert HAS_CONTRIBUTING_FILE().evaluate(make_ctx()) == RuleOutcome.SUCCESS


def test_contributing_name_must_be_a_prefix(make_ctx, write_file):
    write_file("HOW_CONTRIBUTING_WORKS.md", "Send patches.")
    assert HAS_CONTRIBUTING_FILE().evaluate(make_ctx()) == RuleOutcome.FAILURE


def test_contributing_missing(make_ctx):
    assert HAS_CONTRIBUTING_FILE().evaluate(make_ctx()) == RuleOutcome.FAILURE
