import io
from unittest.mock import patch

import pytest

from culture.connectors.cargo.commands import CargoInvocationError
from culture.connectors.cargo.config import TEST_RECURSION_BUSTER_ENV
from culture.rules_engine.models import RuleOutcome
from culture.rules_engine.rules.passes_multiple_tests import PASSES_MULTIPLE_TESTS

RULE_MODULE = "culture.rules_engine.rules.passes_multiple_tests"

TWO_PASSING = """
running 2 tests
test tests::a ... ok
test tests::b ... ok

test result: ok. 2 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out

   Doc-tests kid

running 0 tests

test result: ok. 0 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out
"""

ONE_PASSING = "test result: ok. 1 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out\n"

ONE_FAILING = "test result: FAILED. 2 passed; 1 failed; 0 ignored; 0 measured; 0 filtered out\n"


@pytest.fixture(autouse=True)
def no_recursion_guard(monkeypatch):
    monkeypatch.delenv(TEST_RECURSION_BUSTER_ENV, raising=False)


@pytest.mark.parametrize(
    "stdout, returncode, expected",
    [
        (TWO_PASSING, 0, RuleOutcome.SUCCESS),
        (ONE_PASSING, 0, RuleOutcome.FAILURE),
        (ONE_FAILING, 101, RuleOutcome.FAILURE),
        ("error: could not compile `kid`\n", 101, RuleOutcome.UNDETERMINED),
    ],
)
def test_outcome_from_test_output(make_ctx, make_cargo_output, stdout, returncode, expected):
    with patch(f"{RULE_MODULE}.cargo_test", return_value=make_cargo_output(returncode=returncode, stdout=stdout)):
        assert PASSES_MULTIPLE_TESTS().evaluate(make_ctx()) == expected


def test_min_passed_is_configurable(make_ctx, make_cargo_output):
    ctx = make_ctx(client_rules={"PASSES-MULTIPLE-TESTS": {"min_passed": 1}})
    with patch(f"{RULE_MODULE}.cargo_test", return_value=make_cargo_output(stdout=ONE_PASSING)):
        assert PASSES_MULTIPLE_TESTS().evaluate(ctx) == RuleOutcome.SUCCESS


def test_missing_cargo_is_undetermined(make_ctx):
    with patch(
        f"{RULE_MODULE}.cargo_test",
        side_effect=CargoInvocationError(["cargo", "test"], "No such file or directory"),
    ):
        assert PASSES_MULTIPLE_TESTS().evaluate(make_ctx()) == RuleOutcome.UNDETERMINED


def test_undecodable_output_is_undetermined(make_ctx, make_cargo_output):
    with patch(f"{RULE_MODULE}.cargo_test", return_value=make_cargo_output(stdout=b"\xc3\x28")):
        assert PASSES_MULTIPLE_TESTS().evaluate(make_ctx()) == RuleOutcome.UNDETERMINED


def test_does_not_recurse_inside_its_own_test_run(make_ctx, monkeypatch):
    monkeypatch.setenv(TEST_RECURSION_BUSTER_ENV, "true")
    with patch(f"{RULE_MODULE}.cargo_test") as cargo_test:
        assert PASSES_MULTIPLE_TESTS().evaluate(make_ctx()) == RuleOutcome.UNDETERMINED
    cargo_test.assert_not_called()


def test_verbose_note_reports_totals(make_ctx, make_cargo_output):
    out = io.StringIO()
    with patch(f"{RULE_MODULE}.cargo_test", return_value=make_cargo_output(stdout=TWO_PASSING)):
        PASSES_MULTIPLE_TESTS().evaluate(make_ctx(verbose=True, print_output=out))
    assert "2 tests ran across 2 test binaries: 2 passed; 0 failed." in out.getvalue()
