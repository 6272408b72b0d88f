import pytest

from culture.rules_engine.models import RuleOutcome
from culture.rules_engine.rules.has_rustfmt_file import HAS_RUSTFMT_FILE


@pytest.mark.parametrize("name", ["rustfmt.toml", ".rustfmt.toml", "legacy-rustfmt.toml"])
def test_rustfmt_file_present(make_ctx, write_file, name):
    write_file(name, "")
    assert HAS_RUSTFMT_FILE().evaluate(make_ctx()) == RuleOutcome.SUCCESS


@pytest.mark.parametrize("name", ["rustfmt.toml.bak", "my-rustfmt.toml"])
def test_near_misses_fail(make_ctx, write_file, name):
    write_file(name, "max_width = 100")
    assert HAS_RUSTFMT_FILE().evaluate(make_ctx()) == RuleOutcome.FAILURE
