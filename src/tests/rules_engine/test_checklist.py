import pytest

from culture.rules_engine.catalog import available_rules, default_rules
from culture.rules_engine.checklist import (
    DEFAULT_CHECKLIST_FILE_NAME,
    filter_rules,
    filter_rules_from_checklist_file,
    find_checklist_file,
    read_checklist,
)
from culture.rules_engine.errors import ChecklistReadError, RequestedRuleNotFoundError
from culture.rules_engine.rules.has_license_file import HAS_LICENSE_FILE
from culture.rules_engine.rules.has_readme_file import HAS_README_FILE

README_DESCRIPTION = "Should have a README.md file in the project directory."


def _descriptions(rules):
    return [r.description for r in rules]


def test_filter_selects_single_readme_rule_from_default_catalog():
    catalog = default_rules()
    assert len(catalog) == 8
    filtered = filter_rules(catalog, [README_DESCRIPTION])
    assert _descriptions(filtered) == [README_DESCRIPTION]


def test_filter_preserves_catalog_order_not_request_order():
    catalog = default_rules()
    requested = [catalog[5].description, catalog[1].description, catalog[3].description]
    filtered = filter_rules(catalog, requested)
    assert _descriptions(filtered) == [catalog[1].description, catalog[3].description, catalog[5].description]


@pytest.mark.parametrize("pick", [(), (0,), (0, 7), (2, 3, 4), tuple(range(8))])
def test_filter_is_idempotent_and_only_returns_requested(pick):
    catalog = default_rules()
    requested = [catalog[i].description for i in pick]
    once = filter_rules(catalog, requested)
    twice = filter_rules(once, requested)
    assert _descriptions(once) == _descriptions(twice)
    assert set(_descriptions(once)) == set(requested)


def test_empty_request_yields_empty_rule_set():
    assert filter_rules(default_rules(), []) == []


def test_unmatched_description_silently_dropped_by_default():
    filtered = filter_rules(default_rules(), [README_DESCRIPTION, "Every function should halt."])
    assert _descriptions(filtered) == [README_DESCRIPTION]


def test_unmatched_description_raises_when_strict():
    with pytest.raises(RequestedRuleNotFoundError) as excinfo:
        filter_rules(default_rules(), ["Every function should halt."], strict=True)
    assert excinfo.value.rule_description == "Every function should halt."
    assert excinfo.value.exit_code == 21


def test_optional_rules_selectable_from_available_rules():
    filtered = filter_rules(available_rules(), ["Should be under source control."])
    assert _descriptions(filtered) == ["Should be under source control."]


def test_read_checklist_trims_and_skips_blank_lines(tmp_path):
    path = tmp_path / DEFAULT_CHECKLIST_FILE_NAME
    path.write_text(f"  {README_DESCRIPTION}  \n\n{HAS_LICENSE_FILE.description}\n")
    assert read_checklist(path) == [README_DESCRIPTION, HAS_LICENSE_FILE.description]


def test_read_checklist_missing_file_raises(tmp_path):
    with pytest.raises(ChecklistReadError):
        read_checklist(tmp_path / DEFAULT_CHECKLIST_FILE_NAME)


def test_filter_by_file_restricts_to_specified_rules(tmp_path):
    path = tmp_path / DEFAULT_CHECKLIST_FILE_NAME
    path.write_text(HAS_README_FILE.description)
    filtered = filter_rules_from_checklist_file(path, [HAS_README_FILE(), HAS_LICENSE_FILE()])
    assert _descriptions(filtered) == [HAS_README_FILE.description]


def test_find_checklist_direct_file(tmp_path):
    path = tmp_path / "my_custom_checklist.txt"
    path.write_text(README_DESCRIPTION)
    assert find_checklist_file(path) == path


def test_find_checklist_from_dir(tmp_path):
    path = tmp_path / DEFAULT_CHECKLIST_FILE_NAME
    path.write_text(README_DESCRIPTION)
    assert find_checklist_file(tmp_path) == path.resolve()


def test_find_checklist_from_ancestor_dir(tmp_path):
    path = tmp_path / DEFAULT_CHECKLIST_FILE_NAME
    path.write_text(README_DESCRIPTION)
    subdir = tmp_path / "kid" / "grandkid"
    subdir.mkdir(parents=True)
    assert find_checklist_file(subdir) == path.resolve()


def test_find_checklist_none_when_absent(tmp_path):
    assert find_checklist_file(tmp_path / DEFAULT_CHECKLIST_FILE_NAME) is None
    assert find_checklist_file(tmp_path) is None
