import pytest

from culture.adapters.cargo.harness_output import HarnessOutputParseError, summary_from_test_output


def test_summary_sums_every_test_binary():
    stdout = (
        "running 3 tests\n"
        "test result: ok. 3 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out; finished in 0.00s\n"
        "running 1 test\n"
        "test result: ok. 1 passed; 0 failed; 1 ignored; 0 measured; 0 filtered out\n"
    )
    summary = summary_from_test_output(stdout)
    assert (summary.passed, summary.failed, summary.binaries) == (4, 0, 2)
    assert summary.all_passed
    assert summary.ran == 4


def test_summary_counts_failures():
    stdout = "test result: FAILED. 5 passed; 2 failed; 0 ignored; 0 measured; 0 filtered out\n"
    summary = summary_from_test_output(stdout)
    assert summary.failed == 2
    assert not summary.all_passed


def test_failed_binary_without_failing_tests_counts_as_failure():
    stdout = "test result: FAILED. 2 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out\n"
    assert summary_from_test_output(stdout).failed == 1


def test_missing_summary_raises():
    with pytest.raises(HarnessOutputParseError):
        summary_from_test_output("error[E0432]: unresolved import `kid::nope`\n")
