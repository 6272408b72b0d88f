from __future__ import annotations

import re
from dataclasses import dataclass

# One summary line per test binary (unit tests, each integration test, doc tests).
TEST_RESULT_LINE = re.compile(
    r"^test result: (?P<result>ok|FAILED)\. (?P<passed>\d+) passed; (?P<failed>\d+) failed;",
    re.MULTILINE,
)


class HarnessOutputParseError(ValueError):
    pass


@dataclass(frozen=True)
class HarnessSummary:
    passed: int = 0
    failed: int = 0
    binaries: int = 0

    @property
    def ran(self) -> int:
        return self.passed + self.failed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


def summary_from_test_output(stdout: str) -> HarnessSummary:
    """Sum every `test result:` line in `cargo test` stdout.

    Raises `HarnessOutputParseError` when no summary line is present, e.g. when
    the test binaries failed to compile.
    """
    passed = failed = binaries = 0
    for m in TEST_RESULT_LINE.finditer(stdout):
        passed += int(m.group("passed"))
        failed += int(m.group("failed"))
        binaries += 1
        if m.group("result") == "FAILED" and int(m.group("failed")) == 0:
            # A binary can fail without a failing test (e.g. a panicking harness).
            failed += 1
    if binaries == 0:
        raise HarnessOutputParseError("No `test result:` summary found in `cargo test` output.")
    return HarnessSummary(passed=passed, failed=failed, binaries=binaries)
