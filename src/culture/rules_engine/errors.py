from __future__ import annotations


class CultureError(Exception):
    """Setup-level failure: aborts a run before any rule is evaluated."""

    exit_code = 1


class ManifestNotFoundError(CultureError):
    exit_code = 30

    def __init__(self, manifest_path):
        super().__init__(f"Could not find the project manifest file, {manifest_path}")
        self.manifest_path = manifest_path


class ChecklistReadError(CultureError):
    exit_code = 20


class RequestedRuleNotFoundError(CultureError):
    exit_code = 21

    def __init__(self, rule_description: str):
        super().__init__(
            f"A described rule specified was not in the available set of rules: {rule_description}"
        )
        self.rule_description = rule_description
