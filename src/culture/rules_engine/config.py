from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import CultureError

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    pass


class FilePresenceRuleConfig(RuleConfigBase):
    # Zero-byte files do not count as present.
    require_nonempty: bool = True
    # Fall back to the workspace root named by the package metadata.
    search_workspace_root: bool = True


class ContinuousIntegrationRuleConfig(FilePresenceRuleConfig):
    # Matched case-insensitively against files directly in the searched directory.
    file_name_pattern: str = r"^(appveyor|\.appveyor|\.drone|\.gitlab-ci|\.travis)\.ya?ml"
    # Exact relative paths, checked as well.
    file_names: List[str] = Field(
        default_factory=lambda: [
            ".circleci/config.yml",
            "azure-pipelines.yml",
            "Jenkinsfile",
        ]
    )
    # Any *.yml / *.yaml file in this directory also counts.
    workflow_dir: str = ".github/workflows"
    require_nonempty: bool = False


class BuildsCleanlyRuleConfig(RuleConfigBase):
    clean_before_build: bool = True


class PassesMultipleTestsRuleConfig(RuleConfigBase):
    min_passed: int = 2


class UsesPropertyBasedTestLibraryRuleConfig(RuleConfigBase):
    libraries: List[str] = Field(default_factory=lambda: ["proptest", "quickcheck", "suppositions"])
    # Only dev-dependencies count unless disabled.
    dev_dependencies_only: bool = True


class UnderSourceControlRuleConfig(RuleConfigBase):
    vcs_dirs: List[str] = Field(default_factory=lambda: [".git", ".hg", ".bzr", ".svn", "_darcs"])


class CultureRulesConfig(BaseModel):
    """Project-specific configuration for all rules.

    Rules pull their typed config via `get_rule_config`.
    """

    model_config = ConfigDict(frozen=True)

    rules: Mapping[str, Mapping[str, Any]] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("rules", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Mapping[str, Any]]) -> Mapping[str, Mapping[str, Any]]:
        return _freeze(value)

    def get_rule_config(
        self,
        rule_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if rule_id not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        return model.model_validate(_thaw(self.rules[rule_id]))


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


def load_rules_config(path: Path) -> CultureRulesConfig:
    try:
        with path.open(encoding="utf-8") as handle:
            raw = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise CultureError(f"Could not read rules configuration file, {path}: {exc}") from exc

    if isinstance(raw, dict) and "rules" not in raw:
        raw = {"rules": raw}
    try:
        return CultureRulesConfig.model_validate(raw)
    except ValidationError as exc:
        raise CultureError(f"Invalid rules configuration file, {path}: {exc}") from exc
