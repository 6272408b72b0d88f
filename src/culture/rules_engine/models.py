from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class RuleOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    UNDETERMINED = "UNDETERMINED"

    @property
    def label(self) -> str:
        return _OUTCOME_LABELS[self]

    @property
    def exit_code(self) -> int:
        return _OUTCOME_EXIT_CODES[self]


_OUTCOME_LABELS = {
    RuleOutcome.SUCCESS: "ok",
    RuleOutcome.FAILURE: "FAILED",
    RuleOutcome.UNDETERMINED: "undetermined",
}

_OUTCOME_EXIT_CODES = {
    RuleOutcome.SUCCESS: 0,
    RuleOutcome.FAILURE: 1,
    RuleOutcome.UNDETERMINED: 2,
}


class OutcomeRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    outcome: RuleOutcome


class OutcomeStats(BaseModel):
    """Counts of each outcome across one evaluation pass.

    Build with `OutcomeStats.from_records`; an empty pass is a vacuous success.
    """

    model_config = ConfigDict(frozen=True)

    success_count: int = 0
    fail_count: int = 0
    undetermined_count: int = 0

    @classmethod
    def from_records(cls, records: Iterable[OutcomeRecord]) -> "OutcomeStats":
        counts = {outcome: 0 for outcome in RuleOutcome}
        for record in records:
            counts[record.outcome] += 1
        return cls(
            success_count=counts[RuleOutcome.SUCCESS],
            fail_count=counts[RuleOutcome.FAILURE],
            undetermined_count=counts[RuleOutcome.UNDETERMINED],
        )

    @property
    def total(self) -> int:
        return self.success_count + self.fail_count + self.undetermined_count

    @property
    def is_success(self) -> bool:
        return self.fail_count == 0 and self.undetermined_count == 0

    @property
    def overall_outcome(self) -> RuleOutcome:
        # Failures dominate; undetermined only wins when nothing definitely failed.
        if self.fail_count > 0:
            return RuleOutcome.FAILURE
        if self.undetermined_count > 0:
            return RuleOutcome.UNDETERMINED
        return RuleOutcome.SUCCESS

    @property
    def exit_code(self) -> int:
        return self.overall_outcome.exit_code


def outcomes_by_description(records: Iterable[OutcomeRecord]) -> dict[str, RuleOutcome]:
    return {record.description: record.outcome for record in records}


class DependencyKind(str, Enum):
    NORMAL = "normal"
    DEV = "dev"
    BUILD = "build"


class DependencyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: DependencyKind = DependencyKind.NORMAL
    req: str = ""


class TargetInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kinds: Tuple[str, ...] = ()
    src_path: str = ""


class PackageInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    version: str = ""
    manifest_path: str = ""
    dependencies: Tuple[DependencyInfo, ...] = ()
    targets: Tuple[TargetInfo, ...] = ()

    def dependencies_of_kind(self, kind: DependencyKind) -> List[DependencyInfo]:
        return [dep for dep in self.dependencies if dep.kind == kind]


class ProjectMetadata(BaseModel):
    """Read-only view of `cargo metadata`, shared by every rule in a run."""

    model_config = ConfigDict(frozen=True)

    workspace_root: str = ""
    packages: Tuple[PackageInfo, ...] = ()
    workspace_members: Tuple[str, ...] = ()


class MetadataStatus(str, Enum):
    OK = "OK"
    # The tool ran and rejected the manifest.
    INVALID = "INVALID"
    # The tool could not be run, or its output could not be understood.
    UNAVAILABLE = "UNAVAILABLE"


class MetadataQueryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: MetadataStatus
    metadata: Optional[ProjectMetadata] = None
    message: str = ""

    @classmethod
    def ok(cls, metadata: ProjectMetadata) -> "MetadataQueryResult":
        return cls(status=MetadataStatus.OK, metadata=metadata)

    @classmethod
    def invalid(cls, message: str) -> "MetadataQueryResult":
        return cls(status=MetadataStatus.INVALID, message=message)

    @classmethod
    def unavailable(cls, message: str) -> "MetadataQueryResult":
        return cls(status=MetadataStatus.UNAVAILABLE, message=message)


class CultureRunReport(BaseModel):
    run_id: str
    generated_at: datetime
    manifest_path: str

    results: List[OutcomeRecord] = Field(default_factory=list)
    stats: OutcomeStats = Field(default_factory=OutcomeStats)
