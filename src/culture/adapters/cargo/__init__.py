"""Interpretation of raw cargo output into engine models and summaries."""

from .build_messages import BuildDiagnostic, BuildDiagnostics, diagnostics_from_build_output
from .harness_output import HarnessOutputParseError, HarnessSummary, summary_from_test_output
from .metadata import (
    CargoMetadataAdapterError,
    project_metadata_from_json,
    project_metadata_from_payload,
)

__all__ = [
    "BuildDiagnostic",
    "BuildDiagnostics",
    "CargoMetadataAdapterError",
    "HarnessOutputParseError",
    "HarnessSummary",
    "diagnostics_from_build_output",
    "project_metadata_from_json",
    "project_metadata_from_payload",
    "summary_from_test_output",
]
