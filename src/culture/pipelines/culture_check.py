from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from culture.adapters.cargo.metadata import CargoMetadataAdapterError, project_metadata_from_json
from culture.connectors.cargo.commands import CargoInvocationError, cargo_metadata
from culture.connectors.cargo.config import CargoConfig, get_cargo_config
from culture.rules_engine.catalog import available_rules
from culture.rules_engine.checklist import filter_rules_from_checklist_file
from culture.rules_engine.config import CultureRulesConfig
from culture.rules_engine.context import RuleContext
from culture.rules_engine.errors import ManifestNotFoundError
from culture.rules_engine.models import CultureRunReport, MetadataQueryResult, OutcomeRecord
from culture.rules_engine.rule import Rule
from culture.rules_engine.runner import RulesRunner, write_summary

logger = logging.getLogger(__name__)


def read_project_metadata(manifest_path: Path, toolchain: CargoConfig) -> MetadataQueryResult:
    try:
        output = cargo_metadata(toolchain, manifest_path)
    except CargoInvocationError as exc:
        logger.info("Package metadata query unavailable: %s", exc)
        return MetadataQueryResult.unavailable(str(exc))

    if not output.success:
        return MetadataQueryResult.invalid(output.stderr_text().strip())

    try:
        metadata = project_metadata_from_json(output.stdout_text())
    except (UnicodeDecodeError, CargoMetadataAdapterError) as exc:
        logger.warning("Could not parse `cargo metadata` output for %s: %s", manifest_path, exc)
        return MetadataQueryResult.unavailable(str(exc))
    return MetadataQueryResult.ok(metadata)


def build_context(
    manifest_path: Path,
    *,
    verbose: bool = False,
    print_output: Optional[TextIO] = None,
    config: Optional[CultureRulesConfig] = None,
    toolchain: Optional[CargoConfig] = None,
) -> RuleContext:
    """Resolve the manifest and gather the facts every rule shares.

    Raises `ManifestNotFoundError` before anything is run when the manifest
    does not exist.
    """
    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        raise ManifestNotFoundError(manifest_path)
    manifest_path = manifest_path.resolve()

    toolchain = toolchain or get_cargo_config()
    out = print_output if print_output is not None else sys.stdout
    metadata_result = read_project_metadata(manifest_path, toolchain)
    if verbose and metadata_result.message:
        out.write(f"{metadata_result.message}\n")

    return RuleContext(
        manifest_path=manifest_path,
        metadata_result=metadata_result,
        verbose=verbose,
        print_output=out,
        config=config or CultureRulesConfig(),
        toolchain=toolchain,
    )


def run_culture_check(
    manifest_path: Path,
    verbose: bool,
    print_output: TextIO,
    rules: Optional[Sequence[Rule]] = None,
    *,
    config: Optional[CultureRulesConfig] = None,
    toolchain: Optional[CargoConfig] = None,
) -> CultureRunReport:
    """Evaluate `rules` (the default catalog when None) against one project.

    Writes one report line per rule and a closing summary line to
    `print_output`, and returns the run report with outcome records in
    evaluation order.
    """
    ctx = build_context(
        manifest_path,
        verbose=verbose,
        print_output=print_output,
        config=config,
        toolchain=toolchain,
    )
    report = RulesRunner(rules).run(ctx)
    write_summary(report.stats, print_output)
    return report


def check_culture(
    manifest_path: Path,
    verbose: bool,
    print_output: TextIO,
    rules: Optional[Sequence[Rule]] = None,
    *,
    config: Optional[CultureRulesConfig] = None,
    toolchain: Optional[CargoConfig] = None,
) -> List[OutcomeRecord]:
    report = run_culture_check(
        manifest_path, verbose, print_output, rules, config=config, toolchain=toolchain
    )
    return report.results


def check_culture_default(
    manifest_path: Path,
    verbose: bool,
    print_output: TextIO,
    *,
    config: Optional[CultureRulesConfig] = None,
    toolchain: Optional[CargoConfig] = None,
) -> List[OutcomeRecord]:
    return check_culture(manifest_path, verbose, print_output, config=config, toolchain=toolchain)


def check_culture_from_checklist(
    manifest_path: Path,
    verbose: bool,
    print_output: TextIO,
    checklist_path: Path,
    *,
    strict: bool = False,
    config: Optional[CultureRulesConfig] = None,
    toolchain: Optional[CargoConfig] = None,
) -> List[OutcomeRecord]:
    return check_culture(
        manifest_path,
        verbose,
        print_output,
        checklist_rules(checklist_path, strict=strict),
        config=config,
        toolchain=toolchain,
    )


def checklist_rules(checklist_path: Path, *, strict: bool = False) -> List[Rule]:
    """The available rules named by a checklist file, in catalog order."""
    rules = filter_rules_from_checklist_file(checklist_path, available_rules(), strict=strict)
    logger.debug("Checklist %s selected %d rule(s)", checklist_path, len(rules))
    return rules
