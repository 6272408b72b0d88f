from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from culture.pipelines.culture_check import checklist_rules, run_culture_check
from culture.rules_engine.catalog import available_rules, default_rules
from culture.rules_engine.checklist import DEFAULT_CHECKLIST_FILE_NAME, find_checklist_file
from culture.rules_engine.config import CultureRulesConfig, load_rules_config
from culture.rules_engine.errors import ChecklistReadError, CultureError
from culture.rules_engine.models import CultureRunReport
from culture.rules_engine.rule import Rule


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="culture",
        description="Check a Cargo project against a set of project culture rules.",
    )
    parser.add_argument(
        "--manifest-path",
        type=Path,
        default=Path("./Cargo.toml"),
        help="Path to the project's Cargo.toml (default: ./Cargo.toml).",
    )
    parser.add_argument(
        "--culture-checklist-path",
        type=Path,
        default=None,
        help=(
            "Checklist of rule descriptions to evaluate, one per line. When omitted, a "
            f"`{DEFAULT_CHECKLIST_FILE_NAME}` file is searched for from the current directory upward."
        ),
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat checklist entries that match no rule as an error instead of ignoring them.",
    )
    parser.add_argument(
        "--rules-config",
        type=Path,
        default=None,
        help="JSON file of per-rule settings keyed by rule id.",
    )
    parser.add_argument(
        "--json-out",
        type=Path,
        default=None,
        help="Also write the run report as JSON to this path.",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="Print the descriptions of every available rule and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _list_rules(out) -> int:
    defaults = {rule.description for rule in default_rules()}
    for rule in available_rules():
        marker = "" if rule.description in defaults else " (optional)"
        out.write(f"{rule.description}{marker}\n")
    return 0


def _write_json_report(path: Path, report: CultureRunReport) -> None:
    path.write_text(json.dumps(report.model_dump(mode="json"), indent=2))


def run(args: argparse.Namespace, out=None) -> int:
    out = out if out is not None else sys.stdout
    if args.list_rules:
        return _list_rules(out)

    config = load_rules_config(args.rules_config) if args.rules_config else CultureRulesConfig()

    checklist_path: Optional[Path]
    if args.culture_checklist_path is not None:
        if not args.culture_checklist_path.is_file():
            raise ChecklistReadError(
                f"Could not find requested rules checklist file, {args.culture_checklist_path}"
            )
        checklist_path = args.culture_checklist_path
    else:
        checklist_path = find_checklist_file(Path(DEFAULT_CHECKLIST_FILE_NAME))

    rules: Optional[List[Rule]] = None
    if checklist_path is not None:
        rules = checklist_rules(checklist_path, strict=args.strict)

    report = run_culture_check(args.manifest_path, args.verbose, out, rules, config=config)
    if args.json_out:
        _write_json_report(args.json_out, report)
    return report.stats.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except CultureError as exc:
        print(exc)
        return exc.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
