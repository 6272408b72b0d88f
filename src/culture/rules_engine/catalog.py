from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List

from pydantic import BaseModel

from .registry import registry
from .rule import Rule

# Ensure built-in rules are imported/registered before any catalog is built.
from . import rules as _builtin_rules  # noqa: F401

# Report order is part of the output contract.
DEFAULT_RULE_IDS = (
    "CARGO-METADATA-READABLE",
    "HAS-CONTRIBUTING-FILE",
    "HAS-LICENSE-FILE",
    "HAS-README-FILE",
    "HAS-CONTINUOUS-INTEGRATION-FILE",
    "BUILDS-CLEANLY-WITHOUT-WARNINGS-OR-ERRORS",
    "PASSES-MULTIPLE-TESTS",
    "USES-PROPERTY-BASED-TEST-LIBRARY",
)

# Built in, but only evaluated when a checklist asks for them.
OPTIONAL_RULE_IDS = (
    "HAS-RUSTFMT-FILE",
    "UNDER-SOURCE-CONTROL",
)


def default_rules() -> List[Rule]:
    """Fresh instances of the default rules, in catalog order."""
    return registry.create(DEFAULT_RULE_IDS)


def optional_rules() -> List[Rule]:
    return registry.create(OPTIONAL_RULE_IDS)


def available_rules() -> List[Rule]:
    """Every built-in rule a checklist may name: the defaults, then the optional ones."""
    return default_rules() + optional_rules()


class RuleCatalogEntry(BaseModel):
    rule_id: str
    description: str
    in_default_catalog: bool

    module: str
    class_name: str

    config_model: str
    config_schema: Dict[str, Any]


def build_catalog() -> List[RuleCatalogEntry]:
    entries: List[RuleCatalogEntry] = []
    for rule_id in DEFAULT_RULE_IDS + OPTIONAL_RULE_IDS:
        rule_cls = registry.get(rule_id)
        cfg_model = getattr(rule_cls, "config_model", None)
        cfg_schema: Dict[str, Any] = {}
        cfg_model_name = ""
        if cfg_model is not None:
            cfg_model_name = getattr(cfg_model, "__name__", str(cfg_model))
            cfg_schema = cfg_model.model_json_schema()

        entries.append(
            RuleCatalogEntry(
                rule_id=rule_id,
                description=rule_cls.description,
                in_default_catalog=rule_id in DEFAULT_RULE_IDS,
                module=getattr(rule_cls, "__module__", ""),
                class_name=getattr(rule_cls, "__name__", ""),
                config_model=cfg_model_name,
                config_schema=cfg_schema,
            )
        )
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as exc:
        raise SystemExit(
            "PyYAML is required for YAML output. Install the `yaml` extra (e.g., `pip install culture-check[yaml]`)."
        ) from exc

    return yaml.safe_dump(catalog, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the catalog of built-in culture rules.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump() for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
