from __future__ import annotations

import json
from typing import Any

from culture.rules_engine.models import (
    DependencyInfo,
    DependencyKind,
    PackageInfo,
    ProjectMetadata,
    TargetInfo,
)


class CargoMetadataAdapterError(ValueError):
    pass


_DEPENDENCY_KINDS = {
    None: DependencyKind.NORMAL,
    "normal": DependencyKind.NORMAL,
    "dev": DependencyKind.DEV,
    "build": DependencyKind.BUILD,
}


def project_metadata_from_json(raw: str) -> ProjectMetadata:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CargoMetadataAdapterError(f"`cargo metadata` output is not JSON: {exc}") from exc
    return project_metadata_from_payload(payload)


def project_metadata_from_payload(payload: Any) -> ProjectMetadata:
    """
    Build `ProjectMetadata` from a `cargo metadata --format-version 1` payload.

    Only the fields the rules read are kept:
    - {"packages": [{"name", "version", "manifest_path", "dependencies": [...], "targets": [...]}],
       "workspace_root": "...", "workspace_members": [...]}
    """
    if not isinstance(payload, dict):
        raise CargoMetadataAdapterError("`cargo metadata` payload must be a JSON object.")
    packages_raw = payload.get("packages")
    if not isinstance(packages_raw, list):
        raise CargoMetadataAdapterError("`cargo metadata` payload is missing a `packages` list.")

    members = payload.get("workspace_members")
    member_ids = {m for m in members if isinstance(m, str)} if isinstance(members, list) else set()

    packages = []
    for pkg in packages_raw:
        if not isinstance(pkg, dict):
            continue
        # Registry dependencies show up in `packages` too; keep workspace members when known.
        if member_ids and pkg.get("id") not in member_ids:
            continue
        packages.append(_package_from_payload(pkg))

    return ProjectMetadata(
        workspace_root=str(payload.get("workspace_root") or ""),
        packages=packages,
        workspace_members=sorted(member_ids),
    )


def _package_from_payload(pkg: dict[str, Any]) -> PackageInfo:
    name = pkg.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CargoMetadataAdapterError("Package entry without a name in `cargo metadata` payload.")

    dependencies = []
    for dep in pkg.get("dependencies") or []:
        if not isinstance(dep, dict) or not isinstance(dep.get("name"), str):
            continue
        kind = _DEPENDENCY_KINDS.get(dep.get("kind"))
        if kind is None:
            raise CargoMetadataAdapterError(f"Unknown dependency kind {dep.get('kind')!r} for {dep['name']}.")
        dependencies.append(DependencyInfo(name=dep["name"], kind=kind, req=str(dep.get("req") or "")))

    targets = []
    for target in pkg.get("targets") or []:
        if not isinstance(target, dict) or not isinstance(target.get("name"), str):
            continue
        targets.append(
            TargetInfo(
                name=target["name"],
                kinds=[str(k) for k in target.get("kind") or []],
                src_path=str(target.get("src_path") or ""),
            )
        )

    return PackageInfo(
        name=name,
        version=str(pkg.get("version") or ""),
        manifest_path=str(pkg.get("manifest_path") or ""),
        dependencies=dependencies,
        targets=targets,
    )
