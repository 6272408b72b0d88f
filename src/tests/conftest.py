import os
import sys


# Ensure `src` is on sys.path so imports like `import culture...` work,
# even when the package is not installed.
SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import io
from pathlib import Path

import pytest

from culture.connectors.cargo.commands import CargoOutput
from culture.connectors.cargo.config import CargoConfig
from culture.rules_engine.config import CultureRulesConfig
from culture.rules_engine.context import RuleContext
from culture.rules_engine.models import (
    DependencyInfo,
    MetadataQueryResult,
    PackageInfo,
    ProjectMetadata,
)


CARGO_TOML = """[package]
name = "kid"
version = "0.1.0"
authors = []

[dependencies]

[dev-dependencies]
"""


@pytest.fixture
def project_dir(tmp_path) -> Path:
    (tmp_path / "Cargo.toml").write_text(CARGO_TOML)
    return tmp_path


@pytest.fixture
def manifest_path(project_dir) -> Path:
    return project_dir / "Cargo.toml"


@pytest.fixture
def write_file(project_dir):
    def _write(relative: str, content: str = "content") -> Path:
        path = project_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def make_metadata(project_dir):
    def _make(*, dev_dependencies=(), dependencies=(), packages=None, workspace_root=None) -> ProjectMetadata:
        if packages is None:
            deps = [DependencyInfo(name=name, kind="normal") for name in dependencies]
            deps += [DependencyInfo(name=name, kind="dev") for name in dev_dependencies]
            packages = [
                PackageInfo(
                    name="kid",
                    version="0.1.0",
                    manifest_path=str(project_dir / "Cargo.toml"),
                    dependencies=deps,
                )
            ]
        return ProjectMetadata(
            workspace_root=str(workspace_root if workspace_root is not None else project_dir),
            packages=packages,
        )

    return _make


@pytest.fixture
def make_ctx(manifest_path):
    def _make(
        *,
        metadata: ProjectMetadata | None = None,
        metadata_result: MetadataQueryResult | None = None,
        verbose: bool = False,
        client_rules: dict | None = None,
        print_output=None,
    ) -> RuleContext:
        if metadata_result is None:
            if metadata is not None:
                metadata_result = MetadataQueryResult.ok(metadata)
            else:
                metadata_result = MetadataQueryResult.unavailable("metadata not queried in fixture")
        return RuleContext(
            manifest_path=manifest_path,
            metadata_result=metadata_result,
            verbose=verbose,
            print_output=print_output if print_output is not None else io.StringIO(),
            config=CultureRulesConfig(rules=client_rules or {}),
            toolchain=CargoConfig(command="cargo"),
        )

    return _make


@pytest.fixture
def make_cargo_output():
    def _make(*, returncode: int = 0, stdout: bytes | str = b"", stderr: bytes | str = b"", args=None) -> CargoOutput:
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        if isinstance(stderr, str):
            stderr = stderr.encode("utf-8")
        return CargoOutput(
            args=list(args or ["cargo"]),
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )

    return _make
