from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from culture.connectors.cargo.config import CargoConfig

from .config import CultureRulesConfig
from .models import MetadataQueryResult, MetadataStatus, ProjectMetadata


@dataclass(frozen=True)
class RuleContext:
    manifest_path: Path
    metadata_result: MetadataQueryResult
    verbose: bool = False
    print_output: TextIO = field(default_factory=lambda: sys.stdout)
    config: CultureRulesConfig = field(default_factory=CultureRulesConfig)
    toolchain: CargoConfig = field(default_factory=CargoConfig)

    @property
    def project_dir(self) -> Path:
        return self.manifest_path.parent

    @property
    def metadata(self) -> Optional[ProjectMetadata]:
        if self.metadata_result.status != MetadataStatus.OK:
            return None
        return self.metadata_result.metadata

    @property
    def workspace_dir(self) -> Optional[Path]:
        metadata = self.metadata
        if metadata is None or not metadata.workspace_root:
            return None
        return Path(metadata.workspace_root)

    def note(self, message: str) -> None:
        if self.verbose:
            self.print_output.write(f"{message}\n")
