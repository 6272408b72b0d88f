from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict

from dotenv import load_dotenv


load_dotenv()

# Set while `cargo test` runs so a project that embeds culture in its own
# test suite does not recurse into itself.
TEST_RECURSION_BUSTER_ENV = "CARGO_CULTURE_TEST_RECURSION_BUSTER"


@dataclass(frozen=True)
class CargoConfig:
    command: str = "cargo"
    extra_env: Dict[str, str] = field(default_factory=dict)

    def env(self, **overrides: str) -> Dict[str, str]:
        merged = dict(os.environ)
        merged.update(self.extra_env)
        merged.update(overrides)
        return merged


def get_cargo_config() -> CargoConfig:
    """
    Load cargo toolchain configuration from environment variables.

    Reads:
      CARGO  path or name of the cargo executable (default: cargo)
    """
    command = os.getenv("CARGO", "").strip() or "cargo"
    return CargoConfig(command=command)


def recursion_guard_active() -> bool:
    return os.getenv(TEST_RECURSION_BUSTER_ENV, "").strip().lower() == "true"
