"""Cargo toolchain connector: subprocess invocations returning raw output.

Nothing here interprets the output; see `culture.adapters.cargo`.
"""

from .commands import (
    CargoInvocationError,
    CargoOutput,
    cargo_build,
    cargo_clean,
    cargo_metadata,
    cargo_test,
    run_cargo,
)
from .config import CargoConfig, get_cargo_config, recursion_guard_active

__all__ = [
    "CargoConfig",
    "CargoInvocationError",
    "CargoOutput",
    "cargo_build",
    "cargo_clean",
    "cargo_metadata",
    "cargo_test",
    "get_cargo_config",
    "recursion_guard_active",
    "run_cargo",
]
