from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .config import TEST_RECURSION_BUSTER_ENV, CargoConfig

logger = logging.getLogger(__name__)


class CargoInvocationError(RuntimeError):
    def __init__(self, args: Sequence[str], message: str):
        super().__init__(f"Could not run `{' '.join(args)}`: {message}")
        self.args_used = list(args)


@dataclass(frozen=True)
class CargoOutput:
    args: List[str]
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def command_str(self) -> str:
        return " ".join(self.args)

    def stdout_text(self) -> str:
        """Decode stdout as UTF-8; raises UnicodeDecodeError on garbage."""
        return self.stdout.decode("utf-8")

    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


def run_cargo(
    config: CargoConfig,
    subcommand: str,
    manifest_path: Path,
    *extra_args: str,
    env_overrides: Optional[dict] = None,
) -> CargoOutput:
    """
    Run `cargo <subcommand> --manifest-path <manifest_path> <extra_args...>`.

    Blocks until the process exits; there is no timeout. Raises
    `CargoInvocationError` when the process cannot be spawned at all.
    """
    args = [config.command, subcommand, "--manifest-path", str(manifest_path), *extra_args]
    logger.debug("Running %s", " ".join(args))
    try:
        completed = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=config.env(**(env_overrides or {})),
            check=False,
        )
    except OSError as exc:
        raise CargoInvocationError(args, str(exc)) from exc

    logger.debug("%s exited with %s", " ".join(args), completed.returncode)
    return CargoOutput(
        args=args,
        returncode=completed.returncode,
        stdout=completed.stdout or b"",
        stderr=completed.stderr or b"",
    )


def cargo_metadata(config: CargoConfig, manifest_path: Path) -> CargoOutput:
    return run_cargo(config, "metadata", manifest_path, "--format-version", "1")


def cargo_clean(config: CargoConfig, manifest_path: Path, package_name: str) -> CargoOutput:
    return run_cargo(config, "clean", manifest_path, "--package", package_name)


def cargo_build(config: CargoConfig, manifest_path: Path) -> CargoOutput:
    return run_cargo(config, "build", manifest_path, "--message-format=json")


def cargo_test(config: CargoConfig, manifest_path: Path) -> CargoOutput:
    return run_cargo(
        config,
        "test",
        manifest_path,
        env_overrides={TEST_RECURSION_BUSTER_ENV: "true"},
    )
