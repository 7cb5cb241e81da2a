"""Subprocess execution for the helm binary."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from .types import CommandResult


class CommandRunner:
    """Runs external commands and never raises for a non-zero exit."""

    def __init__(self, working_dir: Path | None = None) -> None:
        self.working_dir = working_dir

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        capture_output: bool = True,
    ) -> CommandResult:
        """Run ``cmd`` and wrap its outcome.

        A missing executable is reported as exit code 127, like a shell would.
        """
        logger.debug(f"$ {' '.join(cmd)}")
        try:
            completed = subprocess.run(
                list(cmd),
                cwd=cwd or self.working_dir,
                capture_output=capture_output,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            return CommandResult(success=False, stderr=f"{cmd[0]}: {e}", returncode=127)

        if completed.returncode != 0:
            logger.debug(f"{cmd[0]} exited with {completed.returncode}")
        return CommandResult(
            success=completed.returncode == 0,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )
