"""Subprocess runner for the system commands written into run logs."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def run_command(
    cmd: str,
    cwd: Path | None = None,
    timeout: int = 60,
) -> subprocess.CompletedProcess:
    """Run a shell command, capturing stdout and stderr together."""
    logger.debug(f"Running: {cmd}")

    result = subprocess.run(
        cmd,
        shell=True,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        timeout=timeout,
        check=False,
    )

    if result.returncode != 0:
        logger.debug(f"'{cmd}' exited with {result.returncode}")
    return result


def append_command_output(cmd: str, log_file: Path) -> None:
    """Append the command line, its output and a blank line to ``log_file``.

    Not every command exists on every machine, so failures are only logged.
    """
    try:
        output = run_command(cmd).stdout
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Could not run '{cmd}': {e}")
        output = ""

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(f"{cmd}\n")
        f.write(output)
        f.write("\n")
