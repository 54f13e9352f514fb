"""Write a per-run log file next to the output prefix."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Sequence

from stereo_args import __version__
from stereo_args.core.exceptions import ArgumentError
from stereo_args.core.logging import add_file_handler
from stereo_args.utils.subprocess_utils import append_command_output

logger = logging.getLogger(__name__)

# (command, file that must exist for the command to be useful)
SYSTEM_INFO_COMMANDS = [
    ("uname -a", None),
    ("cat /proc/meminfo 2>/dev/null | grep MemTotal", "/proc/meminfo"),
    ("cat /proc/cpuinfo 2>/dev/null | tail -n 25", "/proc/cpuinfo"),
    # macOS
    ('sysctl -a hw 2>/dev/null | grep -E "ncpu|byteorder|memsize|cpufamily|cachesize|mmx|sse|machine|model" | grep -v ipv6', None),
]


def current_posix_time_string() -> str:
    return datetime.now().strftime("%Y-%b-%d %H:%M:%S")


def extract_prog_name(prog: str) -> str:
    """Program name without directory, extension, or a leading ``lt-``."""
    name = Path(prog).stem
    return name.removeprefix("lt-")


def _quote(token: str) -> str:
    if " " in token or "\t" in token:
        return f'"{token}"'
    return token


def log_file_name(out_prefix: str, prog_name: str, now: datetime | None = None) -> Path:
    """``<prefix>-log-<prog>-<MM-DD-HHMM>-<pid>.txt``"""
    now = now or datetime.now()
    return Path(f"{out_prefix}-log-{prog_name}-{now:%m-%d-%H%M}-{os.getpid()}.txt")


def log_to_file(
    argv: Sequence[str],
    out_prefix: str,
    default_settings_file: Path | None = None,
) -> Path:
    """Record the invocation and some system info, then mirror logging into the file."""
    if not out_prefix:
        raise ArgumentError("Output prefix was not set.\n")

    log_file = log_file_name(out_prefix, extract_prog_name(argv[0]))
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Writing log info to: {log_file}")

    with open(log_file, "w", encoding="utf-8") as f:
        f.write(f"stereo-args {__version__}\n\n")
        f.write(" ".join(_quote(t) for t in argv if t != " "))
        f.write("\n\n")

    for cmd, required in SYSTEM_INFO_COMMANDS:
        if required is not None and not Path(required).exists():
            continue
        append_command_output(cmd, log_file)

    if default_settings_file is not None and Path(default_settings_file).exists():
        append_command_output(f"cat {default_settings_file} 2>/dev/null", log_file)

    add_file_handler(log_file)
    return log_file
