"""Readers for small text inputs: lists, vectors, metadata, ISIS labels."""

from __future__ import annotations

from pathlib import Path

from stereo_args.core.exceptions import ArgumentError

# Stop scanning a label after this many lines; a .tif can be several GB
# and will not have a TargetName anyway.
MAX_LABEL_LINES = 1000


def parse_append_metadata(metadata: str, keywords: dict[str, str]) -> dict[str, str]:
    """Parse ``"VAR1=VAL1 VAR2=VAL2"`` into ``keywords``, keeping what is already there."""
    for entry in metadata.split():
        parts = entry.replace("=", " ").split()
        if len(parts) < 2:
            raise ArgumentError(f"Could not parse: {entry}\n")
        keywords[parts[0]] = parts[1]
    return keywords


def read_list(path: Path | str) -> list[str]:
    """Read whitespace-separated entries. An empty list is an error."""
    with open(path, encoding="utf-8") as f:
        entries = f.read().split()
    if not entries:
        raise ArgumentError(f"Could not read any entries from: {path}.\n")
    return entries


def read_vec(path: Path | str) -> list[float]:
    """Read whitespace-separated numbers, stopping at the first non-number."""
    try:
        with open(path, encoding="utf-8") as f:
            tokens = f.read().split()
    except OSError:
        raise ArgumentError(f"Could not open file: {path}") from None

    vals = []
    for token in tokens:
        try:
            vals.append(float(token))
        except ValueError:
            break
    return vals


def read_target_name(path: Path | str) -> str:
    """Read the target (planet) name from the text label of an ISIS cube.

    Returns ``"UNKNOWN"`` if the file cannot be read or has no TargetName
    before the ``End`` of its label.
    """
    target = "UNKNOWN"
    try:
        f = open(path, encoding="utf-8", errors="replace")
    except OSError:
        return target

    with f:
        for count, line in enumerate(f):
            line = line.rstrip("\n")
            if line == "End" or count >= MAX_LABEL_LINES:
                break
            line = line.lower()
            if "targetname" not in line:
                continue
            parts = line.replace("=", " ").split()
            if len(parts) < 2:
                continue
            return parts[1].upper()
    return target
