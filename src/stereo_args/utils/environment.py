"""Process environment needed by ISIS, GDAL and Qt."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from stereo_args.core.exceptions import EnvironmentSetupError

logger = logging.getLogger(__name__)

PREFERENCES_FILE = "IsisPreferences"
DEPS_DIR_VAR = "ASP_DEPS_DIR"


def set_env(key: str, value: str) -> None:
    try:
        os.environ[key] = value
    except (ValueError, OSError) as e:
        raise EnvironmentSetupError(f"Failed to set: {key}={value}\n") from e


def _has_preferences(base_dir: Path | None) -> bool:
    return base_dir is not None and (base_dir / PREFERENCES_FILE).exists()


def find_deps_dir(deps_dir: Path | None = None) -> Path:
    """Find the directory having IsisPreferences.

    Tried in order: ``deps_dir``, the base of the installation the
    interpreter runs from, and the ASP_DEPS_DIR environment variable.
    """
    candidates = [
        Path(deps_dir) if deps_dir else None,
        Path(sys.executable).resolve().parent.parent,
        Path(os.environ[DEPS_DIR_VAR]) if os.environ.get(DEPS_DIR_VAR) else None,
    ]
    for candidate in candidates:
        if _has_preferences(candidate):
            return candidate
    raise EnvironmentSetupError(
        "Cannot find the directory having IsisPreferences. "
        f"Try setting it as the environmental variable {DEPS_DIR_VAR}."
    )


def set_asp_env_vars(deps_dir: Path | None = None) -> dict[str, str]:
    """Set ISISROOT, QT_PLUGIN_PATH, GDAL_DATA and force a US English locale.

    The locale keeps ISIS from choking on a comma as decimal separator.
    """
    base_dir = find_deps_dir(deps_dir)
    values = {
        "ISISROOT": str(base_dir),
        "QT_PLUGIN_PATH": str(base_dir / "plugins"),
        "GDAL_DATA": str(base_dir / "share" / "gdal"),
        "LC_ALL": "en_US.UTF-8",
        "LANG": "en_US.UTF-8",
    }
    for key, value in values.items():
        set_env(key, value)

    if not Path(values["QT_PLUGIN_PATH"]).exists():
        raise EnvironmentSetupError(f"Cannot find Qt plugins in {values['QT_PLUGIN_PATH']}")
    if not Path(values["GDAL_DATA"]).exists():
        raise EnvironmentSetupError(f"Cannot find GDAL data in {values['GDAL_DATA']}")

    logger.debug(f"Environment configured from {base_dir}")
    return values
