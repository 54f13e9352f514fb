"""Tool configuration loaded from YAML."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class StereoArgsConfig(BaseModel):
    log_level: str = Field("INFO", description="Logging level: DEBUG|INFO|WARNING|ERROR")
    write_run_log: bool = Field(False, description="Write a run log next to the output prefix")
    configure_environment: bool = Field(False, description="Set ISIS/GDAL/Qt/locale variables first")
    deps_dir: Path | None = Field(None, description="Directory holding IsisPreferences")


def load_config(config_path: Path | None) -> StereoArgsConfig:
    """Load a YAML config, falling back to defaults when the file is absent."""
    if config_path is None or not Path(config_path).exists():
        return StereoArgsConfig()
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    logger.debug(f"Loaded config from {config_path}")
    return StereoArgsConfig(**raw)
