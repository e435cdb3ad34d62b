"""
Persistent store for DIMS export settings (YAML file).

Loading never fails: a missing or broken file yields the defaults so an
export can always run. Saving propagates I/O errors to the caller.
"""
import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from dims_export.core.config import settings as app_settings
from dims_export.models.settings import ExportSettings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _resolve(path: Optional[PathLike]) -> Path:
    return Path(path) if path is not None else Path(app_settings.DIMS_SETTINGS_FILE)


def load_export_settings(path: Optional[PathLike] = None) -> ExportSettings:
    """
    Load export settings from YAML.

    Args:
        path: Settings file (defaults to DIMS_SETTINGS_FILE)

    Returns:
        Stored ExportSettings, or defaults if the file is missing or invalid
    """
    settings_path = _resolve(path)

    if not settings_path.exists():
        logger.info(f"No DIMS settings at {settings_path}, using defaults")
        return ExportSettings()

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read DIMS settings {settings_path}: {e}; using defaults")
        return ExportSettings()

    if not isinstance(data, dict):
        logger.warning(f"DIMS settings {settings_path} is not a mapping; using defaults")
        return ExportSettings()

    try:
        return ExportSettings.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Invalid DIMS settings in {settings_path}: {e}; using defaults")
        return ExportSettings()


def save_export_settings(export_settings: ExportSettings, path: Optional[PathLike] = None) -> Path:
    """
    Save export settings as YAML.

    Returns:
        Path written
    """
    settings_path = _resolve(path)
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    with open(settings_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(export_settings.model_dump(), f, sort_keys=False)

    logger.info(f"Saved DIMS settings to {settings_path}")
    return settings_path
