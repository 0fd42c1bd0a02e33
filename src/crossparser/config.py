"""Configuration file handling for crossparser."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from crossparser.models import Settings

logger = logging.getLogger(__name__)


def expand_path(path: str | os.PathLike) -> Path:
    """Expand ~ and environment variables in path."""
    return Path(os.path.expanduser(os.path.expandvars(os.fspath(path))))


def get_config_dir() -> Path:
    """Directory holding config.json (CROSSPARSER_HOME or ~/.crossparser)."""
    override = os.environ.get("CROSSPARSER_HOME")
    if override:
        return expand_path(override)
    return expand_path("~/.crossparser")


def get_config_file() -> Path:
    return get_config_dir() / "config.json"


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    config_file = get_config_file()
    if not config_file.exists():
        return Settings()

    try:
        with open(config_file) as f:
            return Settings.model_validate(json.load(f))
    except (json.JSONDecodeError, OSError, ValidationError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return Settings()


def save_settings(settings: Settings) -> bool:
    """Save settings to disk."""
    config_file = get_config_file()
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            json.dump(settings.model_dump(mode="json"), f, indent=2)
        return True
    except OSError as e:
        logger.warning("Could not write config %s: %s", config_file, e)
        return False


def add_root(path: str) -> dict:
    """
    Add a directory to the configured scan roots.

    Args:
        path: Directory to add (can contain ~)

    Returns:
        Dict with success flag and message
    """
    settings = load_settings()
    expanded = str(expand_path(path).resolve())

    if expanded in settings.extra_roots:
        return {"success": False, "message": f"Already configured: {expanded}"}

    settings.extra_roots.append(expanded)
    if not save_settings(settings):
        return {"success": False, "message": "Failed to save configuration"}

    return {"success": True, "message": f"Added scan root: {expanded}"}


def remove_root(path: str) -> dict:
    """Remove a directory from the configured scan roots."""
    settings = load_settings()
    expanded = str(expand_path(path).resolve())

    if expanded not in settings.extra_roots:
        return {"success": False, "message": f"Not configured: {expanded}"}

    settings.extra_roots.remove(expanded)
    if not save_settings(settings):
        return {"success": False, "message": "Failed to save configuration"}

    return {"success": True, "message": f"Removed scan root: {expanded}"}
