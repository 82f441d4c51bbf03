"""Shared settings loading and a minimal lint context for hosts.

Settings files use the same shape as the ``settings`` block of an ESLint
configuration, e.g. ``{"react": {"version": "detect", "defaultVersion": "18.2.0"}}``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from lintversion.constants import Constants

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or parsed."""


def load_settings(config_path: str) -> Dict[str, Any]:
    """Load shared settings from a YAML or JSON file.

    JSON is chosen by a ``.json`` extension; anything else is read as YAML.
    A top-level ``settings`` key is unwrapped when present.

    Args:
        config_path: Path to the settings file.

    Returns:
        Settings mapping; empty when the file is empty.

    Raises:
        SettingsError: if the file is missing, unreadable or malformed.
    """
    if not os.path.isfile(config_path):
        raise SettingsError(f"Settings file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            if config_path.lower().endswith(".json"):
                body = fh.read()
                data = json.loads(body) if body.strip() else None
            else:
                data = yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SettingsError(f"Failed to load settings from {config_path}: {e}") from e

    if data is None:
        logger.debug("Settings file %s is empty", config_path)
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings in {config_path} must be a mapping")

    settings = data.get("settings", data)
    if not isinstance(settings, dict):
        raise SettingsError(f"'settings' in {config_path} must be a mapping")
    if Constants.SETTINGS_SECTION not in settings:
        logger.debug("No '%s' section in %s", Constants.SETTINGS_SECTION, config_path)
    return settings


@dataclass
class LintContext:
    """The pieces of a lint context that version checks read."""

    filename: str
    settings: Dict[str, Any] = field(default_factory=dict)

    def get_filename(self) -> str:
        return self.filename

    @classmethod
    def from_file(cls, config_path: str, filename: str) -> "LintContext":
        """Build a context for filename using settings read from config_path."""
        return cls(filename=filename, settings=load_settings(config_path))
