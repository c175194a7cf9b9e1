#!/usr/bin/env python3
"""
Dynamic settings management for seatbot.

Hierarchical settings addressed with dot notation
(e.g. "strategy.preflop.raise_threshold"). Components register their
defaults with create() and read them back with get() or get_group().

Usage:
    from seatbot.config.settings import Settings

    settings = Settings()
    settings.create("strategy.preflop.raise_threshold", default=60)
    threshold = settings.get("strategy.preflop.raise_threshold")
    preflop = settings.get_group("strategy.preflop")

Settings live in memory unless the host hands over a file, either as the
constructor argument or through SEATBOT_SETTINGS_FILE. With a file, values
already in it override the registered defaults and every change is written
back to it.
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional
from threading import Lock
import logging
from box import Box

logger = logging.getLogger(__name__)

SETTINGS_FILE_ENV = "SEATBOT_SETTINGS_FILE"


class Settings:
    """
    Shared, thread-safe settings store backed by a python-box Box.

    Every engine component talks to the same instance.
    """

    _instance = None
    _lock = Lock()

    def __new__(cls, settings_file: Optional[Path] = None):
        """Singleton pattern to ensure only one Settings instance exists."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(Settings, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self, settings_file: Optional[Path] = None):
        """
        Initialize the settings store.

        Args:
            settings_file: JSON file to read and persist to. Defaults to
                $SEATBOT_SETTINGS_FILE; without either, nothing touches disk
        """
        if self._initialized:
            return

        self._initialized = True

        if settings_file is None and os.environ.get(SETTINGS_FILE_ENV):
            settings_file = os.environ[SETTINGS_FILE_ENV]
        self.settings_file: Optional[Path] = Path(settings_file) if settings_file is not None else None

        self._settings = Box(default_box=True, box_dots=True)

        if self.settings_file is not None:
            self._load_from_file()

        logger.info(f"Settings initialized ({self.settings_file or 'in memory'})")

    def create(self, setting_name: str, default: Any) -> None:
        """
        Register a setting with its default value.

        A value already loaded from the settings file is kept.

        Args:
            setting_name: Dot-notation path (e.g., "strategy.raise.multiplier")
            default: Value used when the file has none
        """
        current = self._get_nested(setting_name)
        if current is not None:
            logger.debug(f"Setting '{setting_name}' keeps {current} (default {default})")
            return

        self._set_nested(setting_name, default)
        self._save_to_file()
        logger.debug(f"Created setting '{setting_name}' = {default}")

    def update(self, setting_name: str, value: Any) -> None:
        """
        Change a registered setting.

        Raises:
            KeyError: If the setting was never created
        """
        previous = self._get_nested(setting_name)
        if previous is None:
            raise KeyError(f"Setting '{setting_name}' does not exist. Use create() first.")

        self._set_nested(setting_name, value)
        self._save_to_file()
        logger.debug(f"Updated setting '{setting_name}': {previous} -> {value}")

    def get(self, setting_name: str, fallback: Any = None) -> Any:
        """Get a setting's value, or ``fallback`` when it does not exist."""
        value = self._get_nested(setting_name)
        return fallback if value is None else value

    def get_group(self, group_path: str) -> Dict[str, Any]:
        """
        Get every setting under a group as a plain dictionary.

        Example:
            settings.get_group("strategy.postflop")
            # {"raise_threshold": 50, "call_threshold": 25, ...}
        """
        group = self._get_nested(group_path)
        if not isinstance(group, dict):
            logger.warning(f"Group '{group_path}' not found")
            return {}
        return group.to_dict() if isinstance(group, Box) else dict(group)

    def _get_nested(self, path: str) -> Any:
        node = self._settings
        for key in path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]

        # Groups left empty count as missing
        if isinstance(node, dict) and not node:
            return None
        return node

    def _set_nested(self, path: str, value: Any) -> None:
        *parents, leaf = path.split('.')
        node = self._settings
        for key in parents:
            child = node[key] if key in node else None
            if not isinstance(child, dict):
                node[key] = Box(default_box=True, box_dots=True)
            node = node[key]
        node[leaf] = value

    def _load_from_file(self) -> None:
        """Read settings from the configured file; a missing file is not created."""
        if not self.settings_file.exists():
            logger.info(f"Settings file {self.settings_file} not found, starting from defaults")
            return

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file: {e}")
            logger.warning("Using default settings")
            return

        if isinstance(data, dict):
            self._settings = Box(data.get("settings", data), default_box=True, box_dots=True)
        logger.info(f"Loaded settings from {self.settings_file}")

    def _save_to_file(self) -> None:
        """Write settings to the configured file, if there is one."""
        if self.settings_file is None:
            return

        payload = {
            "settings": self._settings.to_dict(),
            "metadata": {"version": "1.0", "last_modified": datetime.now().isoformat()}
        }

        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=2)
        except PermissionError as e:
            logger.error(f"Permission denied writing settings file: {e}")
            raise

        logger.debug(f"Settings saved to {self.settings_file}")
