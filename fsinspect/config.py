#!/usr/bin/env python3
"""
fsinspect Configuration Management
"""

from __future__ import annotations

import copy
import os
from typing import Any

from .config_schemas.schemas import FsInspectConfig
from .config_store import ConfigStore
from .core.constants import CONFIG_ENV_VAR
from .utils.logger import get_logger

logger = get_logger(__name__)


class Config:
    """Configuration manager for fsinspect"""

    DEFAULT_CONFIG = FsInspectConfig().to_dict()

    def __init__(self, config_path: str | None = None):
        self.config_path = config_path or os.environ.get(CONFIG_ENV_VAR) or None
        self.config: dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self.typed_config = FsInspectConfig()

        if self.config_path:
            self.load_config()

    def load_config(self) -> None:
        """Load configuration from file, keeping defaults on any failure"""
        user_config = ConfigStore.load(self.config_path)
        if user_config is None:
            return
        self.apply_overrides(user_config)

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Merge overrides section by section and revalidate"""
        merged = copy.deepcopy(self.config)
        for section, settings in overrides.items():
            if section in merged and isinstance(settings, dict):
                merged[section].update(settings)
            else:
                logger.warning(f"Ignoring unknown config section: {section}")

        try:
            typed = FsInspectConfig.from_dict(merged)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid configuration, using defaults: {e}")
            return

        self.config = merged
        self.typed_config = typed

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.config)

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]
