"""Configuration adapters."""

from wandermate.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
