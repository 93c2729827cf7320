"""Configuration adapters."""

from gasoprice.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
