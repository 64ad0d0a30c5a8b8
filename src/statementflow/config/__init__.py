"""Configuration module."""
from .settings import AppSettings, DEFAULT_CONFIG_PATH

__all__ = ["AppSettings", "DEFAULT_CONFIG_PATH"]
