"""Configuration module for the state housing price chart."""

from .constants import *
from .settings import Settings, ThemeSettings, get_default_settings

__all__ = ["Settings", "ThemeSettings", "get_default_settings"]
