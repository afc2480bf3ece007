"""Configuration management for record search."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
