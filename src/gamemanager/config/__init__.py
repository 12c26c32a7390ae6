"""Configuration helpers for the player registry."""

from .settings import RegistrySettings, load_settings

__all__ = [
    "RegistrySettings",
    "load_settings",
]
