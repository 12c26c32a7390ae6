"""Exceptions raised by the player registry."""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for registry failures."""


class ValidationError(RegistryError, ValueError):
    """Raised when a caller supplies an out-of-range or malformed value."""


class PersistenceError(RegistryError):
    """Raised when the player store cannot be written."""


class ReportError(RegistryError, RuntimeError):
    """Raised when a report or CSV export cannot be written."""


__all__ = [
    "PersistenceError",
    "RegistryError",
    "ReportError",
    "ValidationError",
]
