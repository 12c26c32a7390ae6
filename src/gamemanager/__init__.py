"""Player registry for a game-administration tool."""

from .errors import PersistenceError, RegistryError, ReportError, ValidationError
from .models import Player, ProPlayer, StandardPlayer
from .registry import PlayerRepository

__all__ = [
    "PersistenceError",
    "Player",
    "PlayerRepository",
    "ProPlayer",
    "RegistryError",
    "ReportError",
    "StandardPlayer",
    "ValidationError",
]
