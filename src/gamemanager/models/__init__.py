"""Player record models."""

from .player import (
    PLAYER_ADAPTER,
    PRO_RATING_BONUS,
    PRO_TEAM_PLACEHOLDER,
    Player,
    PlayerBase,
    ProPlayer,
    StandardPlayer,
    derived_rating,
    new_player_id,
)

__all__ = [
    "PLAYER_ADAPTER",
    "PRO_RATING_BONUS",
    "PRO_TEAM_PLACEHOLDER",
    "Player",
    "PlayerBase",
    "ProPlayer",
    "StandardPlayer",
    "derived_rating",
    "new_player_id",
]
