"""Player repository and ranking helpers."""

from .service import RATING_MODES, PlayerRepository
from .sorting import insertion_sort_desc, stable_sort_desc, take_top

__all__ = [
    "RATING_MODES",
    "PlayerRepository",
    "insertion_sort_desc",
    "stable_sort_desc",
    "take_top",
]
