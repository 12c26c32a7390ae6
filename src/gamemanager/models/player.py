"""Player records held by the registry.

Players come in two kinds that share one field set: standard players and pro
players. The kind travels with each record as the ``kind`` tag so rating
computation can dispatch on it without subclass overrides.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union
from uuid import uuid4

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


PRO_TEAM_PLACEHOLDER = "No Team"
PRO_RATING_BONUS = 20.0
SCORE_WEIGHT = 0.7
HOURS_WEIGHT = 0.3


def new_player_id() -> str:
    return str(uuid4())


class PlayerBase(BaseModel):
    """Fields common to every player kind."""

    player_id: str = Field(default_factory=new_player_id, alias="id", min_length=1, frozen=True)
    username: str = Field(..., min_length=1, frozen=True)
    hours_played: int = Field(default=0, ge=0)
    high_score: int = Field(default=0, ge=0)
    team: str = ""
    rating: float = 0.0

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    @property
    def is_pro(self) -> bool:
        return False

    def describe(self, rating: float | None = None) -> str:
        """One-line summary; ``rating`` replaces the stored value when given."""

        tag = " [PRO]" if self.is_pro else ""
        team = self.team or "-"
        shown = self.rating if rating is None else rating
        return (
            f"{self.player_id} | {self.username}{tag} | Hours: {self.hours_played} | "
            f"Score: {self.high_score} | Rating: {shown:.2f} | Team: {team}"
        )

    def __str__(self) -> str:
        return self.describe()


class StandardPlayer(PlayerBase):
    kind: Literal["standard"] = "standard"


class ProPlayer(PlayerBase):
    kind: Literal["pro"] = "pro"
    team: str = PRO_TEAM_PLACEHOLDER

    @property
    def is_pro(self) -> bool:
        return True


Player = Annotated[Union[StandardPlayer, ProPlayer], Field(discriminator="kind")]

PLAYER_ADAPTER: TypeAdapter[Player] = TypeAdapter(Player)


def derived_rating(player: StandardPlayer | ProPlayer) -> float:
    """Rating computed from the counters, with a flat bonus for pro players.

    Always recomputed from the current counters so stat updates show up
    immediately.
    """

    rating = SCORE_WEIGHT * player.high_score + HOURS_WEIGHT * player.hours_played
    if player.kind == "pro":
        rating += PRO_RATING_BONUS
    return rating
