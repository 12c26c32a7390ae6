"""In-memory player repository with JSON auto-save, search and rankings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import ValidationError as ModelValidationError

from gamemanager.config.settings import RATING_MODES
from gamemanager.errors import PersistenceError, ReportError, ValidationError
from gamemanager.models import Player, ProPlayer, StandardPlayer, derived_rating
from gamemanager.persistence import LoadStatus, PlayerStore
from gamemanager.reports import render_players_csv, render_report, write_text_file

from .sorting import insertion_sort_desc, stable_sort_desc, take_top


logger = logging.getLogger(__name__)

RatingMode = Literal["stored", "derived"]

REPORT_FILENAME = "report.txt"
CSV_FILENAME = "players.csv"


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValidationError(f"{name} cannot be negative (got {value})")


class PlayerRepository:
    """Owns the player collection and keeps the JSON store in sync.

    Every mutating operation saves the full collection right away. Save
    failures are logged and never undo the in-memory change. Query results
    are copies, so only the repository mutates its records.
    """

    def __init__(
        self,
        storage_path: Path | str,
        *,
        rating_mode: RatingMode = "stored",
        output_dir: Path | str | None = None,
        log: logging.Logger | None = None,
    ):
        if rating_mode not in RATING_MODES:
            raise ValueError(f"rating_mode must be one of {RATING_MODES}, got {rating_mode!r}")
        self._store = PlayerStore(storage_path)
        self._players: List[Player] = []
        self.rating_mode: RatingMode = rating_mode
        self.output_dir = Path(output_dir) if output_dir is not None else self._store.path.parent
        self._log = log or logger

    @property
    def storage_path(self) -> Path:
        return self._store.path

    def __len__(self) -> int:
        return len(self._players)

    # -- persistence -----------------------------------------------------

    def load(self) -> int:
        """Replace the collection with the stored one and return its size."""

        result = self._store.load()
        if result.status is LoadStatus.MISSING:
            self._log.info("No player file at %s; starting with an empty list", self.storage_path)
        elif result.status is LoadStatus.EMPTY:
            self._log.warning("Player file %s is empty; starting with an empty list", self.storage_path)
        elif result.status is LoadStatus.CORRUPT:
            self._log.error("%s; starting with an empty list", result.error)
        for reason in result.skipped:
            self._log.warning("Skipped stored player (%s)", reason)

        self._players = list(result.players)
        if result.status is LoadStatus.LOADED:
            self._log.info("Loaded %s players from %s", len(self._players), self.storage_path)
        return len(self._players)

    def save(self) -> bool:
        try:
            self._store.save(self._players)
        except PersistenceError as exc:
            self._log.error("%s", exc)
            return False
        return True

    # -- identity & mutation ---------------------------------------------

    def add_player(
        self,
        username: str,
        hours_played: int = 0,
        high_score: int = 0,
        team: Optional[str] = None,
        rating: float = 0.0,
        *,
        is_pro: bool = False,
    ) -> Player:
        name = (username or "").strip()
        if not name:
            raise ValidationError("Username cannot be empty.")
        folded = name.casefold()
        if any(player.username.casefold() == folded for player in self._players):
            raise ValidationError(f"Username {name!r} already exists.")
        _require_non_negative("hours_played", hours_played)
        _require_non_negative("high_score", high_score)

        fields = {
            "username": name,
            "hours_played": hours_played,
            "high_score": high_score,
            "rating": rating,
        }
        if team is not None and team.strip():
            fields["team"] = team.strip()
        player: Player = ProPlayer(**fields) if is_pro else StandardPlayer(**fields)

        self._players.append(player)
        self._log.info("Added player %s (%s)", player.username, player.player_id)
        self.save()
        return player.model_copy()

    def update_stats(
        self,
        player_id: str,
        hours_to_add: int,
        new_high_score: Optional[int] = None,
    ) -> bool:
        """Add hours and raise the high score if the new one is higher.

        Returns ``False`` when no player has ``player_id``. A lower or equal
        score is ignored.
        """

        _require_non_negative("hours_to_add", hours_to_add)
        if new_high_score is not None:
            _require_non_negative("new_high_score", new_high_score)

        player = self._find(player_id)
        if player is None:
            self._log.warning("Stats update for unknown player id %s", player_id)
            return False

        player.hours_played += hours_to_add
        if new_high_score is not None and new_high_score > player.high_score:
            player.high_score = new_high_score
        self._log.info("Updated stats for %s", player.username)
        self.save()
        return True

    def update_player(
        self,
        player_id: str,
        hours_played: int,
        high_score: int,
        team: str,
        rating: float,
    ) -> bool:
        """Overwrite every mutable field. Unlike update_stats, scores may go down."""

        _require_non_negative("hours_played", hours_played)
        _require_non_negative("high_score", high_score)

        player = self._find(player_id)
        if player is None:
            self._log.warning("Update for unknown player id %s", player_id)
            return False

        try:
            checked = type(player).model_validate(
                {
                    **player.model_dump(),
                    "hours_played": hours_played,
                    "high_score": high_score,
                    "team": team,
                    "rating": rating,
                }
            )
        except ModelValidationError as exc:
            raise ValidationError(f"Invalid player update: {exc.error_count()} invalid field(s)") from exc

        player.hours_played = checked.hours_played
        player.high_score = checked.high_score
        player.team = checked.team
        player.rating = checked.rating
        self._log.info("Updated player %s", player.username)
        self.save()
        return True

    # -- queries ---------------------------------------------------------

    def _find(self, player_id: str) -> Optional[Player]:
        for player in self._players:
            if player.player_id == player_id:
                return player
        return None

    def get_by_id(self, player_id: str) -> Optional[Player]:
        player = self._find(player_id)
        return player.model_copy() if player is not None else None

    def get_all(self) -> List[Player]:
        return [player.model_copy() for player in self._players]

    def search_by_username(self, term: str) -> List[Player]:
        needle = (term or "").strip().casefold()
        if not needle:
            return []
        return [
            player.model_copy()
            for player in self._players
            if needle in player.username.casefold()
        ]

    def rating_of(self, player: Player) -> float:
        if self.rating_mode == "derived":
            return derived_rating(player)
        return player.rating

    def describe(self, player: Player) -> str:
        return player.describe(self.rating_of(player))

    # -- rankings --------------------------------------------------------

    def sort_by_high_score(self, top_n: Optional[int] = None) -> List[Player]:
        ranked = insertion_sort_desc(self.get_all(), key=lambda player: player.high_score)
        return take_top(ranked, top_n)

    def sort_by_rating(self, top_n: Optional[int] = None) -> List[Player]:
        ranked = insertion_sort_desc(self.get_all(), key=self.rating_of)
        return take_top(ranked, top_n)

    def sort_by_hours(self, top_n: Optional[int] = None) -> List[Player]:
        ranked = stable_sort_desc(self.get_all(), key=lambda player: player.hours_played)
        return take_top(ranked, top_n)

    # -- reports ---------------------------------------------------------

    def _write_output(self, target: Path, content: str) -> Path:
        try:
            return write_text_file(target, content)
        except ReportError as exc:
            self._log.error("%s", exc)
            raise

    def generate_report(self, path: Path | str | None = None) -> Path:
        """Write the ranking report and return its path (raises ReportError)."""

        target = Path(path) if path is not None else self.output_dir / REPORT_FILENAME
        content = render_report(
            [
                ("Most Active Players (by hours)", self.sort_by_hours()),
                ("Top Rated Players", self.sort_by_rating()),
                ("Top Players by High Score", self.sort_by_high_score()),
            ],
            rating_of=self.rating_of,
        )
        written = self._write_output(target, content)
        self._log.info("Report written to %s", written)
        return written

    def export_csv(self, path: Path | str | None = None) -> Path:
        """Write players in most-active order as CSV (raises ReportError)."""

        target = Path(path) if path is not None else self.output_dir / CSV_FILENAME
        written = self._write_output(target, render_players_csv(self.sort_by_hours(), rating_of=self.rating_of))
        self._log.info("CSV exported to %s", written)
        return written


__all__ = ["PlayerRepository", "RATING_MODES", "RatingMode"]
