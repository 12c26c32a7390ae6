"""Persistence layer storing the player collection as a JSON document."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError as ModelValidationError

from gamemanager.errors import PersistenceError
from gamemanager.models import PLAYER_ADAPTER, Player


# Lower-cased, underscore-free key -> canonical JSON field name.
_FIELD_ALIASES: Mapping[str, str] = {
    "id": "id",
    "playerid": "id",
    "kind": "kind",
    "username": "username",
    "hoursplayed": "hoursPlayed",
    "highscore": "highScore",
    "team": "team",
    "teamname": "team",
    "rating": "rating",
}


class LoadStatus(str, enum.Enum):
    LOADED = "loaded"
    MISSING = "missing"
    EMPTY = "empty"
    CORRUPT = "corrupt"


@dataclass
class LoadResult:
    status: LoadStatus
    players: List[Player] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    error: str | None = None


def _normalize_entry(entry: Mapping[str, Any]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in entry.items():
        token = str(key).replace("_", "").lower()
        canonical = _FIELD_ALIASES.get(token)
        if canonical is not None:
            normalized[canonical] = value
    if isinstance(normalized.get("username"), str):
        normalized["username"] = normalized["username"].strip()
    if isinstance(normalized.get("kind"), str):
        normalized["kind"] = normalized["kind"].strip().lower()
    else:
        normalized["kind"] = "standard"
    if normalized.get("team") is None:
        normalized.pop("team", None)
    if normalized.get("rating") is None:
        normalized.pop("rating", None)
    return normalized


def load_players(path: Path | str) -> LoadResult:
    """Read the player collection from ``path``.

    Missing, empty or malformed files never raise; they yield an empty
    collection with a status the caller can log.
    """

    path = Path(path)
    if not path.exists():
        return LoadResult(status=LoadStatus.MISSING)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return LoadResult(status=LoadStatus.CORRUPT, error=f"Unable to read {path}: {exc}")

    if not text.strip():
        return LoadResult(status=LoadStatus.EMPTY)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        return LoadResult(status=LoadStatus.CORRUPT, error=f"Invalid JSON in {path}: {exc}")

    if not isinstance(data, list):
        return LoadResult(
            status=LoadStatus.CORRUPT,
            error=f"Expected a JSON array in {path}, got {type(data).__name__}",
        )

    result = LoadResult(status=LoadStatus.LOADED)
    seen_ids: set[str] = set()
    seen_names: set[str] = set()
    for index, entry in enumerate(data):
        if not isinstance(entry, Mapping):
            result.skipped.append(f"entry {index}: not an object")
            continue
        try:
            fields = _normalize_entry(entry)
            if fields.get("username") == "":
                result.skipped.append(f"entry {index}: blank username")
                continue
            player = PLAYER_ADAPTER.validate_python(fields)
        except ModelValidationError as exc:
            result.skipped.append(f"entry {index}: {exc.error_count()} invalid field(s)")
            continue
        if player.player_id in seen_ids:
            result.skipped.append(f"entry {index}: duplicate id {player.player_id}")
            continue
        folded = player.username.casefold()
        if folded in seen_names:
            result.skipped.append(f"entry {index}: duplicate username {player.username}")
            continue
        seen_ids.add(player.player_id)
        seen_names.add(folded)
        result.players.append(player)
    return result


def dump_players(players: Iterable[Player]) -> str:
    payload = [PLAYER_ADAPTER.dump_python(player, mode="json", by_alias=True) for player in players]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def save_players(path: Path | str, players: Iterable[Player]) -> None:
    """Write the full collection to ``path``, raising PersistenceError on I/O failure."""

    path = Path(path)
    document = dump_players(players)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"Unable to save players to {path}: {exc}") from exc


class PlayerStore:
    """JSON file store bound to a single path."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> LoadResult:
        return load_players(self.path)

    def save(self, players: Iterable[Player]) -> None:
        save_players(self.path, players)


__all__ = [
    "LoadResult",
    "LoadStatus",
    "PlayerStore",
    "dump_players",
    "load_players",
    "save_players",
]
