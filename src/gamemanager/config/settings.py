"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

DATA_DIR_ENV = "GAMEMANAGER_DATA_DIR"
PLAYERS_FILE_ENV = "GAMEMANAGER_PLAYERS_FILE"
LOG_FILE_ENV = "GAMEMANAGER_LOG_FILE"
RATING_MODE_ENV = "GAMEMANAGER_RATING_MODE"

DEFAULT_DATA_DIR = Path("data")
DEFAULT_PLAYERS_FILE = "players.json"
DEFAULT_LOG_FILE = "log.txt"
DEFAULT_RATING_MODE = "stored"
RATING_MODES = ("stored", "derived")


@dataclass(frozen=True)
class RegistrySettings:
    data_dir: Path
    players_file: str = DEFAULT_PLAYERS_FILE
    log_file: str = DEFAULT_LOG_FILE
    rating_mode: str = DEFAULT_RATING_MODE

    @property
    def players_path(self) -> Path:
        return self.data_dir / self.players_file

    @property
    def log_path(self) -> Path:
        return self.data_dir / self.log_file


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_choice(env: Mapping[str, str], name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("Invalid value for %s: %s; using default %s", name, raw, default)
        return default
    return value


def load_settings(
    *,
    data_dir: Path | str | None = None,
    rating_mode: Optional[str] = None,
    env: Mapping[str, str] | None = None,
) -> RegistrySettings:
    """Build settings from the environment; keyword overrides take precedence."""

    env = os.environ if env is None else env
    resolved_dir = Path(data_dir) if data_dir is not None else Path(_env_str(env, DATA_DIR_ENV, str(DEFAULT_DATA_DIR)))
    if rating_mode is not None:
        if rating_mode not in RATING_MODES:
            raise ValueError(f"rating_mode must be one of {RATING_MODES}, got {rating_mode!r}")
        resolved_mode = rating_mode
    else:
        resolved_mode = _env_choice(env, RATING_MODE_ENV, DEFAULT_RATING_MODE, RATING_MODES)
    return RegistrySettings(
        data_dir=resolved_dir,
        players_file=_env_str(env, PLAYERS_FILE_ENV, DEFAULT_PLAYERS_FILE),
        log_file=_env_str(env, LOG_FILE_ENV, DEFAULT_LOG_FILE),
        rating_mode=resolved_mode,
    )
