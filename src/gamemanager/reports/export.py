"""Text report and CSV export helpers for player rankings."""

from __future__ import annotations

import csv
from datetime import datetime
from io import StringIO
from pathlib import Path
from typing import Callable, Sequence, Tuple

from gamemanager.errors import ReportError
from gamemanager.models import Player


CSV_HEADERS: tuple[str, ...] = ("Id", "Username", "HoursPlayed", "HighScore", "Rating")

RatingFn = Callable[[Player], float]
ReportSection = Tuple[str, Sequence[Player]]


def _format_line(rank: int, player: Player, rating_of: RatingFn) -> str:
    team = player.team or "-"
    tag = " [PRO]" if player.is_pro else ""
    return (
        f"{rank}. {player.username}{tag} | Hours: {player.hours_played} | "
        f"Score: {player.high_score} | Rating: {rating_of(player):.2f} | Team: {team}"
    )


def render_report(
    sections: Sequence[ReportSection],
    *,
    rating_of: RatingFn,
    generated_at: datetime | None = None,
) -> str:
    """Render ranked sections as a plain-text document."""

    generated_at = generated_at or datetime.now()
    lines = [f"Player Report - generated {generated_at:%Y-%m-%d %H:%M:%S}", ""]
    for title, players in sections:
        lines.append(f"=== {title} ===")
        if not players:
            lines.append("(no players)")
        for rank, player in enumerate(players, start=1):
            lines.append(_format_line(rank, player, rating_of))
        lines.append("")
    return "\n".join(lines)


def render_players_csv(players: Sequence[Player], *, rating_of: RatingFn) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for player in players:
        writer.writerow([
            player.player_id,
            player.username,
            player.hours_played,
            player.high_score,
            f"{rating_of(player):.2f}",
        ])
    return buffer.getvalue()


def write_text_file(path: Path | str, content: str) -> Path:
    """Write ``content`` to ``path``, raising ReportError on I/O failure."""

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Unable to write {path}: {exc}") from exc
    return path


__all__ = [
    "CSV_HEADERS",
    "render_players_csv",
    "render_report",
    "write_text_file",
]
