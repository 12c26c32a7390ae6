"""Command-line interface for managing the player registry."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

from gamemanager.config import load_settings
from gamemanager.config.settings import RATING_MODES
from gamemanager.errors import RegistryError
from gamemanager.logging_config import configure_logging
from gamemanager.models import Player
from gamemanager.registry import PlayerRepository


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gamemanager", description="Manage game player records")
    parser.add_argument("--data-dir", type=Path, default=None, help="Folder holding players.json and log.txt")
    parser.add_argument(
        "--rating-mode",
        choices=RATING_MODES,
        default=None,
        help="Use stored ratings or derive them from score and hours",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Register a new player")
    add.add_argument("username")
    add.add_argument("--hours", type=int, default=0, help="Initial hours played")
    add.add_argument("--score", type=int, default=0, help="Initial high score")
    add.add_argument("--team", default=None, help="Team label")
    add.add_argument("--rating", type=float, default=0.0, help="Stored rating")
    add.add_argument("--pro", action="store_true", help="Create a pro player")

    sub.add_parser("list", help="List every player in insertion order")

    show = sub.add_parser("show", help="Show one player by id")
    show.add_argument("player_id")

    search = sub.add_parser("search", help="Search usernames (case-insensitive substring)")
    search.add_argument("term")

    stats = sub.add_parser("update-stats", help="Add hours and submit a new high score")
    stats.add_argument("player_id")
    stats.add_argument("--hours", type=int, default=0, help="Hours to add")
    stats.add_argument("--score", type=int, default=None, help="New high score (kept only if higher)")

    update = sub.add_parser("update", help="Overwrite hours, score, team and rating")
    update.add_argument("player_id")
    update.add_argument("--hours", type=int, required=True)
    update.add_argument("--score", type=int, required=True)
    update.add_argument("--team", required=True)
    update.add_argument("--rating", type=float, required=True)

    top = sub.add_parser("top", help="Rank players")
    top.add_argument("by", choices=("score", "rating", "hours"))
    top.add_argument("--limit", type=int, default=None, help="Only show the first N players")

    report = sub.add_parser("report", help="Write the text ranking report")
    report.add_argument("--output", type=Path, default=None, help="Report path")

    export = sub.add_parser("export", help="Export players as CSV")
    export.add_argument("--output", type=Path, default=None, help="CSV path")

    return parser


def _print_players(
    repo: PlayerRepository,
    players: Iterable[Player],
    empty_message: str = "No players found.",
) -> None:
    printed = False
    for player in players:
        print(repo.describe(player))
        printed = True
    if not printed:
        print(empty_message)


def _run(args: argparse.Namespace, repo: PlayerRepository) -> int:
    if args.command == "add":
        player = repo.add_player(
            args.username,
            args.hours,
            args.score,
            args.team,
            args.rating,
            is_pro=args.pro,
        )
        print(f"Added {repo.describe(player)}")
    elif args.command == "list":
        _print_players(repo, repo.get_all())
    elif args.command == "show":
        found = repo.get_by_id(args.player_id)
        if found is None:
            print(f"Player {args.player_id} not found.", file=sys.stderr)
            return 1
        print(repo.describe(found))
    elif args.command == "search":
        _print_players(repo, repo.search_by_username(args.term))
    elif args.command == "update-stats":
        if not repo.update_stats(args.player_id, args.hours, args.score):
            print(f"Player {args.player_id} not found.", file=sys.stderr)
            return 1
        print("Stats updated.")
    elif args.command == "update":
        if not repo.update_player(args.player_id, args.hours, args.score, args.team, args.rating):
            print(f"Player {args.player_id} not found.", file=sys.stderr)
            return 1
        print("Player updated.")
    elif args.command == "top":
        ranking = {
            "score": repo.sort_by_high_score,
            "rating": repo.sort_by_rating,
            "hours": repo.sort_by_hours,
        }[args.by]
        _print_players(repo, ranking(args.limit))
    elif args.command == "report":
        print(f"Report written to {repo.generate_report(args.output)}")
    elif args.command == "export":
        print(f"CSV exported to {repo.export_csv(args.output)}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings(data_dir=args.data_dir, rating_mode=args.rating_mode)
    configure_logging(settings.log_path)

    repo = PlayerRepository(settings.players_path, rating_mode=settings.rating_mode)
    repo.load()
    try:
        return _run(args, repo)
    except RegistryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
