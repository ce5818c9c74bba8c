import argparse
import logging
import sys
from datetime import timedelta
from typing import List, Optional

from pydantic import ValidationError

from leaderboard.load_secrets import load_settings
from leaderboard.models.dc_models import GameSessionResult
from leaderboard.profile_manager import PlayerProfileManager
from leaderboard.services.leaderboard_service import LeaderboardService
from leaderboard.storage.factory import create_storage_provider


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tetraj leaderboard")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("status", help="Show the backend and whether it is reachable")
    commands.add_parser("top", help="Print the top scores")

    submit = commands.add_parser("submit", help="Record a finished game for the local profile")
    submit.add_argument("--score", type=int, required=True, help="Final score")
    submit.add_argument("--level", type=int, default=0, help="Level reached")
    submit.add_argument("--lines", type=int, default=0, help="Lines cleared")
    submit.add_argument("--duration", type=float, default=0.0, help="Session length in seconds")
    return parser


def build_service() -> LeaderboardService:
    settings = load_settings()
    provider = create_storage_provider(settings)
    return LeaderboardService(provider, PlayerProfileManager(settings.profile_path))


def main(args: argparse.Namespace, service: LeaderboardService) -> int:
    available = service.start()

    if args.command == "status":
        print(f"{service.provider.describe()} available={available}")
        return 0

    if args.command == "submit":
        try:
            result = GameSessionResult(
                score=args.score,
                level=args.level,
                lines_cleared=args.lines,
                duration=timedelta(seconds=args.duration),
            )
        except ValidationError as e:
            logging.error(f"Invalid game result: {e}")
            return 2
        return 0 if service.record_game(result) else 1

    rows = service.rows()
    if not rows:
        print("No scores yet")
    for row in rows:
        marker = "*" if row.is_current_player else " "
        print(f"{marker}{row.rank:>2}. {row.entry.nickname:<20} {row.entry.score:>8}  L{row.entry.level}")
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    args = get_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    return main(args, build_service())


if __name__ == "__main__":
    sys.exit(run())
