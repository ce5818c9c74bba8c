"""Service layer between the game screens and the leaderboard backend.

- The game-over screen calls record_game(); the leaderboard screen calls rows().
- This layer combines the player identity with session stats.
- It never raises for backend problems, that is left to the provider contract.
"""

import logging
from datetime import datetime, timezone
from typing import List

from leaderboard.models.dc_models import GameSessionResult, LeaderboardEntry, LeaderboardRow
from leaderboard.profile_manager import PlayerProfileManager
from leaderboard.storage.provider import StorageProvider


class LeaderboardService:
    def __init__(self, provider: StorageProvider, profile_manager: PlayerProfileManager):
        self.provider = provider
        self.profile_manager = profile_manager

    def start(self) -> bool:
        """Initialize the backend and load the local profile

        Returns:
            bool: Whether the backend is available
        """
        self.profile_manager.load_or_create()
        self.provider.initialize()
        available = self.provider.is_available()
        logging.info(f"Leaderboard backend {self.provider.describe()} available: {available}")
        return available

    def build_entry(self, result: GameSessionResult) -> LeaderboardEntry:
        profile = self.profile_manager.profile
        return LeaderboardEntry(
            player_id=profile.id,
            nickname=profile.nickname,
            score=result.score,
            recorded_at=datetime.now(timezone.utc),
            level=result.level,
            lines_cleared=result.lines_cleared,
            session_duration=result.duration,
        )

    def record_game(self, result: GameSessionResult) -> bool:
        entry = self.build_entry(result)
        saved = self.provider.submit(entry)
        if not saved:
            logging.warning(f"Score {entry.score} not saved to {self.provider.describe()}")
        return saved

    def top(self) -> List[LeaderboardEntry]:
        return self.provider.fetch_top()

    def rows(self) -> List[LeaderboardRow]:
        """Ranked rows for display, with the local player's rows flagged."""
        player_id = self.profile_manager.profile.id
        return [
            LeaderboardRow(rank=rank, entry=entry, is_current_player=entry.player_id == player_id)
            for rank, entry in enumerate(self.top(), start=1)
        ]
