from typing import List

from leaderboard.models.dc_models import LeaderboardEntry
from leaderboard.storage.provider import StorageProvider


class OfflineStorageProvider(StorageProvider):
    """Used when no backend is configured. Never available, stores nothing."""

    def initialize(self) -> None:
        pass

    def is_available(self) -> bool:
        return False

    def fetch_top(self) -> List[LeaderboardEntry]:
        return []

    def submit(self, entry: LeaderboardEntry) -> bool:
        return False

    def describe(self) -> str:
        return "Offline (no leaderboard backend)"
