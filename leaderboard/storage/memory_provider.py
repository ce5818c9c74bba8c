"""In-process leaderboard, lost when the game exits."""

from typing import List

from leaderboard.domain.ranking import MAX_ENTRIES, merge_entry
from leaderboard.models.dc_models import LeaderboardEntry
from leaderboard.storage.provider import StorageProvider


class MemoryStorageProvider(StorageProvider):
    def __init__(self):
        self._entries: List[LeaderboardEntry] = []
        self._available = False

    def initialize(self) -> None:
        self._available = True

    def is_available(self) -> bool:
        return self._available

    def fetch_top(self) -> List[LeaderboardEntry]:
        if not self._available:
            return []
        return list(self._entries)

    def submit(self, entry: LeaderboardEntry) -> bool:
        if not self._available:
            return False
        self._entries = merge_entry(self._entries, entry, MAX_ENTRIES)
        return True

    def describe(self) -> str:
        return "Memory (local session)"
