"""Contract shared by every leaderboard backend.

The application runs with exactly one provider at a time. No method here
raises for backend problems: failures show up as `False`, as an empty list
or through `is_available()`.
"""

from abc import ABC, abstractmethod
from typing import List

from leaderboard.domain.ranking import MAX_ENTRIES
from leaderboard.models.dc_models import LeaderboardEntry


class StorageProvider(ABC):
    MAX_ENTRIES = MAX_ENTRIES

    @abstractmethod
    def initialize(self) -> None:
        """Probe the backend and record whether it can be used. Safe to call again."""

    @abstractmethod
    def is_available(self) -> bool:
        """Availability as of the last `initialize()` call."""

    @abstractmethod
    def fetch_top(self) -> List[LeaderboardEntry]:
        """Up to MAX_ENTRIES entries, highest score first."""

    @abstractmethod
    def submit(self, entry: LeaderboardEntry) -> bool:
        """Merge one entry into the ranked collection. True when it was written."""

    @abstractmethod
    def describe(self) -> str:
        """Backend kind and connection target, safe to log."""
