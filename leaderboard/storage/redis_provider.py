import logging
from typing import List, Optional

from pydantic import ValidationError
from redis import Redis
from redis.exceptions import RedisError, WatchError

from leaderboard.domain.ranking import MAX_ENTRIES, merge_entry
from leaderboard.models.dc_models import LeaderboardAdapter, LeaderboardEntry
from leaderboard.storage.connection import DEFAULT_TIMEOUT, ConnectionDescriptor
from leaderboard.storage.provider import StorageProvider

LEADERBOARD_KEY = "tetraj:leaderboard"
MAX_SUBMIT_ATTEMPTS = 5


class RedisStorageProvider(StorageProvider):
    """Leaderboard kept as one JSON array under a single Redis key.

    Every call blocks the calling thread for at most the client timeout.
    One instance is not meant to be shared between threads without a lock.
    """

    def __init__(
        self,
        use_ssl: bool,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        client: Optional[Redis] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.descriptor = ConnectionDescriptor.build(use_ssl, host, port, username, password)
        self.timeout = timeout
        self._client: Redis = client if client is not None else Redis(**self.descriptor.redis_kwargs(timeout))
        self._available = False

    def initialize(self) -> None:
        """Ping the server. DNS failures, refusals and timeouts all end up as unavailable."""
        try:
            self._available = bool(self._client.ping())
        except (RedisError, OSError) as e:
            logging.warning(f"Redis unreachable at {self.descriptor}: {e}")
            self._available = False

        if self._available:
            logging.info(f"Connected to leaderboard backend {self.describe()}")

    def is_available(self) -> bool:
        return self._available

    def fetch_top(self) -> List[LeaderboardEntry]:
        if not self._available:
            return []
        try:
            raw = self._client.get(LEADERBOARD_KEY)
        except (RedisError, OSError) as e:
            logging.error(f"Error reading leaderboard from {self.descriptor}: {e}")
            return []
        return self._load_entries(raw)[:MAX_ENTRIES]

    def submit(self, entry: LeaderboardEntry) -> bool:
        """Read-modify-write of the collection key, guarded by WATCH

        Args:
            entry (LeaderboardEntry): The finished game to rank

        Returns:
            bool: True if the new collection was written, False when the backend is
            unavailable, a command failed or other writers kept winning the race
        """
        if not self._available:
            return False

        for attempt in range(1, MAX_SUBMIT_ATTEMPTS + 1):
            try:
                with self._client.pipeline() as pipe:
                    pipe.watch(LEADERBOARD_KEY)
                    current = self._load_entries(pipe.get(LEADERBOARD_KEY))
                    updated = merge_entry(current, entry, MAX_ENTRIES)
                    pipe.multi()
                    pipe.set(LEADERBOARD_KEY, LeaderboardAdapter.dump_json(updated, by_alias=True))
                    pipe.execute()
                logging.debug(f"Saved score {entry.score} for {entry.nickname}")
                return True
            except WatchError:
                logging.info(f"Leaderboard changed during submit, retrying ({attempt}/{MAX_SUBMIT_ATTEMPTS})")
            except (RedisError, OSError) as e:
                logging.error(f"Error saving leaderboard entry to {self.descriptor}: {e}")
                return False

        logging.warning(f"Gave up saving score {entry.score} after {MAX_SUBMIT_ATTEMPTS} attempts")
        return False

    def describe(self) -> str:
        return f"Redis ({self.descriptor})"

    def _load_entries(self, raw: Optional[bytes]) -> List[LeaderboardEntry]:
        """Absent or unreadable payloads count as an empty collection."""
        if raw is None:
            return []
        try:
            return LeaderboardAdapter.validate_json(raw)
        except ValidationError as e:
            logging.warning(f"Discarding unreadable leaderboard payload: {e.error_count()} errors")
            return []
