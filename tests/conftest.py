from datetime import datetime, timedelta, timezone

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import WatchError

from leaderboard.models.dc_models import LeaderboardEntry
from leaderboard.profile_manager import PlayerProfileManager
from leaderboard.storage.redis_provider import RedisStorageProvider

REDIS_DEFAULT_HOSTNAME = "localhost"
REDIS_DEFAULT_PORT = 6379


class FakePipeline:
    """Just enough of redis-py's Pipeline for WATCH / MULTI / EXEC."""

    def __init__(self, server: "FakeRedis"):
        self.server = server
        self.watched = {}
        self.queued = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.reset()

    def watch(self, *keys):
        self.watched = {key: self.server.versions.get(key, 0) for key in keys}

    def get(self, key):
        return self.server.get(key)

    def multi(self):
        self.queued = []

    def set(self, key, value):
        self.queued.append((key, value))

    def execute(self):
        if self.server.fail_writes:
            raise RedisConnectionError("Connection reset by peer")
        if self.server.conflicts > 0:
            self.server.conflicts -= 1
            raise WatchError("Watched variable changed.")
        for key, version in self.watched.items():
            if self.server.versions.get(key, 0) != version:
                raise WatchError("Watched variable changed.")
        for key, value in self.queued:
            self.server.set(key, value)
        return [True] * len(self.queued)

    def reset(self):
        self.watched = {}
        self.queued = []


class FakeRedis:
    def __init__(self):
        self.data = {}
        self.versions = {}
        self.reachable = True
        self.fail_writes = False
        self.conflicts = 0

    def ping(self):
        if not self.reachable:
            raise RedisConnectionError("Error connecting to localhost:6379.")
        return True

    def get(self, key):
        if not self.reachable:
            raise RedisConnectionError("Error connecting to localhost:6379.")
        return self.data.get(key)

    def set(self, key, value):
        if isinstance(value, str):
            value = value.encode()
        self.data[key] = value
        self.versions[key] = self.versions.get(key, 0) + 1
        return True

    def pipeline(self):
        return FakePipeline(self)


@pytest.fixture()
def fake_redis():
    return FakeRedis()


@pytest.fixture()
def redis_provider(fake_redis):
    return RedisStorageProvider(
        False, REDIS_DEFAULT_HOSTNAME, REDIS_DEFAULT_PORT, client=fake_redis
    )


@pytest.fixture()
def make_entry():
    def _make_entry(score=1000, player_id="player1", nickname="Alice", level=5, lines=20, minutes=10):
        return LeaderboardEntry(
            player_id=player_id,
            nickname=nickname,
            score=score,
            recorded_at=datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc),
            level=level,
            lines_cleared=lines,
            session_duration=timedelta(minutes=minutes),
        )

    return _make_entry


@pytest.fixture()
def profile_manager(tmp_path):
    return PlayerProfileManager(tmp_path / "profile.json")
