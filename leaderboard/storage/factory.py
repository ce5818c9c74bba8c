import logging

from leaderboard.load_secrets import StorageSettings
from leaderboard.storage.memory_provider import MemoryStorageProvider
from leaderboard.storage.offline_provider import OfflineStorageProvider
from leaderboard.storage.provider import StorageProvider
from leaderboard.storage.redis_provider import RedisStorageProvider


def create_storage_provider(settings: StorageSettings) -> StorageProvider:
    """Pick the backend named in the settings

    Args:
        settings (StorageSettings): Settings read by load_settings()

    Returns:
        StorageProvider: A provider that still needs initialize()
    """
    if settings.backend == "memory":
        return MemoryStorageProvider()

    if settings.backend == "redis":
        if not settings.redis_host:
            logging.warning("REDIS_HOST is not set, leaderboard runs offline")
            return OfflineStorageProvider()
        return RedisStorageProvider(
            settings.redis_ssl,
            settings.redis_host,
            settings.redis_port,
            settings.redis_username,
            settings.redis_password.get_secret_value() if settings.redis_password else None,
            timeout=settings.redis_timeout,
        )

    return OfflineStorageProvider()
