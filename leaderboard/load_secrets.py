import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, SecretStr

from leaderboard.storage.connection import DEFAULT_PORT, DEFAULT_TIMEOUT

load_dotenv()

PROFILE_FILENAME = "tetrajPlayerProfile.json"
TRUE_VALUES = ("1", "true", "yes", "on")


class StorageSettings(BaseModel):
    backend: Literal["redis", "memory", "offline"] = "redis"
    redis_ssl: bool = False
    redis_host: Optional[str] = None
    redis_port: int = DEFAULT_PORT
    redis_username: Optional[str] = None
    redis_password: Optional[SecretStr] = None
    redis_timeout: float = DEFAULT_TIMEOUT
    profile_path: Path = Path.home() / PROFILE_FILENAME


def load_settings() -> StorageSettings:
    """Collect the leaderboard settings from the environment (and .env)

    Raises:
        ValidationError: A variable is set to something that cannot be parsed

    Returns:
        StorageSettings: Settings with defaults filled in
    """
    values = {
        "backend": os.getenv("LEADERBOARD_BACKEND", "redis").lower(),
        "redis_ssl": os.getenv("REDIS_SSL", "false").lower() in TRUE_VALUES,
        "redis_host": os.getenv("REDIS_HOST") or None,
        "redis_username": os.getenv("REDIS_USERNAME") or None,
        "redis_password": os.getenv("REDIS_PASSWORD") or None,
    }
    if os.getenv("REDIS_PORT"):
        values["redis_port"] = os.getenv("REDIS_PORT")
    if os.getenv("REDIS_TIMEOUT"):
        values["redis_timeout"] = os.getenv("REDIS_TIMEOUT")
    if os.getenv("PLAYER_PROFILE_PATH"):
        values["profile_path"] = os.getenv("PLAYER_PROFILE_PATH")
    return StorageSettings(**values)


if __name__ == "__main__":
    print(load_settings())
