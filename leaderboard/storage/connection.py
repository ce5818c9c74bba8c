from typing import Optional

from pydantic import BaseModel, SecretStr
from redis.backoff import NoBackoff
from redis.retry import Retry

DEFAULT_USERNAME = "default"
DEFAULT_PORT = 6379
DEFAULT_TIMEOUT = 2.0
PASSWORD_MASK = "***"


class ConnectionDescriptor(BaseModel):
    """Where a Redis backend lives and how to log in.

    The password is kept as a SecretStr. `str()` is assembled from the other
    fields plus a fixed mask, so the raw secret never reaches diagnostics.
    """

    secure: bool = False
    host: str
    port: int = DEFAULT_PORT
    username: str = DEFAULT_USERNAME
    password: Optional[SecretStr] = None

    class Config:
        frozen = True

    @classmethod
    def build(
        cls,
        secure: bool,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> "ConnectionDescriptor":
        return cls(
            secure=secure,
            host=host,
            port=port,
            username=username or DEFAULT_USERNAME,
            password=SecretStr(password) if password else None,
        )

    @property
    def scheme(self) -> str:
        return "rediss" if self.secure else "redis"

    @property
    def has_password(self) -> bool:
        return self.password is not None

    def __str__(self) -> str:
        credentials = self.username
        if self.has_password:
            credentials += f":{PASSWORD_MASK}"
        return f"{self.scheme}://{credentials}@{self.host}:{self.port}"

    def redis_kwargs(self, timeout: float = DEFAULT_TIMEOUT) -> dict:
        """Keyword arguments for redis.Redis. The only place the secret is unwrapped."""
        kwargs = {
            "host": self.host,
            "port": self.port,
            "ssl": self.secure,
            "socket_connect_timeout": timeout,
            "socket_timeout": timeout,
            # one attempt per command, so a probe costs at most one timeout
            "retry": Retry(NoBackoff(), 0),
        }
        # AUTH is only sent when a password exists, servers without ACLs reject it otherwise
        if self.has_password:
            kwargs["username"] = self.username
            kwargs["password"] = self.password.get_secret_value()
        return kwargs
