import math
import os
from dataclasses import dataclass
from typing import Optional

from movie_proxy.errors import ConfigurationError

DEFAULT_API_BASE = "https://api.themoviedb.org/3/"


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_base: str = DEFAULT_API_BASE
    frontend_origin: str = "*"
    # None means no timeout on upstream calls
    upstream_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment.

        Fails fast so the API key is known before any request is served.
        """
        api_key = os.getenv("TMDB_API_KEY")
        if not api_key:
            raise ConfigurationError("TMDB_API_KEY is not configured")

        raw_timeout = os.getenv("UPSTREAM_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError:
            raise ConfigurationError(
                f"UPSTREAM_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            )
        if timeout is not None and not (math.isfinite(timeout) and timeout > 0):
            raise ConfigurationError(
                f"UPSTREAM_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}"
            )

        return cls(
            api_key=api_key,
            api_base=os.getenv("TMDB_API_BASE", DEFAULT_API_BASE),
            frontend_origin=os.getenv("FRONTEND_ORIGIN", "*"),
            upstream_timeout=timeout,
        )
