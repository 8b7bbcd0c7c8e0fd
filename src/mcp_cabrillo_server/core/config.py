"""Service configuration resolved from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

BASE_DIR_ENV = "CABRILLO_BASE_DIR"
DEFAULT_LIMIT_ENV = "CABRILLO_DEFAULT_LIMIT"
HARD_LIMIT_ENV = "CABRILLO_HARD_LIMIT"
ENCODING_ENV = "CABRILLO_ENCODING"
LOG_LEVEL_ENV = "CABRILLO_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    base_dir: Path = field(default_factory=Path.cwd)
    default_limit: int = 200
    hard_limit: int = 5000
    encoding: str = "utf-8"

    def clamp_limit(self, limit: int | None) -> int:
        """Apply the default and the hard cap to a requested limit."""
        if limit is None:
            limit = self.default_limit
        if limit <= 0:
            raise ValueError("limit must be > 0")
        return min(limit, self.hard_limit)


def _positive_int_env(name: str, default: int) -> int:
    env = os.getenv(name)
    if env is None or env == "":
        return default
    try:
        value = int(env)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


def resolve_server_config() -> ServerConfig:
    """Return config with environment overrides applied."""
    base_dir = Path(os.getenv(BASE_DIR_ENV, os.getcwd())).resolve()
    default_limit = _positive_int_env(DEFAULT_LIMIT_ENV, 200)
    hard_limit = _positive_int_env(HARD_LIMIT_ENV, 5000)
    encoding = os.getenv(ENCODING_ENV) or "utf-8"
    return ServerConfig(
        base_dir=base_dir,
        default_limit=min(default_limit, hard_limit),
        hard_limit=hard_limit,
        encoding=encoding,
    )
