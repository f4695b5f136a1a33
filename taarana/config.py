"""
Runtime configuration, read from the environment (and a local .env file).
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigError

BACKENDS = ("memory", "supabase")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _as_bool(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _as_int(name, value):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


@dataclass
class Config:
    host: str = "0.0.0.0"
    port: int = 10000
    debug: bool = False
    testing: bool = False
    backend: str = "memory"
    supabase_url: str = ""
    supabase_key: str = ""
    session_ttl: int = 3600
    cors_origins: str = "*"
    oauth_redirect: str = "http://localhost:10000"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env=None):
        if env is None:
            load_dotenv()
            env = os.environ

        config = cls(
            host=env.get("TAARANA_HOST", cls.host),
            port=_as_int("TAARANA_PORT", env.get("TAARANA_PORT", cls.port)),
            debug=_as_bool(env.get("TAARANA_DEBUG", "false")),
            backend=env.get("TAARANA_BACKEND", cls.backend).strip().lower(),
            supabase_url=env.get("SUPABASE_URL", ""),
            supabase_key=env.get("SUPABASE_KEY", ""),
            session_ttl=_as_int("TAARANA_SESSION_TTL", env.get("TAARANA_SESSION_TTL", cls.session_ttl)),
            cors_origins=env.get("TAARANA_CORS_ORIGINS", cls.cors_origins),
            oauth_redirect=env.get("TAARANA_OAUTH_REDIRECT", cls.oauth_redirect),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
        )
        config.validate()
        return config

    def validate(self):
        if self.backend not in BACKENDS:
            raise ConfigError(f"Unknown backend {self.backend!r}, expected one of {', '.join(BACKENDS)}")
        if self.backend == "supabase" and not (self.supabase_url and self.supabase_key):
            raise ConfigError("SUPABASE_URL and SUPABASE_KEY are required for the supabase backend")
        if self.session_ttl <= 0:
            raise ConfigError("TAARANA_SESSION_TTL must be positive")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown LOG_LEVEL {self.log_level!r}")


def configure_logging(level="INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT)
