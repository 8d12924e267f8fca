"""Application settings loaded from the environment"""
import os
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


def _split_csv(raw: Optional[str]) -> List[str]:
    """Split a comma separated env value, dropping blanks and trailing slashes"""
    if not raw:
        return []
    return [item.strip().rstrip("/") for item in raw.split(",") if item.strip()]


def _as_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the EdTech Platform API"""

    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "production"
    log_level: str = "INFO"

    # CORS policy
    cors_exact_origins: FrozenSet[str] = field(
        default_factory=lambda: frozenset(_split_csv(DEFAULT_CORS_ORIGINS))
    )
    cors_wildcard_suffixes: FrozenSet[str] = frozenset({".netlify.app"})
    cors_allow_no_origin: bool = True

    # Rate limiting (fixed window, per client address, /api/* only)
    rate_limit_window_seconds: int = 15 * 60
    rate_limit_max_requests: int = 100
    rate_limit_sweep_seconds: int = 15 * 60

    @property
    def debug(self) -> bool:
        return self.environment == "development"


def load_settings() -> Settings:
    """
    Build Settings from environment variables (and a .env file, if present).

    FRONTEND_URL and NETLIFY_URL are appended to the CORS_ORIGINS allow-list.
    An empty CORS_WILDCARD_SUFFIXES selects the allow-list-only CORS variant.
    """
    load_dotenv()

    origins = _split_csv(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))
    origins += _split_csv(os.getenv("FRONTEND_URL"))
    origins += _split_csv(os.getenv("NETLIFY_URL"))

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        environment=os.getenv("ENVIRONMENT", "production"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_exact_origins=frozenset(origins),
        cors_wildcard_suffixes=frozenset(
            s.lower() for s in _split_csv(os.getenv("CORS_WILDCARD_SUFFIXES", ".netlify.app"))
        ),
        cors_allow_no_origin=_as_bool(os.getenv("CORS_ALLOW_NO_ORIGIN"), True),
        rate_limit_window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900")),
        rate_limit_max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "100")),
        rate_limit_sweep_seconds=int(os.getenv("RATE_LIMIT_SWEEP_SECONDS", "900")),
    )
