from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from default_selectors import DOMAIN


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    session_id: str
    domain: str = DOMAIN
    timeout: Optional[float] = None
    csv_path: Optional[str] = None
    log_level: str = "INFO"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"GIFTOFF_TIMEOUT must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"GIFTOFF_TIMEOUT must be positive, got {raw!r}")
    return value


def load_settings(
    session_id: Optional[str] = None,
    csv_path: Optional[str] = None,
    verbose: bool = False,
    dotenv_path: Optional[str] = None,
) -> Settings:
    """CLI values win over environment variables (optionally loaded from a .env file)."""
    load_dotenv(dotenv_path=dotenv_path, override=False)

    session_id = session_id or os.getenv("GIFTOFF_SESSION_ID")
    if not session_id:
        raise ConfigError("A session id is required (--sessionId or GIFTOFF_SESSION_ID)")

    log_level = "DEBUG" if verbose else os.getenv("GIFTOFF_LOG_LEVEL", "INFO").upper()
    return Settings(
        session_id=session_id,
        domain=os.getenv("GIFTOFF_DOMAIN") or DOMAIN,
        timeout=_parse_timeout(os.getenv("GIFTOFF_TIMEOUT")),
        csv_path=csv_path,
        log_level=log_level,
    )
