"""Configuration loading and validation from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from loopia_dns.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from loopia_dns.exceptions import ConfigError

# Loopia rejects zone records with a TTL below five minutes
MIN_TTL = 300


@dataclass(frozen=True)
class LoopiaConfig:
    """Loopia API credentials and provider settings."""

    api_user: str
    api_password: str
    api_url: str = DEFAULT_BASE_URL
    ttl: int = MIN_TTL
    http_timeout: float = DEFAULT_TIMEOUT


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ConfigError(f"Required environment variable {name} is not set")
    return value


def load_config() -> LoopiaConfig:
    """Load and validate Loopia configuration from environment variables."""
    api_user = _require_env("LOOPIA_API_USER")
    api_password = _require_env("LOOPIA_API_PASSWORD")
    api_url = os.environ.get("LOOPIA_API_URL") or DEFAULT_BASE_URL

    raw_ttl = os.environ.get("LOOPIA_TTL", str(MIN_TTL))
    try:
        ttl = int(raw_ttl)
    except ValueError:
        raise ConfigError(f"LOOPIA_TTL must be an integer, got: {raw_ttl!r}")
    if ttl < MIN_TTL:
        raise ConfigError(f"LOOPIA_TTL must be at least {MIN_TTL}, got: {ttl}")

    raw_timeout = os.environ.get("LOOPIA_HTTP_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        http_timeout = float(raw_timeout)
    except ValueError:
        raise ConfigError(f"LOOPIA_HTTP_TIMEOUT must be a number, got: {raw_timeout!r}")
    if http_timeout <= 0:
        raise ConfigError(f"LOOPIA_HTTP_TIMEOUT must be positive, got: {http_timeout}")

    return LoopiaConfig(
        api_user=api_user,
        api_password=api_password,
        api_url=api_url,
        ttl=ttl,
        http_timeout=http_timeout,
    )
