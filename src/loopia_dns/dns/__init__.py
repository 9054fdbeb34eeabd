"""DNS provider factory — build a Loopia-backed DNS provider from configuration."""

from __future__ import annotations

from loopia_dns.config import LoopiaConfig
from loopia_dns.dns.base import DnsProvider
from loopia_dns.dns.loopia import LoopiaDnsProvider


def get_dns_provider(config: LoopiaConfig) -> DnsProvider:
    """Instantiate the DNS provider described by ``config``.

    Args:
        config: Loopia configuration.

    Returns:
        A configured DnsProvider instance.
    """
    return LoopiaDnsProvider(
        api_user=config.api_user,
        api_password=config.api_password,
        base_url=config.api_url,
        ttl=config.ttl,
        http_timeout=config.http_timeout,
    )
