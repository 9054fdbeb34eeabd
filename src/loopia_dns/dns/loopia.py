"""Loopia DNS provider — create/delete TXT records via the Loopia XML-RPC API."""

from __future__ import annotations

import logging

from loopia_dns.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, LoopiaClient
from loopia_dns.config import MIN_TTL
from loopia_dns.dns.base import DnsProvider
from loopia_dns.exceptions import ConfigError

logger = logging.getLogger(__name__)

_TXT = "TXT"


class LoopiaDnsProvider(DnsProvider):
    """DNS provider backed by Loopia zone records."""

    def __init__(
        self,
        api_user: str,
        api_password: str,
        base_url: str = DEFAULT_BASE_URL,
        ttl: int = MIN_TTL,
        http_timeout: float = DEFAULT_TIMEOUT,
        _client: LoopiaClient | None = None,
    ) -> None:
        if ttl < MIN_TTL:
            raise ConfigError(f"TTL must be at least {MIN_TTL} seconds, got: {ttl}")
        self._ttl = ttl
        self._client = _client or LoopiaClient(
            api_user,
            api_password,
            base_url=base_url,
            timeout=http_timeout,
        )

    def create_txt_record(self, zone: str, record_name: str, value: str) -> None:
        self._client.add_txt_record(zone, record_name, self._ttl, value)
        logger.info("Created TXT record %s.%s", record_name, zone)

    def delete_txt_record(self, zone: str, record_name: str, value: str | None = None) -> None:
        records = [
            r
            for r in self._client.get_txt_records(zone, record_name)
            if r.type == _TXT and (value is None or r.rdata == value)
        ]
        if not records:
            logger.warning("TXT record %s.%s not found in Loopia, skipping delete", record_name, zone)
            return

        for record in records:
            self._client.remove_txt_record(zone, record_name, record.record_id)
        logger.info("Deleted %d TXT record(s) %s.%s", len(records), record_name, zone)

        # Loopia keeps an empty subdomain around after its last record is removed
        if not self._client.get_txt_records(zone, record_name):
            self._client.remove_subdomain(zone, record_name)
            logger.info("Removed empty subdomain %s.%s", record_name, zone)

    def close(self) -> None:
        """Close the underlying Loopia client."""
        self._client.close()
