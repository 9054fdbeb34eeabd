"""Abstract base class for DNS-01 challenge record providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self


class DnsProvider(ABC):
    """Interface for providers that publish and withdraw ``_acme-challenge`` TXT records.

    Records are addressed the way registrars address them: a registered
    domain plus a subdomain relative to it. A provider is a context manager
    so the HTTP session behind it is released after each challenge.
    """

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def create_txt_record(self, zone: str, record_name: str, value: str) -> None:
        """Publish a challenge TXT record.

        Args:
            zone: Registered domain the record lives in (e.g. "example.com").
            record_name: Subdomain within the zone (e.g. "_acme-challenge").
            value: TXT record data (the key authorization digest).
        """

    @abstractmethod
    def delete_txt_record(self, zone: str, record_name: str, value: str | None = None) -> None:
        """Withdraw challenge TXT records once validation has finished.

        A base domain and its wildcard share one record name, so pass
        ``value`` to remove only the record of a single challenge.

        Args:
            zone: Registered domain the record lives in (e.g. "example.com").
            record_name: Subdomain within the zone (e.g. "_acme-challenge").
            value: Only delete records whose data equals this value. ``None``
                deletes every TXT record under ``record_name``.
        """
