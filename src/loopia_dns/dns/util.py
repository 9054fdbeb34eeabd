"""DNS utility functions."""

from __future__ import annotations

_CHALLENGE_LABEL = "_acme-challenge"

# Loopia's name for records at the zone apex
APEX_SUBDOMAIN = "@"


def challenge_record_name(domain: str) -> str:
    """Return the DNS-01 challenge FQDN for a domain, e.g. ``_acme-challenge.example.com``.

    Wildcard domains share the record of their base domain (RFC 8555 §8.4).
    """
    return f"{_CHALLENGE_LABEL}.{domain.removeprefix('*.')}"


def split_record_name(fqdn: str, domain: str) -> tuple[str, str]:
    """Split an FQDN into (zone, relative_record_name) based on the domain.

    The zone is derived from the domain (stripping any wildcard prefix).
    The relative record name is the FQDN with the zone suffix removed, or
    ``"@"`` when the FQDN is the zone itself.

    Note: Loopia addresses records by registered domain plus subdomain. If
    the certificate domain is itself a subdomain (e.g. ``sub.example.com``
    registered as ``example.com``), pass the registered domain instead.

    Args:
        fqdn: Fully qualified record name (e.g. "_acme-challenge.example.com").
            A trailing root dot is ignored.
        domain: Registered domain (e.g. "example.com" or "*.example.com").

    Returns:
        Tuple of (zone, relative_name).
    """
    zone = domain.removeprefix("*.").rstrip(".")
    fqdn = fqdn.rstrip(".")
    if fqdn == zone:
        return zone, APEX_SUBDOMAIN
    suffix = f".{zone}"
    if not fqdn.endswith(suffix):
        raise ValueError(f"Record '{fqdn}' is not under zone '{zone}'")
    relative = fqdn.removesuffix(suffix)
    return zone, relative
