"""Client library for managing Loopia DNS TXT records over XML-RPC."""

from loopia_dns.client import DEFAULT_BASE_URL, LoopiaClient
from loopia_dns.exceptions import (
    AuthenticationError,
    ConfigError,
    HttpError,
    HttpRequestError,
    HttpStatusError,
    LoopiaError,
    MarshalError,
    RpcError,
    StatusError,
    UnknownStatusError,
    UnmarshalError,
)
from loopia_dns.models import ZoneRecord

__all__ = [
    "DEFAULT_BASE_URL",
    "AuthenticationError",
    "ConfigError",
    "HttpError",
    "HttpRequestError",
    "HttpStatusError",
    "LoopiaClient",
    "LoopiaError",
    "MarshalError",
    "RpcError",
    "StatusError",
    "UnknownStatusError",
    "UnmarshalError",
    "ZoneRecord",
]
