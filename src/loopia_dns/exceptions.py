"""Exception hierarchy for Loopia API failures."""

from __future__ import annotations


class LoopiaError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(LoopiaError, ValueError):
    """Invalid or missing configuration."""


class HttpError(LoopiaError):
    """The HTTP round trip to the RPC endpoint failed."""


class HttpStatusError(HttpError):
    """The RPC endpoint answered with a non-200 status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP Post Error: {status_code}")
        self.status_code = status_code


class HttpRequestError(HttpError):
    """Connection or body read failure before a usable response arrived."""


class MarshalError(LoopiaError):
    """A method call could not be serialized to XML."""


class UnmarshalError(LoopiaError):
    """A response body is not well-formed XML or has an unexpected shape."""


class RpcError(LoopiaError):
    """The endpoint reported an XML-RPC fault."""

    def __init__(self, fault_code: int, fault_string: str) -> None:
        super().__init__(f"RPC Error: ({fault_code}) {fault_string}")
        self.fault_code = fault_code
        self.fault_string = fault_string


class StatusError(LoopiaError):
    """The endpoint returned a status string other than ``OK``."""


class AuthenticationError(StatusError):
    """The endpoint rejected the API credentials (``AUTH_ERROR``)."""

    def __init__(self) -> None:
        super().__init__("authentication error")


class UnknownStatusError(StatusError):
    """The endpoint returned an unrecognised status string."""

    def __init__(self, status: str) -> None:
        super().__init__(f"unknown error: {status!r}")
        self.status = status
