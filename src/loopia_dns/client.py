"""Loopia XML-RPC client — add, list and remove TXT records over httpx."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Self, TypeVar

import httpx

from loopia_dns import xmlrpc
from loopia_dns.exceptions import (
    AuthenticationError,
    HttpRequestError,
    HttpStatusError,
    RpcError,
    UnknownStatusError,
)
from loopia_dns.models import (
    IntParam,
    MethodCall,
    Param,
    RecordsResponse,
    StringParam,
    StringResponse,
    StructMember,
    StructParam,
    ZoneRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.loopia.se/RPCSERV"
DEFAULT_TIMEOUT = 10

_RETURN_OK = "OK"
_RETURN_AUTH_ERROR = "AUTH_ERROR"

_ResponseT = TypeVar("_ResponseT", StringResponse, RecordsResponse)


class LoopiaClient:
    """Client for the zone record methods of the Loopia API.

    The client holds no per-call state, so one instance can serve concurrent
    callers. Closing it closes the underlying HTTP client, including one
    passed in through ``http_client``.
    """

    def __init__(
        self,
        api_user: str,
        api_password: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_user = api_user
        self._api_password = api_password
        self._base_url = base_url
        self._client = http_client or httpx.Client(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def add_txt_record(self, domain: str, subdomain: str, ttl: int, value: str) -> None:
        """Add a TXT record with the given TTL and data to ``subdomain`` of ``domain``."""
        record = StructParam(
            members=(
                StructMember("type", StringParam("TXT")),
                StructMember("ttl", IntParam(ttl)),
                StructMember("priority", IntParam(0)),
                StructMember("rdata", StringParam(value)),
                StructMember("record_id", IntParam(0)),
            )
        )
        call = self._method_call("addZoneRecord", StringParam(domain), StringParam(subdomain), record)
        resp = self._rpc_call(call, xmlrpc.unmarshal_string)
        _check_status(resp.value)

    def remove_txt_record(self, domain: str, subdomain: str, record_id: int) -> None:
        """Remove the zone record identified by ``record_id``."""
        call = self._method_call(
            "removeZoneRecord",
            StringParam(domain),
            StringParam(subdomain),
            IntParam(record_id),
        )
        resp = self._rpc_call(call, xmlrpc.unmarshal_string)
        _check_status(resp.value)

    def get_txt_records(self, domain: str, subdomain: str) -> list[ZoneRecord]:
        """Return the zone records of ``subdomain`` in the order the API lists them."""
        call = self._method_call("getZoneRecords", StringParam(domain), StringParam(subdomain))
        resp = self._rpc_call(call, xmlrpc.unmarshal_records)
        return list(resp.records)

    def remove_subdomain(self, domain: str, subdomain: str) -> None:
        """Remove ``subdomain`` and every record it holds."""
        call = self._method_call("removeSubdomain", StringParam(domain), StringParam(subdomain))
        resp = self._rpc_call(call, xmlrpc.unmarshal_string)
        _check_status(resp.value)

    def _method_call(self, method_name: str, *params: Param) -> MethodCall:
        """Build a method call whose parameters start with the API credentials."""
        return MethodCall(
            method_name=method_name,
            params=(StringParam(self._api_user), StringParam(self._api_password), *params),
        )

    def _rpc_call(self, call: MethodCall, decode: Callable[[bytes], _ResponseT]) -> _ResponseT:
        """Send ``call`` to the RPC endpoint and decode the reply with ``decode``.

        A fault reported by the endpoint is raised as RpcError and no partial
        result is returned.
        """
        body = xmlrpc.marshal(call)
        logger.debug("Calling %s on %s", call.method_name, self._base_url)

        resp = decode(self._http_post(self._base_url, "text/xml", body))

        if resp.fault.code != 0:
            raise RpcError(resp.fault.code, resp.fault.message.strip())
        return resp

    def _http_post(self, url: str, content_type: str, body: bytes) -> bytes:
        try:
            resp = self._client.post(url, content=body, headers={"Content-Type": content_type})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise HttpRequestError(f"HTTP Post Error: {exc}") from exc

        if resp.status_code != httpx.codes.OK:
            raise HttpStatusError(resp.status_code)
        return resp.content


def _check_status(value: str) -> None:
    """Translate a status string returned by a mutating call into an exception."""
    status = value.strip()
    if status == _RETURN_OK:
        return
    if status == _RETURN_AUTH_ERROR:
        raise AuthenticationError()
    raise UnknownStatusError(status)
