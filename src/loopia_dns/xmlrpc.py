"""XML-RPC codec — marshal method calls and unmarshal Loopia responses with lxml."""

from __future__ import annotations

from lxml import etree

from loopia_dns.exceptions import MarshalError, UnmarshalError
from loopia_dns.models import Fault, MethodCall, RecordsResponse, StringResponse, ZoneRecord

XML_DECLARATION = b'<?xml version="1.0"?>\n'


def marshal(call: MethodCall) -> bytes:
    """Serialize a method call to an XML-RPC request document."""
    try:
        body = etree.tostring(call.to_element(), pretty_print=True)
    except (TypeError, ValueError) as exc:
        raise MarshalError(f"marshal error: {exc}") from exc
    return XML_DECLARATION + body


def _parse(body: bytes) -> etree._Element:
    # One parser per call: lxml parsers must not be shared between threads.
    # Response bodies come from the network, so never resolve entities or fetch DTDs.
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    try:
        root = etree.fromstring(body, parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise UnmarshalError(f"unmarshal error: {exc}") from exc
    if root.tag != "methodResponse":
        raise UnmarshalError(f"unmarshal error: unexpected root element <{root.tag}>")
    return root


def _decode_int(text: str | None) -> int:
    try:
        return int((text or "").strip())
    except ValueError:
        raise UnmarshalError(f"unmarshal error: invalid integer {text!r}")


def _decode_value(value: etree._Element) -> object:
    """Decode an XML-RPC ``<value>`` element into a Python value.

    A ``<value>`` without a type element is a string, as XML-RPC specifies.
    """
    typed = next(iter(value), None)
    if typed is None:
        return value.text or ""

    tag = typed.tag
    if tag == "string":
        return typed.text or ""
    if tag in ("int", "i4"):
        return _decode_int(typed.text)
    if tag == "boolean":
        return _decode_int(typed.text) == 1
    if tag == "double":
        try:
            return float((typed.text or "").strip())
        except ValueError:
            raise UnmarshalError(f"unmarshal error: invalid double {typed.text!r}")
    if tag == "struct":
        return _decode_struct(typed)
    if tag == "array":
        return [_decode_value(v) for v in typed.iterfind("data/value")]
    raise UnmarshalError(f"unmarshal error: unsupported value type <{tag}>")


def _decode_struct(struct: etree._Element) -> dict[str, object]:
    members: dict[str, object] = {}
    for member in struct.iterfind("member"):
        name = member.findtext("name")
        value = member.find("value")
        if name is None or value is None:
            raise UnmarshalError("unmarshal error: struct member without name or value")
        members[name.strip()] = _decode_value(value)
    return members


def _decode_fault(root: etree._Element) -> Fault:
    struct = root.find("fault/value/struct")
    if struct is None:
        return Fault()
    members = _decode_struct(struct)
    code = members.get("faultCode", 0)
    if not isinstance(code, int):
        code = _decode_int(str(code))
    return Fault(code=code, message=str(members.get("faultString", "")))


def _decode_result(root: etree._Element) -> object:
    value = root.find("params/param/value")
    if value is None:
        raise UnmarshalError("unmarshal error: response has no params to decode")
    return _decode_value(value)


def unmarshal_string(body: bytes) -> StringResponse:
    """Decode a response whose payload is a single string."""
    root = _parse(body)
    fault = _decode_fault(root)
    if fault.code:
        return StringResponse(fault=fault)

    result = _decode_result(root)
    if not isinstance(result, str):
        raise UnmarshalError(f"unmarshal error: expected a string value, got {type(result).__name__}")
    return StringResponse(value=result, fault=fault)


def unmarshal_records(body: bytes) -> RecordsResponse:
    """Decode a response whose payload is an array of zone record structs."""
    root = _parse(body)
    fault = _decode_fault(root)
    if fault.code:
        return RecordsResponse(fault=fault)

    result = _decode_result(root)
    if not isinstance(result, list):
        raise UnmarshalError(f"unmarshal error: expected an array value, got {type(result).__name__}")

    records: list[ZoneRecord] = []
    for item in result:
        if not isinstance(item, dict):
            raise UnmarshalError(f"unmarshal error: expected a record struct, got {type(item).__name__}")
        try:
            records.append(ZoneRecord.from_dict(item))
        except (TypeError, ValueError, OverflowError) as exc:
            raise UnmarshalError(f"unmarshal error: invalid record {item!r}: {exc}") from exc
    return RecordsResponse(records=tuple(records), fault=fault)
