"""XML-RPC call and response values exchanged with the Loopia API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from lxml import etree


class Param(ABC):
    """A typed method-call parameter that renders itself as an XML-RPC ``<value>``."""

    @abstractmethod
    def to_element(self) -> etree._Element:
        """Return a ``<value>`` element wrapping the typed payload."""


@dataclass(frozen=True)
class StringParam(Param):
    value: str

    def to_element(self) -> etree._Element:
        value = etree.Element("value")
        etree.SubElement(value, "string").text = self.value
        return value


@dataclass(frozen=True)
class IntParam(Param):
    value: int

    def to_element(self) -> etree._Element:
        # bool is an int subclass but has its own XML-RPC type
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"int parameter expected an integer, got: {self.value!r}")
        value = etree.Element("value")
        etree.SubElement(value, "int").text = str(self.value)
        return value


@dataclass(frozen=True)
class StructMember:
    """A named member of a struct parameter."""

    name: str
    value: StringParam | IntParam

    def to_element(self) -> etree._Element:
        member = etree.Element("member")
        etree.SubElement(member, "name").text = self.name
        member.append(self.value.to_element())
        return member


@dataclass(frozen=True)
class StructParam(Param):
    members: tuple[StructMember, ...] = ()

    def to_element(self) -> etree._Element:
        value = etree.Element("value")
        struct = etree.SubElement(value, "struct")
        for member in self.members:
            struct.append(member.to_element())
        return value


@dataclass(frozen=True)
class MethodCall:
    """A remote method name with its ordered parameters."""

    method_name: str
    params: tuple[Param, ...] = ()

    def to_element(self) -> etree._Element:
        root = etree.Element("methodCall")
        etree.SubElement(root, "methodName").text = self.method_name
        params = etree.SubElement(root, "params")
        for param in self.params:
            etree.SubElement(params, "param").append(param.to_element())
        return root


@dataclass(frozen=True)
class Fault:
    """XML-RPC fault details. A code of zero means the call succeeded."""

    code: int = 0
    message: str = ""


@dataclass(frozen=True)
class ZoneRecord:
    """One zone record as returned by ``getZoneRecords``."""

    type: str
    ttl: int
    priority: int
    rdata: str
    record_id: int

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "ttl": self.ttl,
            "priority": self.priority,
            "rdata": self.rdata,
            "record_id": self.record_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ZoneRecord:
        return cls(
            type=str(data.get("type", "")),
            ttl=int(data.get("ttl", 0)),
            priority=int(data.get("priority", 0)),
            rdata=str(data.get("rdata", "")),
            record_id=int(data.get("record_id", 0)),
        )


@dataclass(frozen=True)
class StringResponse:
    """Response carrying a single status string such as ``OK``."""

    value: str = ""
    fault: Fault = field(default_factory=Fault)


@dataclass(frozen=True)
class RecordsResponse:
    """Response carrying the zone records of a subdomain."""

    records: tuple[ZoneRecord, ...] = ()
    fault: Fault = field(default_factory=Fault)
