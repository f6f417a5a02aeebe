"""Location report (0x0200) and batch location upload (0x0704)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar, Dict, List

from jtbody.addition import Addition, T0x0200AdditionDetails
from jtbody.base import BodyLengthError, CommandType, MessageBody
from jtbody.location import T0x0200LocationItem

_LOCATION_LEN = 28


@dataclasses.dataclass
class T0x0200(MessageBody):
    """Terminal location report: a location item followed by additional items."""

    command: ClassVar[CommandType] = CommandType.T0200_LOCATION_REPORT

    location_item: T0x0200LocationItem = dataclasses.field(default_factory=T0x0200LocationItem)
    addition_details: T0x0200AdditionDetails = dataclasses.field(
        default_factory=T0x0200AdditionDetails
    )

    @property
    def additions(self) -> Dict[int, Addition]:
        return self.addition_details.additions

    def parse(self, body: bytes) -> None:
        self.location_item.parse(body)
        if len(body) > _LOCATION_LEN:
            self.addition_details.parse(body[_LOCATION_LEN:])

    def encode(self) -> bytes:
        """Encode the location item; additional items are not written back."""
        return self.location_item.encode()


@dataclasses.dataclass
class T0x0704LocationItem:
    """One entry of a batch upload."""

    length: int = 0
    location_item: T0x0200LocationItem = dataclasses.field(default_factory=T0x0200LocationItem)
    addition_details: T0x0200AdditionDetails = dataclasses.field(
        default_factory=T0x0200AdditionDetails
    )

    def encode(self) -> bytes:
        return self.location_item.encode()


@dataclasses.dataclass
class T0x0704(MessageBody):
    """Terminal batch location upload."""

    command: ClassVar[CommandType] = CommandType.T0704_LOCATION_BATCH_UPLOAD

    num: int = 0
    # 0-normal batch report 1-blind area supplement
    location_type: int = 0
    items: List[T0x0704LocationItem] = dataclasses.field(default_factory=list)

    def parse(self, body: bytes) -> None:
        if len(body) < 31:
            raise BodyLengthError()
        self.num, self.location_type = struct.unpack(">HB", body[:3])
        start = 3
        for _ in range(self.num):
            if start + 2 > len(body):
                raise BodyLengthError()
            item = T0x0704LocationItem(length=int.from_bytes(body[start : start + 2], "big"))
            end = start + 2 + item.length
            if end > len(body):
                raise BodyLengthError()
            current = bytes(body[start + 2 : end])
            item.location_item.parse(current)
            if len(current) > _LOCATION_LEN:
                item.addition_details.parse(current[_LOCATION_LEN:])
            self.items.append(item)
            start = end

    def encode(self) -> bytes:
        parts = [struct.pack(">HB", self.num, self.location_type)]
        for item in self.items:
            encoded = item.encode()
            parts.append(struct.pack(">H", len(encoded)))
            parts.append(encoded)
        return b"".join(parts)