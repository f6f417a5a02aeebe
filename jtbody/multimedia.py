"""Multimedia event upload (0x0800), multimedia data upload (0x0801) and shoot reply (0x0805)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar, List, Optional

from jtbody.base import BodyLengthError, CommandType, MessageBody
from jtbody.location import T0x0200LocationItem

_EVENT_FORMAT = ">IBBBB"
_EVENT_LEN = struct.calcsize(_EVENT_FORMAT)
_LOCATION_LEN = 28


@dataclasses.dataclass
class T0x0800(MessageBody):
    """Terminal multimedia event information upload."""

    command: ClassVar[CommandType] = CommandType.T0800_MULTIMEDIA_EVENT_INFO_UPLOAD

    # greater than 0
    multimedia_id: int = 0
    # 0-image 1-audio 2-video
    multimedia_type: int = 0
    # 0-jpeg 1-tif 2-mp3 3-wav 4-wmv
    multimedia_format_encode: int = 0
    # 0-platform command 1-timed action 2-robbery alarm 3-collision/rollover alarm ...
    event_item_encode: int = 0
    channel_id: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != _EVENT_LEN:
            raise BodyLengthError()
        (
            self.multimedia_id,
            self.multimedia_type,
            self.multimedia_format_encode,
            self.event_item_encode,
            self.channel_id,
        ) = struct.unpack(_EVENT_FORMAT, body)

    def encode(self) -> bytes:
        return struct.pack(
            _EVENT_FORMAT,
            self.multimedia_id,
            self.multimedia_type,
            self.multimedia_format_encode,
            self.event_item_encode,
            self.channel_id,
        )


@dataclasses.dataclass
class T0x0801(MessageBody):
    """Terminal multimedia data upload: event header, location and the data packet."""

    command: ClassVar[CommandType] = CommandType.T0801_MULTIMEDIA_DATA_UPLOAD
    reply_command: ClassVar[Optional[CommandType]] = CommandType.P8800_MULTIMEDIA_UPLOAD_RESPOND

    multimedia_id: int = 0
    multimedia_type: int = 0
    multimedia_format_encode: int = 0
    event_item_encode: int = 0
    channel_id: int = 0
    location_item: T0x0200LocationItem = dataclasses.field(default_factory=T0x0200LocationItem)
    multimedia_package: bytes = b""

    def parse(self, body: bytes) -> None:
        header_end = _EVENT_LEN + _LOCATION_LEN
        if len(body) < header_end:
            raise BodyLengthError()
        (
            self.multimedia_id,
            self.multimedia_type,
            self.multimedia_format_encode,
            self.event_item_encode,
            self.channel_id,
        ) = struct.unpack(_EVENT_FORMAT, body[:_EVENT_LEN])
        self.location_item.parse(bytes(body[_EVENT_LEN:header_end]))
        self.multimedia_package = bytes(body[header_end:])

    def encode(self) -> bytes:
        return (
            struct.pack(
                _EVENT_FORMAT,
                self.multimedia_id,
                self.multimedia_type,
                self.multimedia_format_encode,
                self.event_item_encode,
                self.channel_id,
            )
            + self.location_item.encode()
            + bytes(self.multimedia_package)
        )


@dataclasses.dataclass
class T0x0805(MessageBody):
    """Terminal reply to an immediate camera shoot command."""

    command: ClassVar[CommandType] = CommandType.T0805_CAMERA_SHOOT_IMMEDIATELY

    respond_serial_number: int = 0
    result: int = 0
    multimedia_id_number: int = 0
    multimedia_id_list: List[int] = dataclasses.field(default_factory=list)

    def parse(self, body: bytes) -> None:
        if len(body) < 5:
            raise BodyLengthError()
        self.respond_serial_number, self.result, self.multimedia_id_number = struct.unpack(
            ">HBH", body[:5]
        )
        count = self.multimedia_id_number
        if len(body) != 5 + count * 4:
            raise BodyLengthError()
        self.multimedia_id_list = list(struct.unpack(f">{count}I", body[5:]))

    def encode(self) -> bytes:
        return struct.pack(
            ">HBH", self.respond_serial_number, self.result, self.multimedia_id_number
        ) + b"".join(struct.pack(">I", value) for value in self.multimedia_id_list)

    def has_reply(self) -> bool:
        return False