"""Shared definitions for message bodies: command ids, errors and BCD helpers."""

from __future__ import annotations

import dataclasses
import enum
import re
import struct
from typing import ClassVar, Optional

_BCD_TIME_BYTES = 6


class BodyLengthError(ValueError):
    """The body length does not match what the message layout requires."""

    def __init__(self, message: str = "body length inconsistency") -> None:
        super().__init__(message)


class CommandType(enum.IntEnum):
    """Message ids of terminal (T) and platform (P) messages."""

    T0001_GENERAL_RESPOND = 0x0001
    T0002_HEART_BEAT = 0x0002
    T0100_REGISTER = 0x0100
    T0102_REGISTER_AUTH = 0x0102
    T0104_QUERY_PARAMETER = 0x0104
    T0200_LOCATION_REPORT = 0x0200
    T0704_LOCATION_BATCH_UPLOAD = 0x0704
    T0800_MULTIMEDIA_EVENT_INFO_UPLOAD = 0x0800
    T0801_MULTIMEDIA_DATA_UPLOAD = 0x0801
    T0805_CAMERA_SHOOT_IMMEDIATELY = 0x0805
    T1003_UPLOAD_AUDIO_VIDEO_ATTR = 0x1003
    T1005_UPLOAD_PASSENGER_FLOW = 0x1005
    T1205_UPLOAD_AUDIO_VIDEO_RESOURCE_LIST = 0x1205
    T1206_FILE_UPLOAD_COMPLETE_NOTICE = 0x1206
    T1210_ALARM_ATTACH_INFO_MESSAGE = 0x1210
    T1211_FILE_INFO_UPLOAD = 0x1211
    T1212_FILE_UPLOAD_COMPLETE = 0x1212
    P8001_GENERAL_RESPOND = 0x8001
    P8100_REGISTER_RESPOND = 0x8100
    P8800_MULTIMEDIA_UPLOAD_RESPOND = 0x8800
    P9102_AUDIO_VIDEO_CONTROL = 0x9102
    P9105_AUDIO_VIDEO_CONTROL_STATUS_NOTICE = 0x9105
    P9201_SEND_VIDEO_RECORD_REQUEST = 0x9201
    P9202_SEND_VIDEO_RECORD_CONTROL = 0x9202
    P9205_QUERY_RESOURCE_LIST = 0x9205
    P9206_FILE_UPLOAD_INSTRUCTIONS = 0x9206
    P9207_FILE_UPLOAD_CONTROL = 0x9207
    P9208_ALARM_ATTACH_UPLOAD = 0x9208
    P9212_FILE_UPLOAD_COMPLETE_RESPOND = 0x9212


class ProtocolVersion(enum.IntEnum):
    """Protocol editions: 1-2011, 2-2013, 3-2019."""

    V2011 = 1
    V2013 = 2
    V2019 = 3


class ActiveSafetyType(enum.IntEnum):
    """Regional active-safety variants; Jiangsu is the default layout."""

    JS = 1
    HLJ = 2
    GD = 3
    HN = 4
    SC = 5


def bcd_to_time(data: bytes) -> str:
    """Render six BCD bytes YYMMDDhhmmss as ``20YY-MM-DD hh:mm:ss``."""
    if len(data) != _BCD_TIME_BYTES:
        raise BodyLengthError(f"BCD time needs {_BCD_TIME_BYTES} bytes, got {len(data)}")
    yy, mo, dd, hh, mi, ss = data
    return f"20{yy:02x}-{mo:02x}-{dd:02x} {hh:02x}:{mi:02x}:{ss:02x}"


def time_to_bcd(text: str) -> bytes:
    """Pack ``20YY-MM-DD hh:mm:ss`` into six BCD bytes; empty text gives zeros."""
    if not text:
        return bytes(_BCD_TIME_BYTES)
    digits = re.sub(r"\D", "", text)
    if len(digits) == 14:
        digits = digits[2:]
    if len(digits) != 12:
        raise ValueError(f"not a time in YYYY-MM-DD hh:mm:ss form: {text!r}")
    return bytes.fromhex(digits)


def fill_bytes(text: str, size: int) -> bytes:
    """Encode ``text`` into exactly ``size`` bytes, padding with 0x00."""
    return text.encode()[:size].ljust(size, b"\x00")


class MessageBody:
    """Base of all message bodies; a body without fields encodes to nothing."""

    command: ClassVar[CommandType]
    reply_command: ClassVar[Optional[CommandType]] = None

    def parse(self, body: bytes) -> None:
        """Fill the fields from ``body``; a body without fields ignores it."""

    def encode(self) -> bytes:
        return b""

    def has_reply(self) -> bool:
        return True

    def __str__(self) -> str:
        lines = [f"{self.command.name}:[{self.encode().hex()}]"]
        if dataclasses.is_dataclass(self):
            lines.extend(
                f"\t{field.name}: {getattr(self, field.name)!r}"
                for field in dataclasses.fields(self)
            )
        return "\n".join(lines)


@dataclasses.dataclass
class T0x0001(MessageBody):
    """Terminal general response."""

    command: ClassVar[CommandType] = CommandType.T0001_GENERAL_RESPOND

    serial_number: int = 0
    respond_id: int = 0
    # 0-success 1-failure 2-bad message 3-unsupported
    result: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != 5:
            raise BodyLengthError()
        self.serial_number, self.respond_id, self.result = struct.unpack(">HHB", body)

    def encode(self) -> bytes:
        return struct.pack(">HHB", self.serial_number, self.respond_id, self.result)

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class T0x0002(MessageBody):
    """Terminal heartbeat; it has no body."""

    command: ClassVar[CommandType] = CommandType.T0002_HEART_BEAT
    reply_command: ClassVar[Optional[CommandType]] = CommandType.P8001_GENERAL_RESPOND

    def encode(self) -> bytes:
        return b""