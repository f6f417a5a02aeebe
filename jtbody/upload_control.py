"""File upload control (0x9207) and file upload complete notice (0x1206)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar, Optional

from jtbody.base import BodyLengthError, CommandType, MessageBody


@dataclasses.dataclass
class P0x9207(MessageBody):
    """Platform file upload control."""

    command: ClassVar[CommandType] = CommandType.P9207_FILE_UPLOAD_CONTROL
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T0001_GENERAL_RESPOND

    # serial number of the platform's file upload message
    respond_serial_number: int = 0
    # 0-pause 1-continue 2-cancel
    upload_control: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != 3:
            raise BodyLengthError()
        self.respond_serial_number, self.upload_control = struct.unpack(">HB", body)

    def encode(self) -> bytes:
        return struct.pack(">HB", self.respond_serial_number, self.upload_control)

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class T0x1206(MessageBody):
    """Terminal file upload complete notice."""

    command: ClassVar[CommandType] = CommandType.T1206_FILE_UPLOAD_COMPLETE_NOTICE

    # serial number of the platform's file upload message
    respond_serial_number: int = 0
    # 0-success 1-failure
    result: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != 3:
            raise BodyLengthError()
        self.respond_serial_number, self.result = struct.unpack(">HB", body)

    def encode(self) -> bytes:
        return struct.pack(">HB", self.respond_serial_number, self.result)

    def has_reply(self) -> bool:
        return False