"""Terminal registration (0x0100) and registration authentication (0x0102)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar, Optional, Tuple

from jtbody.base import (
    BodyLengthError,
    CommandType,
    MessageBody,
    ProtocolVersion,
    fill_bytes,
)

_SOFTWARE_VERSION_LEN = 20
_IMEI_LEN = 15


def _text(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="replace")


def _field_lengths(version: ProtocolVersion) -> Tuple[int, int, int]:
    """Lengths of manufacturer id, terminal model and terminal id for an edition."""
    if version == ProtocolVersion.V2013:
        return 5, 20, 7
    if version == ProtocolVersion.V2019:
        return 11, 30, 30
    return 5, 8, 7


@dataclasses.dataclass
class T0x0100(MessageBody):
    """Terminal registration; field widths depend on the protocol edition."""

    command: ClassVar[CommandType] = CommandType.T0100_REGISTER
    reply_command: ClassVar[Optional[CommandType]] = CommandType.P8100_REGISTER_RESPOND

    province_id: int = 0
    city_id: int = 0
    manufacturer_id: str = ""
    terminal_model: str = ""
    terminal_id: str = ""
    # 0-unregistered 1-blue 2-yellow 3-black 4-white 5-green 9-other
    plate_color: int = 0
    # VIN when the plate colour is 0, otherwise the plate number
    license_plate_number: str = ""
    version: ProtocolVersion = ProtocolVersion.V2011

    def parse(self, body: bytes, version: ProtocolVersion = ProtocolVersion.V2013) -> None:
        """Parse ``body`` sent under the header edition ``version``.

        Under the 2011/2013 header the body length tells the two apart.
        """
        if version == ProtocolVersion.V2019:
            self.version = ProtocolVersion.V2019
        elif len(body) > 36:
            self.version = ProtocolVersion.V2013
        else:
            self.version = ProtocolVersion.V2011
        if self.version == ProtocolVersion.V2011 and len(body) < 25:
            raise BodyLengthError()
        if self.version == ProtocolVersion.V2019 and len(body) < 76:
            raise BodyLengthError()
        m_len, t_len, tid_len = _field_lengths(self.version)
        self.province_id, self.city_id = struct.unpack(">HH", body[:4])
        cursor = 4
        self.manufacturer_id = _text(bytes(body[cursor : cursor + m_len]).rstrip(b"\x00"))
        cursor += m_len
        self.terminal_model = _text(bytes(body[cursor : cursor + t_len]).rstrip(b"\x00"))
        cursor += t_len
        self.terminal_id = _text(bytes(body[cursor : cursor + tid_len]).rstrip(b"\x00"))
        cursor += tid_len
        self.plate_color = body[cursor]
        self.license_plate_number = bytes(body[cursor + 1 :]).decode("gbk", errors="replace")

    def encode(self) -> bytes:
        m_len, t_len, tid_len = _field_lengths(self.version)
        return (
            struct.pack(">HH", self.province_id, self.city_id)
            + fill_bytes(self.manufacturer_id, m_len)
            + fill_bytes(self.terminal_model, t_len)
            + fill_bytes(self.terminal_id, tid_len)
            + bytes([self.plate_color])
            + self.license_plate_number.encode("gbk", errors="replace")
        )


@dataclasses.dataclass
class T0x0102(MessageBody):
    """Terminal authentication; the 2019 edition adds IMEI and software version."""

    command: ClassVar[CommandType] = CommandType.T0102_REGISTER_AUTH

    auth_code_len: int = 0
    auth_code: str = ""
    terminal_imei: str = ""
    software_version: str = ""
    version: ProtocolVersion = ProtocolVersion.V2013

    def parse(self, body: bytes, version: ProtocolVersion = ProtocolVersion.V2013) -> None:
        self.version = (
            ProtocolVersion.V2019 if version == ProtocolVersion.V2019 else ProtocolVersion.V2013
        )
        if self.version != ProtocolVersion.V2019:
            self.auth_code = _text(body)
            return
        tail = _IMEI_LEN + _SOFTWARE_VERSION_LEN
        if len(body) < 1 + tail:
            raise BodyLengthError()
        self.auth_code_len = body[0]
        n = self.auth_code_len
        if len(body) < 1 + n + tail:
            raise BodyLengthError()
        self.auth_code = _text(body[1 : 1 + n])
        self.terminal_imei = _text(body[1 + n : 1 + n + _IMEI_LEN])
        software = bytes(body[1 + n + _IMEI_LEN : 1 + n + tail])
        self.software_version = _text(software.split(b"\x00", 1)[0])

    def encode(self) -> bytes:
        if self.version != ProtocolVersion.V2019:
            return self.auth_code.encode()
        return (
            bytes([self.auth_code_len])
            + self.auth_code.encode()
            + self.terminal_imei.encode()
            + fill_bytes(self.software_version, _SOFTWARE_VERSION_LEN)
        )