"""Alarm attachment upload instruction (0x9208) and alarm attachment info (0x1210)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar, List, Optional

from jtbody.base import (
    ActiveSafetyType,
    BodyLengthError,
    CommandType,
    MessageBody,
    bcd_to_time,
    fill_bytes,
    time_to_bcd,
)

_ALARM_ID_LEN = 32

_TERMINAL_ID_LENS = {
    ActiveSafetyType.JS: 7,
    ActiveSafetyType.HLJ: 30,
    ActiveSafetyType.GD: 30,
    ActiveSafetyType.HN: 7,
    ActiveSafetyType.SC: 30,
}

_ALARM_SIGN_LENS = {
    ActiveSafetyType.JS: 16,
    ActiveSafetyType.HLJ: 38,
    ActiveSafetyType.GD: 40,
    ActiveSafetyType.HN: 32,
    ActiveSafetyType.SC: 39,
}


def _text(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="replace")


@dataclasses.dataclass
class P9208AlarmSign:
    """Alarm identification; its layout depends on the regional variant (Jiangsu by default)."""

    terminal_id: str = ""
    time: str = ""
    serial_number: int = 0
    attach_number: int = 0
    alarm_reserve: bytes = b""
    active_safety_type: ActiveSafetyType = ActiveSafetyType.JS

    def terminal_id_len(self) -> int:
        return _TERMINAL_ID_LENS.get(self.active_safety_type, 7)

    def alarm_sign_len(self) -> int:
        return _ALARM_SIGN_LENS.get(self.active_safety_type, 16)

    def parse(self, data: bytes) -> None:
        id_len = self.terminal_id_len()
        if len(data) < id_len + 8:
            raise BodyLengthError()
        self.terminal_id = _text(bytes(data[:id_len]).strip(b"\x00"))
        self.time = bcd_to_time(bytes(data[id_len : id_len + 6]))
        self.serial_number = data[id_len + 6]
        self.attach_number = data[id_len + 7]
        self.alarm_reserve = bytes(data[id_len + 8 :])

    def encode(self) -> bytes:
        """Encode the sign; a reserve that is too short is padded with zeros."""
        data = (
            fill_bytes(self.terminal_id, self.terminal_id_len())
            + time_to_bcd(self.time)
            + bytes([self.serial_number, self.attach_number])
            + bytes(self.alarm_reserve)
        )
        missing = self.alarm_sign_len() - len(data)
        if missing > 0:
            self.alarm_reserve = bytes(self.alarm_reserve) + bytes(missing)
            data += bytes(missing)
        return data


@dataclasses.dataclass
class P0x9208(MessageBody):
    """Platform alarm attachment upload instruction."""

    command: ClassVar[CommandType] = CommandType.P9208_ALARM_ATTACH_UPLOAD
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T0001_GENERAL_RESPOND

    server_ip_len: int = 0
    server_addr: str = ""
    tcp_port: int = 0
    udp_port: int = 0
    alarm_sign: P9208AlarmSign = dataclasses.field(default_factory=P9208AlarmSign)
    alarm_id: str = ""
    reserve: bytes = b""

    def parse(self, body: bytes) -> None:
        sign_len = self.alarm_sign.alarm_sign_len()
        fixed = 1 + 2 + 2 + sign_len + _ALARM_ID_LEN
        if len(body) < fixed:
            raise BodyLengthError()
        self.server_ip_len = body[0]
        k = self.server_ip_len
        if fixed + k > len(body):
            raise BodyLengthError()
        self.server_addr = _text(body[1 : 1 + k])
        self.tcp_port, self.udp_port = struct.unpack(">HH", body[1 + k : 5 + k])
        self.alarm_sign.parse(bytes(body[5 + k : 5 + k + sign_len]))
        end = fixed + k
        self.alarm_id = _text(bytes(body[end - _ALARM_ID_LEN : end]).strip(b"\x00"))
        self.reserve = bytes(body[end:])

    def encode(self) -> bytes:
        return (
            bytes([self.server_ip_len])
            + self.server_addr.encode()
            + struct.pack(">HH", self.tcp_port, self.udp_port)
            + self.alarm_sign.encode()
            + fill_bytes(self.alarm_id, _ALARM_ID_LEN)
            + bytes(self.reserve)
        )

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class T0x1210AlarmItem:
    """One attachment entry: name and size in bytes."""

    file_name_len: int = 0
    file_name: str = ""
    file_size: int = 0


@dataclasses.dataclass
class T0x1210(MessageBody):
    """Terminal alarm attachment info message.

    The Heilongjiang variant carries no terminal id ahead of the alarm sign.
    """

    command: ClassVar[CommandType] = CommandType.T1210_ALARM_ATTACH_INFO_MESSAGE
    reply_command: ClassVar[Optional[CommandType]] = CommandType.P8001_GENERAL_RESPOND

    terminal_id: str = ""
    alarm_sign: P9208AlarmSign = dataclasses.field(default_factory=P9208AlarmSign)
    alarm_id: str = ""
    # 0x00-normal alarm files 0x01-supplementary alarm files
    info_type: int = 0
    attach_count: int = 0
    items: List[T0x1210AlarmItem] = dataclasses.field(default_factory=list)

    def _has_terminal_id(self) -> bool:
        return self.alarm_sign.active_safety_type != ActiveSafetyType.HLJ

    def parse(self, body: bytes) -> None:
        id_len = self.alarm_sign.terminal_id_len() if self._has_terminal_id() else 0
        sign_len = self.alarm_sign.alarm_sign_len()
        if len(body) < id_len + sign_len + _ALARM_ID_LEN + 2:
            raise BodyLengthError()
        cursor = id_len
        if id_len > 0:
            self.terminal_id = _text(bytes(body[:id_len]).strip(b"\x00"))
        self.alarm_sign.parse(bytes(body[cursor : cursor + sign_len]))
        cursor += sign_len
        self.alarm_id = _text(bytes(body[cursor : cursor + _ALARM_ID_LEN]).strip(b"\x00"))
        cursor += _ALARM_ID_LEN
        self.info_type = body[cursor]
        self.attach_count = body[cursor + 1]
        cursor += 2
        if len(body) < cursor + self.attach_count * 6:
            raise BodyLengthError()
        items = []
        for _ in range(self.attach_count):
            name_len = body[cursor]
            name_end = cursor + 1 + name_len
            if len(body) < name_end + 4:
                raise BodyLengthError()
            (size,) = struct.unpack(">I", body[name_end : name_end + 4])
            items.append(
                T0x1210AlarmItem(
                    file_name_len=name_len,
                    file_name=_text(body[cursor + 1 : name_end]),
                    file_size=size,
                )
            )
            cursor = name_end + 4
        self.items = items

    def encode(self) -> bytes:
        parts = []
        if self._has_terminal_id():
            parts.append(fill_bytes(self.terminal_id, self.alarm_sign.terminal_id_len()))
        parts.append(self.alarm_sign.encode())
        parts.append(fill_bytes(self.alarm_id, _ALARM_ID_LEN))
        parts.append(bytes([self.info_type, self.attach_count]))
        for item in self.items:
            parts.append(bytes([item.file_name_len]))
            parts.append(item.file_name.encode())
            parts.append(struct.pack(">I", item.file_size))
        return b"".join(parts)