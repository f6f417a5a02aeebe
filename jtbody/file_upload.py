"""File upload instruction (0x9206), upload complete reply (0x9212),
file info upload (0x1211) and file upload complete (0x1212)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar, List, Optional

from jtbody.base import (
    BodyLengthError,
    CommandType,
    MessageBody,
    bcd_to_time,
    time_to_bcd,
)

_UPLOAD_TAIL_LEN = 1 + 6 + 6 + 8 + 1 + 1 + 1 + 1
_PACKET_FORMAT = ">II"
_PACKET_LEN = struct.calcsize(_PACKET_FORMAT)


def _text(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="replace")


def _length_prefixed(body: bytes, start: int, minimum_after: int) -> tuple:
    """Read a one-byte length and the text it covers from ``start``.

    Requires at least ``minimum_after`` bytes to follow the text.
    """
    if len(body) < start + 1:
        raise BodyLengthError()
    size = body[start]
    end = start + 1 + size
    if len(body) < end + minimum_after:
        raise BodyLengthError()
    return size, _text(body[start + 1 : end]), end


@dataclasses.dataclass
class P0x9206(MessageBody):
    """Platform instruction to upload recorded files to an FTP server."""

    command: ClassVar[CommandType] = CommandType.P9206_FILE_UPLOAD_INSTRUCTIONS
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T1206_FILE_UPLOAD_COMPLETE_NOTICE

    ftp_addr_len: int = 0
    ftp_addr: str = ""
    port: int = 0
    username_len: int = 0
    username: str = ""
    password_len: int = 0
    password: str = ""
    file_upload_path_len: int = 0
    file_upload_path: str = ""
    channel_no: int = 0
    start_time: str = ""
    end_time: str = ""
    alarm_flag: int = 0
    # 0-audio and video 1-audio 2-video 3-audio or video
    media_type: int = 0
    # 0-main or sub 1-main 2-sub
    stream_type: int = 0
    # 0-main or backup 1-main 2-backup
    memory_position: int = 0
    # bit0 WI-FI, bit1 LAN, bit2 3G/4G
    task_execute_condition: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) < 1:
            raise BodyLengthError()
        self.ftp_addr_len, self.ftp_addr, end = _length_prefixed(body, 0, 3)
        (self.port,) = struct.unpack(">H", body[end : end + 2])
        self.username_len, self.username, end = _length_prefixed(body, end + 2, 1)
        self.password_len, self.password, end = _length_prefixed(body, end, 1)
        self.file_upload_path_len = body[end]
        start = end + 1
        end = start + self.file_upload_path_len
        if len(body) != end + _UPLOAD_TAIL_LEN:
            raise BodyLengthError()
        self.file_upload_path = _text(body[start:end])
        self.channel_no = body[end]
        self.start_time = bcd_to_time(bytes(body[end + 1 : end + 7]))
        self.end_time = bcd_to_time(bytes(body[end + 7 : end + 13]))
        (
            self.alarm_flag,
            self.media_type,
            self.stream_type,
            self.memory_position,
            self.task_execute_condition,
        ) = struct.unpack(">QBBBB", body[end + 13 : end + 25])

    def encode(self) -> bytes:
        """Encode the instruction; the address length byte is taken from the address itself."""
        ftp_addr = self.ftp_addr.encode()
        return (
            bytes([len(ftp_addr)])
            + ftp_addr
            + struct.pack(">H", self.port)
            + bytes([self.username_len])
            + self.username.encode()
            + bytes([self.password_len])
            + self.password.encode()
            + bytes([self.file_upload_path_len])
            + self.file_upload_path.encode()
            + bytes([self.channel_no])
            + time_to_bcd(self.start_time)
            + time_to_bcd(self.end_time)
            + struct.pack(
                ">QBBBB",
                self.alarm_flag,
                self.media_type,
                self.stream_type,
                self.memory_position,
                self.task_execute_condition,
            )
        )

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class P0x9212RetransmitPacket:
    """A range of file data the terminal must send again."""

    data_offset: int = 0
    data_length: int = 0


@dataclasses.dataclass
class P0x9212(MessageBody):
    """Platform reply to a completed file upload."""

    command: ClassVar[CommandType] = CommandType.P9212_FILE_UPLOAD_COMPLETE_RESPOND
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T0001_GENERAL_RESPOND

    file_name_len: int = 0
    file_name: str = ""
    # 0x00-image 0x01-audio 0x02-video 0x03-text 0x04-other
    file_type: int = 0
    # 0-complete 1-retransmission needed
    upload_result: int = 0
    retransmit_packet_number: int = 0
    retransmit_packet_list: List[P0x9212RetransmitPacket] = dataclasses.field(
        default_factory=list
    )

    def parse(self, body: bytes) -> None:
        if len(body) < 4:
            raise BodyLengthError()
        self.file_name_len = body[0]
        n = self.file_name_len
        if len(body) < 4 + n:
            raise BodyLengthError()
        self.file_name = _text(body[1 : 1 + n])
        self.file_type, self.upload_result, self.retransmit_packet_number = body[1 + n : 4 + n]
        start = 4 + n
        if len(body) != start + _PACKET_LEN * self.retransmit_packet_number:
            raise BodyLengthError()
        self.retransmit_packet_list = [
            P0x9212RetransmitPacket(*struct.unpack(_PACKET_FORMAT, body[pos : pos + _PACKET_LEN]))
            for pos in range(start, len(body), _PACKET_LEN)
        ]

    def encode(self) -> bytes:
        return (
            bytes([self.file_name_len])
            + self.file_name.encode()
            + bytes([self.file_type, self.upload_result, self.retransmit_packet_number])
            + b"".join(
                struct.pack(_PACKET_FORMAT, packet.data_offset, packet.data_length)
                for packet in self.retransmit_packet_list
            )
        )

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class T0x1211(MessageBody):
    """Terminal file information upload."""

    command: ClassVar[CommandType] = CommandType.T1211_FILE_INFO_UPLOAD

    file_name_len: int = 0
    file_name: str = ""
    # 0x00-image 0x01-audio 0x02-video 0x03-text 0x04-other
    file_type: int = 0
    # bytes
    file_size: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) < 6:
            raise BodyLengthError()
        self.file_name_len = body[0]
        n = self.file_name_len
        if len(body) != 6 + n:
            raise BodyLengthError()
        self.file_name = _text(body[1 : 1 + n])
        self.file_type = body[1 + n]
        (self.file_size,) = struct.unpack(">I", body[2 + n : 6 + n])

    def encode(self) -> bytes:
        return (
            bytes([self.file_name_len])
            + self.file_name.encode()
            + bytes([self.file_type])
            + struct.pack(">I", self.file_size)
        )


@dataclasses.dataclass
class T0x1212(T0x1211):
    """Terminal file upload complete; same layout as the file info upload.

    ``retransmit_packet_list`` holds the ranges to ask for again in the reply.
    """

    command: ClassVar[CommandType] = CommandType.T1212_FILE_UPLOAD_COMPLETE
    reply_command: ClassVar[Optional[CommandType]] = CommandType.P9212_FILE_UPLOAD_COMPLETE_RESPOND

    retransmit_packet_list: List[P0x9212RetransmitPacket] = dataclasses.field(
        default_factory=list
    )

    def reply_body(self, body: bytes) -> bytes:
        """Parse ``body`` and build the encoded 0x9212 reply.

        A body that does not parse leaves the fields as they were.
        """
        try:
            self.parse(body)
        except BodyLengthError:
            pass
        reply = P0x9212(
            file_name_len=self.file_name_len,
            file_name=self.file_name,
            file_type=self.file_type,
        )
        if self.retransmit_packet_list:
            reply.upload_result = 1
            reply.retransmit_packet_number = len(self.retransmit_packet_list) & 0xFF
            reply.retransmit_packet_list = list(self.retransmit_packet_list)
        return reply.encode()