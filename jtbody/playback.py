"""Remote video playback request (0x9201) and playback control (0x9202)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar, Optional

from jtbody.base import (
    BodyLengthError,
    CommandType,
    MessageBody,
    bcd_to_time,
    time_to_bcd,
)

_TAIL_FORMAT = ">HHBBBBBB"
_TAIL_LEN = struct.calcsize(_TAIL_FORMAT)


@dataclasses.dataclass
class P0x9201(MessageBody):
    """Platform remote video playback request."""

    command: ClassVar[CommandType] = CommandType.P9201_SEND_VIDEO_RECORD_REQUEST
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T0001_GENERAL_RESPOND

    server_ip_len: int = 0
    server_ip_addr: str = ""
    # leave at 0 when the transport is not used; TCP wins when both are set
    tcp_port: int = 0
    udp_port: int = 0
    channel_no: int = 0
    # 0-audio and video 1-audio 2-video 3-audio or video
    media_type: int = 0
    # 0-main or sub 1-main 2-sub
    stream_type: int = 0
    # 0-main or backup 1-main 2-backup
    memory_type: int = 0
    # 0-normal 1-fast forward 2-key frame rewind 3-key frame play 4-single frame upload
    playback_way: int = 0
    # 0-invalid 1-1x 2-2x 3-4x 4-8x 5-16x
    play_speed: int = 0
    start_time: str = ""
    end_time: str = ""

    def parse(self, body: bytes) -> None:
        if len(body) < 1:
            raise BodyLengthError()
        self.server_ip_len = body[0]
        n = self.server_ip_len
        if len(body) != 1 + n + _TAIL_LEN + 12:
            raise BodyLengthError()
        self.server_ip_addr = bytes(body[1 : 1 + n]).decode("utf-8", errors="replace")
        cursor = 1 + n
        (
            self.tcp_port,
            self.udp_port,
            self.channel_no,
            self.media_type,
            self.stream_type,
            self.memory_type,
            self.playback_way,
            self.play_speed,
        ) = struct.unpack(_TAIL_FORMAT, body[cursor : cursor + _TAIL_LEN])
        cursor += _TAIL_LEN
        self.start_time = bcd_to_time(bytes(body[cursor : cursor + 6]))
        self.end_time = bcd_to_time(bytes(body[cursor + 6 : cursor + 12]))

    def encode(self) -> bytes:
        return (
            bytes([self.server_ip_len])
            + self.server_ip_addr.encode()
            + struct.pack(
                _TAIL_FORMAT,
                self.tcp_port,
                self.udp_port,
                self.channel_no,
                self.media_type,
                self.stream_type,
                self.memory_type,
                self.playback_way,
                self.play_speed,
            )
            + time_to_bcd(self.start_time)
            + time_to_bcd(self.end_time)
        )

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class P0x9202(MessageBody):
    """Platform remote video playback control."""

    command: ClassVar[CommandType] = CommandType.P9202_SEND_VIDEO_RECORD_CONTROL
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T0001_GENERAL_RESPOND

    channel_no: int = 0
    # 0-start 1-pause 2-stop 3-fast forward 4-key frame rewind 5-seek 6-key frame play
    play_control: int = 0
    # used when play_control is 3 or 4: 0-invalid 1-1x 2-2x 3-4x 4-8x 5-16x
    play_speed: int = 0
    # seek position, used when play_control is 5
    date_time: str = ""

    def parse(self, body: bytes) -> None:
        if len(body) != 9:
            raise BodyLengthError()
        self.channel_no, self.play_control, self.play_speed = body[:3]
        self.date_time = bcd_to_time(bytes(body[3:9]))

    def encode(self) -> bytes:
        return bytes([self.channel_no, self.play_control, self.play_speed]) + time_to_bcd(
            self.date_time
        )

    def has_reply(self) -> bool:
        return False