"""Audio/video attribute upload (0x1003) and passenger flow upload (0x1005)."""

from __future__ import annotations

import dataclasses
import struct
from typing import ClassVar

from jtbody.base import (
    BodyLengthError,
    CommandType,
    MessageBody,
    bcd_to_time,
    time_to_bcd,
)

_ATTR_FORMAT = ">BBBBHBBBB"
_ATTR_LEN = struct.calcsize(_ATTR_FORMAT)


@dataclasses.dataclass
class T0x1003(MessageBody):
    """Terminal audio/video attributes."""

    command: ClassVar[CommandType] = CommandType.T1003_UPLOAD_AUDIO_VIDEO_ATTR

    enter_audio_encoding: int = 0
    enter_audio_channels_number: int = 0
    # 0-8kHz 1-22.05kHz 2-44.1kHz 3-48kHz
    enter_audio_sample_rate: int = 0
    # 0-8 bit 1-16 bit 2-32 bit
    enter_audio_sample_digits: int = 0
    audio_frame_length: int = 0
    # 0-unsupported 1-supported
    has_supported_audio_output: int = 0
    video_encoding: int = 0
    max_audio_physical_channels: int = 0
    max_video_physical_channels: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != _ATTR_LEN:
            raise BodyLengthError()
        (
            self.enter_audio_encoding,
            self.enter_audio_channels_number,
            self.enter_audio_sample_rate,
            self.enter_audio_sample_digits,
            self.audio_frame_length,
            self.has_supported_audio_output,
            self.video_encoding,
            self.max_audio_physical_channels,
            self.max_video_physical_channels,
        ) = struct.unpack(_ATTR_FORMAT, body)

    def encode(self) -> bytes:
        return struct.pack(
            _ATTR_FORMAT,
            self.enter_audio_encoding,
            self.enter_audio_channels_number,
            self.enter_audio_sample_rate,
            self.enter_audio_sample_digits,
            self.audio_frame_length,
            self.has_supported_audio_output,
            self.video_encoding,
            self.max_audio_physical_channels,
            self.max_video_physical_channels,
        )


@dataclasses.dataclass
class T0x1005(MessageBody):
    """Terminal passenger flow between two times (GMT+8)."""

    command: ClassVar[CommandType] = CommandType.T1005_UPLOAD_PASSENGER_FLOW

    start_time: str = ""
    end_time: str = ""
    board_number: int = 0
    alight_number: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != 16:
            raise BodyLengthError()
        self.start_time = bcd_to_time(bytes(body[:6]))
        self.end_time = bcd_to_time(bytes(body[6:12]))
        self.board_number, self.alight_number = struct.unpack(">HH", body[12:16])

    def encode(self) -> bytes:
        return (
            time_to_bcd(self.start_time)
            + time_to_bcd(self.end_time)
            + struct.pack(">HH", self.board_number, self.alight_number)
        )