"""Real-time audio/video transmission control (0x9102) and status notice (0x9105)."""

from __future__ import annotations

import dataclasses
from typing import ClassVar, Optional

from jtbody.base import BodyLengthError, CommandType, MessageBody


@dataclasses.dataclass
class P0x9102(MessageBody):
    """Platform real-time audio/video transmission control."""

    command: ClassVar[CommandType] = CommandType.P9102_AUDIO_VIDEO_CONTROL
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T0001_GENERAL_RESPOND

    channel_no: int = 0
    # 0-close 1-switch stream 2-pause 3-resume 4-close intercom
    control_cmd: int = 0
    # 0-close audio and video 1-close audio 2-close video
    close_audio_video_data: int = 0
    # 0-main stream 1-sub stream
    stream_type: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != 4:
            raise BodyLengthError()
        (
            self.channel_no,
            self.control_cmd,
            self.close_audio_video_data,
            self.stream_type,
        ) = body

    def encode(self) -> bytes:
        return bytes(
            [
                self.channel_no,
                self.control_cmd,
                self.close_audio_video_data,
                self.stream_type,
            ]
        )

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class P0x9105(MessageBody):
    """Platform real-time audio/video transmission status notice."""

    command: ClassVar[CommandType] = CommandType.P9105_AUDIO_VIDEO_CONTROL_STATUS_NOTICE
    reply_command: ClassVar[Optional[CommandType]] = CommandType.T0001_GENERAL_RESPOND

    channel_no: int = 0
    # packet loss rate multiplied by 100, integer part
    package_loss_rate: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != 2:
            raise BodyLengthError()
        self.channel_no, self.package_loss_rate = body

    def encode(self) -> bytes:
        return bytes([self.channel_no, self.package_loss_rate])

    def has_reply(self) -> bool:
        return False