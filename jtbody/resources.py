"""Resource list query (0x9205) and audio/video resource list upload (0x1205)."""

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

_QUERY_LEN = 24
_RESOURCE_FORMAT = ">B6s6sQBBBI"
_RESOURCE_LEN = struct.calcsize(_RESOURCE_FORMAT)
_LIST_HEADER_FORMAT = ">HI"
_LIST_HEADER_LEN = struct.calcsize(_LIST_HEADER_FORMAT)


@dataclasses.dataclass
class P0x9205(MessageBody):
    """Platform query of the terminal's audio/video resource list."""

    command: ClassVar[CommandType] = CommandType.P9205_QUERY_RESOURCE_LIST
    reply_command: ClassVar[Optional[CommandType]] = (
        CommandType.T1205_UPLOAD_AUDIO_VIDEO_RESOURCE_LIST
    )

    # 0 means all channels
    channel_no: int = 0
    # all zeros means no start condition
    start_time: str = ""
    # all zeros means no end condition
    end_time: str = ""
    # bit0-31 location alarms, bit32-63 video alarms; 0 means no alarm condition
    alarm_flag: int = 0
    # 0-audio and video 1-audio 2-video 3-video or audio and video
    media_type: int = 0
    # 0-all streams 1-main 2-sub
    stream_type: int = 0
    # 0-all storage 1-main 2-backup
    storage_type: int = 0

    def parse(self, body: bytes) -> None:
        if len(body) != _QUERY_LEN:
            raise BodyLengthError()
        self.channel_no = body[0]
        self.start_time = bcd_to_time(bytes(body[1:7]))
        self.end_time = bcd_to_time(bytes(body[7:13]))
        (
            self.alarm_flag,
            self.media_type,
            self.stream_type,
            self.storage_type,
        ) = struct.unpack(">QBBB", body[13:24])

    def encode(self) -> bytes:
        return (
            bytes([self.channel_no])
            + time_to_bcd(self.start_time)
            + time_to_bcd(self.end_time)
            + struct.pack(
                ">QBBB",
                self.alarm_flag,
                self.media_type,
                self.stream_type,
                self.storage_type,
            )
        )

    def has_reply(self) -> bool:
        return False


@dataclasses.dataclass
class T0x1205AudioVideoResource:
    """One recorded audio/video resource."""

    channel_no: int = 0
    start_time: str = ""
    end_time: str = ""
    alarm_flag: int = 0
    # 0-audio and video 1-audio 2-video
    audio_video_resource_type: int = 0
    # 1-main 2-sub
    stream_type: int = 0
    # 1-main storage 2-backup storage
    memory_type: int = 0
    # bytes
    file_size: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "T0x1205AudioVideoResource":
        (
            channel_no,
            start,
            end,
            alarm_flag,
            resource_type,
            stream_type,
            memory_type,
            file_size,
        ) = struct.unpack(_RESOURCE_FORMAT, data)
        return cls(
            channel_no=channel_no,
            start_time=bcd_to_time(start),
            end_time=bcd_to_time(end),
            alarm_flag=alarm_flag,
            audio_video_resource_type=resource_type,
            stream_type=stream_type,
            memory_type=memory_type,
            file_size=file_size,
        )

    def encode(self) -> bytes:
        return struct.pack(
            _RESOURCE_FORMAT,
            self.channel_no,
            time_to_bcd(self.start_time),
            time_to_bcd(self.end_time),
            self.alarm_flag,
            self.audio_video_resource_type,
            self.stream_type,
            self.memory_type,
            self.file_size,
        )


@dataclasses.dataclass
class T0x1205(MessageBody):
    """Terminal upload of its audio/video resource list."""

    command: ClassVar[CommandType] = CommandType.T1205_UPLOAD_AUDIO_VIDEO_RESOURCE_LIST

    serial_number: int = 0
    audio_video_resource_total: int = 0
    audio_video_resource_list: List[T0x1205AudioVideoResource] = dataclasses.field(
        default_factory=list
    )

    def parse(self, body: bytes) -> None:
        if len(body) < _LIST_HEADER_LEN:
            raise BodyLengthError()
        self.serial_number, self.audio_video_resource_total = struct.unpack(
            _LIST_HEADER_FORMAT, body[:_LIST_HEADER_LEN]
        )
        total = self.audio_video_resource_total
        if len(body) != _LIST_HEADER_LEN + total * _RESOURCE_LEN:
            raise BodyLengthError()
        self.audio_video_resource_list = [
            T0x1205AudioVideoResource.from_bytes(bytes(body[start : start + _RESOURCE_LEN]))
            for start in range(_LIST_HEADER_LEN, len(body), _RESOURCE_LEN)
        ]

    def encode(self) -> bytes:
        return struct.pack(
            _LIST_HEADER_FORMAT, self.serial_number, self.audio_video_resource_total
        ) + b"".join(item.encode() for item in self.audio_video_resource_list)

    def has_reply(self) -> bool:
        return False