"""Active-safety additional items (0x64-0x67, 0x70) of the Jiangsu variant.

Each extension's ``parse`` has the shape expected by
``T0x0200AdditionDetails.custom_addition_content_func``. It returns the decoded
content when the id and length match, and None otherwise so that the
built-in decoding applies.
"""

from __future__ import annotations

import dataclasses
import struct
from typing import List, Optional

from jtbody.addition import AdditionContent
from jtbody.alarm_attach import P9208AlarmSign
from jtbody.base import BodyLengthError, bcd_to_time

_SB_BASE_LEN = 35
_TABLE22_LEN = 9

_TABLE18_BITS = (
    ("acc", 0),
    ("left_turn", 1),
    ("right_turn", 2),
    ("wipers", 3),
    ("brake", 4),
    ("card", 5),
    ("location", 10),
)


def _bit(value: int, position: int) -> bool:
    return bool((value >> position) & 1)


@dataclasses.dataclass
class T0x0200ExtensionTable18:
    """Vehicle status flags (table 18)."""

    original_value: int = 0
    acc: bool = False
    left_turn: bool = False
    right_turn: bool = False
    wipers: bool = False
    brake: bool = False
    card: bool = False
    location: bool = False

    @classmethod
    def from_value(cls, value: int) -> "T0x0200ExtensionTable18":
        flags = {name: _bit(value, pos) for name, pos in _TABLE18_BITS}
        return cls(original_value=value, **flags)


@dataclasses.dataclass
class T0x0200ExtensionSBBase:
    """Common tail of the active-safety items: position, time, status and alarm sign."""

    # km/h, 0-250
    vehicle_speed: int = 0
    # metres
    altitude: int = 0
    # degrees multiplied by 10^6
    latitude: int = 0
    longitude: int = 0
    date_time: str = ""
    vehicle_status: T0x0200ExtensionTable18 = dataclasses.field(
        default_factory=T0x0200ExtensionTable18
    )
    alarm_sign: P9208AlarmSign = dataclasses.field(default_factory=P9208AlarmSign)
    parse_success: bool = False

    def parse(self, data: bytes) -> None:
        if len(data) < _SB_BASE_LEN:
            raise BodyLengthError()
        self.vehicle_speed = data[0]
        self.altitude, self.latitude, self.longitude = struct.unpack(">HII", data[1:11])
        self.date_time = bcd_to_time(bytes(data[11:17]))
        (status,) = struct.unpack(">H", data[17:19])
        self.vehicle_status = T0x0200ExtensionTable18.from_value(status)
        self.alarm_sign.parse(bytes(data[19:35]))
        self.parse_success = True


@dataclasses.dataclass
class T0x0200ExtensionTable22:
    """One tire monitoring entry (table 22)."""

    # numbered in a Z pattern from the front left tire
    tire_pressure_alarm_location: int = 0
    alarm_or_event_type: int = 0
    # kPa
    tire_pressure: int = 0
    # degrees Celsius
    tire_temperature: int = 0
    # percent
    battery_level: int = 0


@dataclasses.dataclass
class T0x0200AdditionExtension0x64:
    """Driving assistance alarm (table 17)."""

    alarm_id: int = 0
    # 0x00-unavailable 0x01-start 0x02-end
    flag_status: int = 0
    alarm_event_type: int = 0
    alarm_level: int = 0
    pre_vehicle_speed: int = 0
    pre_vehicle_or_pedestrian_distance: int = 0
    deviation_type: int = 0
    road_sign_recognition_type: int = 0
    road_sign_recognition_data: int = 0
    base: T0x0200ExtensionSBBase = dataclasses.field(default_factory=T0x0200ExtensionSBBase)

    def parse(self, addition_id: int, content: bytes) -> Optional[AdditionContent]:
        if addition_id != 0x64 or len(content) != 47:
            return None
        (
            self.alarm_id,
            self.flag_status,
            self.alarm_event_type,
            self.alarm_level,
            self.pre_vehicle_speed,
            self.pre_vehicle_or_pedestrian_distance,
            self.deviation_type,
            self.road_sign_recognition_type,
            self.road_sign_recognition_data,
        ) = struct.unpack(">I8B", content[:12])
        self.base.parse(bytes(content[12:47]))
        return AdditionContent(data=bytes(content), custom_value=self)


@dataclasses.dataclass
class T0x0200AdditionExtension0x65:
    """Driver behaviour monitoring alarm (table 20)."""

    alarm_id: int = 0
    flag_status: int = 0
    alarm_event_type: int = 0
    alarm_level: int = 0
    # 1-10, higher is more tired
    fatigue_level: int = 0
    reserved: bytes = bytes(4)
    base: T0x0200ExtensionSBBase = dataclasses.field(default_factory=T0x0200ExtensionSBBase)

    def parse(self, addition_id: int, content: bytes) -> Optional[AdditionContent]:
        if addition_id != 0x65 or len(content) != 47:
            return None
        (
            self.alarm_id,
            self.flag_status,
            self.alarm_event_type,
            self.alarm_level,
            self.fatigue_level,
        ) = struct.unpack(">I4B", content[:8])
        self.reserved = bytes(content[8:12])
        self.base.parse(bytes(content[12:47]))
        return AdditionContent(data=bytes(content), custom_value=self)


@dataclasses.dataclass
class T0x0200AdditionExtension0x66:
    """Tire status monitoring alarm (table 21)."""

    alarm_id: int = 0
    flag_status: int = 0
    base: T0x0200ExtensionSBBase = dataclasses.field(default_factory=T0x0200ExtensionSBBase)
    alarm_or_event_count: int = 0
    alarm_or_event_list: List[T0x0200ExtensionTable22] = dataclasses.field(default_factory=list)

    def parse(self, addition_id: int, content: bytes) -> Optional[AdditionContent]:
        if addition_id != 0x66 or len(content) < 41:
            return None
        count = content[40]
        if len(content) != 41 + count * _TABLE22_LEN:
            return None
        self.alarm_id, self.flag_status = struct.unpack(">IB", content[:5])
        self.base.parse(bytes(content[5:40]))
        self.alarm_or_event_count = count
        self.alarm_or_event_list = [
            T0x0200ExtensionTable22(*struct.unpack(">BHHHH", content[start : start + _TABLE22_LEN]))
            for start in range(41, len(content), _TABLE22_LEN)
        ]
        return AdditionContent(data=bytes(content), custom_value=self)


@dataclasses.dataclass
class T0x0200AdditionExtension0x67:
    """Lane change decision assistance alarm (table 23)."""

    alarm_id: int = 0
    flag_status: int = 0
    # 0x01-rear approach 0x02-left rear approach 0x03-right rear approach
    alarm_event_type: int = 0
    base: T0x0200ExtensionSBBase = dataclasses.field(default_factory=T0x0200ExtensionSBBase)

    def parse(self, addition_id: int, content: bytes) -> Optional[AdditionContent]:
        if addition_id != 0x67 or len(content) != 41:
            return None
        self.alarm_id, self.flag_status, self.alarm_event_type = struct.unpack(
            ">IBB", content[:6]
        )
        self.base.parse(bytes(content[6:41]))
        return AdditionContent(data=bytes(content), custom_value=self)


@dataclasses.dataclass
class T0x0200AdditionExtension0x70:
    """Aggressive driving alarm (table 24)."""

    alarm_id: int = 0
    flag_status: int = 0
    alarm_event_type: int = 0
    # seconds
    alarm_time_threshold: int = 0
    alarm_threshold1: int = 0
    alarm_threshold2: int = 0
    base: T0x0200ExtensionSBBase = dataclasses.field(default_factory=T0x0200ExtensionSBBase)

    def parse(self, addition_id: int, content: bytes) -> Optional[AdditionContent]:
        if addition_id != 0x70 or len(content) != 47:
            return None
        (
            self.alarm_id,
            self.flag_status,
            self.alarm_event_type,
            self.alarm_time_threshold,
            self.alarm_threshold1,
            self.alarm_threshold2,
        ) = struct.unpack(">IBBHHH", content[:12])
        self.base.parse(bytes(content[12:48]))
        return AdditionContent(data=bytes(content), custom_value=self)