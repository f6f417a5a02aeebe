"""Additional information items carried after the location part of a position report."""

from __future__ import annotations

import dataclasses
import enum
import struct
from typing import Any, Callable, Dict, Optional

from jtbody.base import BodyLengthError


class LocationAdditionType(enum.IntEnum):
    """Ids of the known additional information items."""

    MILE = 0x01
    OIL = 0x02
    SPEED = 0x03
    MANUAL_ALARM = 0x04
    TIRE_PRESSURE = 0x05
    CAR_TEMPERATURE = 0x06
    OVER_SPEED_ALARM = 0x11
    AREA_ALARM = 0x12
    DRIVING_TIME_INSUFFICIENT_ALARM = 0x13
    EXTEND_VEHICLE_STATUS = 0x25
    IO_STATUS = 0x2A
    ANALOG = 0x2B
    WIFI_SIGNAL_STRENGTH = 0x30
    GNSS_POSITION_NUM = 0x31


# Allowed content lengths of the items whose length the protocol fixes.
_CONTENT_LENGTHS: Dict[int, tuple] = {
    0x01: (4,),
    0x25: (4,),
    0x2B: (4,),
    0x02: (2,),
    0x03: (2,),
    0x04: (2,),
    0x06: (2,),
    0x2A: (2,),
    0x05: (30,),
    0x11: (1, 5),
    0x12: (6,),
    0x13: (7,),
    0x30: (1,),
}

_EXTEND_STATUS_BITS = (
    "low_beam_signal",
    "high_beam_signal",
    "right_turn_signal",
    "left_turn_signal",
    "brake_signal",
    "reverse_gear_signal",
    "fog_light_signal",
    "clearance_lights",
    "horn_signal",
    "air_conditioner_signal",
    "neutral_signal",
    "retarder_work",
    "abs_work",
    "heater_work",
    "clutch_status",
)


def _bit(value: int, position: int) -> bool:
    return bool((value >> position) & 1)


def _uint(data: bytes) -> int:
    return int.from_bytes(data, "big")


@dataclasses.dataclass
class AdditionTirePressure:
    """Tire pressures in Pa keyed by tire index; zero readings are left out."""

    values: Dict[int, int] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_bytes(cls, content: bytes) -> "AdditionTirePressure":
        return cls({index: value for index, value in enumerate(content) if value})


@dataclasses.dataclass
class AdditionOverSpeedAlarm:
    """Over-speed alarm; location type 0 means no specific area."""

    # 0-none 1-circle 2-rectangle 3-polygon 4-road section
    location_type: int = 0
    area_id: int = 0


@dataclasses.dataclass
class AdditionAreaAlarm:
    """Entering or leaving an area or route."""

    # 1-circle 2-rectangle 3-polygon 4-route
    location_type: int = 0
    area_id: int = 0
    # 0-in 1-out
    direction: int = 0


@dataclasses.dataclass
class AdditionDrivingTimeInsufficientAlarm:
    """Road section driving time too short or too long."""

    road_section_id: int = 0
    road_section_driving_time_second: int = 0
    # 0-too short 1-too long
    result: int = 0


@dataclasses.dataclass
class AdditionExtendVehicleStatus:
    """Extended vehicle signal status bits 0 to 14."""

    value: int = 0
    low_beam_signal: bool = False
    high_beam_signal: bool = False
    right_turn_signal: bool = False
    left_turn_signal: bool = False
    brake_signal: bool = False
    reverse_gear_signal: bool = False
    fog_light_signal: bool = False
    clearance_lights: bool = False
    horn_signal: bool = False
    air_conditioner_signal: bool = False
    neutral_signal: bool = False
    retarder_work: bool = False
    abs_work: bool = False
    heater_work: bool = False
    clutch_status: bool = False

    @classmethod
    def from_value(cls, value: int) -> "AdditionExtendVehicleStatus":
        flags = {name: _bit(value, pos) for pos, name in enumerate(_EXTEND_STATUS_BITS)}
        return cls(value=value, **flags)


@dataclasses.dataclass
class AdditionIOStatus:
    """IO status bits: bit0 deep sleep, bit1 sleep."""

    value: int = 0
    deep_sleep_status: bool = False
    sleep_status: bool = False

    @classmethod
    def from_value(cls, value: int) -> "AdditionIOStatus":
        return cls(
            value=value,
            deep_sleep_status=_bit(value, 0),
            sleep_status=_bit(value, 1),
        )


@dataclasses.dataclass
class AdditionContent:
    """Raw content of an item and the value decoded from it."""

    data: bytes = b""
    custom_value: Any = None
    mile: int = 0
    oil: int = 0
    speed: int = 0
    manual_alarm: int = 0
    tire_pressure: AdditionTirePressure = dataclasses.field(default_factory=AdditionTirePressure)
    car_temperature: int = 0
    over_speed_alarm: AdditionOverSpeedAlarm = dataclasses.field(
        default_factory=AdditionOverSpeedAlarm
    )
    area_alarm: AdditionAreaAlarm = dataclasses.field(default_factory=AdditionAreaAlarm)
    driving_time_insufficient_alarm: AdditionDrivingTimeInsufficientAlarm = dataclasses.field(
        default_factory=AdditionDrivingTimeInsufficientAlarm
    )
    extend_vehicle_status: AdditionExtendVehicleStatus = dataclasses.field(
        default_factory=AdditionExtendVehicleStatus
    )
    io_status: AdditionIOStatus = dataclasses.field(default_factory=AdditionIOStatus)
    # bit0-15 AD0, bit16-31 AD1
    analog: int = 0
    wifi_signal_strength: int = 0
    gnss_position_num: int = 0


@dataclasses.dataclass
class Addition:
    """One id-length-content item."""

    id: int = 0
    length: int = 0
    content: AdditionContent = dataclasses.field(default_factory=AdditionContent)


CustomContentFunc = Callable[[int, bytes], Optional[AdditionContent]]


@dataclasses.dataclass
class T0x0200AdditionDetails:
    """Additional items keyed by id.

    ``custom_addition_content_func`` is consulted first for every item; it
    returns the content it decoded, or None to fall back to the built-in
    decoding.
    """

    additions: Dict[int, Addition] = dataclasses.field(default_factory=dict)
    custom_addition_content_func: Optional[CustomContentFunc] = dataclasses.field(
        default=None, repr=False, compare=False
    )

    def parse(self, body: bytes) -> None:
        index = 0
        while index < len(body):
            if index + 2 > len(body):
                raise BodyLengthError()
            addition_id, length = body[index], body[index + 1]
            allowed = _CONTENT_LENGTHS.get(addition_id)
            if allowed is not None and length not in allowed:
                raise BodyLengthError(
                    f"addition 0x{addition_id:02x} cannot be {length} bytes long"
                )
            start = index + 2
            end = start + length
            if end > len(body):
                raise BodyLengthError()
            content = bytes(body[start:end])
            self.additions[addition_id] = Addition(
                id=addition_id,
                length=length,
                content=self.decode(addition_id, content),
            )
            index = end

    def decode(self, addition_id: int, content: bytes) -> AdditionContent:
        if self.custom_addition_content_func is not None:
            custom = self.custom_addition_content_func(addition_id, content)
            if custom is not None:
                return custom
        result = AdditionContent(data=content)
        if addition_id == 0x01:
            result.mile = _uint(content)
        elif addition_id == 0x02:
            result.oil = _uint(content)
        elif addition_id == 0x03:
            result.speed = _uint(content)
        elif addition_id == 0x04:
            result.manual_alarm = _uint(content)
        elif addition_id == 0x05:
            result.tire_pressure = AdditionTirePressure.from_bytes(content)
        elif addition_id == 0x06:
            result.car_temperature = _uint(content)
        elif addition_id == 0x11:
            if not content:
                raise BodyLengthError()
            alarm = AdditionOverSpeedAlarm(location_type=content[0])
            if content[0] != 0:
                if len(content) < 4:
                    raise BodyLengthError()
                # the id is read from the leading four bytes of the content
                alarm.area_id = _uint(content[:4])
            result.over_speed_alarm = alarm
        elif addition_id == 0x12:
            location_type, area_id, direction = struct.unpack(">BIB", content)
            result.area_alarm = AdditionAreaAlarm(location_type, area_id, direction)
        elif addition_id == 0x13:
            road_id, seconds, outcome = struct.unpack(">IHB", content)
            result.driving_time_insufficient_alarm = AdditionDrivingTimeInsufficientAlarm(
                road_id, seconds, outcome
            )
        elif addition_id == 0x25:
            result.extend_vehicle_status = AdditionExtendVehicleStatus.from_value(_uint(content))
        elif addition_id == 0x2A:
            result.io_status = AdditionIOStatus.from_value(_uint(content))
        elif addition_id == 0x2B:
            result.analog = _uint(content)
        elif addition_id == 0x30:
            result.wifi_signal_strength = content[0]
        elif addition_id == 0x31:
            if not content:
                raise BodyLengthError()
            result.gnss_position_num = content[0]
        return result