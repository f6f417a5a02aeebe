"""Location item of a position report: fixed 28-byte part and flag details."""

from __future__ import annotations

import dataclasses
import struct

from jtbody.base import BodyLengthError, bcd_to_time, time_to_bcd

_ALARM_BITS = (
    "emergency_alarm",
    "over_speed",
    "fatigue_driving",
    "dangerous_alarm",
    "gnss_module_fault",
    "gnss_antenna_fault",
    "gnss_antenna_short_circuit",
    "terminal_power_supply",
    "terminal_power_supply_shutdown",
    "terminal_lcd_fault",
    "tts_module_fault",
    "camera_fault",
    "ic_card_module_fault",
    "over_speed_alarm",
    "fatigue_driving_alarm",
    "violation_driving_alarm",
    "tire_pressure_alarm",
    "right_turn_blind_area_alarm",
    "driving_timeout",
    "over_time_stop",
    "in_out_area",
    "in_out_line",
    "section_driving_time",
    "line_deviation",
    "vss_fault",
    "oil_level_abnormality",
    "steal_car",
    "lane_deviation",
    "lane_offset",
    "collision_alarm",
    "side_slip_alarm",
    "lane_opening_alarm",
)

_STATUS_LOW_BITS = (
    "acc",
    "location",
    "south",
    "east",
    "suspended",
    "encryption",
    "emergency_brake",
    "lane_offset",
)

# bits 8 and 9 carry the cargo state; these start at bit 10
_STATUS_HIGH_BITS = (
    "oil",
    "electricity",
    "vehicle_door",
    "front_door",
    "middle_door",
    "back_door",
    "driver_door",
    "custom_door",
    "use_gps",
    "use_bd",
    "use_glonass",
    "use_galileo",
    "vehicle_running",
)

_LOCATION_LEN = 28


def _bit(value: int, position: int) -> bool:
    return bool((value >> position) & 1)


@dataclasses.dataclass
class AlarmSignDetails:
    """Alarm flags, one per bit from bit0 (emergency) to bit31 (illegal door opening)."""

    emergency_alarm: bool = False
    over_speed: bool = False
    fatigue_driving: bool = False
    dangerous_alarm: bool = False
    gnss_module_fault: bool = False
    gnss_antenna_fault: bool = False
    gnss_antenna_short_circuit: bool = False
    terminal_power_supply: bool = False
    terminal_power_supply_shutdown: bool = False
    terminal_lcd_fault: bool = False
    tts_module_fault: bool = False
    camera_fault: bool = False
    ic_card_module_fault: bool = False
    over_speed_alarm: bool = False
    fatigue_driving_alarm: bool = False
    violation_driving_alarm: bool = False
    tire_pressure_alarm: bool = False
    right_turn_blind_area_alarm: bool = False
    driving_timeout: bool = False
    over_time_stop: bool = False
    in_out_area: bool = False
    in_out_line: bool = False
    section_driving_time: bool = False
    line_deviation: bool = False
    vss_fault: bool = False
    oil_level_abnormality: bool = False
    steal_car: bool = False
    lane_deviation: bool = False
    lane_offset: bool = False
    collision_alarm: bool = False
    side_slip_alarm: bool = False
    lane_opening_alarm: bool = False

    @classmethod
    def from_value(cls, value: int) -> "AlarmSignDetails":
        return cls(**{name: _bit(value, pos) for pos, name in enumerate(_ALARM_BITS)})


@dataclasses.dataclass
class StatusSignDetails:
    """Status flags; ``cargo`` is 0-empty 1-half 2-reserved 3-full."""

    acc: bool = False
    location: bool = False
    south: bool = False
    east: bool = False
    suspended: bool = False
    encryption: bool = False
    emergency_brake: bool = False
    lane_offset: bool = False
    cargo: int = 0
    oil: bool = False
    electricity: bool = False
    vehicle_door: bool = False
    front_door: bool = False
    middle_door: bool = False
    back_door: bool = False
    driver_door: bool = False
    custom_door: bool = False
    use_gps: bool = False
    use_bd: bool = False
    use_glonass: bool = False
    use_galileo: bool = False
    vehicle_running: bool = False

    @classmethod
    def from_value(cls, value: int) -> "StatusSignDetails":
        flags = {name: _bit(value, pos) for pos, name in enumerate(_STATUS_LOW_BITS)}
        flags.update(
            {name: _bit(value, pos + 10) for pos, name in enumerate(_STATUS_HIGH_BITS)}
        )
        # bit8 is the high digit of the cargo code, bit9 the low one
        cargo = (int(_bit(value, 8)) << 1) | int(_bit(value, 9))
        return cls(cargo=cargo, **flags)


@dataclasses.dataclass
class T0x0200LocationItem:
    """Basic location information shared by location reports."""

    alarm_sign: int = 0
    status_sign: int = 0
    # degrees multiplied by 10^6
    latitude: int = 0
    longitude: int = 0
    # metres
    altitude: int = 0
    # 1/10 km/h
    speed: int = 0
    # 0-359, north is 0, clockwise
    direction: int = 0
    date_time: str = ""
    alarm_sign_details: AlarmSignDetails = dataclasses.field(default_factory=AlarmSignDetails)
    status_sign_details: StatusSignDetails = dataclasses.field(default_factory=StatusSignDetails)

    def parse(self, body: bytes) -> None:
        """Read the first 28 bytes of ``body``; the rest is left to the caller."""
        if len(body) < _LOCATION_LEN:
            raise BodyLengthError()
        (
            self.alarm_sign,
            self.status_sign,
            self.latitude,
            self.longitude,
            self.altitude,
            self.speed,
            self.direction,
        ) = struct.unpack(">IIIIHHH", body[:22])
        self.alarm_sign_details = AlarmSignDetails.from_value(self.alarm_sign)
        self.status_sign_details = StatusSignDetails.from_value(self.status_sign)
        self.date_time = bcd_to_time(body[22:28])

    def encode(self) -> bytes:
        return struct.pack(
            ">IIIIHHH",
            self.alarm_sign,
            self.status_sign,
            self.latitude,
            self.longitude,
            self.altitude,
            self.speed,
            self.direction,
        ) + time_to_bcd(self.date_time)