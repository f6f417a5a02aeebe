import re

import pytest

from jtbody.addition import (
    AdditionContent,
    AdditionExtendVehicleStatus,
    AdditionIOStatus,
    AdditionTirePressure,
    LocationAdditionType,
    T0x0200AdditionDetails,
)
from jtbody.base import BodyLengthError


def frame_body(message: str) -> bytes:
    raw = bytes.fromhex(message)[1:-1]
    content = re.sub(
        rb"\x7d([\x01\x02])",
        lambda m: b"\x7d" if m.group(1) == b"\x01" else b"\x7e",
        raw,
    )
    length = int.from_bytes(content[2:4], "big") & 0x3FF
    return content[-1 - length : -1]


ALL_KNOWN = (
    "7e020000800123456789017fff000004000000080006eeb6ad02633df70138000300632007071923590104"
    "0000000b02020016030200210402002c051e373737000000000000000000000000000000000000000000000"
    "0000000001105420000004212064d0000004d4d1307000000580058582504000000632a02000a2b04000000"
    "1430011e31012806020001927e"
)

WITH_CUSTOM = (
    "7E0200007B0123456789017FFF000004000000080006EEB6AD02633DF7013800030063200707192359010400"
    "00000B02020016030200210402002C051E37373700000000000000000000000000000000000000000000000"
    "000000011010012064D0000004D4D1307000000580058582504000000632A02000A2B040000001430011E31"
    "01283301207A7E"
)

BAD_LENGTH = (
    "7E0200007A0123456789017FFF000004000000080006EEB6AD02633DF7013800030063200707192359010400"
    "00000B02020016030200210402002C051E37373700000000000000000000000000000000000000000000000"
    "0000000110012064D0000004D4D1307000000580058582504000000632A02000A2B040000001430011E3101"
    "283301207A7E"
)

TOO_SHORT = (
    "7E0200007F0123456789017FFF000004000000080006EEB6AD02633DF7013800030063200707192359010400"
    "00000B02020016030200210402002C051E37373700000000000000000000000000000000000000000000000"
    "00000001105420000004212064D0000004D4D1307000000580058582504000000632A02000A2B0400000014"
    "30011E310128330301597E"
)


def parse_additions(message, func=None):
    details = T0x0200AdditionDetails(custom_addition_content_func=func)
    details.parse(frame_body(message)[28:])
    return details


def test_all_known_additions():
    details = parse_additions(ALL_KNOWN)
    a = details.additions
    assert a[LocationAdditionType.MILE].content.mile == 11
    assert a[LocationAdditionType.OIL].content.oil == 22
    assert a[LocationAdditionType.SPEED].content.speed == 33
    assert a[LocationAdditionType.MANUAL_ALARM].content.manual_alarm == 44
    assert a[0x05].content.tire_pressure.values == {0: 55, 1: 55, 2: 55}
    assert a[0x05].length == 30
    assert a[0x06].content.car_temperature == 1
    assert a[0x11].content.over_speed_alarm.location_type == 0x42
    area = a[0x12].content.area_alarm
    assert (area.location_type, area.area_id, area.direction) == (0x4D, 77, 0x4D)
    drive = a[0x13].content.driving_time_insufficient_alarm
    assert (drive.road_section_id, drive.road_section_driving_time_second, drive.result) == (
        88,
        88,
        88,
    )
    ext = a[0x25].content.extend_vehicle_status
    assert ext.value == 99
    assert ext.low_beam_signal and ext.high_beam_signal
    assert ext.reverse_gear_signal and ext.fog_light_signal
    assert not ext.brake_signal
    io = a[0x2A].content.io_status
    assert io.value == 10 and io.sleep_status and not io.deep_sleep_status
    assert a[0x2B].content.analog == 20
    assert a[0x30].content.wifi_signal_strength == 30
    assert a[0x31].content.gnss_position_num == 40
    assert len(a) == 14


def test_custom_unknown_addition():
    def custom(addition_id, content):
        if addition_id == 0x33:
            return AdditionContent(data=content, custom_value="seen")
        return None

    details = parse_additions(WITH_CUSTOM, custom)
    assert details.additions[0x33].content.data == b"\x20"
    assert details.additions[0x33].content.custom_value == "seen"
    assert details.additions[0x11].content.over_speed_alarm.location_type == 0
    assert details.additions[0x11].content.over_speed_alarm.area_id == 0
    assert details.additions[0x01].content.mile == 11


def test_unknown_addition_keeps_raw_data():
    details = parse_additions(WITH_CUSTOM)
    assert details.additions[0x33].content.data == b"\x20"
    assert details.additions[0x33].content.custom_value is None


def test_length_not_matching_protocol():
    with pytest.raises(BodyLengthError):
        parse_additions(BAD_LENGTH)


def test_body_shorter_than_declared_length():
    with pytest.raises(BodyLengthError):
        parse_additions(TOO_SHORT)


def test_id_without_length():
    details = T0x0200AdditionDetails()
    with pytest.raises(BodyLengthError):
        details.parse(bytes.fromhex("31012833"))


def test_custom_function_overrides_builtin():
    details = T0x0200AdditionDetails(
        custom_addition_content_func=lambda i, c: AdditionContent(data=c, mile=7)
    )
    content = details.decode(0x01, b"\x00\x00\x00\x0b")
    assert content.mile == 7


def test_decode_builtin():
    details = T0x0200AdditionDetails()
    assert details.decode(0x01, b"\x00\x00\x00\x0b").mile == 11
    assert details.decode(0x30, b"\x05").wifi_signal_strength == 5


def test_empty_gnss_content_raises():
    with pytest.raises(BodyLengthError):
        T0x0200AdditionDetails().decode(0x31, b"")


def test_extend_vehicle_status_bits():
    full = AdditionExtendVehicleStatus.from_value(0x7FFF)
    assert full.clutch_status and full.low_beam_signal and full.abs_work
    empty = AdditionExtendVehicleStatus.from_value(0x8000)
    assert not empty.clutch_status and empty.value == 0x8000


def test_io_status_bits():
    assert AdditionIOStatus.from_value(1).deep_sleep_status is True
    assert AdditionIOStatus.from_value(1).sleep_status is False


def test_tire_pressure_skips_zero():
    assert AdditionTirePressure.from_bytes(b"\x00\x10\x00\x20").values == {1: 0x10, 3: 0x20}