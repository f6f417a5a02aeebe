import pytest

from jtbody.base import (
    BodyLengthError,
    CommandType,
    ProtocolVersion,
    T0x0001,
    T0x0002,
    bcd_to_time,
    fill_bytes,
    time_to_bcd,
)


def test_bcd_to_time():
    assert bcd_to_time(bytes.fromhex("241001235959")) == "2024-10-01 23:59:59"


def test_bcd_to_time_keeps_raw_digits():
    assert bcd_to_time(bytes.fromhex("002002020100")) == "2000-20-02 02:01:00"


def test_bcd_to_time_wrong_length():
    with pytest.raises(BodyLengthError):
        bcd_to_time(b"\x24\x10")


def test_time_to_bcd():
    assert time_to_bcd("2020-07-07 19:23:59") == bytes.fromhex("200707192359")


def test_time_to_bcd_empty_is_zero():
    assert time_to_bcd("") == bytes(6)


def test_time_to_bcd_invalid():
    with pytest.raises(ValueError):
        time_to_bcd("2020-07")


@pytest.mark.parametrize("raw", ["241001235959", "200707192359", "241102000102"])
def test_bcd_round_trip(raw):
    data = bytes.fromhex(raw)
    assert time_to_bcd(bcd_to_time(data)) == data


def test_fill_bytes_pads():
    assert fill_bytes("cd", 5) == b"cd\x00\x00\x00"


def test_fill_bytes_truncates():
    assert fill_bytes("www.808.com", 8) == b"www.808."


def test_enums_lookup_by_value():
    assert CommandType(0x0200) is CommandType.T0200_LOCATION_REPORT
    assert ProtocolVersion(3) is ProtocolVersion.V2019


def test_t0x0001_parse():
    body = bytes.fromhex("007b01c803")
    msg = T0x0001()
    msg.parse(body)
    assert msg == T0x0001(serial_number=123, respond_id=456, result=3)
    assert msg.encode() == body


@pytest.mark.parametrize("length", [4])
def test_t0x0001_short_body(length):
    body = bytes.fromhex("007b01c803")[:length]
    with pytest.raises(BodyLengthError):
        T0x0001().parse(body)


def test_t0x0001_no_reply_and_str():
    msg = T0x0001(serial_number=123, respond_id=456, result=3)
    assert msg.has_reply() is False
    assert str(msg).startswith("T0001_GENERAL_RESPOND:[007b01c803]")


def test_t0x0002_heartbeat():
    msg = T0x0002()
    msg.parse(b"")
    assert msg.encode() == b""
    assert msg.has_reply() is True
    assert msg.reply_command is CommandType.P8001_GENERAL_RESPOND