import pytest

from jtbody.base import BodyLengthError, ProtocolVersion
from jtbody.register import T0x0100, T0x0102

_PLATE = bytes.fromhex("b2e24131323334")


def _body_2011() -> bytes:
    return bytes.fromhex(
        "001f0073" "6364000000" "7777772e3830382e" "37363534333231" "01"
    ) + _PLATE


def _body_2013() -> bytes:
    return (
        bytes.fromhex("001f0073")
        + b"cd".ljust(5, b"\x00")
        + b"www.808.com".ljust(20, b"\x00")
        + b"7654321"
        + b"\x01"
        + _PLATE
    )


def _body_2019() -> bytes:
    return (
        bytes.fromhex("001f0073")
        + b"cd".ljust(11, b"\x00")
        + b"www.808.com".ljust(30, b"\x00")
        + b"7654321".ljust(30, b"\x00")
        + b"\x01"
        + _PLATE
    )


def _auth_2019() -> bytes:
    return (
        bytes([11])
        + b"authcode001"
        + b"000000000000001"
        + b"3.7.15".ljust(20, b"\x00")
    )


def test_register_2011():
    body = _body_2011()
    assert len(body) == 32
    msg = T0x0100()
    msg.parse(body, ProtocolVersion.V2013)
    assert msg == T0x0100(
        province_id=31,
        city_id=115,
        manufacturer_id="cd",
        terminal_model="www.808.",
        terminal_id="7654321",
        plate_color=1,
        license_plate_number="测A1234",
        version=ProtocolVersion.V2011,
    )
    assert msg.encode() == body


def test_register_2013():
    body = _body_2013()
    assert len(body) == 44
    msg = T0x0100()
    msg.parse(body, ProtocolVersion.V2013)
    assert msg == T0x0100(
        province_id=31,
        city_id=115,
        manufacturer_id="cd",
        terminal_model="www.808.com",
        terminal_id="7654321",
        plate_color=1,
        license_plate_number="测A1234",
        version=ProtocolVersion.V2013,
    )
    assert msg.encode() == body


def test_register_2019():
    body = _body_2019()
    assert len(body) == 83
    msg = T0x0100()
    msg.parse(body, ProtocolVersion.V2019)
    assert msg == T0x0100(
        province_id=31,
        city_id=115,
        manufacturer_id="cd",
        terminal_model="www.808.com",
        terminal_id="7654321",
        plate_color=1,
        license_plate_number="测A1234",
        version=ProtocolVersion.V2019,
    )
    assert msg.encode() == body


def test_register_2011_too_short():
    with pytest.raises(BodyLengthError):
        T0x0100().parse(_body_2011()[:24], ProtocolVersion.V2013)


def test_register_2019_too_short():
    with pytest.raises(BodyLengthError):
        T0x0100().parse(_body_2019()[:75], ProtocolVersion.V2019)


def test_register_36_bytes_read_as_2011():
    msg = T0x0100()
    msg.parse(_body_2013()[:36], ProtocolVersion.V2013)
    assert msg.version == ProtocolVersion.V2011
    assert msg.terminal_model == "www.808."


def test_auth_2013():
    body = b"authcode001"
    msg = T0x0102()
    msg.parse(body, ProtocolVersion.V2013)
    assert msg == T0x0102(auth_code="authcode001", version=ProtocolVersion.V2013)
    assert msg.encode() == body


def test_auth_2019():
    body = _auth_2019()
    assert len(body) == 47
    msg = T0x0102()
    msg.parse(body, ProtocolVersion.V2019)
    assert msg == T0x0102(
        auth_code_len=11,
        auth_code="authcode001",
        terminal_imei="000000000000001",
        software_version="3.7.15",
        version=ProtocolVersion.V2019,
    )
    assert msg.encode() == body


@pytest.mark.parametrize("length", [35, 37])
def test_auth_2019_too_short(length):
    with pytest.raises(BodyLengthError):
        T0x0102().parse(_auth_2019()[:length], ProtocolVersion.V2019)


def test_auth_software_version_stops_at_zero():
    body = bytes([2]) + b"ab" + b"000000000000001" + b"1.0\x00xyz".ljust(20, b"\x00")
    msg = T0x0102()
    msg.parse(body, ProtocolVersion.V2019)
    assert msg.auth_code == "ab"
    assert msg.software_version == "1.0"