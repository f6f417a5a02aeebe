import pytest

from jtbody.base import BodyLengthError, CommandType
from jtbody.live_control import P0x9102, P0x9105


def test_p0x9102_parse_and_encode():
    body = bytes.fromhex("08010203")
    msg = P0x9102()
    msg.parse(body)
    assert msg == P0x9102(
        channel_no=8, control_cmd=1, close_audio_video_data=2, stream_type=3
    )
    assert msg.encode() == body


def test_p0x9102_short_body():
    with pytest.raises(BodyLengthError):
        P0x9102().parse(bytes.fromhex("080102"))


def test_p0x9102_long_body():
    with pytest.raises(BodyLengthError):
        P0x9102().parse(bytes.fromhex("0801020304"))


def test_p0x9102_reply_info():
    msg = P0x9102()
    assert msg.has_reply() is False
    assert msg.reply_command is CommandType.T0001_GENERAL_RESPOND
    assert msg.command == 0x9102


def test_p0x9105_parse_and_encode():
    body = bytes.fromhex("0203")
    msg = P0x9105()
    msg.parse(body)
    assert msg == P0x9105(channel_no=2, package_loss_rate=3)
    assert msg.encode() == body


def test_p0x9105_short_body():
    with pytest.raises(BodyLengthError):
        P0x9105().parse(bytes.fromhex("02"))


def test_p0x9105_no_reply():
    assert P0x9105().has_reply() is False
    assert P0x9105(channel_no=1, package_loss_rate=50).encode() == b"\x01\x32"