import pytest

from jtbody.base import BodyLengthError, CommandType
from jtbody.playback import P0x9201, P0x9202

BODY_9201 = bytes.fromhex(
    "0d31322e31322e3132332e313233a7b93c6c320200000000200707192359200707192359"
)
BODY_9202 = bytes.fromhex("110103200707192359")


def test_p0x9201_parse():
    handler = P0x9201()
    handler.parse(BODY_9201)
    assert handler == P0x9201(
        server_ip_len=13,
        server_ip_addr="12.12.123.123",
        tcp_port=42937,
        udp_port=15468,
        channel_no=50,
        media_type=2,
        stream_type=0,
        memory_type=0,
        playback_way=0,
        play_speed=0,
        start_time="2020-07-07 19:23:59",
        end_time="2020-07-07 19:23:59",
    )


def test_p0x9201_round_trip():
    handler = P0x9201()
    handler.parse(BODY_9201)
    assert handler.encode() == BODY_9201


@pytest.mark.parametrize("length", [0, 3])
def test_p0x9201_short_body(length):
    with pytest.raises(BodyLengthError):
        P0x9201().parse(BODY_9201[:length])


def test_p0x9201_extra_byte_rejected():
    with pytest.raises(BodyLengthError):
        P0x9201().parse(BODY_9201 + b"\x00")


def test_p0x9201_reply_settings():
    assert P0x9201().has_reply() is False
    assert P0x9201.reply_command == CommandType.T0001_GENERAL_RESPOND


def test_p0x9202_parse():
    handler = P0x9202()
    handler.parse(BODY_9202)
    assert handler == P0x9202(
        channel_no=17,
        play_control=1,
        play_speed=3,
        date_time="2020-07-07 19:23:59",
    )


def test_p0x9202_round_trip():
    handler = P0x9202()
    handler.parse(BODY_9202)
    assert handler.encode() == BODY_9202


def test_p0x9202_empty_time_encodes_zeros():
    assert P0x9202(channel_no=1).encode() == bytes([1, 0, 0]) + bytes(6)


@pytest.mark.parametrize("length", [1])
def test_p0x9202_short_body(length):
    with pytest.raises(BodyLengthError):
        P0x9202().parse(BODY_9202[:length])


def test_p0x9202_has_no_reply():
    assert P0x9202().has_reply() is False