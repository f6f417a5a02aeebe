import pytest

from jtbody.base import BodyLengthError, CommandType
from jtbody.resources import P0x9205, T0x1205, T0x1205AudioVideoResource

P9205_BODY = bytes.fromhex("e7" "200707192359" "200707192359" "0000000000000000" "9b6e00")

T1205_BODY = bytes.fromhex(
    "0000"
    "00000001"
    "01"
    "241102000000"
    "241102000102"
    "0000000000000400"
    "010101"
    "0000000b"
)


def test_p9205_parse_fields():
    msg = P0x9205()
    msg.parse(P9205_BODY)
    assert msg == P0x9205(
        channel_no=231,
        start_time="2020-07-07 19:23:59",
        end_time="2020-07-07 19:23:59",
        alarm_flag=0,
        media_type=155,
        stream_type=110,
        storage_type=0,
    )


def test_p9205_encode_round_trip():
    msg = P0x9205()
    msg.parse(P9205_BODY)
    assert msg.encode() == P9205_BODY


@pytest.mark.parametrize("length", [1, 23])
def test_p9205_wrong_length(length):
    with pytest.raises(BodyLengthError):
        P0x9205().parse(P9205_BODY[:length])


def test_p9205_reply_and_commands():
    msg = P0x9205()
    assert msg.has_reply() is False
    assert msg.command == 0x9205
    assert msg.reply_command == CommandType.T1205_UPLOAD_AUDIO_VIDEO_RESOURCE_LIST


def test_p9205_alarm_flag_is_64_bit():
    msg = P0x9205(alarm_flag=0x0102030405060708)
    assert msg.encode()[13:21] == bytes.fromhex("0102030405060708")


def test_t1205_parse_fields():
    msg = T0x1205()
    msg.parse(T1205_BODY)
    assert msg.serial_number == 0
    assert msg.audio_video_resource_total == 1
    assert msg.audio_video_resource_list == [
        T0x1205AudioVideoResource(
            channel_no=1,
            start_time="2024-11-02 00:00:00",
            end_time="2024-11-02 00:01:02",
            alarm_flag=1024,
            audio_video_resource_type=1,
            stream_type=1,
            memory_type=1,
            file_size=11,
        )
    ]


def test_t1205_encode_round_trip():
    msg = T0x1205()
    msg.parse(T1205_BODY)
    assert msg.encode() == T1205_BODY


@pytest.mark.parametrize("length", [1, 7])
def test_t1205_wrong_length(length):
    with pytest.raises(BodyLengthError):
        T0x1205().parse(T1205_BODY[:length])


def test_t1205_two_resources_round_trip():
    item = T0x1205AudioVideoResource(
        channel_no=2,
        start_time="2024-01-02 03:04:05",
        end_time="2024-01-02 03:05:06",
        alarm_flag=7,
        audio_video_resource_type=2,
        stream_type=1,
        memory_type=2,
        file_size=99,
    )
    msg = T0x1205(
        serial_number=5, audio_video_resource_total=2, audio_video_resource_list=[item, item]
    )
    encoded = msg.encode()
    assert len(encoded) == 6 + 2 * 28
    parsed = T0x1205()
    parsed.parse(encoded)
    assert parsed == msg


def test_t1205_has_no_reply():
    assert T0x1205().has_reply() is False
    assert T0x1205().encode() == bytes(6)