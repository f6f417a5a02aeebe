# jtbody

`jtbody` reads and writes the message bodies used by the JT/T 808 vehicle
terminal protocol and its JT/T 1078 audio/video extensions. You pass each class
the raw, already unescaped body bytes.

Each message type is a dataclass named after its command ID. For example,
`T0x0200` is a terminal location report and `P0x9201` is a platform playback
request. Every message class derives from `jtbody.base.MessageBody` and has:

- `parse(body)`: fills the fields from the body bytes. It raises
  `jtbody.base.BodyLengthError` (a `ValueError`) when the body length does not
  match what the message type needs.
- `encode()`: returns the body bytes for the current field values.
- `has_reply()`: tells whether the message expects a reply.
- `command` and `reply_command`: class attributes holding `CommandType` values.
- `str(obj)`: the command name, the encoded body in hex, and one line per field.

`T0x0100.parse` and `T0x0102.parse` also take the protocol edition from the
message header as a `ProtocolVersion` value. It defaults to `V2013`.

Dates travel as 6-byte BCD values. In Python they are strings of the form
`"YYYY-MM-DD hh:mm:ss"`. The helpers `bcd_to_time`, `time_to_bcd` and
`fill_bytes` in `jtbody.base` convert them.

## Installation

```
pip install .
```

## Example

```python
from jtbody.base import BodyLengthError
from jtbody.location_report import T0x0200

body = bytes.fromhex(
    "000004000000080007203b7e"
    "02633df7013800030063241001235959"
)
report = T0x0200()
report.parse(body)
item = report.location_item
print(item.latitude, item.longitude, item.date_time)  # 119552894 40058359 2024-10-01 23:59:59
print(item.alarm_sign_details.terminal_lcd_fault)      # True
assert report.encode() == body

try:
    T0x0200().parse(body[:10])
except BodyLengthError:
    print("truncated body")
```

`T0x0200.encode()` writes only the 28-byte location part. Parsed additional
items are in `report.additions`, a dict of `Addition` keyed by item ID.

## Modules

| Module | Contents |
| --- | --- |
| `jtbody.base` | `BodyLengthError`, `CommandType`, `ProtocolVersion`, `ActiveSafetyType`, BCD helpers, `MessageBody`, `T0x0001`, `T0x0002` |
| `jtbody.register` | `T0x0100` registration, `T0x0102` authentication |
| `jtbody.location` | `T0x0200LocationItem`, `AlarmSignDetails`, `StatusSignDetails` |
| `jtbody.addition` | `T0x0200AdditionDetails`, `Addition`, `AdditionContent` and the decoded item types |
| `jtbody.location_report` | `T0x0200`, `T0x0704`, `T0x0704LocationItem` |
| `jtbody.safety_extensions` | active-safety additions 0x64–0x67 and 0x70 |
| `jtbody.multimedia` | `T0x0800`, `T0x0801`, `T0x0805` |
| `jtbody.device_info` | `T0x1003`, `T0x1005` |
| `jtbody.live_control` | `P0x9102`, `P0x9105` |
| `jtbody.playback` | `P0x9201`, `P0x9202` |
| `jtbody.resources` | `P0x9205`, `T0x1205`, `T0x1205AudioVideoResource` |
| `jtbody.upload_control` | `P0x9207`, `T0x1206` |
| `jtbody.file_upload` | `P0x9206`, `P0x9212`, `P0x9212RetransmitPacket`, `T0x1211`, `T0x1212` |
| `jtbody.alarm_attach` | `P0x9208`, `T0x1210`, `T0x1210AlarmItem`, `P9208AlarmSign` |

## Custom additional items

`T0x0200AdditionDetails.custom_addition_content_func` takes an item ID and its
content bytes. It returns an `AdditionContent`, or `None` to fall back to the
built-in decoding. The `parse` methods of the extension classes in
`jtbody.safety_extensions` have exactly this shape:

```python
from jtbody.location_report import T0x0200
from jtbody.safety_extensions import T0x0200AdditionExtension0x64

report = T0x0200()
report.addition_details.custom_addition_content_func = T0x0200AdditionExtension0x64().parse
```

The layouts of the regional alarm signs (Jiangsu by default) are chosen through
`P9208AlarmSign.active_safety_type`.

## What the package does not do

- It handles message bodies only. Framing, 0x7e escaping, checksums, headers
  and sub-packaging are outside it.
- It does not open connections or run a server.
- It does not build replies, except `T0x1212.reply_body`. That method returns
  the encoded 0x9212 reply to a completed file upload.

## Running the tests

```
pip install .[test]
pytest
```