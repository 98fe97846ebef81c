# safezone

The core of a safety monitoring service. Cameras watch areas, a detection
model flags people without face masks, wearing them incorrectly, or facing
the wrong way, and the resulting violations are recorded for security staff
to review.

## Modules

- `safezone.hexadecimal`: `to_hexadecimal` renders an unsigned 128-bit
  integer as 32 upper-case hex digits; `from_hexadecimal` parses hex digits
  of either case and raises `HexParseError` (a `ValueError`) on an empty
  string or a non-hex character.
- `safezone.separated`: `with_separator(iterable, new_separator)` yields
  each item followed by a value made by calling `new_separator()`; a
  separator also follows the last item.
- `safezone.errors`: `LogLevel`, `LoggableError` and `ResponseError`.
  A `ResponseError` carries a log message, a message for the client, a log
  level and an HTTP status. Class methods build the common cases
  (`unauthorized`, `server_error`, `invalid_field_format`, `conflict_field`,
  `value_do_not_exist`), `length_limit_check` raises when a field's UTF-8
  length is out of bounds, and `error_body()` gives the JSON body
  `{"message": ...}`. `into_response` turns any loggable error into a
  `ResponseError`.
- `safezone.recorder`: `LogRecorder` keeps `LogEntry` items in order.
  `record(log, path)` stores anything with `message`, `level` and
  `timestamp`; `retrieve(index, length)` renders a range of entries as
  `{logs:[...]}` with one JSON object per entry; `log_on_error(func, ...)`
  calls a function and records a `LoggableError` or `ResponseError` it
  raises, returning `None` in that case.
- `safezone.config`: `ServerConfig.load()` reads `ACTIX_PORT` and
  `CLIENT_DB_URL` from the environment, loading a `.env` file if one is
  found; `socket_addr()` returns `("0.0.0.0", port)`.
- `safezone.enums`: `Category`, `DeviceOs`, `UserRole` and `ViolationKind`
  with their JSON (`from_json`, `to_json`) and database (`from_sql`,
  `to_sql`) encodings.
- `safezone.credentials`: `DeviceSignature` (a 128-bit value shown as hex),
  `PasswordHash` (64 bytes, shown as unpadded base64) and `JwtClaims`
  (session id and an expiry fifteen days out).
- `safezone.notifier`: `Notifier` holds a `Listener` per session and
  `notify` delivers a `Notification` (new violations or camera activation)
  to each, returning a `Response` per session. Notifications are encoded as
  CBOR; a listener switches event kinds on or off through CBOR
  `ClientRequest` messages passed to `handle_message`.
- `safezone.records`: the rows and requests for sessions, users, areas,
  cameras and violations, with their JSON forms and validation rules
  (`AreaInsert.from_request`, `CameraAddRequest.model`).
- `safezone.detection`: post-processing of detector output
  (`process_output` with confidence filtering and overlap suppression,
  `iou`, `union`, `intersection`, `OutputBox`, `Label`), frame preparation
  (`as_input`) and `violation_kind_for`, which maps a label to the
  violation it is recorded as.

## Installation

```
pip install .
```

## Examples

```python
from safezone.hexadecimal import to_hexadecimal, from_hexadecimal

to_hexadecimal(0x60A344)           # '0000000000000000000000000060A344'
from_hexadecimal("A00000060A344")  # 0xA00000060A344
```

```python
from safezone.errors import ResponseError
from safezone.recorder import LogRecorder

recorder = LogRecorder()
try:
    ResponseError.length_limit_check("Label", "ab", 3, 15)
except ResponseError as error:
    recorder.record(error, "/areas/camera")
print(recorder.retrieve(0, 10))
```

```python
from safezone.notifier import Listener, Notification, Notifier
import uuid

sent = []
notifier = Notifier()
notifier.add_client(uuid.uuid4(), Listener(send=sent.append))
notifier.notify(Notification.new_violations([uuid.uuid4()]))
```

## What this package does not do

It has no web server, no routes, no database access and no command to run.
It does not capture video from cameras or run the detection model; it only
prepares frames for the model (`as_input`) and interprets its output
(`process_output`). The records in `safezone.records` describe what is
stored, but storing and querying them is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```