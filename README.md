# sensorlink

`sensorlink` models a small sensor telemetry service. Sensors report
temperature readings, and a server answers them in four ways: one reading at
a time, as a stream of readings, as an uploaded batch, or as a two-way
conversation. Bearer-token checks can guard the calls, and a client-side
pipeline produces readings and sends them while limiting how many sends run
at once.

It uses only the Python standard library. Logging goes through the
`logging` module under the `sensorlink.server` and `sensorlink.producer`
loggers.

## Messages

`sensorlink.messages` holds the values passed between sensors and the
server. The message classes are frozen dataclasses.

- `SensorData`: one reading, with `id` (str), `temperature` (float) and a
  Unix `timestamp` (int).
- `SensorRequest`: asks for a stream of readings for one `sensor_id`.
- `ServerResponse`: the server's answer, carried in `status`.
- `StatusCode`: an enum of call outcome codes, from `OK` (0) to
  `UNAUTHENTICATED` (16), including `INVALID_ARGUMENT`.
- `RpcError`: the exception raised when a call fails. It has `code` (a
  `StatusCode`) and `details` (the message); its text is
  `"<CODE NAME>: <details>"`.

```python
from sensorlink.messages import SensorData, SensorRequest

reading = SensorData(id="sensor-a", temperature=72.5, timestamp=1_700_000_000)
request = SensorRequest(sensor_id="sensor-a")
```

## The server

`sensorlink.server.SensorServer(processing_delay=4.0, stream_interval=1.0)`
offers four calls:

| Call | Shape | Result |
| --- | --- | --- |
| `send_sensor_data(data, metadata=None)` | one reading in, one answer out | `ServerResponse(status="Received!")` after sleeping `processing_delay` seconds; a negative temperature raises `RpcError` with `StatusCode.INVALID_ARGUMENT` |
| `get_sensor_data_stream(request)` | one request in, a generator out | ten `SensorData` for `request.sensor_id`, temperatures between 50 and 100, with a pause of `stream_interval` seconds after each |
| `upload_sensor_batch(requests)` | an iterable in, one answer out | `ServerResponse(status="Received N sensor records.")` |
| `live_sensor_chats(requests)` | an iterable in, a generator out | one answer per reading: `"OK"`, or `"WARNING: High Temperature for <id>"` when the temperature is above 80 |

If `metadata` given to `send_sensor_data` has a `"client-id"` entry (a
string or a sequence of strings), the first value is logged.

Set `processing_delay` and `stream_interval` to `0` to get answers at once:

```python
from sensorlink.messages import SensorData
from sensorlink.server import SensorServer

server = SensorServer(processing_delay=0, stream_interval=0)
readings = [SensorData(id="a", temperature=55), SensorData(id="b", temperature=85)]

server.upload_sensor_batch(readings).status
# 'Received 2 sensor records.'
[r.status for r in server.live_sensor_chats(readings)]
# ['OK', 'WARNING: High Temperature for b']
```

## Authentication

`sensorlink.auth` holds token checks to run in front of the server's calls.
Metadata is a mapping from header names to a string or a sequence of
strings; the `authorization` key is matched without regard to case, and its
first value is the one checked.

- `is_valid_token(auth_header)` is true only for exactly
  `"Bearer secret"`: two space-separated parts, the `Bearer` scheme and the
  unary token.
- `unary_auth_interceptor(metadata, request, handler)` raises `RpcError`
  with `StatusCode.UNAUTHENTICATED` when `metadata` is `None` or its
  authorization value fails `is_valid_token`; otherwise it returns
  `handler(request, metadata)`.
- `stream_auth_interceptor(metadata, requests, handler)` does the same for
  streaming calls, which expect exactly `"Bearer token"`; otherwise it
  returns `handler(requests)`.

```python
from sensorlink.auth import stream_auth_interceptor, unary_auth_interceptor

unary_auth_interceptor({"authorization": "Bearer secret"}, readings[0], server.send_sensor_data)
stream_auth_interceptor({"authorization": "Bearer token"}, readings, server.upload_sensor_batch)
```

## Producing and sending readings

`sensorlink.producer` builds readings and feeds them to anything with a
`send_sensor_data(data)` method, such as a `SensorServer`:

- `generate_sensor_data()` makes one reading with a fresh UUID as its id and
  a temperature between 50 and 100.
- `make_batch(size=10)` makes `size` readings with temperatures between 20
  and 70, ready for `upload_sensor_batch`.
- `data_producer(queue, duration=60.0, interval=1.0)` puts a new reading on
  the queue every `interval` seconds until `duration` seconds have passed,
  then puts `None` to mark the end. A non-positive `interval` raises
  `ValueError`.
- `processor(queue, client, max_in_flight=5)` is a generator that takes
  readings off the queue until `None` and sends each one on its own thread,
  with at most `max_in_flight` sends running at once. It yields responses as
  sends complete, so not necessarily in queue order. A send that raises is
  reported as `ServerResponse(status="ERROR!")`. A `max_in_flight` below 1
  raises `ValueError`.
- `run_pipeline(client, duration=60.0, interval=1.0, max_in_flight=5)` runs
  the producer on a thread, feeds its readings through `processor`, and
  returns the list of responses.

```python
from sensorlink.producer import run_pipeline

responses = run_pipeline(server, duration=3, interval=1, max_in_flight=2)
```

## What it does not do

Everything here runs in one process. `SensorServer` is a plain object whose
methods are called directly: it does not listen on a port, there is no wire
format or network client, and the package installs no command to start a
server or a client. The auth interceptors are functions you call around a
handler yourself; nothing wires them in automatically.