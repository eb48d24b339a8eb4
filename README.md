# falcosink

`falcosink` holds the pieces that sit around a runtime security rule
engine and deliver what it finds: alert outputs, a leveled logger, a
watchdog timer, a periodic statistics file and a small health-check web
server. It is a library; it has no dependencies beyond the standard
library.

## What is inside

- **Rules and priorities** (`falcosink.engine`): `FalcoRule` is a dataclass
  describing a loaded rule (id, source, name, description, output, tags,
  exception fields, priority). `Priority` is an `IntEnum` of severities from
  `EMERGENCY` (0) down to `DEBUG` (7), numerically aligned with syslog
  levels. `FalcoError` is raised wherever the package reports a failure.
  `ENGINE_VERSION` and `FIELDS_CHECKSUM` identify the supported rule format.
- **Indexed vector** (`falcosink.indexed_vector`): `IndexedVector` keeps
  entries in insertion order and lets you reach them both by position and
  by a unique string name through `at()`, which returns `None` when nothing
  is found. `insert()` under a name that is already present overwrites that
  entry in place and returns its existing position. It supports `len()`,
  iteration and `clear()`.
- **Logger** (`falcosink.logger`): `Logger` filters messages by level, set
  by name with `set_level()` (`"emergency"`, `"alert"`, `"critical"`,
  `"error"`, `"warning"`, `"notice"`, `"info"`, `"debug"`; any other name
  raises `FalcoError`). `log()` writes to syslog (without a trailing
  newline) and to standard error or a given stream (with one), stamping
  stderr lines either in local `asctime` form or, after
  `set_time_format_iso_8601(True)`, in ISO 8601 UTC. A shared
  `default_logger` is provided.
- **Watchdog** (`falcosink.watchdog`): `Watchdog` runs a background thread
  that calls your callback with a payload once a deadline set by
  `set_timeout()` passes, unless `cancel_timeout()` is called first. Times
  are in seconds or `timedelta`. It works as a context manager.
- **Outputs** (`falcosink.outputs` and friends): every output is built from
  an `OutputConfig` (a name and a mapping of options) and receives
  `Message` objects. `AbstractOutput` is the base class; outputs are
  context managers that call `cleanup()` on exit.
  - `FileOutput` (`falcosink.outputs_file`) appends each message as a line
    to the file named by the `filename` option; with `keep_alive` set to
    `"true"` the file stays open between messages. A file that cannot be
    opened raises `FalcoError`.
  - `ProgramOutput` (`falcosink.outputs_program`) pipes each message to the
    standard input of the shell command in the `program` option, again
    honouring `keep_alive`.
  - `StdoutOutput` (`falcosink.outputs_stdout`) prints messages to standard
    output or a given stream.
  - `HttpOutput` (`falcosink.outputs_http`) POSTs each message to the `url`
    option, as `application/json` when the output is set for JSON and
    `text/plain` otherwise, with the `user_agent` option as its user agent
    when set. Transport errors are logged, not raised.
- **Statistics file** (`falcosink.statsfile`): `StatsFileWriter` takes any
  object with a `get_capture_stats()` method returning `CaptureStats`. A
  timer marks a sample as due every `interval_msec` milliseconds (0
  disables it); each call to `handle()` then appends one JSON object line
  with the current counters, the deltas since the last sample and the drop
  percentage. Environment variables prefixed with `FALCO_STATS_EXTRA_` are
  copied into every sample. Call `close()` or use it as a context manager.
- **Web server** (`falcosink.webserver`): `Webserver` serves
  `{"status": "ok"}` at a health endpoint on all interfaces, over plain HTTP
  or TLS, in a background thread. Starting it twice without stopping raises
  `FalcoError`; the `port` property reports the port in use.

## Example

```python
from falcosink.engine import Priority
from falcosink.outputs import Message, OutputConfig
from falcosink.outputs_file import FileOutput

config = OutputConfig(
    name="file",
    options={"filename": "/tmp/alerts.txt", "keep_alive": "false"},
)
out = FileOutput(config, buffered=False, hostname="node-1", json_output=False)

out.output(
    Message(
        ts=0,
        priority=Priority.WARNING,
        msg="Shell spawned in a container",
        rule="Terminal shell in container",
        source="syscall",
    )
)
out.cleanup()
```

A watchdog that reports slow work:

```python
from falcosink.watchdog import Watchdog

dog = Watchdog()
dog.start(lambda payload: print("too slow:", payload), 0.1)
dog.set_timeout(2.0, "event 42")
# ... do the work ...
dog.cancel_timeout()
dog.stop()
```

A health endpoint:

```python
from falcosink.webserver import Webserver

with Webserver() as server:
    server.start(8765, "/healthz", "", False)
    # GET http://localhost:8765/healthz -> {"status": "ok"}
```

## What it does not do

The package does not load, compile or evaluate rules, and it does not
capture events: it only describes rules and delivers messages you give it.
There is no output that sends alerts to syslog at the message's priority
(the logger alone writes to syslog), no gRPC output or server, and no
command-line program; everything is used from Python.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```