# metricfacade

A lightweight metrics facade. Libraries emit metrics through one small API.
The application chooses where those metrics go by installing a single global
**recorder**.

Until a recorder is installed, every call goes to a no-op recorder that
discards everything. Libraries can therefore be instrumented freely.

## Concepts

- **Counters** hold unsigned 64-bit integers. They can be incremented, or
  raised to an absolute value. Counter values must be `int`s from 0 to
  2**64 - 1. Other types raise `TypeError`, and values out of range raise
  `ValueError`.
- **Gauges** hold floats that go up and down. They can be incremented,
  decremented or set.
- **Histograms** record float observations.

Gauge and histogram values may be `int`, `float` or `datetime.timedelta`.
`metricfacade.units.into_f64` converts a `timedelta` to seconds. It raises
`TypeError` for booleans and for any other type.

A metric is identified by a `Key` (`metricfacade.keys`). A key is a `KeyName`
plus an ordered tuple of `Label` key/value pairs (`metricfacade.labels`). Two
keys are equal when both the name and the labels are equal, and the labels
must be in the same order. Keys also sort and hash on the name and the labels.
`str(key)` gives output such as `Key(foobar, [system = http, user = joe])`.

Labels can be given in any of these forms:

- `None`
- a single `Label` or a single `("key", "value")` pair
- a mapping of strings
- an iterable of `Label`s or pairs

`into_labels` normalises all of these into a list of `Label`.

## Emitting metrics

```python
from metricfacade.emit import counter, increment_counter, absolute_counter, gauge, histogram
from metricfacade.register import describe_counter, register_gauge
from metricfacade.units import Unit

describe_counter("bytes_sent", "total number of bytes sent", Unit.BYTES)

counter("bytes_sent", 64)
counter("bytes_sent", 64, [("listener", "frontend")])
absolute_counter("bytes_sent", 128)
increment_counter("requests_processed", {"request_type": "admin"})
gauge("connection_count", 300.0)
histogram("svc.execution_time", 70.0, [("type", "users")])

connections = register_gauge("connection_count", [("listener", "frontend")])
connections.increment(1.0)
```

`metricfacade.emit` has these functions:

- `counter`, `increment_counter` and `absolute_counter`
- `gauge`, `increment_gauge` and `decrement_gauge`
- `histogram`

`metricfacade.register` has these functions:

- `describe_counter`, `describe_gauge` and `describe_histogram`, which take a
  name, a description and an optional `Unit`
- `register_counter`, `register_gauge` and `register_histogram`, which return
  handles

## Units

`Unit` is an enum. Its members include `COUNT`, `PERCENT`, `SECONDS`,
`MILLISECONDS`, `BYTES` and `BITS_PER_SECOND`. Each member provides these
methods:

- `as_str()` returns the string form, for example `"milliseconds"`.
  `Unit.from_string` reverses it and returns `None` for unknown text.
- `as_canonical_label()` returns a short label, for example `"ms"`.
- `is_time_based()`, `is_data_based()` and `is_data_rate_based()` classify
  the unit.

`GaugeValue(GaugeOp.INCREMENT, 2.0).update_value(1.0)` applies a gauge
operation to a value.

## Writing a recorder

To write a recorder, subclass `Recorder` from `metricfacade.recorder` and
implement these methods:

- `describe_counter`, `describe_gauge` and `describe_histogram`
- `register_counter`, `register_gauge` and `register_histogram`

The `register_*` methods return `Counter`, `Gauge` and `Histogram` handles
from `metricfacade.handles`. Each handle wraps a `CounterFn`, `GaugeFn` or
`HistogramFn` handler, or no handler at all (`Counter.noop()` and so on).

The package has two ready-made, thread-safe stores:

- `AtomicCounter` keeps the larger value on `absolute` and wraps increments
  at 64 bits.
- `AtomicGauge` holds a float.

Each has a `value` property.

```python
from metricfacade.handles import AtomicCounter, Counter

store = AtomicCounter()
Counter(store).increment(5)
Counter(store).absolute(3)
assert store.value == 5
```

## Installing a recorder

```python
from metricfacade.recorder import set_recorder, clear_recorder, recorder, try_recorder, SetRecorderError
from metricfacade.printer import PrintRecorder

set_recorder(PrintRecorder())      # succeeds only while no recorder is installed
try:
    set_recorder(PrintRecorder())
except SetRecorderError:
    pass
clear_recorder()                   # mainly useful in tests
```

The `recorder()` function returns the installed recorder, or the no-op
recorder if none is installed. The `try_recorder()` function returns `None` if
no recorder is installed.

## Printing recorder and demo

`metricfacade.printer.PrintRecorder` writes one line per description and per
update. It writes to standard output, or to a stream passed to its
constructor. For example:

```
(counter) registered key bytes_sent with unit Some(Bytes) and description "total number of bytes sent"
counter increment for 'Key(bytes_sent, [listener = frontend])': 64
```

The package includes a command that installs a `PrintRecorder` and then calls
every kind of describe, register and emit function:

```
metricfacade-demo
```

## What it does not do

The package is only a facade. It does not provide any of the following:

- an exporter, such as a network endpoint, a scrape server or a file writer
- aggregation or summaries of histogram data
- persistent storage

`AtomicCounter` and `AtomicGauge` hold single in-memory values. Histograms
have no built-in store. To keep histogram observations, implement
`HistogramFn` yourself.