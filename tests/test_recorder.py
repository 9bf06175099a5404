import threading

import pytest

from metricfacade.handles import AtomicCounter, Counter, Gauge, Histogram
from metricfacade.keys import Key, KeyName
from metricfacade.recorder import (
    NoopRecorder,
    Recorder,
    SetRecorderError,
    clear_recorder,
    recorder,
    set_recorder,
    try_recorder,
)
from metricfacade.units import Unit


class CollectingRecorder(Recorder):
    def __init__(self):
        self.described = []
        self.counters = {}

    def describe_counter(self, key, unit, description):
        self.described.append(("counter", key, unit, description))

    def describe_gauge(self, key, unit, description):
        self.described.append(("gauge", key, unit, description))

    def describe_histogram(self, key, unit, description):
        self.described.append(("histogram", key, unit, description))

    def register_counter(self, key):
        storage = self.counters.setdefault(key, AtomicCounter())
        return Counter(storage)

    def register_gauge(self, key):
        return Gauge.noop()

    def register_histogram(self, key):
        return Histogram.noop()


@pytest.fixture(autouse=True)
def clean_slot():
    clear_recorder()
    yield
    clear_recorder()


def test_uninitialized_returns_noop():
    assert try_recorder() is None
    assert isinstance(recorder(), NoopRecorder)


def test_noop_recorder_hands_out_noop_handles():
    noop = NoopRecorder()
    key = Key.from_name("counter_bench")
    assert noop.register_counter(key).handler is None
    assert noop.register_gauge(key).handler is None
    assert noop.register_histogram(key).handler is None


def test_set_recorder_installs():
    rec = CollectingRecorder()
    set_recorder(rec)
    assert try_recorder() is rec
    assert recorder() is rec


def test_set_twice_raises():
    set_recorder(CollectingRecorder())
    with pytest.raises(SetRecorderError) as info:
        set_recorder(CollectingRecorder())
    assert "already initialized" in str(info.value)


def test_clear_then_set_again():
    first = CollectingRecorder()
    set_recorder(first)
    clear_recorder()
    assert try_recorder() is None
    second = CollectingRecorder()
    set_recorder(second)
    assert recorder() is second


def test_installed_recorder_receives_updates():
    rec = CollectingRecorder()
    set_recorder(rec)
    key = Key.from_parts("counter_bench", [("request", "http"), ("svc", "admin")])
    recorder().register_counter(key).increment(42)
    recorder().register_counter(key).increment(1)
    assert rec.counters[key].value == 43


def test_describe_passes_through():
    rec = CollectingRecorder()
    set_recorder(rec)
    recorder().describe_counter(KeyName("abc"), Unit.BYTES, "a counter")
    assert rec.described == [("counter", KeyName("abc"), Unit.BYTES, "a counter")]


def test_set_recorder_rejects_non_recorder():
    with pytest.raises(TypeError):
        set_recorder(object())


def test_concurrent_set_only_one_wins():
    errors = []
    winners = []
    lock = threading.Lock()

    def attempt():
        rec = CollectingRecorder()
        try:
            set_recorder(rec)
        except SetRecorderError:
            with lock:
                errors.append(rec)
        else:
            with lock:
                winners.append(rec)

    threads = [threading.Thread(target=attempt) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(winners) == 1
    assert len(errors) == 7
    assert try_recorder() is winners[0]
    assert recorder() is winners[0]