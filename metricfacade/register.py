"""Describing and registering metrics through the installed recorder."""

from __future__ import annotations

from typing import Optional, Union

from metricfacade.handles import Counter, Gauge, Histogram
from metricfacade.keys import Key, KeyName
from metricfacade.labels import LabelsLike
from metricfacade.recorder import recorder
from metricfacade.units import Unit

NameLike = Union[str, KeyName]


def _key_name(name: NameLike) -> KeyName:
    if isinstance(name, KeyName):
        return name
    return KeyName(name)


def _check_description(description: str) -> str:
    if not isinstance(description, str):
        raise TypeError("metric descriptions must be strings")
    return description


def _check_unit(unit: Optional[Unit]) -> Optional[Unit]:
    if unit is not None and not isinstance(unit, Unit):
        raise TypeError("unit must be a Unit or None")
    return unit


def describe_counter(
    name: NameLike, description: str, unit: Optional[Unit] = None
) -> None:
    """Describe a counter, optionally with a unit."""
    recorder().describe_counter(
        _key_name(name), _check_unit(unit), _check_description(description)
    )


def describe_gauge(
    name: NameLike, description: str, unit: Optional[Unit] = None
) -> None:
    """Describe a gauge, optionally with a unit."""
    recorder().describe_gauge(
        _key_name(name), _check_unit(unit), _check_description(description)
    )


def describe_histogram(
    name: NameLike, description: str, unit: Optional[Unit] = None
) -> None:
    """Describe a histogram, optionally with a unit."""
    recorder().describe_histogram(
        _key_name(name), _check_unit(unit), _check_description(description)
    )


def register_counter(name: NameLike, labels: Optional[LabelsLike] = None) -> Counter:
    """Register a counter and return its handle."""
    return recorder().register_counter(Key(name, labels))


def register_gauge(name: NameLike, labels: Optional[LabelsLike] = None) -> Gauge:
    """Register a gauge and return its handle."""
    return recorder().register_gauge(Key(name, labels))


def register_histogram(
    name: NameLike, labels: Optional[LabelsLike] = None
) -> Histogram:
    """Register a histogram and return its handle."""
    return recorder().register_histogram(Key(name, labels))