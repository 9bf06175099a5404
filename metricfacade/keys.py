"""Metric identifiers: a name plus an ordered set of labels."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Iterator, Optional, Tuple, Union

from metricfacade.labels import Label, LabelsLike, into_labels

_U64_MASK = (1 << 64) - 1


@dataclass(frozen=True, order=True)
class KeyName:
    """Name component of a key."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError("key names must be strings")

    def as_str(self) -> str:
        """Return the name as a string."""
        return self.name

    def __str__(self) -> str:
        return self.name


NameLike = Union[str, KeyName]


def _to_key_name(name: NameLike) -> KeyName:
    if isinstance(name, KeyName):
        return name
    return KeyName(name)


@total_ordering
class Key:
    """A metric identifier made of a name and labels.

    Labels keep their insertion order, and equality, ordering and hashing
    all take that order into account.
    """

    __slots__ = ("_name", "_labels", "_hash")

    def __init__(self, name: NameLike, labels: Optional[LabelsLike] = None) -> None:
        self._name = _to_key_name(name)
        self._labels: Tuple[Label, ...] = tuple(into_labels(labels))
        self._hash = hash((self._name, self._labels))

    @classmethod
    def from_name(cls, name: NameLike) -> "Key":
        """Create a key with no labels."""
        return cls(name)

    @classmethod
    def from_parts(cls, name: NameLike, labels: Optional[LabelsLike]) -> "Key":
        """Create a key from a name and labels."""
        return cls(name, labels)

    @classmethod
    def from_static_name(cls, name: NameLike) -> "Key":
        """Create a key from a fixed name with no labels."""
        return cls(name)

    @classmethod
    def from_static_parts(cls, name: NameLike, labels: Iterable[Label]) -> "Key":
        """Create a key from a fixed name and a fixed set of labels."""
        return cls(name, labels)

    @classmethod
    def from_static_labels(cls, name: NameLike, labels: Iterable[Label]) -> "Key":
        """Create a key from any name and a fixed set of labels."""
        return cls(name, labels)

    @property
    def name(self) -> str:
        """Name of this key."""
        return self._name.name

    @property
    def key_name(self) -> KeyName:
        """Name of this key as a :class:`KeyName`."""
        return self._name

    @property
    def labels(self) -> Tuple[Label, ...]:
        """Labels of this key, in insertion order."""
        return self._labels

    def __iter__(self) -> Iterator[Label]:
        return iter(self._labels)

    def into_parts(self) -> Tuple[KeyName, list[Label]]:
        """Return the name and a list of the labels."""
        return (self._name, list(self._labels))

    def with_extra_labels(self, extra_labels: Optional[LabelsLike]) -> "Key":
        """Return a new key with ``extra_labels`` appended to the labels."""
        extra = into_labels(extra_labels)
        return Key(self._name, [*self._labels, *extra])

    def get_hash(self) -> int:
        """Return the key's hash as an unsigned 64-bit integer."""
        return self._hash & _U64_MASK

    def _sort_key(self) -> Tuple[KeyName, Tuple[Label, ...]]:
        return (self._name, self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._name == other._name and self._labels == other._labels

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        if not self._labels:
            return f"Key({self._name.name})"
        rendered = ", ".join(f"{label.key} = {label.value}" for label in self._labels)
        return f"Key({self._name.name}, [{rendered}])"

    def __repr__(self) -> str:
        return f"Key(name={self._name.name!r}, labels={list(self._labels)!r})"