"""Key/value labels attached to metric keys."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True, order=True)
class Label:
    """A key/value pair giving context to a metric."""

    key: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not isinstance(self.value, str):
            raise TypeError("label key and value must be strings")

    def into_parts(self) -> Tuple[str, str]:
        """Return the key and value as a tuple."""
        return (self.key, self.value)


LabelsLike = Union[
    None,
    Label,
    Mapping[str, str],
    Iterable[Union[Label, Tuple[str, str]]],
]


def _to_label(item: object) -> Label:
    if isinstance(item, Label):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        return Label(item[0], item[1])
    raise TypeError(f"cannot convert {item!r} into a label")


def into_labels(labels: Optional[LabelsLike]) -> list[Label]:
    """Normalise labels, pairs or a mapping into a list of :class:`Label`."""
    if labels is None:
        return []
    if isinstance(labels, Label):
        return [labels]
    if isinstance(labels, Mapping):
        return [Label(k, v) for k, v in labels.items()]
    if isinstance(labels, (str, bytes)):
        raise TypeError("labels must be pairs, not a string")
    if isinstance(labels, tuple) and len(labels) == 2 and all(
        isinstance(part, str) for part in labels
    ):
        return [Label(labels[0], labels[1])]
    if not isinstance(labels, Iterable):
        raise TypeError(f"cannot convert {labels!r} into labels")
    return [_to_label(item) for item in labels]