"""A lightweight metrics facade: keys, labels, handles and a pluggable global recorder."""

__version__ = "0.1.0"

__all__ = ["emit", "handles", "keys", "labels", "printer", "recorder", "register", "units"]