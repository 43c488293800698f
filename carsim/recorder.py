"""Subscriber that appends received positions to a file."""

from __future__ import annotations

import re
from typing import Any

from carsim.component import Subscriber

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", re.ASCII)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int:
    """Parse a leading integer, ignoring leading whitespace and trailing text."""
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {match.group(1)}")
    return value


def _parse_position(message: str) -> tuple[int, int]:
    """Read ``x=<int>,y=<int>`` from ``message``; missing parts count as 0."""
    x = y = 0
    head, comma, rest = message.partition(",")
    if not comma:
        return x, y
    y_str = rest.split("\n", 1)[0]
    if not rest or (not y_str and rest.startswith("\n") is False):
        return x, y
    if head.startswith("x="):
        x = _to_int(head[2:])
    if y_str.startswith("y="):
        y = _to_int(y_str[2:])
    return x, y


class Recorder(Subscriber):
    """Appends ``name,topic,x,y`` lines to a file for each message received."""

    def __init__(self, name: str, file_name: str) -> None:
        super().__init__(name)
        self._file = open(file_name, "a", encoding="utf-8")

    def receive_message(self, topic: str, message: str) -> None:
        x, y = _parse_position(message)
        if not self._file.closed:
            self._file.write(f"{self.name},{topic},{x},{y}\n")
            self._file.flush()

    def close(self) -> None:
        """Close the output file; later messages are not recorded."""
        self._file.close()

    def __enter__(self) -> Recorder:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()