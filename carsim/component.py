"""Named components, subscribers and a small signal mechanism."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Signal:
    """A list of callables invoked in connection order on every emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register ``slot`` to be called on every emit."""
        self._slots.append(slot)

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)


class Component:
    """Anything in the system that carries a name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Subscriber(Component, ABC):
    """A component that receives messages published on a topic."""

    @abstractmethod
    def receive_message(self, topic: str, message: str) -> None:
        """Handle ``message`` delivered on ``topic``."""