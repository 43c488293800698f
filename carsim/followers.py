"""Subscribers that react to video and GPS messages."""

from __future__ import annotations

import logging

from carsim.component import Signal, Subscriber

logger = logging.getLogger(__name__)


class Follower(Subscriber):
    """Prints every message it receives."""

    def receive_message(self, topic: str, message: str) -> None:
        print(f"{self.name} received on topic '{topic}': {message}")


class VideoFollower(Subscriber):
    """Prints received video addresses and re-emits them on ``message_processed``."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.message_processed = Signal()

    def receive_message(self, topic: str, message: str) -> None:
        print(f"VideoFollower ({self.name}) recibió en tópico '{topic}': {message}")
        self.message_processed.emit(message)


class GPSCarFollower(Subscriber):
    """Logs received GPS messages and re-emits them on ``message_processed``."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.message_processed = Signal()
        logger.debug("GPSCarFollower creado: %s", name)

    def receive_message(self, topic: str, message: str) -> None:
        logger.debug("GPSCarFollower recibió mensaje en topic: %s Mensaje: %s", topic, message)
        self.message_processed.emit(message)