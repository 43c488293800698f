"""Publishers that send messages through a broker."""

from __future__ import annotations

from carsim.broker import Broker


class Publisher:
    """A named sender bound to one broker."""

    def __init__(self, name: str, broker: Broker) -> None:
        self.name = name
        self.broker = broker

    def publish(self, topic: str, message: str) -> None:
        """Publish ``message`` on ``topic`` through the broker."""
        self.broker.publish(topic, message)


class VideoPublisher(Publisher):
    """Publisher of video addresses."""

    def __init__(self, name: str, broker: Broker) -> None:
        super().__init__(name, broker)
        print(f"VideoPublisher {name} creado.")


class GPSCarPublisher(Publisher):
    """Publisher of car GPS positions."""

    def __init__(self, name: str, broker: Broker) -> None:
        super().__init__(name, broker)
        print(f"GPSCarPublisher {name} creado.")