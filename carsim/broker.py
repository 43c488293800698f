"""Topic-based message broker."""

from __future__ import annotations

from collections import defaultdict

from carsim.component import Subscriber


class Broker:
    """Delivers published messages to the subscribers of a topic."""

    def __init__(self, default_topic: str) -> None:
        self.default_topic = default_topic
        self._topics: defaultdict[str, list[Subscriber]] = defaultdict(list)

    def subscribe(self, topic: str, subscriber: Subscriber) -> None:
        """Add ``subscriber`` to the receivers of ``topic``."""
        self._topics[topic].append(subscriber)

    def publish(self, topic: str, message: str) -> None:
        """Send ``message`` to every subscriber of ``topic``, in subscription order."""
        for subscriber in list(self._topics[topic]):
            subscriber.receive_message(topic, message)