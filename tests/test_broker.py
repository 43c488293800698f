from carsim.broker import Broker
from carsim.component import Subscriber


class _Collector(Subscriber):
    def __init__(self, name, log=None):
        super().__init__(name)
        self.received = []
        self.log = log

    def receive_message(self, topic, message):
        self.received.append((topic, message))
        if self.log is not None:
            self.log.append(self.name)


def test_default_topic_is_kept():
    assert Broker("GPSCarTopic").default_topic == "GPSCarTopic"


def test_publish_reaches_subscriber():
    broker = Broker("topic")
    sub = _Collector("a")
    broker.subscribe("topic", sub)
    broker.publish("topic", "video.mp4")
    assert sub.received == [("topic", "video.mp4")]


def test_publish_only_reaches_matching_topic():
    broker = Broker("topic")
    on_topic = _Collector("a")
    elsewhere = _Collector("b")
    broker.subscribe("topic", on_topic)
    broker.subscribe("other", elsewhere)
    broker.publish("topic", "msg")
    assert on_topic.received == [("topic", "msg")]
    assert elsewhere.received == []


def test_publish_to_topic_without_subscribers_delivers_nothing():
    broker = Broker("topic")
    sub = _Collector("a")
    broker.subscribe("topic", sub)
    broker.publish("unused", "msg")
    assert sub.received == []


def test_subscribers_called_in_subscription_order():
    order = []
    broker = Broker("topic")
    for name in ("first", "second", "third"):
        broker.subscribe("topic", _Collector(name, order))
    broker.publish("topic", "x")
    assert order == ["first", "second", "third"]


def test_double_subscription_delivers_twice():
    broker = Broker("topic")
    sub = _Collector("a")
    broker.subscribe("topic", sub)
    broker.subscribe("topic", sub)
    broker.publish("topic", "m")
    assert sub.received == [("topic", "m"), ("topic", "m")]


def test_one_subscriber_on_several_topics():
    broker = Broker("topic")
    sub = _Collector("a")
    broker.subscribe("t1", sub)
    broker.subscribe("t2", sub)
    broker.publish("t2", "two")
    broker.publish("t1", "one")
    assert sub.received == [("t2", "two"), ("t1", "one")]