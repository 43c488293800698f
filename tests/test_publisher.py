from carsim.broker import Broker
from carsim.component import Subscriber
from carsim.publisher import GPSCarPublisher, Publisher, VideoPublisher


class _Collector(Subscriber):
    def __init__(self, name):
        super().__init__(name)
        self.received = []

    def receive_message(self, topic, message):
        self.received.append((topic, message))


def test_publisher_keeps_name_and_broker():
    broker = Broker("topic")
    pub = Publisher("pub", broker)
    assert pub.name == "pub"
    assert pub.broker is broker


def test_publish_goes_through_broker():
    broker = Broker("topic")
    sub = _Collector("s")
    broker.subscribe("topic", sub)
    Publisher("pub", broker).publish("topic", "hello")
    assert sub.received == [("topic", "hello")]


def test_publish_on_other_topic_not_delivered():
    broker = Broker("topic")
    sub = _Collector("s")
    broker.subscribe("topic", sub)
    Publisher("pub", broker).publish("elsewhere", "hello")
    assert sub.received == []


def test_video_publisher_announces_creation(capsys):
    VideoPublisher("VideoPublisher", Broker("topic"))
    assert capsys.readouterr().out == "VideoPublisher VideoPublisher creado.\n"


def test_gps_publisher_announces_creation(capsys):
    GPSCarPublisher("GPSCarPublisher", Broker("GPSCarTopic"))
    assert capsys.readouterr().out == "GPSCarPublisher GPSCarPublisher creado.\n"


def test_gps_publisher_publishes_positions():
    broker = Broker("GPSCarTopic")
    sub = _Collector("s")
    broker.subscribe("GPSCarTopic", sub)
    pub = GPSCarPublisher("car", broker)
    pub.publish(broker.default_topic, "1,10,20")
    assert sub.received == [("GPSCarTopic", "1,10,20")]
    assert isinstance(pub, Publisher)