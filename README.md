# carsim

A small publish/subscribe simulator. A `Broker` passes messages on named
topics to its subscribers. Publishers send video addresses and GPS car
positions, and followers react to what they receive. Tracks of GPS readings
can be read from a text file, with missing seconds filled in, and then played
back point by point.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to get pytest for running the
tests.

## Command line

```
carsim [gps_file] [--video URL ...] [--interval SECONDS]
```

- `--video URL` (may be given several times) publishes each address on the
  video topic. The grid title (`topic -> VideoFollower`) is then printed,
  followed by one `[row,col] url` line per video, three to a row, with
  addresses that have no scheme shown as `file:` URLs.
- `gps_file` is a track file (see below). It is loaded and replayed: each step
  prints `t=<seconds> x=<x> y=<y>` and publishes the point as
  `seconds,x,y` on the GPS topic.
- `--interval` sets the pause between steps in seconds (default `1.0`; `0`
  replays without pausing).

If the track file cannot be read, the error is printed to standard error and
the command exits with status 1. Run `carsim --help` for the option list.

## Library use

```python
from carsim.broker import Broker
from carsim.publisher import GPSCarPublisher
from carsim.followers import GPSCarFollower

broker = Broker("GPSCarTopic")
follower = GPSCarFollower("GPSCarFollower")
broker.subscribe("GPSCarTopic", follower)
follower.message_processed.connect(print)

publisher = GPSCarPublisher("GPSCarPublisher", broker)
publisher.publish("GPSCarTopic", "0,10,20")   # prints 0,10,20
```

Subscribers derive from `carsim.component.Subscriber` and implement
`receive_message(topic, message)`. A broker delivers a message to the
subscribers of its topic in the order they subscribed. `Signal` (in
`carsim.component`) calls its connected callables in connection order on
every `emit`.

The followers in `carsim.followers`:

- `Follower` prints every message it receives.
- `VideoFollower` prints the message and emits it on `message_processed`.
- `GPSCarFollower` logs the message at debug level and emits it on
  `message_processed`.

### Recording positions

A `Recorder` subscriber reads messages of the form `x=<int>,y=<int>` (a part
that is missing counts as 0) and appends `name,topic,x,y` lines to a file:

```python
from carsim.recorder import Recorder

with Recorder("rec", "track.csv") as recorder:
    broker.subscribe("positions", recorder)
    broker.publish("positions", "x=3,y=4")   # writes rec,positions,3,4
```

After `close()` further messages are not recorded.

### GPS track files

Each line of a track file holds the time in seconds and the x and y
positions, separated by whitespace or commas. Blank lines and lines that do
not hold exactly three integers are skipped. When readings are more than a
second apart, the positions for the missing seconds are filled in by rounded
linear interpolation.

```python
from carsim.simulator import parse_gps_lines

track = parse_gps_lines(["0 0 0", "4 8 4"])
# [GPSPoint(0, 0, 0), GPSPoint(1, 2, 1), GPSPoint(2, 4, 2),
#  GPSPoint(3, 6, 3), GPSPoint(4, 8, 4)]
```

`read_gps_file(path)` reads a file in the same way, and
`parse_gps_message("0,10,20")` returns `(10, 20)`, or `None` for a malformed
message.

### The simulator

`carsim.simulator.Simulator` wires a video broker (topic `topic`) and a GPS
broker (topic `GPSCarTopic`) to their publishers and followers.

- `submit_video_url(text)` publishes a non-empty address and adds it to
  `videos`; the follower's message becomes `current_video`.
- `video_grid()` returns the grid title and `(row, column, url)` cells.
- `load_gps_file(path)` reads a track into a new `GPSMovementView` and starts
  its replay.
- `send_next_gps_data()` publishes the next point as `seconds,x,y` and returns
  the message, or returns `None` once every point has been sent. Published
  positions move the car in the view.

`carsim.gpsview.GPSMovementView` holds the path and the car position. Each
call to `update_position()` moves the car to the next point (coordinates
doubled for the scene), emits `position_updated(tiempo, x, y)` and returns the
point; at the end of the path it stops and returns `None`.

## What it does not do

There is no graphical window and no media playback. `GPSMovementView` is a
model of the tracker view that keeps state only, and videos are listed by
address rather than played. The command line prints positions and addresses
instead of drawing or playing them.