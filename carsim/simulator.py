"""Video and GPS car simulator built on the broker."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import quote, urlsplit

from carsim.broker import Broker
from carsim.followers import GPSCarFollower, VideoFollower
from carsim.gpsview import GPSMovementView, GPSPoint
from carsim.publisher import GPSCarPublisher, VideoPublisher

_SEPARATOR = re.compile(r"\s+|,")
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_COLUMNS = 3


def _parse_int(text: str) -> int | None:
    """Parse a whole-string decimal int in 32-bit range, or return None."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def parse_gps_lines(lines: Iterable[str]) -> list[GPSPoint]:
    """Read ``seconds x y`` records, filling gaps of more than one second.

    Fields are separated by whitespace or commas. Lines that do not hold
    exactly three integers are skipped. Missing seconds are filled by
    linear interpolation, rounded half away from the previous point.
    """
    points: list[GPSPoint] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        parts = [p for p in _SEPARATOR.split(line) if p]
        if len(parts) != 3:
            continue
        values = [_parse_int(p) for p in parts]
        if any(v is None for v in values):
            continue
        segundos, x, y = values
        if points:
            last = points[-1]
            gap = segundos - last.tiempo
            if gap > 1:
                dx = x - last.x
                dy = y - last.y
                for t in range(1, gap):
                    points.append(
                        GPSPoint(
                            last.tiempo + t,
                            last.x + _trunc_div(dx * t + gap // 2, gap),
                            last.y + _trunc_div(dy * t + gap // 2, gap),
                        )
                    )
        points.append(GPSPoint(segundos, x, y))
    return points


def read_gps_file(path: str | Path) -> list[GPSPoint]:
    """Read GPS records from a text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_gps_lines(handle)


def parse_gps_message(message: str) -> tuple[int, int] | None:
    """Extract ``(x, y)`` from a ``seconds,x,y`` message, or None if malformed."""
    parts = message.split(",")
    if len(parts) != 3:
        return None
    x = _parse_int(parts[1])
    y = _parse_int(parts[2])
    if x is None or y is None:
        return None
    return x, y


def resolve_video_url(text: str) -> str:
    """Return ``text`` if it is a URL with a scheme, else a file URL for it."""
    try:
        scheme = urlsplit(text).scheme
    except ValueError:
        scheme = ""
    if scheme:
        return text
    quoted = quote(text)
    if text.startswith("/"):
        return "file://" + quoted
    return "file:" + quoted


class Simulator:
    """Wires video and GPS publishers and followers through two brokers."""

    def __init__(self) -> None:
        self.broker = Broker("topic")
        self.video_publisher = VideoPublisher("VideoPublisher", self.broker)
        self.video_follower = VideoFollower("VideoFollower")
        self.broker.subscribe("topic", self.video_follower)
        self.video_follower.message_processed.connect(self.on_follower_message)
        self.current_video = ""
        self.videos: list[str] = []

        self.gps_broker = Broker("GPSCarTopic")
        self.gps_publisher = GPSCarPublisher("GPSCarPublisher", self.gps_broker)
        self.gps_follower = GPSCarFollower("GPSCarFollower")
        self.gps_broker.subscribe("GPSCarTopic", self.gps_follower)
        self.gps_follower.message_processed.connect(self.on_gps_message)

        self.gps_view: GPSMovementView | None = None
        self.gps_data: list[GPSPoint] = []
        self.current_gps_index = 0
        self.gps_timer_active = False

    def submit_video_url(self, text: str) -> None:
        """Publish a video address and remember it; empty text is ignored."""
        if text:
            self.video_publisher.publish(self.broker.default_topic, text)
            self.videos.append(text)

    def on_follower_message(self, message: str) -> None:
        """Make ``message`` the current video."""
        self.current_video = message

    def on_gps_message(self, message: str) -> None:
        """Move the car in the open view to the position in ``message``."""
        if self.gps_view is None:
            return
        position = parse_gps_message(message)
        if position is not None:
            self.gps_view.update_car_position(*position)

    def video_grid(self) -> tuple[str, list[tuple[int, int, str]]]:
        """Return the grid title and ``(row, column, url)`` for each video."""
        title = f"{self.broker.default_topic} -> {self.video_follower.name}"
        cells = [
            (1 + i // _MAX_COLUMNS, i % _MAX_COLUMNS, url)
            for i, url in enumerate(self.videos)
        ]
        return title, cells

    def load_gps_file(self, path: str | Path) -> None:
        """Load a GPS file and start replaying it in a fresh view."""
        self.gps_timer_active = False
        self.gps_data = read_gps_file(path)
        if not self.gps_data:
            return
        self.current_gps_index = 0
        if self.gps_view is not None:
            self.gps_view.running = False
        view = GPSMovementView()
        view.clear_gps_data()
        for point in self.gps_data:
            view.add_gps_data(point.tiempo, point.x, point.y)
        self.gps_view = view
        view.finalize_path()
        self.gps_timer_active = True

    def send_next_gps_data(self) -> str | None:
        """Publish the next GPS record; stop and return None when all are sent."""
        if self.current_gps_index >= len(self.gps_data):
            self.gps_timer_active = False
            return None
        point = self.gps_data[self.current_gps_index]
        message = f"{point.tiempo},{point.x},{point.y}"
        self.gps_publisher.publish(self.gps_broker.default_topic, message)
        self.current_gps_index += 1
        return message


def main(argv: list[str] | None = None) -> int:
    """Run the simulator from the command line."""
    parser = argparse.ArgumentParser(prog="carsim", description="Video and GPS car simulator.")
    parser.add_argument("gps_file", nargs="?", help="text file of 'seconds x y' records")
    parser.add_argument("--video", action="append", default=[], help="video address to publish")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between GPS steps")
    args = parser.parse_args(argv)

    sim = Simulator()
    for url in args.video:
        sim.submit_video_url(url)
    if sim.videos:
        title, cells = sim.video_grid()
        print(title)
        for row, col, url in cells:
            print(f"[{row},{col}] {resolve_video_url(url)}")

    if args.gps_file is None:
        return 0
    try:
        sim.load_gps_file(args.gps_file)
    except OSError as exc:
        print(f"carsim: {exc}", file=sys.stderr)
        return 1
    view = sim.gps_view
    if view is None or not sim.gps_timer_active:
        return 0
    view.position_updated.connect(lambda t, x, y: print(f"t={t} x={x} y={y}"))
    while sim.gps_timer_active or view.running:
        if view.running:
            view.update_position()
        if sim.gps_timer_active:
            sim.send_next_gps_data()
        if args.interval > 0:
            time.sleep(args.interval)
    return 0