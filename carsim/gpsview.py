"""Headless model of the GPS car tracker view."""

from __future__ import annotations

from dataclasses import dataclass

from carsim.component import Signal


@dataclass(frozen=True)
class GPSPoint:
    """One position of the car at a given second."""

    tiempo: int
    x: int
    y: int


class GPSMovementView:
    """Replays a list of GPS points, moving a car across a scene.

    The replay timer is modelled by ``running``; whoever drives the view calls
    ``update_position`` once per ``INTERVAL_MS`` while it is set.
    """

    TITLE = "GPS Car Tracker"
    SCENE_WIDTH = 600
    SCENE_HEIGHT = 400
    CAR_SIZE = 30
    INTERVAL_MS = 1000
    SCALE = 2

    def __init__(self) -> None:
        self.points: list[GPSPoint] = []
        self.current_index = 0
        self.car_position: tuple[int, int] = (0, 0)
        self.running = False
        self.position_updated = Signal()

    def add_gps_data(self, tiempo: int, x: int, y: int) -> None:
        """Append a point to the path."""
        self.points.append(GPSPoint(tiempo, x, y))

    def clear_gps_data(self) -> None:
        """Drop the path, stop the replay and put the car back at the origin."""
        self.points.clear()
        self.current_index = 0
        self.running = False
        self.car_position = (0, 0)

    def finalize_path(self) -> None:
        """Start replaying the path from its first point, if it has any."""
        if self.points:
            self.current_index = 0
            self.running = True

    def update_car_position(self, x: int, y: int) -> None:
        """Place the car at scene coordinates ``(x, y)``."""
        self.car_position = (x, y)

    def update_position(self) -> GPSPoint | None:
        """Advance the replay by one point; stop and return None at the end."""
        if self.current_index >= len(self.points):
            self.running = False
            return None
        point = self.points[self.current_index]
        self.car_position = (point.x * self.SCALE, point.y * self.SCALE)
        self.position_updated.emit(point.tiempo, point.x, point.y)
        self.current_index += 1
        return point