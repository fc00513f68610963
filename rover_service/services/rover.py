import math
from typing import Optional, Tuple

from rover_service.errors import ObstacleDetected
from rover_service.models import MAX_EXTENT, Coordinate, Orientation, RoverState


# Degrees equivalent to 1km on the surface, 360000 / (2 * pi * radius in metres).
MOVEMENT = 0.02712621553502488

OBSTACLE_THRESHOLD = 0.25

_STEP = {
    Orientation.N: (0.0, MOVEMENT),
    Orientation.S: (0.0, -MOVEMENT),
    Orientation.E: (MOVEMENT, 0.0),
    Orientation.W: (-MOVEMENT, 0.0),
}


def step_towards(position: Coordinate, direction: Orientation) -> Coordinate:
    """Coordinate one MOVEMENT away from ``position`` along ``direction``."""
    dx, dy = _STEP[direction]
    return position.offset(dx, dy)


def is_blocked(target: Coordinate) -> bool:
    # Deterministic terrain: a pure function of the candidate coordinate.
    return abs(math.sin(target.x) - math.cos(target.y)) < OBSTACLE_THRESHOLD


def wrap_edges(position: Coordinate, direction: Orientation) -> Tuple[Coordinate, Orientation]:
    """
    Fold a coordinate that left the projection back onto it.

    Crossing a pole shifts x by half the world and reverses the heading.
    The four checks run in sequence so that a pole crossing which pushes x
    out of range is also wrapped in longitude.
    """
    x, y = position.x, position.y
    if y > MAX_EXTENT:
        x += MAX_EXTENT
        y = -MAX_EXTENT + (y - MAX_EXTENT)
        direction = direction.opposite()
    if y < -MAX_EXTENT:
        x += MAX_EXTENT
        y = MAX_EXTENT + (y + MAX_EXTENT)
        direction = direction.opposite()
    if x > MAX_EXTENT:
        x = -MAX_EXTENT + (x - MAX_EXTENT)
    if x < -MAX_EXTENT:
        x = MAX_EXTENT + (x + MAX_EXTENT)
    return Coordinate(x=x, y=y), direction


class Rover:
    """Single rover moving on the projected planet surface."""

    def __init__(self, position: Optional[Coordinate] = None, direction: Optional[Orientation] = None):
        self.position = position or Coordinate()
        self.direction = direction or Orientation.default()

    @classmethod
    def from_values(cls, x: float, y: float, direction: str) -> "Rover":
        return cls(Coordinate(x=x, y=y), Orientation.parse(direction))

    def forward(self) -> Coordinate:
        return self._move("forward", self.direction)

    def backward(self) -> Coordinate:
        return self._move("backward", self.direction.opposite())

    def left(self) -> Coordinate:
        self.direction = self.direction.left()
        return self.position

    def right(self) -> Coordinate:
        self.direction = self.direction.right()
        return self.position

    def has_obstacle(self, direction: Orientation) -> bool:
        return is_blocked(step_towards(self.position, direction))

    def state(self) -> RoverState:
        return RoverState(x=self.position.x, y=self.position.y, direction=self.direction)

    def _move(self, action: str, heading: Orientation) -> Coordinate:
        target = step_towards(self.position, heading)
        if is_blocked(target):
            raise ObstacleDetected(action, heading, target)
        self.position, self.direction = wrap_edges(target, self.direction)
        return self.position

    def __str__(self) -> str:
        return self.state().render()

    def __repr__(self) -> str:
        return f"Rover(position=({self.position.x}, {self.position.y}), direction={self.direction.format()})"
