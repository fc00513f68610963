from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rover_service.models import Coordinate, Orientation


class RoverError(Exception):
    """Base class for recoverable rover command failures."""


class InvalidDirection(RoverError, ValueError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"unrecognized direction {raw}")


class ObstacleDetected(RoverError):
    """Raised before a translation whose target coordinate is blocked."""

    def __init__(self, action: str, direction: "Orientation", target: "Coordinate"):
        self.action = action
        self.direction = direction
        self.target = target
        super().__init__(
            f"Obstacle detected moving {action} towards {direction.format()} "
            f"at {target.x} {target.y}, aborting"
        )


class UnrecognizedCommand(RoverError):
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"unrecognized command {command}")
