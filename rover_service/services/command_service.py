import logging
import threading
from typing import Callable, Dict, Optional

from rover_service.errors import ObstacleDetected, RoverError, UnrecognizedCommand
from rover_service.models import CommandError, CommandOutcome, Coordinate, RoverState
from rover_service.services.rover import Rover

logger = logging.getLogger(__name__)

COMMANDS: Dict[str, Callable[[Rover], Coordinate]] = {
    "f": Rover.forward,
    "b": Rover.backward,
    "l": Rover.left,
    "r": Rover.right,
}


def apply_command(rover: Rover, command: str) -> Coordinate:
    """Apply a single command character to ``rover`` and return its position."""
    try:
        action = COMMANDS[command]
    except KeyError:
        raise UnrecognizedCommand(command) from None
    return action(rover)


def _describe(exc: RoverError, command: str) -> CommandError:
    kind = "obstacle_detected" if isinstance(exc, ObstacleDetected) else "unrecognized_command"
    return CommandError(kind=kind, message=str(exc), command=command)


class RoverController:
    """Owns the rover and serialises command batches behind a lock."""

    def __init__(self, rover: Rover, lock: Optional[threading.Lock] = None):
        self.rover = rover
        self.lock = lock or threading.Lock()

    def execute(self, commands: str) -> CommandOutcome:
        """
        Apply ``commands`` left to right while holding the lock.

        Processing stops at the first failing command; commands applied before
        it are kept.
        """
        with self.lock:
            applied = 0
            for command in commands:
                try:
                    apply_command(self.rover, command)
                except RoverError as exc:
                    logger.info("Batch stopped at %r after %d commands: %s", command, applied, exc)
                    return CommandOutcome(
                        state=self.rover.state(),
                        applied=applied,
                        error=_describe(exc, command),
                    )
                applied += 1
            logger.debug("Batch of %d commands applied, rover now %r", applied, self.rover)
            return CommandOutcome(state=self.rover.state(), applied=applied)

    def snapshot(self) -> RoverState:
        with self.lock:
            return self.rover.state()
