from .rover import MOVEMENT, Rover
from .command_service import RoverController, apply_command

__all__ = [
    "MOVEMENT",
    "Rover",
    "RoverController",
    "apply_command",
]
