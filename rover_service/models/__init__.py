"""Rover domain values and pydantic models for HTTP payloads."""

from .coordinate import MAX_EXTENT, Coordinate
from .directions import Orientation
from .messages import CommandError, CommandOutcome, ProtocolDocument, RoverState

__all__ = [
    "MAX_EXTENT",
    "Coordinate",
    "Orientation",
    "CommandError",
    "CommandOutcome",
    "ProtocolDocument",
    "RoverState",
]
