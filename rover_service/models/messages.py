from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from rover_service.models.directions import Orientation


class RoverState(BaseModel):
    """Snapshot of the rover position and heading."""

    x: float = Field(..., description="Projected x (longitude-like) coordinate.")
    y: float = Field(..., description="Projected y (latitude-like) coordinate.")
    direction: Orientation = Field(..., description="Heading letter: N, S, E or W.")

    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, value):
        if isinstance(value, str):
            return Orientation.parse(value)
        return value

    def render(self) -> str:
        return f"position: {self.x} {self.y}\ndirection: {self.direction.format()}"


class CommandError(BaseModel):
    kind: Literal["unrecognized_command", "obstacle_detected"]
    message: str
    command: Optional[str] = Field(default=None, description="Command character that failed.")


class CommandOutcome(BaseModel):
    """Result of applying one batch of commands."""

    state: RoverState
    applied: int = Field(default=0, description="Number of commands applied before stopping.")
    error: Optional[CommandError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProtocolDocument(BaseModel):
    """Documentation payload served at /docs for quick reference."""

    endpoints: Dict[str, str]
    commands: Dict[str, str]
    responses: Dict[str, str]
    state_schema: Dict[str, Any]
    examples: Dict[str, Any] = Field(default_factory=dict)
    notes: List[str] = []
