from enum import Enum

from rover_service.errors import InvalidDirection


class Orientation(Enum):
    """Compass heading of the rover."""

    N = "N"
    S = "S"
    E = "E"
    W = "W"

    @classmethod
    def default(cls) -> "Orientation":
        return cls.N

    @classmethod
    def parse(cls, raw: str) -> "Orientation":
        try:
            return _BY_LETTER[raw]
        except (KeyError, TypeError):
            raise InvalidDirection(raw) from None

    def format(self) -> str:
        return _LETTERS[self]

    def opposite(self) -> "Orientation":
        return _OPPOSITE[self]

    def left(self) -> "Orientation":
        return _LEFT[self]

    def right(self) -> "Orientation":
        return _RIGHT[self]

    def __str__(self) -> str:
        return self.format()


_LETTERS = {
    Orientation.N: "N",
    Orientation.S: "S",
    Orientation.E: "E",
    Orientation.W: "W",
}
_BY_LETTER = {letter: orientation for orientation, letter in _LETTERS.items()}

_OPPOSITE = {
    Orientation.N: Orientation.S,
    Orientation.S: Orientation.N,
    Orientation.E: Orientation.W,
    Orientation.W: Orientation.E,
}

# Counter-clockwise quarter turn.
_LEFT = {
    Orientation.N: Orientation.W,
    Orientation.W: Orientation.S,
    Orientation.S: Orientation.E,
    Orientation.E: Orientation.N,
}
_RIGHT = {turned: start for start, turned in _LEFT.items()}
