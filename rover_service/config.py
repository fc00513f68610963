import argparse
import os
from typing import Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from rover_service.errors import InvalidDirection
from rover_service.models import Orientation


class Settings(BaseModel):
    x: float = Field(default=0.0, description="Initial projected x coordinate.")
    y: float = Field(default=0.0, description="Initial projected y coordinate.")
    direction: Orientation = Field(default=Orientation.N, description="Initial heading.")
    address: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rover_service",
        description="Serve a simulated Mars rover over HTTP.",
        epilog="example: rover_service 12.34567890 0.987654321 N",
    )
    parser.add_argument("x", nargs="?", type=float, help="initial x (env ROVER_X)")
    parser.add_argument("y", nargs="?", type=float, help="initial y (env ROVER_Y)")
    parser.add_argument("direction", nargs="?", help="initial heading N/S/E/W (env ROVER_DIRECTION)")
    parser.add_argument("--address", help="listen address (env ADDRESS)")
    parser.add_argument("--port", type=int, help="listen port (env PORT)")
    return parser


def load_settings(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Resolve startup settings from command line arguments, then environment
    variables, then defaults.

    An invalid heading or coordinate exits through ``parser.error``.
    """
    env = os.environ if environ is None else environ
    parser = build_parser()
    args = parser.parse_args(argv)

    def pick(value, env_key: str, default):
        if value is not None:
            return value
        return env.get(env_key, default)

    try:
        direction = Orientation.parse(pick(args.direction, "ROVER_DIRECTION", "N"))
        x = float(pick(args.x, "ROVER_X", 0.0))
        y = float(pick(args.y, "ROVER_Y", 0.0))
        port = int(pick(args.port, "PORT", 3000))
    except InvalidDirection as exc:
        parser.error(str(exc))
    except ValueError as exc:
        parser.error(f"invalid startup value: {exc}")

    return Settings(
        x=x,
        y=y,
        direction=direction,
        address=pick(args.address, "ADDRESS", "127.0.0.1"),
        port=port,
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )
