import logging
import os
from typing import Optional, Sequence

import tornado.ioloop
import tornado.web

from rover_service.config import Settings, load_settings
from rover_service.handlers import DocsHandler, HealthHandler, MoveHandler, StateHandler
from rover_service.models import Coordinate
from rover_service.services import Rover, RoverController


def make_app(controller: RoverController) -> tornado.web.Application:
    return tornado.web.Application(
        [
            (r"/health", HealthHandler),
            (r"/docs", DocsHandler),
            (r"/move", MoveHandler, dict(controller=controller)),
            (r"/state", StateHandler, dict(controller=controller)),
        ]
    )


def make_controller(settings: Settings) -> RoverController:
    rover = Rover(Coordinate(x=settings.x, y=settings.y), settings.direction)
    return RoverController(rover)


def setup_logger(name, level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = load_settings(argv)
    logger = setup_logger("rover_service", settings.log_level)
    setup_logger("tornado", settings.log_level)
    logger.info(f"Started server process {os.getpid()}")
    controller = make_controller(settings)
    logger.info(f"Rover ready at {settings.x} {settings.y} facing {settings.direction.format()}")
    app = make_app(controller)
    app.listen(port=settings.port, address=settings.address)
    logger.info(f"Tornado running on http://{settings.address}:{settings.port} (Press Ctrl+C to quit)")
    tornado.ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
