import tornado.web

from rover_service.models import ProtocolDocument, RoverState
from rover_service.services.command_service import COMMANDS


class DocsHandler(tornado.web.RequestHandler):
    def get(self):
        doc = ProtocolDocument(
            endpoints={
                "move": "POST /move",
                "state": "GET /state",
                "health": "GET /health",
            },
            commands={
                command: action.__name__ for command, action in COMMANDS.items()
            },
            responses={
                "200": "position: <x> <y>\\ndirection: <N|S|E|W>",
                "400": "unrecognized command <char>",
                "409": "Error: <message>\\nposition: <x> <y>\\ndirection: <N|S|E|W>",
            },
            state_schema=RoverState.model_json_schema(),
            examples={
                "move_request": "ff",
                "state": {"x": 0.0, "y": 0.05425243107004976, "direction": "N"},
            },
            notes=[
                "The /move body is a sequence of single-character commands applied left to right.",
                "Processing stops at the first unrecognized command or detected obstacle; earlier commands stay applied.",
                "An obstacle never changes the rover position or heading.",
                "Crossing a pole reverses the heading and shifts x by half the projection width.",
            ],
        )
        self.set_header("Content-Type", "application/json")
        self.write(doc.model_dump(mode="json"))
