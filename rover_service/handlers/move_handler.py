import tornado.ioloop
import tornado.web

from rover_service.models import CommandOutcome
from rover_service.services.command_service import RoverController


class MoveHandler(tornado.web.RequestHandler):
    """Apply the command string in the request body to the rover."""

    def initialize(self, controller: RoverController):
        self.controller = controller

    async def post(self):
        try:
            commands = self.request.body.decode("utf-8")
        except UnicodeDecodeError:
            self._reply(400, "request body is not valid UTF-8")
            return

        # Lock acquisition may block behind another batch, keep it off the IOLoop.
        outcome = await tornado.ioloop.IOLoop.current().run_in_executor(
            None, self.controller.execute, commands
        )
        self._render(outcome)

    def _render(self, outcome: CommandOutcome):
        if outcome.ok:
            self._reply(200, outcome.state.render())
        elif outcome.error.kind == "unrecognized_command":
            self._reply(400, outcome.error.message)
        else:
            self._reply(409, f"Error: {outcome.error.message}\n{outcome.state.render()}")

    def _reply(self, status: int, body: str):
        self.set_status(status)
        self.set_header("Content-Type", "text/plain; charset=UTF-8")
        self.write(body)
