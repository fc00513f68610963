import tornado.ioloop
import tornado.web

from rover_service.services.command_service import RoverController


class StateHandler(tornado.web.RequestHandler):
    def initialize(self, controller: RoverController):
        self.controller = controller

    async def get(self):
        # The lock may be held by a running batch, keep it off the IOLoop.
        state = await tornado.ioloop.IOLoop.current().run_in_executor(None, self.controller.snapshot)
        self.set_header("Content-Type", "application/json")
        self.write(state.model_dump(mode="json"))
