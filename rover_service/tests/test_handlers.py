import asyncio
import json
import time

import pytest
from tornado import httpclient, httpserver, testing

from rover_service.models import Coordinate, Orientation
from rover_service.services import MOVEMENT, Rover, RoverController


def start_server(controller: RoverController):
    from rover_service.main import make_app

    server = httpserver.HTTPServer(make_app(controller))
    sock, port = testing.bind_unused_port()
    server.add_socket(sock)
    return server, f"http://127.0.0.1:{port}"


async def post_move(base_url: str, body):
    client = httpclient.AsyncHTTPClient()
    return await client.fetch(f"{base_url}/move", method="POST", body=body, raise_error=False)


@pytest.mark.asyncio
async def test_move_returns_final_state(controller):
    server, base_url = start_server(controller)
    try:
        resp = await post_move(base_url, "fblr")
        assert resp.code == 200
        assert resp.body.decode() == "position: 0.0 0.0\ndirection: N"
        assert resp.headers["Content-Type"].startswith("text/plain")

        resp = await post_move(base_url, "f")
        assert resp.body.decode() == f"position: 0.0 {MOVEMENT}\ndirection: N"
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_move_stops_at_unrecognized_command(controller):
    server, base_url = start_server(controller)
    try:
        resp = await post_move(base_url, "fxf")
        assert resp.code == 400
        assert resp.body.decode() == "unrecognized command x"
        # The command before the bad one stays applied.
        assert controller.rover.position == Coordinate(x=0.0, y=MOVEMENT)
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_move_reports_obstacle_with_state():
    start = Coordinate(x=-10659954.353273375, y=10659954)
    controller = RoverController(Rover(start, Orientation.E))
    server, base_url = start_server(controller)
    try:
        resp = await post_move(base_url, "f")
        assert resp.code == 409
        text = resp.body.decode()
        assert text.startswith("Error: Obstacle detected moving forward towards E")
        assert text.endswith(f"position: {start.x} {start.y}\ndirection: E")
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_move_rejects_undecodable_body(controller):
    server, base_url = start_server(controller)
    try:
        resp = await post_move(base_url, b"\xff\xfe")
        assert resp.code == 400
        assert controller.rover.position == Coordinate()
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_state_health_and_docs(controller):
    server, base_url = start_server(controller)
    client = httpclient.AsyncHTTPClient()
    try:
        await post_move(base_url, "r")

        resp = await client.fetch(f"{base_url}/state")
        assert json.loads(resp.body) == {"x": 0.0, "y": 0.0, "direction": "E"}

        resp = await client.fetch(f"{base_url}/health")
        assert json.loads(resp.body) == {"status": "ok"}

        resp = await client.fetch(f"{base_url}/docs")
        body = json.loads(resp.body)
        assert body["commands"] == {"f": "forward", "b": "backward", "l": "left", "r": "right"}
        assert set(["x", "y", "direction"]).issubset(body["state_schema"]["properties"].keys())
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_state_waits_for_lock_without_stalling_server(controller):
    server, base_url = start_server(controller)
    client = httpclient.AsyncHTTPClient()
    controller.lock.acquire()
    try:
        pending_state = asyncio.ensure_future(client.fetch(f"{base_url}/state"))
        await asyncio.sleep(0.05)

        started = time.monotonic()
        resp = await client.fetch(f"{base_url}/health")
        assert resp.code == 200
        assert time.monotonic() - started < 0.5
        assert not pending_state.done()
    finally:
        controller.lock.release()
    try:
        resp = await pending_state
        assert json.loads(resp.body) == {"x": 0.0, "y": 0.0, "direction": "N"}
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_unknown_path_is_not_found(controller):
    server, base_url = start_server(controller)
    try:
        resp = await httpclient.AsyncHTTPClient().fetch(f"{base_url}/nope", raise_error=False)
        assert resp.code == 404
    finally:
        server.stop()
