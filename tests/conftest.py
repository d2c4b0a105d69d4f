import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from xrplsale import ClientConfig, XRPLSaleClient

API_PREFIX = "/v1"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: Dict[str, str]
    headers: Any
    json: Any


class FakeAPI:
    """Local XRPL.Sale stand-in that records requests and replays canned responses

    Responses registered for a route are served in order; the last one keeps
    being served once the others are used up.
    """

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self.routes: Dict[tuple, list] = {}
        self.base_url: Optional[str] = None

    def add(self, method: str, path: str, *responses):
        self.routes[(method.upper(), path)] = list(responses)

    def hits(self, method: str, path: str) -> List[RecordedRequest]:
        return [r for r in self.requests if r.method == method and r.path == path]

    async def handle(self, request: web.Request) -> web.StreamResponse:
        path = request.path[len(API_PREFIX):] if request.path.startswith(API_PREFIX) else request.path
        raw = await request.read()
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                query=dict(request.query),
                headers=request.headers.copy(),
                json=json.loads(raw) if raw else None,
            )
        )

        queue = self.routes.get((request.method, path))
        if not queue:
            return web.json_response({"message": f"no route for {request.method} {path}"}, status=404)
        response = queue.pop(0) if len(queue) > 1 else queue[0]

        if callable(response):
            return await response(request)

        status, payload = response[0], response[1]
        headers = response[2] if len(response) > 2 else None
        if isinstance(payload, (dict, list)):
            return web.json_response(payload, status=status, headers=headers)
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        return web.Response(status=status, body=payload or b"", headers=headers)


@pytest.fixture
async def fake_api():
    api = FakeAPI()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", api.handle)
    server = TestServer(app)
    await server.start_server()
    api.base_url = str(server.make_url(API_PREFIX))
    yield api
    await server.close()


@pytest.fixture
def make_client(fake_api):
    """Build a client pointed at the fake API with short retry waits"""

    def factory(**options) -> XRPLSaleClient:
        options.setdefault("retry_wait_time", 0.01)
        options.setdefault("retry_max_wait_time", 0.05)
        options.setdefault("base_url", fake_api.base_url)
        auth_token = options.pop("auth_token", None)
        return XRPLSaleClient(config=ClientConfig(**options), auth_token=auth_token)

    return factory
