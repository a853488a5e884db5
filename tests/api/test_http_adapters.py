"""HTTP Adapters and global error handlers — on a small standalone app.

Tests cover:
    - params_all() merges path < query < JSON body
    - non-JSON and non-object bodies contribute no params
    - JsonResponseSink: single write, 204 when empty
    - unexpected handler errors reach the catch-all as a generic 500
    - SymbolicError raised outside a handler uses the envelope
"""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from userapi.api.error_handlers import register_error_handlers
from userapi.api.http_adapters import HttpRequest, JsonResponseSink
from userapi.api.routes import run_handler
from userapi.core.dispatch_context import DispatchContext
from userapi.core.symbolic_error import SymbolicError


def _echo(req, res):
    res.json(dict(req.params_all()))


def _silent(req, res):
    return None


def _crash(req, res):
    raise RuntimeError("database password is hunter2")


def _build_app() -> FastAPI:
    handlers = DispatchContext().register({
        "echo": _echo, "silent": _silent, "crash": _crash,
    })
    app = FastAPI()

    @app.post("/echo/{userId}")
    async def echo(request: Request):
        return await run_handler(handlers["echo"], request, None)

    @app.get("/silent")
    async def silent(request: Request):
        return await run_handler(handlers["silent"], request, None)

    @app.get("/crash")
    async def crash(request: Request):
        return await run_handler(handlers["crash"], request, None)

    @app.get("/outside")
    async def outside():
        raise SymbolicError("auth.badCredentials", "no")

    register_error_handlers(app)
    return app


@pytest.fixture
async def adapter_client():
    async with AsyncClient(
        transport=ASGITransport(app=_build_app(), raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_params_merge_path_query_and_body(adapter_client):
    resp = await adapter_client.post(
        "/echo/u1?q=1&userId=fromquery", json={"name": "n", "q": "2"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"userId": "fromquery", "q": "2", "name": "n"}


async def test_non_object_body_contributes_nothing(adapter_client):
    resp = await adapter_client.post("/echo/u1", json=[1, 2])
    assert resp.json() == {"userId": "u1"}


async def test_non_json_body_is_ignored(adapter_client):
    resp = await adapter_client.post("/echo/u1", content=b"not json")
    assert resp.json() == {"userId": "u1"}


async def test_handler_without_write_returns_204(adapter_client):
    resp = await adapter_client.get("/silent")
    assert resp.status_code == 204


async def test_unexpected_error_becomes_generic_500(adapter_client):
    resp = await adapter_client.get("/crash")
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"]["code"] == "internal.unexpected"
    assert "hunter2" not in resp.text


async def test_symbolic_error_outside_handler_uses_envelope(adapter_client):
    resp = await adapter_client.get("/outside")
    assert resp.status_code == 401
    assert resp.json() == {"error": {"code": "auth.badCredentials", "message": "no"}}


def test_sink_rejects_second_write():
    sink = JsonResponseSink()
    sink.json({"a": 1})
    with pytest.raises(RuntimeError):
        sink.json({"b": 2})


def test_sink_builds_json_response():
    sink = JsonResponseSink()
    sink.json({"data": 1}, status_code=201)
    resp = sink.to_response()
    assert resp.status_code == 201
    assert resp.body == b'{"data":1}'


def test_http_request_params_are_a_copy():
    source = {"a": 1}
    req = HttpRequest(source)
    source["a"] = 2
    assert req.params_all() == {"a": 1}
