"""Transport and client lifecycle against a local aiohttp server."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from adminstore._transport import HttpTransport
from adminstore.client import AdminClient
from adminstore.config import AdminConfig
from adminstore.exceptions import AdminClientError, AdminPayloadError, AdminTransportError
from adminstore.models.module import UsersModule
from adminstore.models.results import ErrorKind


def _build_app(received: list[Any]) -> web.Application:
    async def modules(request: web.Request) -> web.Response:
        return web.json_response({"users": [{"id": 7, "email": "a@example.com"}]})

    async def broken(request: web.Request) -> web.Response:
        return web.Response(status=500, text="boom")

    async def shopify(request: web.Request) -> web.Response:
        received.append(await request.json())
        return web.json_response({"success": True})

    async def garbage(request: web.Request) -> web.Response:
        return web.Response(text="<html>not json</html>", content_type="text/html")

    async def empty(request: web.Request) -> web.Response:
        return web.Response(status=204)

    async def undecodable_error(request: web.Request) -> web.Response:
        return web.Response(status=500, body=b"\xff\xfe broken")

    async def undecodable(request: web.Request) -> web.Response:
        return web.Response(body=b"\xff\xfe", content_type="application/json")

    app = web.Application()
    app.router.add_get("/api/admin/modules/users", modules)
    app.router.add_get("/api/admin/modules/broken", broken)
    app.router.add_post("/api/admin/dashboard/shopify", shopify)
    app.router.add_get("/garbage", garbage)
    app.router.add_get("/empty", empty)
    app.router.add_get("/api/admin/modules/scripts", undecodable_error)
    app.router.add_get("/undecodable", undecodable)
    return app


@pytest.fixture
def received() -> list[Any]:
    return []


@pytest_asyncio.fixture
async def server(received: list[Any]) -> AsyncIterator[test_utils.TestServer]:
    srv = test_utils.TestServer(_build_app(received))
    await srv.start_server()
    try:
        yield srv
    finally:
        await srv.close()


def _config(srv: test_utils.TestServer) -> AdminConfig:
    return AdminConfig(base_url=f"http://{srv.host}:{srv.port}/", request_timeout=5)


@pytest.mark.asyncio
async def test_get_json(server: test_utils.TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(_config(server), session)
        body = await transport.get_json("/api/admin/modules/users")

    assert body == {"users": [{"id": 7, "email": "a@example.com"}]}


@pytest.mark.asyncio
async def test_non_2xx_maps_to_transport_error(server: test_utils.TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(_config(server), session)
        with pytest.raises(AdminTransportError) as excinfo:
            await transport.get_json("/api/admin/modules/broken")

    assert excinfo.value.status_code == 500
    assert excinfo.value.reason == "Internal Server Error"
    assert excinfo.value.endpoint == "/api/admin/modules/broken"


@pytest.mark.asyncio
async def test_post_sends_json_body(server: test_utils.TestServer, received: list[Any]) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(_config(server), session)
        body = await transport.post_json("/api/admin/dashboard/shopify", {"action": "sync"})

    assert body == {"success": True}
    assert received == [{"action": "sync"}]


@pytest.mark.asyncio
async def test_invalid_json_is_payload_error(server: test_utils.TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(_config(server), session)
        with pytest.raises(AdminPayloadError):
            await transport.get_json("/garbage")


@pytest.mark.asyncio
async def test_empty_body_is_none(server: test_utils.TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(_config(server), session)
        assert await transport.get_json("/empty") is None


@pytest.mark.asyncio
async def test_connection_failure_has_no_status(server: test_utils.TestServer) -> None:
    config = _config(server)
    await server.close()

    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        with pytest.raises(AdminTransportError) as excinfo:
            await transport.get_json("/api/admin/modules/users")

    assert excinfo.value.status_code is None


@pytest.mark.asyncio
async def test_client_loads_module_over_http(server: test_utils.TestServer) -> None:
    async with AdminClient(_config(server)) as client:
        result = await client.load_module("users")

    assert result.ok
    assert isinstance(result.value, UsersModule)
    assert result.value.users[0].id == "7"
    assert client.modules["users"].loaded is True


@pytest.mark.asyncio
async def test_client_requires_context_manager() -> None:
    client = AdminClient(AdminConfig())

    with pytest.raises(AdminClientError):
        await client.load_module("users")


@pytest.mark.asyncio
async def test_error_status_wins_over_undecodable_body(server: test_utils.TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(_config(server), session)
        with pytest.raises(AdminTransportError) as excinfo:
            await transport.get_json("/api/admin/modules/scripts")

    assert excinfo.value.status_code == 500


@pytest.mark.asyncio
async def test_undecodable_success_body_is_payload_error(server: test_utils.TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(_config(server), session)
        with pytest.raises(AdminPayloadError):
            await transport.get_json("/undecodable")


@pytest.mark.asyncio
async def test_module_with_undecodable_error_page_fails_closed(server: test_utils.TestServer) -> None:
    async with AdminClient(_config(server)) as client:
        result = await client.load_module("scripts")

    state = client.modules["scripts"]
    assert state.loaded is False
    assert state.loading is False
    assert state.error == "Failed to load module: Internal Server Error"
    assert result.error_kind is ErrorKind.HTTP_STATUS
