"""Tests for the shared aiohttp client."""

from __future__ import annotations

import aiohttp
import pytest
from aiohttp import test_utils, web

from ticket_estimator.utils import http

HITS = web.AppKey("hits", dict)


@pytest.fixture
async def server():
    hits = {"flaky": 0}

    async def price(request: web.Request) -> web.Response:
        return web.json_response({"price": 25, "query": dict(request.query)})

    async def broken(request: web.Request) -> web.Response:
        return web.Response(status=503)

    async def flaky(request: web.Request) -> web.Response:
        hits["flaky"] += 1
        if hits["flaky"] == 1:
            return web.Response(status=500)
        return web.json_response({"price": 30})

    async def garbage(request: web.Request) -> web.Response:
        return web.Response(text="<html>not json</html>", content_type="text/html")

    app = web.Application()
    app[HITS] = hits
    app.router.add_get("/price", price)
    app.router.add_get("/broken", broken)
    app.router.add_get("/flaky", flaky)
    app.router.add_get("/garbage", garbage)

    srv = test_utils.TestServer(app)
    await srv.start_server()
    yield srv
    await http.close_session()
    await srv.close()


class TestFetchJson:
    async def test_returns_decoded_body(self, server) -> None:
        data = await http.fetch_json(
            str(server.make_url("/price")), params={"from": "Paris", "to": "Lyon"}
        )
        assert data == {"price": 25, "query": {"from": "Paris", "to": "Lyon"}}

    async def test_error_status_raises(self, server) -> None:
        with pytest.raises(aiohttp.ClientResponseError):
            await http.fetch_json(str(server.make_url("/broken")))

    async def test_unreadable_body_raises(self, server) -> None:
        with pytest.raises(ValueError):
            await http.fetch_json(str(server.make_url("/garbage")))

    async def test_single_attempt_by_default(self, server) -> None:
        with pytest.raises(aiohttp.ClientResponseError):
            await http.fetch_json(str(server.make_url("/flaky")))
        assert server.app[HITS]["flaky"] == 1

    async def test_retries_when_asked(self, server, monkeypatch) -> None:
        monkeypatch.setattr(http, "RETRY_BACKOFF", 0.0)
        data = await http.fetch_json(str(server.make_url("/flaky")), retries=2)
        assert data == {"price": 30}
        assert server.app[HITS]["flaky"] == 2


class TestSession:
    async def test_session_is_shared_until_closed(self) -> None:
        first = await http.get_session()
        assert await http.get_session() is first

        await http.close_session()

        assert first.closed
        second = await http.get_session()
        assert second is not first
        await http.close_session()

    async def test_configured_timeout(self) -> None:
        http.configure_http(5.0)
        try:
            session = await http.get_session()
            assert session.timeout.total == 5.0
        finally:
            await http.close_session()
            http.configure_http(30.0)
