# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: a local aiohttp server standing in for the DeepL API."""

from __future__ import annotations

import asyncio
import socket
from collections.abc import AsyncIterator
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


async def _echo(request: web.Request) -> web.Response:
    """Return what the server received."""
    content_type = request.content_type
    record: dict[str, Any] = {
        "method": request.method,
        "path": request.path,
        "authorization": request.headers.getall("Authorization", []),
        "accept": request.headers.get("Accept", ""),
        "content_type": content_type,
    }
    if content_type == "multipart/form-data":
        fields: list[list[str]] = []
        reader = await request.multipart()
        async for part in reader:
            data = await part.read()
            fields.append([part.name or "", part.filename or "", data.decode("utf-8")])
        record["multipart"] = fields
    else:
        record["body"] = await request.text()
    return web.json_response(record)


async def _quota(request: web.Request) -> web.Response:
    return web.json_response({"message": "quota exceeded"}, status=456)


async def _no_content(request: web.Request) -> web.Response:
    return web.Response(status=204)


async def _tsv(request: web.Request) -> web.Response:
    return web.Response(text="Hallo\tHello\nWelt\tWorld", content_type="text/tab-separated-values")


async def _binary(request: web.Request) -> web.Response:
    return web.Response(body=b"%PDF-1.4\n\x00\xff", content_type="application/pdf")


async def _redirect(request: web.Request) -> web.Response:
    return web.Response(status=302, headers={"Location": "/v2/echo"})


async def _slow(request: web.Request) -> web.Response:
    await asyncio.sleep(2)
    return web.json_response({})


async def _broken(request: web.Request) -> web.StreamResponse:
    # Advertise more bytes than are sent, then drop the connection
    response = web.StreamResponse(status=200, headers={"Content-Length": "100"})
    await response.prepare(request)
    await response.write(b'{"partial"')
    assert request.transport is not None
    request.transport.close()
    return response


def create_app() -> web.Application:
    """Build the stand-in API application."""
    app = web.Application()
    app.router.add_post("/v2/quota", _quota)
    app.router.add_delete("/v2/no-content", _no_content)
    app.router.add_get("/v2/tsv", _tsv)
    app.router.add_post("/v2/binary", _binary)
    app.router.add_get("/v2/redirect", _redirect)
    app.router.add_get("/v2/slow", _slow)
    app.router.add_get("/v2/broken", _broken)
    app.router.add_delete("/v2/glossaries/{glossary_id}", _no_content)
    app.router.add_get("/v2/glossaries/{glossary_id}/entries", _tsv)
    app.router.add_post("/v2/document/{document_id}/result", _binary)
    # Everything else echoes the request back
    app.router.add_route("*", "/v2/{path:.*}", _echo)
    return app


@pytest_asyncio.fixture
async def api_server() -> AsyncIterator[TestServer]:
    """Run the stand-in API on a free local port."""
    server = TestServer(create_app())
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def base_url(api_server: TestServer) -> str:
    """Base URL of the stand-in API."""
    return str(api_server.make_url("/v2/"))


@pytest.fixture
def closed_port_url() -> str:
    """Base URL of a local port with nothing listening."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/v2/"
