# File: tests/conftest.py
import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from link_scout.config import CheckerConfig
from link_scout.crawler.models import PageData

#: seconds a "slow" handler sleeps
SLOW_SLEEP: float = 0.5
#: seconds the "hanging" handler sleeps, longer than the client timeout in tests
HANG_SLEEP: float = 1.5


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def basic_config() -> CheckerConfig:
    """
    Return a basic valid CheckerConfig for checker tests.
    """
    return CheckerConfig(
        max_links=50,
        timeout=2.0,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def mock_page_data() -> PageData:
    """
    Provide a simple PageData instance with HTML content.
    """
    html = (
        '<html><body>'
        '<a href="/about">About</a>'
        '<a href="/about">Dup</a>'
        '<a href="mailto:a@b.com">Mail</a>'
        '<a href="https://ext.com/x">Ext</a>'
        '</body></html>'
    )
    return PageData(url="https://site.com", content=html)


@pytest.fixture()
def hits() -> dict[str, int]:
    """Request counter per path, shared with the test server."""
    return {}


@pytest.fixture()
def link_app(hits: dict[str, int]) -> web.Application:
    """
    Local site with working, broken, redirecting and slow targets.
    """
    app = web.Application()

    @web.middleware
    async def count_hits(request, handler):
        hits[request.path] = hits.get(request.path, 0) + 1
        return await handler(request)

    app.middlewares.append(count_hits)

    async def page(request):
        host = request.host
        html = (
            "<html><body>"
            '<a href="/ok">OK</a>'
            '<a href="/ok">Dup</a>'
            '<a href="mailto:a@b.com">Mail</a>'
            '<a href="tel:+100">Tel</a>'
            '<a href="javascript:void(0)">JS</a>'
            '<a href="#top">Top</a>'
            '<a href="img/logo.png">Logo</a>'
            f'<A HREF=\'http://{host}/missing\'>Missing</A>'
            '<a href="/redirect">Redirect</a>'
            '<a href="/gone">Gone</a>'
            "</body></html>"
        )
        return web.Response(text=html, content_type="text/html")

    async def ok(_):
        return web.Response(text="<h1>OK</h1>", content_type="text/html")

    async def missing(_):
        return web.Response(status=404, text="nope")

    async def gone(_):
        return web.Response(status=410)

    async def server_error(_):
        return web.Response(status=500)

    async def redirect(_):
        raise web.HTTPFound("/ok")

    async def slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return web.Response(text="<h1>Slow</h1>", content_type="text/html")

    async def slow_page(_):
        return web.Response(
            text='<a href="/slow1">S1</a><a href="/slow2">S2</a>',
            content_type="text/html",
        )

    async def hanging(_):
        await asyncio.sleep(HANG_SLEEP)
        return web.Response(text="late", content_type="text/html")

    async def many(request):
        count = int(request.query.get("n", "60"))
        links = "".join(f'<a href="/p/{i}">P{i}</a>' for i in range(count))
        return web.Response(text=f"<html><body>{links}</body></html>", content_type="text/html")

    async def numbered(_):
        return web.Response(text="page", content_type="text/html")

    app.router.add_get("/page", page)
    app.router.add_get("/ok", ok)
    app.router.add_get("/missing", missing)
    app.router.add_get("/gone", gone)
    app.router.add_get("/error", server_error)
    app.router.add_get("/redirect", redirect)
    app.router.add_get("/slow-page", slow_page)
    app.router.add_get("/slow1", slow)
    app.router.add_get("/slow2", slow)
    app.router.add_get("/hanging", hanging)
    app.router.add_get("/many", many)
    app.router.add_get("/p/{n}", numbered)
    return app


@pytest_asyncio.fixture
async def link_server(link_app: web.Application, unused_tcp_port: int) -> AsyncIterator[str]:
    async for url in serve_app(link_app, unused_tcp_port):
        yield url


@pytest.fixture()
def dead_url(unused_tcp_port_factory) -> str:
    """URL on a port nobody listens on (connection refused)."""
    return f"http://127.0.0.1:{unused_tcp_port_factory()}/down"


@pytest.fixture()
def serve():
    """The serve_app helper, for tests that need an extra site."""
    return serve_app
