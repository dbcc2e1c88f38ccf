import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from features.common.exceptions.feed_exceptions import FeedError, FeedFetchError
from features.forecast.services.feed_client import SurfFeedClient

CSV_TEXT = "spot,timestamp\nBlacks,6pm\n"


def make_app() -> web.Application:
    async def today(request):
        return web.Response(text=CSV_TEXT, content_type="text/csv")

    async def broken(request):
        return web.Response(status=500, text="boom")

    async def image(request):
        return web.Response(body=b"\x89PNG", content_type="image/png")

    app = web.Application()
    app.router.add_get("/surf/today.csv", today)
    app.router.add_get("/surf/broken.csv", broken)
    app.router.add_get("/surf/image.png", image)
    return app


@pytest.mark.asyncio
async def test_fetch_over_http():
    async with TestServer(make_app()) as server:
        client = SurfFeedClient(str(server.make_url("/surf/today.csv")))

        assert await client.fetch() == CSV_TEXT


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/surf/broken.csv", "/surf/missing.csv", "/surf/image.png"])
async def test_fetch_failures_raise_feed_fetch_error(path):
    async with TestServer(make_app()) as server:
        client = SurfFeedClient(str(server.make_url(path)))

        with pytest.raises(FeedFetchError):
            await client.fetch()


@pytest.mark.asyncio
async def test_fetch_from_file(tmp_path):
    feed = tmp_path / "today.csv"
    feed.write_text(CSV_TEXT, encoding="utf-8")

    assert await SurfFeedClient(str(feed)).fetch() == CSV_TEXT
    assert await SurfFeedClient(feed.as_uri()).fetch() == CSV_TEXT


@pytest.mark.asyncio
async def test_missing_file_raises(tmp_path):
    with pytest.raises(FeedError):
        await SurfFeedClient(str(tmp_path / "nope.csv")).fetch()
