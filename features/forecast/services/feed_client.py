import asyncio
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import aiohttp

from features.common.exceptions.feed_exceptions import FeedFetchError
from core.config import settings

logger = logging.getLogger(__name__)

TEXT_CONTENT_TYPES = {"application/csv", "application/octet-stream"}

class SurfFeedClient:
    """Retrieves the raw surf CSV feed over HTTP or from a local file."""

    def __init__(self, feed_url: Optional[str] = None):
        self.feed_url = feed_url or settings.feed_url

    async def fetch(self) -> str:
        """Fetch the feed text once. There is no retry: any failure raises FeedFetchError."""
        parsed = urlparse(self.feed_url)
        if parsed.scheme in ("http", "https"):
            return await self._fetch_http(self.feed_url)
        path = Path(parsed.path) if parsed.scheme == "file" else Path(self.feed_url)
        return self._read_file(path)

    async def _fetch_http(self, url: str) -> str:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(url) as response:
                    response.raise_for_status()
                    content_type = response.content_type or ""
                    if not (content_type.startswith("text/") or content_type in TEXT_CONTENT_TYPES):
                        raise FeedFetchError(f"Unexpected content type {content_type!r} from {url}")
                    text = await response.text()
                    logger.info(f"📥 Fetched surf feed from {url} ({len(text)} bytes)")
                    return text
        except FeedFetchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            logger.error(f"Error fetching surf feed from {url}: {str(e)}")
            raise FeedFetchError(str(e)) from e

    def _read_file(self, path: Path) -> str:
        try:
            text = path.read_text(encoding="utf-8")
            logger.info(f"📥 Read surf feed from {path} ({len(text)} bytes)")
            return text
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading surf feed from {path}: {str(e)}")
            raise FeedFetchError(str(e)) from e
