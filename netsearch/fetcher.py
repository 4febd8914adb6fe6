"""Page content extraction for search results."""

from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from loguru import logger

from netsearch.browser import PageFactory, open_page
from netsearch.errors import FetchError

if TYPE_CHECKING:
    from netsearch.config.schema import BrowserConfig, FetchConfig

NO_CONTENT = "no content"
FETCH_FAILED = "unable to fetch content"
ELLIPSIS = "..."


def check_link(href: str, *, allow_private_network: bool = True) -> None:
    """Raise FetchError for links a browser cannot usefully open.

    Only literal IP hosts and localhost-style names are recognised as
    private; hostnames are not resolved.
    """
    parsed = urlparse(href)
    if parsed.scheme.lower() not in {"http", "https"}:
        raise FetchError(f"not an http(s) link: {href!r}")
    host = (parsed.hostname or "").rstrip(".").lower()
    if not host:
        raise FetchError(f"link has no host: {href!r}")
    if not allow_private_network and _is_private_host(host):
        raise FetchError(f"private host not allowed: {host}")


def _is_private_host(host: str) -> bool:
    if host == "localhost" or host.endswith((".localhost", ".local")):
        return True
    try:
        return not ipaddress.ip_address(host).is_global
    except ValueError:
        return False


def truncate_content(text: str, max_chars: int) -> str:
    """Cut ``text`` to ``max_chars`` characters, marking the cut with an ellipsis."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + ELLIPSIS


class ContentFetcher:
    """Load a result link in a private browser and read its body text."""

    def __init__(
        self,
        browser_config: BrowserConfig,
        fetch_config: FetchConfig,
        *,
        page_factory: PageFactory = open_page,
    ):
        self.browser_config = browser_config
        self.config = fetch_config
        self.page_factory = page_factory

    async def fetch(self, href: str) -> str:
        """Return bounded page text for ``href``; never raises on page errors."""
        try:
            text = await self._read_body(href)
        except Exception as e:
            logger.warning("Failed to fetch {}, using placeholder content: {}", href or "<empty link>", e)
            return FETCH_FAILED

        if not text:
            return NO_CONTENT
        return truncate_content(text, self.config.max_chars)

    async def _read_body(self, href: str) -> str:
        check_link(href, allow_private_network=self.config.allow_private_network)

        async with self.page_factory(self.browser_config) as page:
            await page.goto(href, wait_until="domcontentloaded", timeout=self.config.timeout_ms)
            body = await page.locator("body").inner_text()
        return (body or "").strip()
