"""Scoped headless browser sessions."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from netsearch.config.schema import BrowserConfig

PageFactory = Callable[["BrowserConfig"], AbstractAsyncContextManager[Any]]

# Concurrent fetches can all hit a missing browser at once; install only once.
_INSTALL_LOCK = asyncio.Lock()
_INSTALL_TIMEOUT_S = 10 * 60
_MISSING_BINARY_HINTS = (
    "executable doesn't exist",
    "please run the following command",
    "browser has not been found",
)


@asynccontextmanager
async def open_page(config: BrowserConfig) -> AsyncIterator[Any]:
    """Launch a private browser, yield one page, and close both on exit.

    Every caller gets its own browser process; nothing is shared between
    calls. Release happens on normal exit, on error and on cancellation.
    """
    from playwright.async_api import async_playwright

    async with async_playwright() as playwright:
        browser_type = getattr(playwright, config.browser)
        browser = await _launch(browser_type, config)
        try:
            page = await browser.new_page()
            try:
                yield page
            finally:
                await page.close()
        finally:
            await browser.close()


def browser_binary_missing(exc: Exception) -> bool:
    """True when a launch failed because Playwright has not downloaded the engine."""
    text = str(exc).lower()
    return any(hint in text for hint in _MISSING_BINARY_HINTS)


async def install_browser(engine: str, *, timeout_s: int = _INSTALL_TIMEOUT_S) -> bool:
    """Run ``playwright install <engine>``; return whether it succeeded."""
    async with _INSTALL_LOCK:
        logger.warning("Playwright {} binary missing, running playwright install", engine)
        process = await asyncio.create_subprocess_exec(
            sys.executable,
            "-m",
            "playwright",
            "install",
            engine,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
        try:
            output, _ = await asyncio.wait_for(process.communicate(), timeout=timeout_s)
        except asyncio.TimeoutError:
            process.kill()
            logger.error("playwright install {} timed out after {}s", engine, timeout_s)
            return False

        if process.returncode != 0:
            tail = output.decode("utf-8", errors="replace").strip()[-2000:]
            logger.error("playwright install {} exited with {}: {}", engine, process.returncode, tail)
            return False

        logger.info("Installed Playwright {}", engine)
        return True


async def _launch(browser_type: Any, config: BrowserConfig) -> Any:
    launch_kwargs = {"headless": config.headless, "args": list(config.launch_args)}
    try:
        return await browser_type.launch(**launch_kwargs)
    except Exception as e:
        if not config.auto_install_browsers or not browser_binary_missing(e):
            raise
        if not await install_browser(config.browser):
            raise
    return await browser_type.launch(**launch_kwargs)
