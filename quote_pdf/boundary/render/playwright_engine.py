"""
Playwright render engine adapter.

Headless Chromium driven through the Playwright async API. One
PlaywrightEngine owns one browser process; every page lives in its own
browser context so nothing leaks between renders. Playwright errors
(launch failure, crashed or closed target) surface as EngineUnavailable.

Dependencies: playwright
System role: Render engine boundary behind the RenderEngine protocol
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from playwright.async_api import (
    Browser,
    BrowserContext,
    ElementHandle,
    Error as PlaywrightError,
    Page,
    Playwright,
    async_playwright,
)

from quote_pdf.configs.render import RenderSettings
from quote_pdf.core.exceptions import EngineUnavailable

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]

# Resolves once the image has loaded or failed; never rejects
_WAIT_FOR_IMAGE_JS = """
img => img.complete || new Promise(resolve => {
    img.addEventListener('load', () => resolve(true), { once: true });
    img.addEventListener('error', () => resolve(false), { once: true });
})
"""


@asynccontextmanager
async def _engine_errors(action: str):
    try:
        yield
    except PlaywrightError as e:
        raise EngineUnavailable(
            f"Render engine failed during {action}: {e.message}",
            details={"action": action},
        ) from e


class PlaywrightPage:
    """A single page in its own browser context."""

    def __init__(self, context: BrowserContext, page: Page) -> None:
        self._context = context
        self._page = page

    async def set_content(self, markup: str) -> None:
        async with _engine_errors("set_content"):
            # Images are settled separately with per-asset deadlines
            await self._page.set_content(markup, wait_until="domcontentloaded", timeout=0)

    async def wait_for_document_ready(self) -> None:
        async with _engine_errors("document_ready"):
            await self._page.wait_for_load_state("domcontentloaded", timeout=0)
            await self._page.evaluate("() => document.fonts.ready.then(() => true)")

    async def pending_assets(self) -> list[ElementHandle]:
        async with _engine_errors("pending_assets"):
            return await self._page.query_selector_all("img")

    async def wait_for_asset(self, asset: Any) -> None:
        async with _engine_errors("wait_for_asset"):
            await asset.evaluate(_WAIT_FOR_IMAGE_JS)

    async def pdf(self, page_size: str, margin: str) -> bytes:
        async with _engine_errors("pdf"):
            await self._page.emulate_media(media="print")
            return await self._page.pdf(
                format=page_size,
                print_background=True,
                margin={"top": margin, "right": margin, "bottom": margin, "left": margin},
            )

    async def close(self) -> None:
        async with _engine_errors("close_page"):
            await self._context.close()


class PlaywrightEngine:
    """One headless Chromium process."""

    def __init__(self, settings: RenderSettings) -> None:
        """
        Initialize engine adapter (nothing is launched until start()).

        Args:
            settings: Executable path and launch configuration
        """
        self._settings = settings
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    async def start(self) -> None:
        async with _engine_errors("launch"):
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=True,
                args=LAUNCH_ARGS,
                executable_path=self._settings.executable_path or None,
            )
        logger.debug(
            "%s:start - Chromium launched",
            __name__,
            extra={"executable_path": self._settings.executable_path},
        )

    async def new_page(self) -> PlaywrightPage:
        if self._browser is None:
            raise EngineUnavailable("Render engine is not running")
        async with _engine_errors("new_page"):
            context = await self._browser.new_context()
            page = await context.new_page()
        return PlaywrightPage(context, page)

    async def close(self) -> None:
        """Close the browser and stop the driver; safe on a partially started engine."""
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        try:
            if browser is not None:
                await browser.close()
        except PlaywrightError as e:
            logger.warning("%s:close - Browser close failed: %s", __name__, e.message)
        finally:
            if playwright is not None:
                await playwright.stop()


def playwright_engine_factory(settings: RenderSettings):
    """Engine factory for RenderSession: a new Chromium process per call."""

    def factory() -> PlaywrightEngine:
        return PlaywrightEngine(settings)

    return factory
