"""
Render session manager.

Owns exactly one render engine process for the lifetime of one pipeline
attempt. The engine is started under a startup deadline, used for a
single render (settle then paginate, each under its phase deadline) and
torn down on every exit path through `async with`.

The engine itself is reached through the RenderEngine / EnginePage
protocols so the Playwright adapter can be swapped for an in-memory fake.

Dependencies: asyncio, quote_pdf.core.rendering.phase_timeout
System role: Engine process lifecycle and bounded content settling
"""

import asyncio
import logging
import time
from typing import Any, Callable, Protocol

from quote_pdf.configs.render import RenderSettings
from quote_pdf.core.exceptions import EngineUnavailable
from quote_pdf.core.rendering.models import PageOptions
from quote_pdf.core.rendering.phase_timeout import Phase, PhaseTimeoutController

logger = logging.getLogger(__name__)


class EnginePage(Protocol):
    """One isolated page context inside a running engine."""

    async def set_content(self, markup: str) -> None: ...

    async def wait_for_document_ready(self) -> None: ...

    async def pending_assets(self) -> list[Any]: ...

    async def wait_for_asset(self, asset: Any) -> None: ...

    async def pdf(self, page_size: str, margin: str) -> bytes: ...

    async def close(self) -> None: ...


class RenderEngine(Protocol):
    """A headless render engine process."""

    async def start(self) -> None: ...

    async def new_page(self) -> EnginePage: ...

    async def close(self) -> None: ...


EngineFactory = Callable[[], RenderEngine]


class RenderSession:
    """
    One engine process, one render.

    Usage:
        async with RenderSession(factory, settings, timeouts) as session:
            pdf_bytes = await session.render(markup, page_options)
    """

    def __init__(
        self,
        engine_factory: EngineFactory,
        settings: RenderSettings,
        timeouts: PhaseTimeoutController,
    ) -> None:
        self._engine_factory = engine_factory
        self._settings = settings
        self._timeouts = timeouts
        self._engine: RenderEngine | None = None
        self.timeline: dict[str, float] = {}
        self.stopped = False

    async def __aenter__(self) -> "RenderSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    def _mark(self, event: str) -> None:
        self.timeline[event] = time.monotonic()

    async def start(self) -> None:
        """
        Launch the engine under the startup deadline.

        Raises:
            EngineUnavailable: Launch failed or did not finish in time
        """
        timeout = self._settings.engine_startup_timeout
        self._engine = self._engine_factory()
        try:
            await asyncio.wait_for(self._engine.start(), timeout=timeout)
        except asyncio.TimeoutError as e:
            await self.stop()
            raise EngineUnavailable(
                f"Render engine did not start within {timeout:g}s",
                details={"timeout_s": timeout},
            ) from e
        except EngineUnavailable:
            await self.stop()
            raise
        except Exception as e:
            await self.stop()
            raise EngineUnavailable(f"Render engine failed to start: {e}") from e

        self._mark("started")
        logger.debug("%s:start - Render engine started", __name__)

    async def render(self, markup: str, page_options: PageOptions) -> bytes:
        """
        Load markup, settle its assets and paginate it.

        Args:
            markup: Complete HTML document
            page_options: Page size and margin

        Returns:
            bytes: Paginated document

        Raises:
            EngineUnavailable: Session not started, page could not be opened in
                time, or engine died mid-render
            PhaseTimeout: Settle or paginate deadline elapsed
        """
        if self._engine is None or self.stopped:
            raise EngineUnavailable("Render session is not running")

        page = await self._open_page()
        try:
            await self._timeouts.run(Phase.SETTLE, self._settle(page, markup))
            self._mark("settled")

            content = await self._timeouts.run(
                Phase.PAGINATE,
                page.pdf(page_size=page_options.page_size, margin=page_options.margin),
            )
            self._mark("paginated")
            return content
        finally:
            await self._close_page(page)

    async def _open_page(self) -> EnginePage:
        timeout = self._settings.context_timeout
        try:
            page = await asyncio.wait_for(self._engine.new_page(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.warning(
                "%s:_open_page - Browser context not ready within %.1fs", __name__, timeout
            )
            raise EngineUnavailable(
                f"Browser context did not open within {timeout:g}s",
                details={"timeout_s": timeout},
            ) from e
        self._mark("page_opened")
        return page

    async def _settle(self, page: EnginePage, markup: str) -> None:
        await page.set_content(markup)
        self._mark("content_set")
        await page.wait_for_document_ready()

        assets = await page.pending_assets()
        if assets:
            await asyncio.gather(*(self._settle_asset(page, asset) for asset in assets))
        logger.debug(
            "%s:_settle - Settled %d embedded assets",
            __name__,
            len(assets),
        )

    async def _settle_asset(self, page: EnginePage, asset: Any) -> None:
        timeout = self._settings.asset_timeout
        try:
            await asyncio.wait_for(page.wait_for_asset(asset), timeout=timeout)
        except asyncio.TimeoutError:
            # A slow image is rendered as broken rather than failing the document
            logger.info(
                "%s:_settle_asset - Asset not loaded within %.1fs, continuing",
                __name__,
                timeout,
            )

    async def _close_page(self, page: EnginePage) -> None:
        if self.stopped:
            return
        try:
            await asyncio.wait_for(page.close(), timeout=self._settings.engine_shutdown_timeout)
        except Exception as e:
            logger.warning("%s:_close_page - Failed to close page: %s", __name__, e)

    async def stop(self) -> None:
        """
        Tear the engine down. Idempotent and bounded by the shutdown deadline.

        Never raises; a failed close is logged.
        """
        if self.stopped:
            return
        self.stopped = True
        engine, self._engine = self._engine, None
        if engine is not None:
            timeout = self._settings.engine_shutdown_timeout
            try:
                await asyncio.wait_for(engine.close(), timeout=timeout)
            except asyncio.TimeoutError:
                logger.warning(
                    "%s:stop - Render engine did not close within %.1fs",
                    __name__,
                    timeout,
                )
            except Exception as e:
                logger.warning("%s:stop - Render engine close failed: %s", __name__, e)
        self._mark("stopped")
        logger.debug("%s:stop - Render session stopped", __name__)
