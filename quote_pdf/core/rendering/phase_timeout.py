"""
Phase timeout controller.

Single place where pipeline deadlines live. Each phase gets its own named
deadline; an overrun cancels the in-flight awaitable and raises
PhaseTimeout naming the phase. No retries happen here.

Dependencies: asyncio, quote_pdf.configs.pipeline
System role: Deadline enforcement for fetch, settle, paginate and upload
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, TypeVar

from quote_pdf.configs.pipeline import PipelineSettings
from quote_pdf.core.exceptions import PhaseTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Phase(str, Enum):
    """Bounded phases of one pipeline attempt."""

    FETCH = "fetch"
    SETTLE = "settle"
    PAGINATE = "paginate"
    UPLOAD = "upload"


class PhaseTimeoutController:
    """Runs pipeline phases under their configured deadlines."""

    def __init__(self, settings: PipelineSettings) -> None:
        self._deadlines: dict[Phase, float] = {
            Phase.FETCH: settings.fetch_timeout,
            Phase.SETTLE: settings.settle_timeout,
            Phase.PAGINATE: settings.paginate_timeout,
            Phase.UPLOAD: settings.upload_timeout,
        }
        self._startup = settings.render.engine_startup_timeout
        self._context = settings.render.context_timeout
        self._shutdown = settings.render.engine_shutdown_timeout
        self._slack = settings.request_slack

    def deadline(self, phase: Phase) -> float:
        """Deadline of one phase in seconds."""
        return self._deadlines[phase]

    @property
    def request_deadline(self) -> float:
        """
        Whole-attempt deadline.

        Engine startup, page opening, every phase deadline, engine shutdown
        and slack, so a phase deadline always fires before the request one.
        """
        return (
            self._startup
            + self._context
            + sum(self._deadlines.values())
            + self._shutdown
            + self._slack
        )

    async def run(self, phase: Phase, aw: Awaitable[T]) -> T:
        """
        Await a phase under its deadline.

        Args:
            phase: Phase being executed
            aw: Awaitable doing the phase's work

        Returns:
            Whatever the awaitable returns

        Raises:
            PhaseTimeout: Deadline elapsed; the awaitable has been cancelled
        """
        timeout = self._deadlines[phase]
        try:
            return await asyncio.wait_for(aw, timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.warning(
                "%s:run - Phase %s exceeded %.1fs",
                __name__,
                phase.value,
                timeout,
                extra={"phase": phase.value, "timeout_s": timeout},
            )
            raise PhaseTimeout(phase.value, timeout) from e
