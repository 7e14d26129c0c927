"""
Test suite for the phase timeout controller.

System role: Verification of per-phase and request deadlines
"""

import asyncio

import pytest

from quote_pdf.configs import PipelineSettings
from quote_pdf.core.exceptions import PhaseTimeout
from quote_pdf.core.rendering.phase_timeout import Phase, PhaseTimeoutController


class TestPhaseTimeoutController:
    def test_each_phase_has_its_own_deadline(self, pipeline_settings: PipelineSettings) -> None:
        controller = PhaseTimeoutController(pipeline_settings)

        assert controller.deadline(Phase.FETCH) == 0.5
        assert controller.deadline(Phase.SETTLE) == 0.3
        assert controller.deadline(Phase.PAGINATE) == 0.5
        assert controller.deadline(Phase.UPLOAD) == 0.5

    def test_request_deadline_covers_every_phase(self, pipeline_settings: PipelineSettings) -> None:
        controller = PhaseTimeoutController(pipeline_settings)

        # startup 0.5 + context 0.2 + phases 1.8 + shutdown 0.5 + slack 0.5
        assert controller.request_deadline == pytest.approx(3.5)

    @pytest.mark.asyncio
    async def test_run_returns_result_within_deadline(self, pipeline_settings: PipelineSettings) -> None:
        controller = PhaseTimeoutController(pipeline_settings)

        async def work() -> str:
            return "done"

        assert await controller.run(Phase.FETCH, work()) == "done"

    @pytest.mark.asyncio
    async def test_overrun_cancels_work_and_names_the_phase(
        self, pipeline_settings: PipelineSettings
    ) -> None:
        controller = PhaseTimeoutController(pipeline_settings)
        cancelled = asyncio.Event()

        async def slow() -> None:
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        with pytest.raises(PhaseTimeout) as exc_info:
            await controller.run(Phase.SETTLE, slow())

        assert exc_info.value.phase == "settle"
        assert exc_info.value.timeout == 0.3
        assert exc_info.value.transient is True
        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_errors_inside_phase_propagate_unchanged(
        self, pipeline_settings: PipelineSettings
    ) -> None:
        controller = PhaseTimeoutController(pipeline_settings)

        async def broken() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await controller.run(Phase.UPLOAD, broken())
