from __future__ import annotations

import logging
from typing import Optional

from qperf_ui.domain.models import RunOptions, RunRequest, RunResult, RunState
from qperf_ui.ports.engine import QperfEngine
from qperf_ui.services.context import UiContext
from qperf_ui.services.status_reporter import (
    STATUS_NO_LOGS,
    STATUS_NO_QUESTIONS,
    STATUS_RUN_FAILED,
    STATUS_RUNNING,
)

logger = logging.getLogger(__name__)


class RunController:
    """
    Use case: validate selections, build the RunRequest, await the engine,
    and fold the RunResult back into the store.

    State machine: IDLE -> IN_FLIGHT -> COMPLETED | FAILED. A Run that arrives
    while another is IN_FLIGHT is rejected, not queued.
    """

    def __init__(self, ctx: UiContext, engine: QperfEngine):
        self._ctx = ctx
        self._engine = engine

    async def run(self, options: Optional[RunOptions] = None) -> Optional[RunResult]:
        ctx = self._ctx
        store = ctx.store

        if store.run_state is RunState.IN_FLIGHT:
            logger.warning("Run requested while a previous run is still in flight; ignoring")
            return None

        if options is not None:
            store.set_options(options)

        if not store.question_paths:
            ctx.reporter.report(STATUS_NO_QUESTIONS)
            ctx.refresh()
            return None
        if not store.log_paths:
            ctx.reporter.report(STATUS_NO_LOGS)
            ctx.refresh()
            return None

        request = RunRequest.build(store.question_paths, store.log_paths, store.options)

        # Everything above runs before the first await, so IN_FLIGHT is set
        # before any other event can be processed.
        generation = store.generation
        store.set_run_state(RunState.IN_FLIGHT)
        ctx.reporter.report(STATUS_RUNNING)
        ctx.refresh()
        logger.info(
            "Running qperf: %d question file(s), %d log file(s), types=%s",
            len(request.question_paths),
            len(request.log_paths),
            request.question_type_codes(),
        )

        result: Optional[RunResult] = None
        try:
            result = await self._engine.run_qperf(request)
        except Exception:
            logger.exception("qperf run failed")
        finally:
            # Cleared here whatever happened, including cancellation and a reset meanwhile.
            store.set_run_state(RunState.IDLE)

        if store.generation != generation:
            logger.info("Discarding qperf outcome: session was cleared while it ran")
            ctx.refresh()
            return None

        if result is None:
            # Prior output and readiness stay as they were.
            store.set_run_state(RunState.FAILED)
            ctx.reporter.report(STATUS_RUN_FAILED)
            ctx.refresh()
            return None

        store.set_output(result.output_payload)
        store.set_readiness(result.readiness)
        store.set_run_state(RunState.COMPLETED)
        ctx.reporter.report(result.status_message, result.warnings)
        ctx.refresh()
        logger.info(
            "qperf finished: status=%r readiness=%s warnings=%d",
            result.status_message,
            result.readiness.value,
            len(result.warnings),
        )
        return result
