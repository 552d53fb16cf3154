from __future__ import annotations

import logging
from typing import Optional

from qperf_ui.domain.models import OUTPUT_FILTER
from qperf_ui.ports.dialogs import FileDialogs
from qperf_ui.ports.persistence import OutputWriter
from qperf_ui.services.context import UiContext
from qperf_ui.services.status_reporter import STATUS_DIALOG_FAILED, STATUS_SAVE_FAILED

logger = logging.getLogger(__name__)


class SaveController:
    """Passes the cached output of the last successful run to the writer. Never mutates it."""

    def __init__(self, ctx: UiContext, dialogs: FileDialogs, writer: OutputWriter):
        self._ctx = ctx
        self._dialogs = dialogs
        self._writer = writer

    async def save(self) -> Optional[str]:
        ctx = self._ctx
        availability = ctx.refresh()
        if not availability.save_enabled:
            ctx.reporter.report(availability.save_hint or STATUS_SAVE_FAILED)
            return None

        try:
            path = await self._dialogs.save_file(filters=[OUTPUT_FILTER])
        except Exception:
            logger.exception("Save dialog failed")
            ctx.reporter.report(STATUS_DIALOG_FAILED)
            ctx.refresh()
            return None

        if not path:
            logger.debug("Save cancelled")
            return None

        try:
            message = await self._writer.save_output(str(path), ctx.store.output_payload)
        except Exception as e:
            logger.warning("Saving output to %s failed: %s", path, e)
            ctx.reporter.report(STATUS_SAVE_FAILED)
            ctx.refresh()
            return None

        logger.info("Output saved to %s", path)
        ctx.reporter.report(message)
        ctx.refresh()
        return message
