from __future__ import annotations

import logging

from qperf_ui.services.context import UiContext

logger = logging.getLogger(__name__)


class ResetController:
    def __init__(self, ctx: UiContext):
        self._ctx = ctx

    def clear(self) -> None:
        """Return selections, output, options, status and gate to their initial values."""
        self._ctx.store.reset()
        self._ctx.reporter.clear()
        self._ctx.refresh()
        logger.info("Session cleared")
