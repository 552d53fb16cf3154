from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from qperf_ui.domain.models import ROLE_FILTERS, FileRole
from qperf_ui.ports.dialogs import FileDialogs
from qperf_ui.services.context import UiContext
from qperf_ui.services.status_reporter import STATUS_DIALOG_FAILED, guidance_for

logger = logging.getLogger(__name__)


def _as_path_list(picked: Union[str, Sequence[str], None]) -> list[str]:
    if not picked:
        return []
    if isinstance(picked, str):
        return [picked]
    return [str(p) for p in picked if p]


class FileSelectionController:
    """Asks the open dialog for files of one role and stores the result."""

    def __init__(self, ctx: UiContext, dialogs: FileDialogs):
        self._ctx = ctx
        self._dialogs = dialogs

    async def select_question_files(self) -> Optional[list[str]]:
        return await self._select(FileRole.QUESTION_SET)

    async def select_log_files(self) -> Optional[list[str]]:
        return await self._select(FileRole.LOG_SET)

    async def _select(self, role: FileRole) -> Optional[list[str]]:
        try:
            picked = await self._dialogs.open_files(multiple=True, filters=[ROLE_FILTERS[role]])
        except Exception:
            logger.exception("Open dialog failed for %s", role.value)
            self._ctx.reporter.report(STATUS_DIALOG_FAILED)
            self._ctx.refresh()
            return None

        paths = _as_path_list(picked)
        if not paths:
            # Cancelled: keep the previous selection.
            logger.debug("Selection of %s cancelled", role.value)
            return None

        store = self._ctx.store
        if role is FileRole.QUESTION_SET:
            store.set_question_paths(paths)
        else:
            store.set_log_paths(paths)
        logger.info("Selected %d %s file(s)", len(paths), role.value)

        self._ctx.reporter.report(guidance_for(store.question_paths, store.log_paths))
        self._ctx.refresh()
        return paths
