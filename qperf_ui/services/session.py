from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from qperf_ui.domain.models import RunOptions, RunResult, SessionView
from qperf_ui.ports.dialogs import FileDialogs
from qperf_ui.ports.engine import QperfEngine
from qperf_ui.ports.links import LinkOpener
from qperf_ui.ports.persistence import OutputWriter
from qperf_ui.services.context import UiContext
from qperf_ui.services.file_selection import FileSelectionController
from qperf_ui.services.reset_controller import ResetController
from qperf_ui.services.run_controller import RunController
from qperf_ui.services.save_controller import SaveController

logger = logging.getLogger(__name__)


@dataclass
class QperfSession:
    """
    Facade over the controllers for one UI session.
    Keeps the web layer thin; every call must come from the same event loop.
    """
    dialogs: FileDialogs
    engine: QperfEngine
    writer: OutputWriter
    links: LinkOpener
    help_url: str = ""
    ctx: UiContext = field(default_factory=UiContext)

    def __post_init__(self) -> None:
        self.files = FileSelectionController(self.ctx, self.dialogs)
        self.runner = RunController(self.ctx, self.engine)
        self.saver = SaveController(self.ctx, self.dialogs, self.writer)
        self.resetter = ResetController(self.ctx)
        self.ctx.refresh()

    def update_options(self, options: RunOptions) -> None:
        self.ctx.store.set_options(options)
        self.ctx.refresh()

    async def select_question_files(self) -> Optional[list[str]]:
        return await self.files.select_question_files()

    async def select_log_files(self) -> Optional[list[str]]:
        return await self.files.select_log_files()

    async def run(self, options: Optional[RunOptions] = None) -> Optional[RunResult]:
        return await self.runner.run(options)

    async def save(self) -> Optional[str]:
        return await self.saver.save()

    def clear(self) -> None:
        self.resetter.clear()

    def open_help(self) -> bool:
        if not self.help_url:
            return False
        try:
            self.links.open(self.help_url)
        except Exception:
            logger.exception("Could not open %s", self.help_url)
            return False
        return True

    def view(self) -> SessionView:
        return self.ctx.view()
