from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from qperf_ui.domain.models import Readiness, RunOptions, RunState


@dataclass
class SelectionStore:
    """
    Single owned state object for one UI session.
    Pure state: no I/O and no validation. Callers refresh the gate after mutating.
    """
    question_paths: list[str] = field(default_factory=list)
    log_paths: list[str] = field(default_factory=list)
    output_payload: str = ""
    readiness: Readiness = Readiness.NOT_READY
    run_state: RunState = RunState.IDLE
    options: RunOptions = field(default_factory=RunOptions)
    # Bumped by reset(); results of runs started before a reset are dropped.
    generation: int = 0

    def set_question_paths(self, paths: Sequence[str]) -> None:
        self.question_paths = list(paths)

    def set_log_paths(self, paths: Sequence[str]) -> None:
        self.log_paths = list(paths)

    def set_output(self, payload: str) -> None:
        self.output_payload = payload or ""

    def set_readiness(self, readiness: Readiness) -> None:
        self.readiness = readiness

    def set_run_state(self, state: RunState) -> None:
        self.run_state = state

    def set_options(self, options: RunOptions) -> None:
        self.options = options

    def reset(self) -> None:
        self.question_paths = []
        self.log_paths = []
        self.output_payload = ""
        self.readiness = Readiness.NOT_READY
        # An outstanding engine call stays IN_FLIGHT; only its own run() clears it.
        if self.run_state is not RunState.IN_FLIGHT:
            self.run_state = RunState.IDLE
        self.options = RunOptions()
        self.generation += 1
