from __future__ import annotations

from qperf_ui.domain.models import Availability, Readiness, RunState
from qperf_ui.services.selection_store import SelectionStore

HINT_SELECT_FILES = "select files first"
HINT_RUN_IN_PROGRESS = "run in progress"
HINT_RUN_FIRST = "run first to generate output"


class AvailabilityGate:
    """
    Derives which actions are currently permitted.
    Recomputed synchronously after every store mutation; `current` is never stale.
    """

    def __init__(self) -> None:
        self.current = Availability(
            run_enabled=False,
            run_hint=HINT_SELECT_FILES,
            save_enabled=False,
            save_hint=HINT_RUN_FIRST,
        )

    def recompute(self, store: SelectionStore) -> Availability:
        has_files = bool(store.question_paths) and bool(store.log_paths)
        in_flight = store.run_state is RunState.IN_FLIGHT
        run_enabled = has_files and not in_flight
        if run_enabled:
            run_hint = None
        elif in_flight:
            run_hint = HINT_RUN_IN_PROGRESS
        else:
            run_hint = HINT_SELECT_FILES

        save_enabled = store.readiness is Readiness.READY_TO_SAVE
        self.current = Availability(
            run_enabled=run_enabled,
            run_hint=run_hint,
            save_enabled=save_enabled,
            save_hint=None if save_enabled else HINT_RUN_FIRST,
        )
        return self.current
