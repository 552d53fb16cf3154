from __future__ import annotations

from dataclasses import dataclass, field

from qperf_ui.domain.models import Availability, SessionView
from qperf_ui.services.availability_gate import AvailabilityGate
from qperf_ui.services.selection_store import SelectionStore
from qperf_ui.services.status_reporter import StatusReporter, format_selection


@dataclass
class UiContext:
    """
    Handle shared by every controller: the store plus its two projections.
    All mutation goes through the store setters, then `refresh()`.
    """
    store: SelectionStore = field(default_factory=SelectionStore)
    reporter: StatusReporter = field(default_factory=StatusReporter)
    gate: AvailabilityGate = field(default_factory=AvailabilityGate)

    def refresh(self) -> Availability:
        return self.gate.recompute(self.store)

    def view(self) -> SessionView:
        return SessionView(
            selected_questions=format_selection(self.store.question_paths),
            selected_logs=format_selection(self.store.log_paths),
            status_line=self.reporter.status_line,
            warnings=tuple(self.reporter.warnings),
            availability=self.gate.current,
            run_state=self.store.run_state,
            options=self.store.options,
        )
