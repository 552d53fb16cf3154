from .availability_gate import AvailabilityGate
from .context import UiContext
from .file_selection import FileSelectionController
from .reset_controller import ResetController
from .run_controller import RunController
from .save_controller import SaveController
from .selection_store import SelectionStore
from .session import QperfSession
from .status_reporter import StatusReporter

__all__ = [
    "AvailabilityGate",
    "UiContext",
    "FileSelectionController",
    "ResetController",
    "RunController",
    "SaveController",
    "SelectionStore",
    "QperfSession",
    "StatusReporter",
]
