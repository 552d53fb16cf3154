class QperfUiError(Exception):
    """Base class for failures raised by qperf_ui collaborators."""


class EngineError(QperfUiError):
    """The qperf engine rejected a run (bad paths, non-zero exit, timeout)."""


class PersistenceError(QperfUiError):
    """Writing the output payload to disk failed."""


class DialogError(QperfUiError):
    """A native file dialog could not be shown."""
