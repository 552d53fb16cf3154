from .dialogs import FileDialogs
from .engine import QperfEngine
from .links import LinkOpener
from .persistence import OutputWriter

__all__ = [
    "FileDialogs",
    "QperfEngine",
    "LinkOpener",
    "OutputWriter",
]
