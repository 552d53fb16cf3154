from .browser import WebBrowserLinkOpener
from .event_loop import EventLoopThread
from .exe_engine import ExeQperfEngine
from .tk_dialogs import TkFileDialogs

__all__ = [
    "WebBrowserLinkOpener",
    "EventLoopThread",
    "ExeQperfEngine",
    "TkFileDialogs",
]
