from __future__ import annotations

import atexit
from typing import Optional

from flask import Flask

from qperf_ui.adapters.browser import WebBrowserLinkOpener
from qperf_ui.adapters.event_loop import EventLoopThread
from qperf_ui.adapters.exe_engine import ExeQperfEngine
from qperf_ui.adapters.tk_dialogs import TkFileDialogs
from qperf_ui.config.ini_config import AppSettings, IniConfig
from qperf_ui.config.logging_config import setup_logging
from qperf_ui.ports import FileDialogs, LinkOpener, OutputWriter, QperfEngine
from qperf_ui.repositories.output_repository import FileOutputRepository
from qperf_ui.services.session import QperfSession
from qperf_ui.web.routes import create_blueprint


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    dialogs: Optional[FileDialogs] = None,
    engine: Optional[QperfEngine] = None,
    writer: Optional[OutputWriter] = None,
    links: Optional[LinkOpener] = None,
) -> Flask:
    """
    Application Factory + composition root.
    Collaborators can be swapped in (tests pass fakes); the defaults are the desktop ones.
    """
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    setup_logging(settings.log_level, settings.log_file)

    if dialogs is None:
        dialogs = TkFileDialogs()
        atexit.register(dialogs.close)

    session = QperfSession(
        dialogs=dialogs,
        engine=engine or ExeQperfEngine(
            exe_path=settings.engine_path,
            timeout_seconds=settings.timeout_seconds,
        ),
        writer=writer or FileOutputRepository(),
        links=links or WebBrowserLinkOpener(),
        help_url=settings.help_url,
    )

    loop = EventLoopThread().start()
    atexit.register(loop.stop)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(session, loop))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    app.config["OPEN_BROWSER"] = settings.open_browser
    app.extensions["qperf"] = {"session": session, "loop": loop}

    return app
