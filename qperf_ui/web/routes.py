## routes.py
from __future__ import annotations

from typing import Any, Awaitable, Optional

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for

from qperf_ui.adapters.event_loop import EventLoopThread
from qperf_ui.domain.models import QUESTION_TYPES, RunOptions, RunState, SessionView
from qperf_ui.services.session import QperfSession
from qperf_ui.web.forms import parse_options, qtype_field

REFRESH_SECONDS = 2


def view_to_dict(view: SessionView) -> dict[str, Any]:
    a = view.availability
    o = view.options
    return {
        "selected_questions": view.selected_questions,
        "selected_logs": view.selected_logs,
        "status": view.status_line,
        "warnings": list(view.warnings),
        "run_state": view.run_state.value,
        "run_enabled": a.run_enabled,
        "run_hint": a.run_hint,
        "save_enabled": a.save_enabled,
        "save_hint": a.save_hint,
        "options": {
            "delimiter": o.delimiter,
            "tournament": o.tournament_label,
            "display_rounds": o.display_individual_rounds,
            "question_types": {code: on for (code, _), on in zip(QUESTION_TYPES, o.question_type_flags)},
        },
    }


def create_blueprint(session: QperfSession, loop: EventLoopThread) -> Blueprint:
    bp = Blueprint("web", __name__)

    async def _view() -> SessionView:
        return session.view()

    async def _with_options(options: Optional[RunOptions], action: Optional[Awaitable] = None):
        # Options are captured on the loop, right before the action that reads them.
        if options is not None:
            session.update_options(options)
        if action is not None:
            return await action
        return None

    async def _clear() -> None:
        session.clear()

    async def _help() -> bool:
        return session.open_help()

    def _back():
        return redirect(url_for("web.index"))

    @bp.get("/")
    def index():
        view = loop.call(_view())
        return render_template(
            "index.html",
            view=view,
            question_types=[(code, label, qtype_field(code)) for code, label in QUESTION_TYPES],
            flags=dict(zip((c for c, _ in QUESTION_TYPES), view.options.question_type_flags)),
            in_flight=view.run_state is RunState.IN_FLIGHT,
            refresh_seconds=REFRESH_SECONDS,
            help_available=bool(session.help_url),
        )

    @bp.get("/state")
    def state():
        return jsonify(view_to_dict(loop.call(_view())))

    @bp.post("/select/questions")
    def select_questions():
        picked = loop.call(_with_options(parse_options(request.form), session.select_question_files()))
        current_app.logger.info("Question selection: %s", "cancelled" if picked is None else len(picked))
        return _back()

    @bp.post("/select/logs")
    def select_logs():
        picked = loop.call(_with_options(parse_options(request.form), session.select_log_files()))
        current_app.logger.info("Log selection: %s", "cancelled" if picked is None else len(picked))
        return _back()

    @bp.post("/run")
    def run():
        # Not awaited: the page polls while the run is in flight.
        loop.submit(session.run(parse_options(request.form)))
        current_app.logger.info("Run submitted")
        return _back()

    @bp.post("/save")
    def save():
        message = loop.call(_with_options(parse_options(request.form), session.save()))
        current_app.logger.info("Save result: %r", message)
        return _back()

    @bp.post("/clear")
    def clear():
        loop.call(_clear())
        return _back()

    @bp.post("/help")
    def open_help():
        opened = loop.call(_with_options(parse_options(request.form), _help()))
        if not opened:
            current_app.logger.info("No help URL configured")
        return _back()

    return bp
