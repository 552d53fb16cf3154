"""
Random event sequences checked against the gate invariants:
- Run enabled  <=> both selections non-empty (no run in flight here)
- Save enabled <=> last completed run was ReadyToSave and no clear since
"""
from __future__ import annotations

import asyncio
import random

import pytest

from qperf_ui.domain.errors import EngineError
from qperf_ui.domain.models import Readiness, RunResult
from qperf_ui.services.status_reporter import format_selection

READY = RunResult("Success", (), Readiness.READY_TO_SAVE, "x,y\n1,2")
NOT_READY = RunResult("No output produced", (), Readiness.NOT_READY, "")


@pytest.mark.parametrize("seed", range(20))
def test_gates_hold_over_random_event_sequences(seed, session, dialogs, engine, writer):
    rng = random.Random(seed)
    expected_questions: list[str] = []
    expected_logs: list[str] = []
    save_expected = False

    for step in range(40):
        event = rng.choice(["questions", "logs", "cancel_q", "run_ok", "run_not_ready", "run_fail", "save", "clear"])

        if event == "questions":
            expected_questions = [f"/q/{step}_{i}.rtf" for i in range(rng.randint(1, 3))]
            dialogs.open_results.append(list(expected_questions))
            asyncio.run(session.select_question_files())
        elif event == "logs":
            expected_logs = [f"/l/{step}.csv"]
            dialogs.open_results.append(list(expected_logs))
            asyncio.run(session.select_log_files())
        elif event == "cancel_q":
            dialogs.open_results.append(None)
            asyncio.run(session.select_question_files())
        elif event.startswith("run"):
            engine.error = EngineError("fail") if event == "run_fail" else None
            engine.result = READY if event == "run_ok" else NOT_READY
            asyncio.run(session.run())
            if expected_questions and expected_logs and event != "run_fail":
                save_expected = event == "run_ok"
        elif event == "save":
            dialogs.save_results.append(f"/out/{step}.csv")
            asyncio.run(session.save())
        else:
            session.clear()
            expected_questions, expected_logs, save_expected = [], [], False

        view = session.view()
        assert view.availability.run_enabled == bool(expected_questions and expected_logs)
        assert view.availability.save_enabled == save_expected
        assert view.selected_questions == format_selection(expected_questions)
        assert view.selected_logs == format_selection(expected_logs)

    # Save never forwards anything but the cached payload.
    assert all(payload == READY.output_payload for _, payload in writer.calls)
