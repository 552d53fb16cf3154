import asyncio

import pytest

from qperf_ui.domain.errors import PersistenceError
from qperf_ui.domain.models import OUTPUT_FILTER
from qperf_ui.services.availability_gate import HINT_RUN_FIRST
from qperf_ui.services.status_reporter import STATUS_SAVE_FAILED


@pytest.fixture
def ran_session(session):
    session.ctx.store.set_question_paths(["q1.rtf"])
    session.ctx.store.set_log_paths(["log1.csv"])
    asyncio.run(session.run())
    return session


def test_save_passes_cached_payload_through(ran_session, dialogs, writer):
    # Scenario D
    dialogs.save_results.append("/out/result.csv")

    message = asyncio.run(ran_session.save())

    assert message == "Saved to disk"
    assert dialogs.save_calls == [[OUTPUT_FILTER]]
    assert writer.calls == [("/out/result.csv", "a,b,c\n1,2,3")]
    assert ran_session.view().status_line == "Status: Saved to disk"
    assert ran_session.ctx.store.output_payload == "a,b,c\n1,2,3"


def test_cancelled_save_does_nothing(ran_session, dialogs, writer):
    before = ran_session.view()

    assert asyncio.run(ran_session.save()) is None

    assert writer.calls == []
    assert ran_session.view() == before


def test_persistence_failure_is_reported_and_retryable(ran_session, dialogs, writer):
    writer.error = PersistenceError("Output file already exists. Choose a different file name.")
    dialogs.save_results.append("/out/exists.csv")

    assert asyncio.run(ran_session.save()) is None

    view = ran_session.view()
    assert view.status_line == f"Status: {STATUS_SAVE_FAILED}"
    assert view.availability.save_enabled is True
    assert ran_session.ctx.store.output_payload == "a,b,c\n1,2,3"

    writer.error = None
    dialogs.save_results.append("/out/new.csv")
    assert asyncio.run(ran_session.save()) == "Saved to disk"
    assert writer.calls[-1] == ("/out/new.csv", "a,b,c\n1,2,3")


def test_save_before_run_is_refused(session, dialogs, writer):
    dialogs.save_results.append("/out/result.csv")

    assert asyncio.run(session.save()) is None

    assert dialogs.save_calls == []
    assert writer.calls == []
    assert session.ctx.reporter.status == HINT_RUN_FIRST


def test_saving_twice_reuses_same_payload(ran_session, dialogs, writer):
    dialogs.save_results += ["/out/a.csv", "/out/b.csv"]

    asyncio.run(ran_session.save())
    asyncio.run(ran_session.save())

    assert [payload for _, payload in writer.calls] == ["a,b,c\n1,2,3", "a,b,c\n1,2,3"]
