from __future__ import annotations

import asyncio
from typing import Optional

import pytest

from qperf_ui.domain.models import Readiness, RunResult
from qperf_ui.ports import FileDialogs, LinkOpener, OutputWriter, QperfEngine
from qperf_ui.services.session import QperfSession


# -----------------------------
# Test doubles
# -----------------------------
class FakeDialogs(FileDialogs):
    def __init__(self):
        self.open_results: list = []
        self.save_results: list = []
        self.open_calls: list = []
        self.save_calls: list = []
        self.open_error: Optional[Exception] = None
        self.save_error: Optional[Exception] = None

    async def open_files(self, *, multiple, filters):
        self.open_calls.append((multiple, list(filters)))
        if self.open_error is not None:
            raise self.open_error
        return self.open_results.pop(0) if self.open_results else None

    async def save_file(self, *, filters):
        self.save_calls.append(list(filters))
        if self.save_error is not None:
            raise self.save_error
        return self.save_results.pop(0) if self.save_results else None


class FakeEngine(QperfEngine):
    def __init__(self, result: Optional[RunResult] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.requests: list = []
        # When set, run_qperf waits on it; tests use this to hold a run in flight.
        self.release: Optional[asyncio.Event] = None

    async def run_qperf(self, request):
        self.requests.append(request)
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.result


class FakeWriter(OutputWriter):
    def __init__(self, message: str = "Saved to disk", error: Optional[Exception] = None):
        self.message = message
        self.error = error
        self.calls: list = []

    async def save_output(self, path, payload):
        self.calls.append((path, payload))
        if self.error is not None:
            raise self.error
        return self.message


class FakeLinks(LinkOpener):
    def __init__(self):
        self.opened: list[str] = []

    def open(self, url):
        self.opened.append(url)


DONE_RESULT = RunResult(
    status_message="Done",
    warnings=("Row 3 skipped",),
    readiness=Readiness.READY_TO_SAVE,
    output_payload="a,b,c\n1,2,3",
)


# -----------------------------
# Fixtures
# -----------------------------
@pytest.fixture
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine(result=DONE_RESULT)


@pytest.fixture
def writer() -> FakeWriter:
    return FakeWriter()


@pytest.fixture
def links() -> FakeLinks:
    return FakeLinks()


@pytest.fixture
def session(dialogs, engine, writer, links) -> QperfSession:
    return QperfSession(
        dialogs=dialogs,
        engine=engine,
        writer=writer,
        links=links,
        help_url="https://example.org/qperf",
    )


@pytest.fixture
def done_result() -> RunResult:
    return DONE_RESULT
