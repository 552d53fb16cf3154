from __future__ import annotations

from typing import Optional, Sequence

STATUS_IDLE = "Waiting for input..."
STATUS_SELECT_QUESTIONS = "Select question set(s)!"
STATUS_SELECT_LOGS = "Select QuizMachine log(s)!"
STATUS_READY_TO_RUN = "Ready to run! (Recommended) Enter a tournament name for better filtering!"
STATUS_NO_QUESTIONS = "select at least one question set file"
STATUS_NO_LOGS = "select at least one record file"
STATUS_RUNNING = "Running qperf..."
STATUS_RUN_FAILED = "error running computation"
STATUS_SAVE_FAILED = "Error saving output."
STATUS_DIALOG_FAILED = "Error opening file dialog."


def format_selection(paths: Sequence[str]) -> str:
    return f"Selected: {', '.join(paths) or 'None'}"


def guidance_for(question_paths: Sequence[str], log_paths: Sequence[str]) -> str:
    if question_paths and log_paths:
        return STATUS_READY_TO_RUN
    if question_paths:
        return STATUS_SELECT_LOGS
    if log_paths:
        return STATUS_SELECT_QUESTIONS
    return STATUS_IDLE


class StatusReporter:
    """Holds the status line and warning list of the last outcome."""

    def __init__(self) -> None:
        self.status = STATUS_IDLE
        self.warnings: list[str] = []

    def report(self, status: str, warnings: Optional[Sequence[str]] = None) -> None:
        # warnings=None keeps whatever the last run produced
        self.status = status
        if warnings is not None:
            self.warnings = list(warnings)

    def clear(self) -> None:
        self.status = STATUS_IDLE
        self.warnings = []

    @property
    def status_line(self) -> str:
        return f"Status: {self.status}"
