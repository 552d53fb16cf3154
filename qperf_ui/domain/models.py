########
######## models.py
########

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence

DEFAULT_DELIMITER = ","

# Ordered question-type categories; one RunOptions flag per entry.
QUESTION_TYPES: tuple[tuple[str, str], ...] = (
    ("A", "A"),
    ("G", "G"),
    ("I", "I"),
    ("Q", "Q"),
    ("R", "R"),
    ("S", "S"),
    ("X", "X"),
    ("V", "V"),
    ("M", "Memory Verse totals (Q, R, V)"),
)


class FileRole(str, Enum):
    QUESTION_SET = "questions"
    LOG_SET = "logs"


class Readiness(str, Enum):
    READY_TO_SAVE = "Ready to save"
    NOT_READY = "Not ready"


class RunState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class FileFilter:
    name: str
    extensions: tuple[str, ...]


QUESTION_FILTER = FileFilter(name="RTF files", extensions=("rtf",))
LOG_FILTER = FileFilter(name="CSV files", extensions=("csv",))
OUTPUT_FILTER = FileFilter(name="CSV file", extensions=("csv",))

ROLE_FILTERS = {
    FileRole.QUESTION_SET: QUESTION_FILTER,
    FileRole.LOG_SET: LOG_FILTER,
}


def default_question_type_flags() -> tuple[bool, ...]:
    return tuple(True for _ in QUESTION_TYPES)


@dataclass(frozen=True)
class RunOptions:
    """Form state read at Run time. Defaults match a freshly cleared form."""
    delimiter: str = DEFAULT_DELIMITER
    tournament_label: str = ""
    display_individual_rounds: bool = False
    question_type_flags: tuple[bool, ...] = field(default_factory=default_question_type_flags)

    def normalized(self) -> "RunOptions":
        # Missing flags count as checked so every category is included by default.
        flags = list(self.question_type_flags[: len(QUESTION_TYPES)])
        flags += [True] * (len(QUESTION_TYPES) - len(flags))
        return replace(
            self,
            delimiter=self.delimiter or DEFAULT_DELIMITER,
            tournament_label=(self.tournament_label or "").strip(),
            question_type_flags=tuple(bool(f) for f in flags),
        )


@dataclass(frozen=True)
class RunRequest:
    question_paths: tuple[str, ...]
    log_paths: tuple[str, ...]
    delimiter: str
    tournament_label: str
    question_type_flags: tuple[bool, ...]
    display_individual_rounds: bool

    @classmethod
    def build(cls, question_paths: Sequence[str], log_paths: Sequence[str], options: RunOptions) -> "RunRequest":
        opts = options.normalized()
        return cls(
            question_paths=tuple(question_paths),
            log_paths=tuple(log_paths),
            delimiter=opts.delimiter,
            tournament_label=opts.tournament_label,
            question_type_flags=opts.question_type_flags,
            display_individual_rounds=opts.display_individual_rounds,
        )

    def question_type_codes(self) -> str:
        return "".join(code for (code, _), on in zip(QUESTION_TYPES, self.question_type_flags) if on)


@dataclass(frozen=True)
class RunResult:
    status_message: str
    warnings: tuple[str, ...]
    readiness: Readiness
    output_payload: str


@dataclass(frozen=True)
class Availability:
    run_enabled: bool
    run_hint: Optional[str]
    save_enabled: bool
    save_hint: Optional[str]


@dataclass(frozen=True)
class SessionView:
    selected_questions: str
    selected_logs: str
    status_line: str
    warnings: tuple[str, ...]
    availability: Availability
    run_state: RunState
    options: RunOptions
