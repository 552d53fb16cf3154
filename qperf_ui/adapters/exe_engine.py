from __future__ import annotations

import asyncio
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from qperf_ui.domain.errors import EngineError
from qperf_ui.domain.models import Readiness, RunRequest, RunResult
from qperf_ui.ports.engine import QperfEngine

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "Success"
STATUS_NO_OUTPUT = "No output produced"


def quote_tournament(label: str) -> str:
    """QuizMachine records store tournament names wrapped in single quotes."""
    label = (label or "").strip()
    if not label:
        return ""
    if not label.startswith("'"):
        label = "'" + label
    if len(label) == 1 or not label.endswith("'"):
        label = label + "'"
    return label


@dataclass
class ExeQperfEngine(QperfEngine):
    """
    Adapter: runs the qperf executable as a subprocess.
    Stdout carries the CSV payload, stderr carries one warning per line.
    """
    exe_path: Path
    timeout_seconds: int

    async def run_qperf(self, request: RunRequest) -> RunResult:
        return await asyncio.to_thread(self.run_blocking, request)

    def build_command(self, request: RunRequest) -> list[str]:
        cmd = [
            str(self.exe_path),
            "--questions", ",".join(request.question_paths),
            "--logs", ",".join(request.log_paths),
            "--types", request.question_type_codes(),
            "--delimiter", request.delimiter,
        ]
        tourn = quote_tournament(request.tournament_label)
        if tourn:
            cmd += ["--tournament", tourn]
        if request.display_individual_rounds:
            cmd.append("--display-rounds")
        return cmd

    def run_blocking(self, request: RunRequest) -> RunResult:
        for path in request.question_paths:
            if not Path(path).exists():
                raise EngineError("Question set location does not exist.")
        for path in request.log_paths:
            if not Path(path).is_file():
                raise EngineError("QuizMachine records file does not exist.")

        cmd = self.build_command(request)
        logger.debug("Executing %s", cmd)
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=str(self.exe_path.parent),
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            raise EngineError("Execution timed out.") from e
        except OSError as e:
            raise EngineError(f"Failed to execute: {e}") from e

        warnings = tuple(line.strip() for line in (proc.stderr or "").splitlines() if line.strip())
        if proc.returncode != 0:
            stderr_tail = "\n".join(warnings[-20:])
            raise EngineError(f"qperf exited with code {proc.returncode}: {stderr_tail}")

        output = proc.stdout or ""
        if not output.strip():
            return RunResult(
                status_message=STATUS_NO_OUTPUT,
                warnings=warnings,
                readiness=Readiness.NOT_READY,
                output_payload="",
            )
        return RunResult(
            status_message=STATUS_SUCCESS,
            warnings=warnings,
            readiness=Readiness.READY_TO_SAVE,
            output_payload=output,
        )
