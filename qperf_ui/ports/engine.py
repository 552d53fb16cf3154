from qperf_ui.domain.models import RunRequest, RunResult


class QperfEngine:
    """Strategy interface for the external qperf computation."""

    async def run_qperf(self, request: RunRequest) -> RunResult:
        raise NotImplementedError
