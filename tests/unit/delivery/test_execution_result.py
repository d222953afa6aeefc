from __future__ import annotations

import signal
from pathlib import Path

import pytest

from rss_watch.delivery import ExecutionResult

PROGRAM = Path("/opt/hooks/notify")


@pytest.mark.parametrize(
    ("result", "ok", "description"),
    [
        (ExecutionResult(program=PROGRAM, returncode=0), True, "exit code 0"),
        (ExecutionResult(program=PROGRAM, returncode=2), False, "exit code 2"),
        (ExecutionResult(program=PROGRAM, returncode=-signal.SIGKILL), False, "terminated by SIGKILL"),
        (ExecutionResult(program=PROGRAM, returncode=None, error="Permission denied"), False, "failed to launch: Permission denied"),
        (ExecutionResult(program=PROGRAM, returncode=None), False, "exited unexpectedly"),
    ],
)
def test_execution_result_outcomes(result: ExecutionResult, ok: bool, description: str) -> None:
    assert result.ok is ok
    assert result.describe() == description


def test_unknown_signal_number_is_described_numerically() -> None:
    result = ExecutionResult(program=PROGRAM, returncode=-250)

    assert result.describe() == "terminated by signal 250"
