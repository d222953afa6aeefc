from __future__ import annotations

import asyncio
import os
import signal
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    program: Path
    returncode: int | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def describe(self) -> str:
        if self.error is not None:
            return f"failed to launch: {self.error}"
        if self.returncode is None:
            return "exited unexpectedly"
        if self.returncode < 0:
            return f"terminated by {_signal_name(-self.returncode)}"
        return f"exit code {self.returncode}"


def _signal_name(number: int) -> str:
    try:
        return signal.Signals(number).name
    except ValueError:
        return f"signal {number}"


class ScriptRunner(Protocol):
    async def run(self, program: Path, env: Mapping[str, str]) -> ExecutionResult: ...


class SubprocessRunner:
    """Runs a program to completion with extra environment variables.

    The child inherits stdio and the watcher's environment. No timeout is
    applied; a hung program blocks the caller.
    """

    def __init__(self, base_env: Mapping[str, str] | None = None) -> None:
        self._base_env = dict(os.environ if base_env is None else base_env)

    async def run(self, program: Path, env: Mapping[str, str]) -> ExecutionResult:
        try:
            process = await asyncio.create_subprocess_exec(
                os.fspath(program),
                env={**self._base_env, **env},
            )
        except (OSError, ValueError) as exc:
            return ExecutionResult(program=program, returncode=None, error=str(exc))

        returncode = await process.wait()
        return ExecutionResult(program=program, returncode=returncode)
