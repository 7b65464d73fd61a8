"""Run the compiled scheduler against a fixture and compare its output."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import TextIO

from gradebot.checks.base import (
    NOT_COMPILEABLE,
    Check,
    Context,
    OutputMismatchError,
    PrerequisiteError,
    Result,
    labelled,
)

logger = logging.getLogger(__name__)


def compare_output(actual: bytes, expected: bytes) -> bool:
    """Byte-exact comparison; scheduler traces are deterministic for a fixed input."""
    return actual == expected


def _dump(stream: TextIO, flag: str, expected: bytes, actual: bytes) -> None:
    stream.write(f"{flag} expected:\n{expected.decode('utf-8', errors='replace')}")
    stream.write(f"{flag} actual:\n{actual.decode('utf-8', errors='replace')}")
    stream.flush()


def make_scheduler_check(
    template: Result,
    flag: str,
    stdin: bytes,
    expected: bytes,
    timeout: float | None = None,
    diagnostics: TextIO | None = None,
) -> Check:
    """Return a check running ``<binary> <flag>`` with ``stdin`` as input.

    Args:
        template: Label and possible points of the rubric item.
        flag: Sole command-line argument selecting the algorithm (e.g. "-fcfs").
        stdin: CSV process descriptions fed to the scheduler.
        expected: Exact stdout the scheduler must produce.
        timeout: Seconds before the scheduler is killed. ``None`` waits forever.
        diagnostics: Stream receiving expected/actual output on a mismatch.
            Defaults to ``sys.stderr`` at call time.

    Empty output scores zero but returns no error: the scheduler ran and was
    graded, it simply printed nothing. A crash or a mismatch returns an error.
    """

    @labelled(template)
    def check_scheduler(ctx: Context) -> tuple[Result, Exception | None]:
        if ctx.binary is None:
            return template.fail(NOT_COMPILEABLE), PrerequisiteError()

        argv = [str(ctx.binary), flag]
        logger.debug(f"Running scheduler: {' '.join(argv)}")
        try:
            proc = subprocess.run(
                argv,
                input=stdin,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=timeout,
                check=True,
            )
        except subprocess.TimeoutExpired as e:
            return template.fail("scheduler timed out"), e
        except (subprocess.CalledProcessError, OSError) as e:
            return template.fail("scheduler exited with error"), e

        if not proc.stdout:
            return template.fail("scheduler ran with no output"), None

        if not compare_output(proc.stdout, expected):
            _dump(diagnostics or sys.stderr, flag, expected, proc.stdout)
            return template.fail("output does not match expected"), OutputMismatchError(
                "output does not match expected"
            )

        logger.debug(f"{flag} scheduler output matches expected (pts={template.possible})")
        return template.full(), None

    return check_scheduler
