"""Build the submission and record the compiled binary in the context."""

from __future__ import annotations

import logging
import shutil
import subprocess

from gradebot.checks.base import Check, Context, Result, labelled
from gradebot.config import BuildConfig

logger = logging.getLogger(__name__)


def make_compile_check(
    build: BuildConfig | None = None,
    label: str = "Compilable",
    possible: int = 10,
) -> Check:
    """Return a check that builds the submission in its source directory.

    On success ``Context.binary`` points at the absolute path of the built
    artifact. On any failure it is left as ``None`` and the error is returned.
    """
    build = build or BuildConfig()
    template = Result(label=label, possible=possible)

    @labelled(template)
    def check_compilable(ctx: Context) -> tuple[Result, Exception | None]:
        source_dir = ctx.source_dir.resolve()
        if not source_dir.is_dir():
            return template.fail("source directory not found"), NotADirectoryError(
                f"not a directory: {source_dir}"
            )

        if shutil.which(build.toolchain) is None:
            return template.fail(f"{build.toolchain} toolchain not found"), FileNotFoundError(
                f"{build.toolchain} executable not found in PATH"
            )

        argv = build.argv()
        logger.debug(f"Building in {source_dir}: {' '.join(argv)}")
        try:
            proc = subprocess.run(
                argv,
                cwd=source_dir,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            return template.fail("scheduler is not compileable"), e

        if proc.stdout:
            logger.debug(f"build stdout: {proc.stdout.decode('utf-8', errors='replace')}")
        if proc.stderr:
            logger.debug(f"build stderr: {proc.stderr.decode('utf-8', errors='replace')}")

        if proc.returncode != 0:
            return template.fail("scheduler is not compileable"), subprocess.CalledProcessError(
                proc.returncode, argv, output=proc.stdout, stderr=proc.stderr
            )

        binary = source_dir / build.binary
        if not binary.is_file():
            return template.fail("scheduler is not compileable"), FileNotFoundError(
                f"build succeeded but {build.binary} was not produced"
            )

        ctx.binary = binary
        logger.debug(f"scheduler is compileable (pts={possible})")
        return template.full(), None

    return check_compilable


check_compilable = make_compile_check()
