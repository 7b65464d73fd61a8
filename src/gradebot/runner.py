from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, TextIO

from gradebot.checks.artifacts import make_file_exists_check
from gradebot.checks.base import Check, Context, Result, crashed_result
from gradebot.checks.compile import make_compile_check
from gradebot.checks.scheduler import make_scheduler_check
from gradebot.config import RubricConfig
from gradebot.fixtures import load_fixture
from gradebot.reporting import Rubric
from gradebot.verbose import setup_logger


def build_checks(config: RubricConfig, diagnostics: TextIO | None = None) -> list[Check]:
    """Build the ordered check list: compile, artifacts, then schedulers.

    Fixtures are loaded here so a missing fixture fails before any check runs.
    """
    checks: list[Check] = [
        make_compile_check(config.build, possible=config.compile_points),
    ]
    for artifact in config.artifacts:
        checks.append(
            make_file_exists_check(artifact.label, artifact.filename, artifact.points)
        )
    for item in config.schedulers:
        fixture = load_fixture(item.fixture, config.fixtures_dir)
        checks.append(
            make_scheduler_check(
                Result(label=item.label, possible=item.points),
                item.flag,
                fixture.input,
                fixture.expected,
                timeout=config.timeout,
                diagnostics=diagnostics,
            )
        )
    return checks


def run_checks(
    source_dir: Path | str,
    checks: Sequence[Check],
    logger: logging.Logger | None = None,
) -> list[Result]:
    """Run every check in order against one shared context.

    Returns one result per check, in order. A failing check never stops the
    ones after it. The compiled binary is removed once all checks are done.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    ctx = Context(source_dir=Path(source_dir))
    results: list[Result] = []
    try:
        for check in checks:
            try:
                result, err = check(ctx)
            except Exception as e:
                result = crashed_result(check, e)
                logger.exception(f"{result.label}: check crashed: {e}")
                results.append(result)
                continue
            if err is not None:
                logger.error(f"{result.label}: {err}")
            results.append(result)
    finally:
        if ctx.binary is not None:
            try:
                ctx.binary.unlink(missing_ok=True)
            except OSError as e:
                logger.debug(f"Could not remove {ctx.binary}: {e}")

    return results


class Runner:
    """Grades one submission directory against a rubric config."""

    def __init__(
        self,
        config: RubricConfig,
        source_dir: Path,
        verbose: bool = False,
        quiet: bool = False,
        debug_file: Path | None = None,
        diagnostics: TextIO | None = None,
    ):
        self.config = config
        self.source_dir = source_dir
        self.verbose = verbose
        self.quiet = quiet
        self.debug_file = debug_file
        self.diagnostics = diagnostics

    def execute(self) -> Rubric:
        logger = setup_logger(
            verbose=self.verbose, quiet=self.quiet, debug_file=self.debug_file
        )
        logger.debug(f"Grading {self.source_dir} for {self.config.total_points} points")

        checks = build_checks(self.config, diagnostics=self.diagnostics)
        results = run_checks(self.source_dir, checks, logger=logger)

        rubric = Rubric(results)
        logger.debug(
            f"Grading complete: {rubric.total_awarded}/{rubric.total_possible} points"
        )
        return rubric
