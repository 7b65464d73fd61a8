"""Existence checks for files the submission must ship alongside its source."""

from __future__ import annotations

import logging

from gradebot.checks.base import (
    NOT_COMPILEABLE,
    Check,
    Context,
    PrerequisiteError,
    Result,
    labelled,
)

logger = logging.getLogger(__name__)


def make_file_exists_check(label: str, filename: str, possible: int = 10) -> Check:
    """Return a check awarding ``possible`` points if ``filename`` exists.

    Gated on a successful build: a submission only counts as complete once
    it compiles, even though the file itself does not need the binary.
    """
    template = Result(label=label, possible=possible)

    @labelled(template)
    def check_file_exists(ctx: Context) -> tuple[Result, Exception | None]:
        if ctx.binary is None:
            return template.fail(NOT_COMPILEABLE), PrerequisiteError()

        path = ctx.source_dir / filename
        logger.debug(f"Checking file_exists: {filename}")
        if not path.exists():
            return template.fail(f"{filename} not found"), FileNotFoundError(
                f"no such file: {path}"
            )

        logger.debug(f"{filename} exists (pts={possible})")
        return template.full(), None

    return check_file_exists


check_screenshot_exists = make_file_exists_check("Screenshot exists", "screenshot.png")
check_readme_exists = make_file_exists_check("README.md exists", "README.md")
