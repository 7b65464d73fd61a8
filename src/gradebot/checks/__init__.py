"""Rubric checks run against a student submission."""

from gradebot.checks.artifacts import (
    check_readme_exists,
    check_screenshot_exists,
    make_file_exists_check,
)
from gradebot.checks.base import Check, Context, Result
from gradebot.checks.compile import check_compilable, make_compile_check
from gradebot.checks.scheduler import compare_output, make_scheduler_check

__all__ = [
    "Check",
    "Context",
    "Result",
    "check_compilable",
    "check_readme_exists",
    "check_screenshot_exists",
    "compare_output",
    "make_compile_check",
    "make_file_exists_check",
    "make_scheduler_check",
]
