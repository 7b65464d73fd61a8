"""Base data structures for the check pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable


NOT_COMPILEABLE = "scheduler was not compileable"


@dataclass(frozen=True)
class Result:
    """One rubric line item produced by a check.

    Attributes:
        label: Rubric item name shown in the report (e.g. "Compilable").
        possible: Points available for this item.
        awarded: Points granted. Only increased by successful verification,
            never above ``possible``.
        message: Human-readable status, empty when the check passed.
    """

    label: str
    possible: int = 0
    awarded: int = 0
    message: str = ""

    def __post_init__(self) -> None:
        if self.possible < 0 or self.awarded < 0:
            raise ValueError(f"{self.label}: points must not be negative")
        if self.awarded > self.possible:
            raise ValueError(
                f"{self.label}: awarded {self.awarded} exceeds possible {self.possible}"
            )

    @property
    def passed(self) -> bool:
        return self.awarded == self.possible

    def fail(self, message: str) -> Result:
        """Return a zero-point copy carrying ``message``."""
        return Result(label=self.label, possible=self.possible, message=message)

    def full(self) -> Result:
        """Return a copy awarding every possible point."""
        return Result(label=self.label, possible=self.possible, awarded=self.possible)


@dataclass
class Context:
    """State shared by every check in one grading run.

    ``binary`` stays ``None`` until the compile check succeeds.
    """

    source_dir: Path
    binary: Path | None = None


Check = Callable[[Context], tuple[Result, Exception | None]]


class PrerequisiteError(RuntimeError):
    """Returned by checks that need the compiled binary when there is none."""

    def __init__(self, message: str = "binary not found") -> None:
        super().__init__(message)


class OutputMismatchError(RuntimeError):
    """The scheduler output differs from the expected fixture output."""


def labelled(template: Result) -> Callable[[Check], Check]:
    """Attach the rubric item to a check so the runner can score it on crash."""

    def _wrap(check: Check) -> Check:
        check.template = template  # type: ignore[attr-defined]
        return check

    return _wrap


def crashed_result(check: Check, error: Exception) -> Result:
    """Zero-point result for a check that raised instead of returning."""
    template = getattr(check, "template", None)
    if template is None:
        template = Result(label=getattr(check, "__name__", repr(check)))
    return template.fail(f"check crashed: {error}")
