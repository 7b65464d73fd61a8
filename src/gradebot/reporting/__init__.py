"""Rubric aggregation and output."""

from __future__ import annotations

from dataclasses import dataclass, field

from gradebot.checks.base import Result


@dataclass
class Rubric:
    """Ordered results of one grading run."""

    results: list[Result] = field(default_factory=list)

    @property
    def total_awarded(self) -> int:
        return sum(r.awarded for r in self.results)

    @property
    def total_possible(self) -> int:
        return sum(r.possible for r in self.results)


__all__ = ["Rubric"]
