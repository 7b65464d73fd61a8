from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BuildConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    toolchain: str = "go"
    command: list[str] = ["go", "build", "-o", "{binary}"]
    binary: str = "scheduler.bin"

    @field_validator("command")
    @classmethod
    def command_must_not_be_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("build command must not be empty")
        return v

    def argv(self) -> list[str]:
        """Build command with ``{binary}`` replaced by the artifact name."""
        return [part.replace("{binary}", self.binary) for part in self.command]


class ArtifactItem(BaseModel):
    model_config = ConfigDict(extra="forbid")
    label: str
    filename: str
    points: int = Field(10, ge=0)


class SchedulerItem(BaseModel):
    model_config = ConfigDict(extra="forbid")
    label: str
    flag: str
    fixture: str
    points: int = Field(..., ge=0)

    @field_validator("flag")
    @classmethod
    def flag_must_be_option(cls, v: str) -> str:
        if not v.startswith("-"):
            raise ValueError(f"Scheduler flag '{v}' must start with '-'")
        return v


def _default_artifacts() -> list[ArtifactItem]:
    return [
        ArtifactItem(label="Screenshot exists", filename="screenshot.png", points=10),
        ArtifactItem(label="README.md exists", filename="README.md", points=10),
    ]


def _default_schedulers() -> list[SchedulerItem]:
    return [
        SchedulerItem(
            label="First-come, first-serve scheduling",
            flag="-fcfs",
            fixture="fcfs",
            points=20,
        ),
        SchedulerItem(
            label="Shortest-job-first scheduling",
            flag="-sjf",
            fixture="sjf",
            points=20,
        ),
        SchedulerItem(
            label="Shortest-job-first with priority scheduling",
            flag="-sjfp",
            fixture="sjfp",
            points=20,
        ),
        SchedulerItem(
            label="Round-robin scheduling",
            flag="-rr",
            fixture="rr",
            points=10,
        ),
    ]


class RubricConfig(BaseModel):
    """Point values, build settings and fixtures for one grading run.

    ``RubricConfig()`` is the built-in project 1 rubric.
    """

    model_config = ConfigDict(extra="forbid")
    build: BuildConfig = BuildConfig()
    compile_points: int = Field(10, ge=0)
    artifacts: list[ArtifactItem] = Field(default_factory=_default_artifacts)
    schedulers: list[SchedulerItem] = Field(default_factory=_default_schedulers)
    fixtures_dir: Path | None = None
    timeout: float | None = Field(None, gt=0)

    @model_validator(mode="after")
    def labels_must_be_unique(self) -> RubricConfig:
        labels = ["Compilable"]
        labels += [a.label for a in self.artifacts]
        labels += [s.label for s in self.schedulers]
        seen: set[str] = set()
        for label in labels:
            if label in seen:
                raise ValueError(f"Duplicate rubric label '{label}'")
            seen.add(label)
        return self

    @property
    def total_points(self) -> int:
        return (
            self.compile_points
            + sum(a.points for a in self.artifacts)
            + sum(s.points for s in self.schedulers)
        )


def load_config(path: Path) -> RubricConfig:
    """Load and validate a rubric config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(
            f"{path}: expected a mapping at the top level, got {type(raw).__name__}"
        )

    config = RubricConfig.model_validate(raw)

    # Resolve a relative fixtures_dir relative to config file location
    if config.fixtures_dir is not None and not config.fixtures_dir.is_absolute():
        config.fixtures_dir = (config_dir / config.fixtures_dir).resolve()

    return config
