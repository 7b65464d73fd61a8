"""Pytest configuration and fixtures."""

import logging
import stat
from pathlib import Path

import pytest

from gradebot.config import BuildConfig, RubricConfig
from gradebot.fixtures import FIXTURE_NAMES, load_fixture


@pytest.fixture(autouse=True)
def reset_gradebot_logger():
    """Undo setup_logger() after each test so caplog sees gradebot records."""
    yield

    logger = logging.getLogger("gradebot")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# ---------------------------------------------------------------------------
# Fake submissions
# ---------------------------------------------------------------------------

# Reads stdin, then replays out/<flag without dash>.out from next to itself.
REPLAY_SCHEDULER = """\
#!/bin/sh
cat > /dev/null
name="${1#-}"
cat "$(dirname "$0")/out/$name.out"
"""

BUILD_OK = """\
cp scheduler.sh "$1"
chmod +x "$1"
"""

BUILD_BROKEN = """\
echo "main.go:3:1: syntax error: non-declaration statement outside function body" >&2
exit 1
"""


def write_executable(path: Path, body: str) -> Path:
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def sh_build() -> BuildConfig:
    """Build settings that run build.sh with sh instead of the Go toolchain."""
    return BuildConfig(toolchain="sh", command=["sh", "build.sh", "{binary}"])


@pytest.fixture
def sh_config(sh_build) -> RubricConfig:
    return RubricConfig(build=sh_build)


@pytest.fixture
def make_submission(tmp_path):
    """Factory creating a submission directory under tmp_path.

    By default the submission builds, ships README.md and screenshot.png,
    and replays the bundled expected output for every algorithm.
    """

    def _make(
        name: str = "submission",
        build: str = BUILD_OK,
        readme: bool = True,
        screenshot: bool = True,
        outputs: dict[str, bytes] | None = None,
    ) -> Path:
        sub = tmp_path / name
        sub.mkdir()
        (sub / "build.sh").write_text(build)
        (sub / "scheduler.sh").write_text(REPLAY_SCHEDULER)
        out_dir = sub / "out"
        out_dir.mkdir()
        for fixture_name in FIXTURE_NAMES:
            data = load_fixture(fixture_name).expected
            if outputs and fixture_name in outputs:
                data = outputs[fixture_name]
            (out_dir / f"{fixture_name}.out").write_bytes(data)
        if readme:
            (sub / "README.md").write_text("# Scheduler\n")
        if screenshot:
            (sub / "screenshot.png").write_bytes(b"\x89PNG\r\n\x1a\n")
        return sub

    return _make
