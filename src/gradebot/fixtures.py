"""Input/expected-output pairs used as the scheduler correctness oracle."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path

FIXTURE_NAMES = ("fcfs", "sjf", "sjfp", "rr")


@dataclass(frozen=True)
class Fixture:
    name: str
    input: bytes
    expected: bytes


def load_fixture(name: str, fixtures_dir: Path | None = None) -> Fixture:
    """Read ``<name>.csv`` and ``<name>.out`` as raw bytes.

    Looks in ``fixtures_dir`` when given, otherwise in the fixtures bundled
    with the package. Raises FileNotFoundError if either file is missing.
    """
    if fixtures_dir is not None:
        base = Path(fixtures_dir)
        csv_path, out_path = base / f"{name}.csv", base / f"{name}.out"
        if not csv_path.is_file() or not out_path.is_file():
            raise FileNotFoundError(f"Fixture '{name}' not found in {base}")
        return Fixture(name=name, input=csv_path.read_bytes(), expected=out_path.read_bytes())

    testdata = resources.files("gradebot") / "testdata"
    csv_res, out_res = testdata / f"{name}.csv", testdata / f"{name}.out"
    if not csv_res.is_file() or not out_res.is_file():
        raise FileNotFoundError(f"Fixture '{name}' is not bundled with gradebot")
    return Fixture(name=name, input=csv_res.read_bytes(), expected=out_res.read_bytes())
