from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from gradebot.reporting import Rubric


def write_junit(rubric: Rubric, path: Path, suite_name: str = "gradebot") -> Path:
    """Write junit.xml with one test case per rubric item, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)
    suite.add_property("total_possible", str(rubric.total_possible))
    suite.add_property("total_awarded", str(rubric.total_awarded))

    for result in rubric.results:
        case = TestCase(result.label)
        case.classname = suite_name
        if not result.passed:
            failure = Failure(result.message or "no points awarded")
            failure.text = f"awarded {result.awarded}/{result.possible}"
            case.result = [failure]
        suite.add_testcase(case)

    # Use append (not +=) to preserve properties
    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
