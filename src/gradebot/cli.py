from __future__ import annotations

from pathlib import Path
import sys

import typer

app = typer.Typer(
    name="gradebot",
    help="Gradebot 9000 is a tool to grade your 4600 project 1.",
    add_completion=False,
)


def pause_for_input() -> None:
    typer.echo("press any key to continue...", nl=False)
    sys.stdin.readline()


@app.command()
def grade(
    path_to_dir: str = typer.Option(".", "--dir", help="Path to scheduler directory"),
    debug: bool = typer.Option(False, "--debug", help="Debug output."),
    total: bool = typer.Option(False, "--total", help="Print total only"),
    config: str | None = typer.Option(
        None, "--config", help="YAML rubric config (defaults to the built-in rubric)"
    ),
    junit: str | None = typer.Option(
        None, "--junit", help="Also write the rubric as JUnit XML to this path"
    ),
    log_file: str | None = typer.Option(
        None, "--log-file", help="Write a debug log to this file"
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.001, help="Kill a scheduler run after this many seconds"
    ),
    no_pause: bool = typer.Option(
        False, "--no-pause", help="Do not wait for a key press before exiting"
    ),
):
    """Build a scheduler submission and grade it against the rubric."""
    import yaml

    from gradebot.config import RubricConfig, load_config
    from gradebot.reporting.table import print_rubric
    from gradebot.runner import Runner

    try:
        rubric_config = load_config(Path(config)) if config else RubricConfig()
        if timeout is not None:
            rubric_config.timeout = timeout

        runner = Runner(
            config=rubric_config,
            source_dir=Path(path_to_dir),
            verbose=debug,
            quiet=total,
            debug_file=Path(log_file) if log_file else None,
        )
        rubric = runner.execute()
    except (OSError, ValueError, yaml.YAMLError) as e:
        # Reported, not fatal: the exit status stays 0. ValueError covers
        # pydantic validation and undecodable config files.
        typer.echo(f"Error running gradebot: {e}", err=True)
    else:
        print_rubric(rubric, only_total=total)
        if junit:
            from gradebot.reporting.junit import write_junit

            junit_path = write_junit(rubric, Path(junit))
            if not total:
                typer.echo(f"JUnit report: {junit_path}")

    if not no_pause:
        pause_for_input()
