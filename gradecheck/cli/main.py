"""Top-level CLI entry point for gradecheck."""

from __future__ import annotations

import logging

import click

from gradecheck import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gradecheck")
@click.option(
    "--config",
    type=click.Path(),
    default=None,
    envvar="GRADECHECK_CONFIG",
    help="Path to config.yaml (or config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """gradecheck -- current Canvas grades as letter grades."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# Register sub-commands
from gradecheck.cli.config_cmd import config_group  # noqa: E402
from gradecheck.cli.grades_cmd import grades_cmd  # noqa: E402

cli.add_command(config_group, "config")
cli.add_command(grades_cmd, "grades")
