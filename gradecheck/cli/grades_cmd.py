"""CLI command: gradecheck grades -- fetch and print current grades."""

from __future__ import annotations

import json

import click
from pydantic import ValidationError

from gradecheck.engine.errors import ErrorKind, GradesError


@click.command("grades")
@click.option("--domain", envvar="CANVAS_DOMAIN", default=None, help="Canvas host (default: $CANVAS_DOMAIN, then config)")
@click.option("--token", envvar="CANVAS_TOKEN", default=None, help="Canvas access token (default: $CANVAS_TOKEN, then config)")
@click.option("--term", default=None, help="Grading period title to report (overrides grading_term)")
@click.option("--json", "as_json", is_flag=True, help="Print records as a JSON array")
@click.pass_context
def grades_cmd(
    ctx: click.Context,
    domain: str | None,
    token: str | None,
    term: str | None,
    as_json: bool,
) -> None:
    """Fetch current grades for the token's owner."""
    from gradecheck.config.loader import load_config
    from gradecheck.data.adapters.canvas_client import CanvasClient
    from gradecheck.engine.pipeline import run_pipeline

    try:
        config = load_config(ctx.obj.get("config_path"))
    except ValidationError as e:
        click.echo(f"Config validation failed: {e}", err=True)
        raise SystemExit(1) from None
    if term:
        config = config.model_copy(update={"grading_term": term})

    domain = domain or config.canvas.domain
    token = token or config.canvas.token
    if not domain:
        raise click.UsageError("No Canvas domain: pass --domain or set CANVAS_DOMAIN")
    if not token:
        raise click.UsageError("No Canvas token: pass --token or set CANVAS_TOKEN")

    try:
        with CanvasClient(timeout=config.canvas.timeout) as client:
            records = run_pipeline(token, domain, config, client)
    except GradesError as e:
        click.echo(f"Error ({e.kind.value}): {e}", err=True)
        raise SystemExit(2 if e.kind is ErrorKind.AUTH else 1) from None

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in records], indent=2))
        return

    if not records:
        click.echo(f"No grades found for {config.grading_term}.")
        return

    for r in records:
        click.echo(
            f"{r.course_name}: {r.current_score} ({r.current_grade})"
            f"  last activity {r.last_activity or '-'}"
        )
