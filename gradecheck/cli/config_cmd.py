"""Config CLI commands: show, validate."""

from __future__ import annotations

import click


@click.group("config")
def config_group() -> None:
    """Manage configuration."""
    pass


@config_group.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the resolved configuration (token masked)."""
    import json

    from gradecheck.config.loader import load_config

    config = load_config(ctx.obj.get("config_path"))
    data = config.model_dump(by_alias=True)
    if data["canvas"]["token"]:
        data["canvas"]["token"] = "***"
    click.echo(json.dumps(data, indent=2, default=str))


@config_group.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Validate the config file against the schema."""
    from gradecheck.config.loader import load_config

    try:
        config = load_config(ctx.obj.get("config_path"))
        click.echo("Config is valid.")
        click.echo(f"  Grading term: {config.grading_term}")
        tiers = ", ".join(
            f"{t.letter_grade}>={t.min_percent:g}"
            for t in sorted(config.scale, key=lambda t: t.min_percent, reverse=True)
        )
        click.echo(f"  Scale: {tiers or '(empty)'}")
        click.echo(f"  Canvas domain: {config.canvas.domain or '(unset)'}")
    except Exception as e:
        click.echo(f"Config validation failed: {e}", err=True)
        raise SystemExit(1) from None
