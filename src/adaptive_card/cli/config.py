"""CLI: adaptive-card config show|set|reset"""

import json

import click
from rich.console import Console
from rich.table import Table

from adaptive_card.models.common import Version

console = Console()

CONFIG_KEYS = ("indent", "version")


def _load_config() -> dict:
    from adaptive_card.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from adaptive_card.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """CLI defaults (stored in ~/.adaptive-card/config.json)."""


@config.command("show")
@click.option("--json-output", "--json", is_flag=True)
def config_show(json_output):
    """Show saved defaults."""
    cfg = _load_config()
    if json_output:
        click.echo(json.dumps(cfg, indent=2))
        return
    table = Table(title="adaptive-card config")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key in CONFIG_KEYS:
        table.add_row(key, str(cfg.get(key, "")))
    console.print(table)


@config.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
def config_set(key, value):
    """Save a default: `indent <n>` or `version <1.x>`."""
    cfg = _load_config()
    if key == "indent":
        if not value.isdigit():
            raise click.BadParameter("indent must be a non-negative integer", param_hint="value")
        cfg[key] = int(value)
    else:
        try:
            cfg[key] = Version(value).value
        except ValueError:
            choices = ", ".join(v.value for v in Version)
            raise click.BadParameter(f"unknown version {value!r} (one of {choices})", param_hint="value")
    _save_config(cfg)
    console.print(f"[green]{key} = {cfg[key]}[/green]")


@config.command("reset")
def config_reset():
    """Forget all saved defaults."""
    _save_config({})
    console.print("[green]Config cleared.[/green]")
