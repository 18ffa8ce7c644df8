"""
Adaptive Card CLI: `adaptive-card` command.

Commands:
  adaptive-card validate <file>        Parse a card, report the first error
  adaptive-card format <file>          Re-emit a card in canonical wire form
  adaptive-card inspect <file>         Show the element/action tree
  adaptive-card new <text>             Print a new single-TextBlock card
  adaptive-card config show|set|reset  Manage CLI defaults
"""

import json
import logging
from pathlib import Path
from typing import Optional

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install adaptive-card[cli]")

from adaptive_card import __version__
from adaptive_card.errors import ParseError
from adaptive_card.models.card import AdaptiveCard
from adaptive_card.wire import from_json

console = Console()
CONFIG_FILE = Path.home() / ".adaptive-card" / "config.json"
DEFAULT_INDENT = 2


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _indent(override: Optional[int]) -> Optional[int]:
    if override is not None:
        return override or None
    return _load_config().get("indent", DEFAULT_INDENT) or None


def _report(err: ParseError, json_output: bool) -> None:
    if json_output:
        click.echo(json.dumps({"ok": False, "code": err.code, "path": err.path, "message": err.reason}))
    else:
        console.print(f"[red]{err.code}[/red] [bold]{escape(err.path)}[/bold]: {escape(err.reason)}", highlight=False)


def _load_card(source, json_output: bool = False) -> AdaptiveCard:
    """Read and parse a card file; exits with status 1 on a parse error."""
    try:
        return from_json(source.read())
    except ParseError as e:
        _report(e, json_output)
        raise SystemExit(1)


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log parser diagnostics to stderr")
def main(verbose: bool):
    """Adaptive Card CLI: check, format and inspect card documents."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Register subcommands from separate modules
from adaptive_card.cli.cards import validate_cmd, format_cmd, inspect_cmd, new_cmd
from adaptive_card.cli.config import config

main.add_command(validate_cmd)
main.add_command(format_cmd)
main.add_command(inspect_cmd)
main.add_command(new_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
