"""CLI: adaptive-card validate, format, inspect, new"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from adaptive_card.models.actions import ShowCardAction
from adaptive_card.models.card import AdaptiveCard
from adaptive_card.models.common import TextSize, TextWeight, Version
from adaptive_card.models.elements import ActionSet, ColumnSet, Container, FactSet, ImageSet, TextBlock
from adaptive_card.wire import to_json, to_wire

console = Console()

LABEL_WIDTH = 40


def _load_config() -> dict:
    from adaptive_card.cli.main import _load_config
    return _load_config()


def _load_card(source, json_output: bool = False) -> AdaptiveCard:
    from adaptive_card.cli.main import _load_card
    return _load_card(source, json_output)


def _indent(override: Optional[int]) -> Optional[int]:
    from adaptive_card.cli.main import _indent
    return _indent(override)


def _short(text: str) -> str:
    return text if len(text) <= LABEL_WIDTH else text[: LABEL_WIDTH - 1] + "…"


def _add_actions(tree: Tree, actions) -> None:
    for action in actions:
        label = f"[magenta]{action.type}[/magenta]"
        if action.title is not None:
            label += f" {escape(repr(action.title))}"
        url = getattr(action, "url", None)
        if url:
            label += f" [dim]{escape(url)}[/dim]"
        node = tree.add(label)
        if isinstance(action, ShowCardAction):
            _add_card(node, action.card)


def _add_elements(tree: Tree, elements) -> None:
    for element in elements:
        label = f"[cyan]{element.type}[/cyan]"
        if element.id:
            label += f" [dim]#{escape(element.id)}[/dim]"
        if isinstance(element, TextBlock):
            label += f" {escape(repr(_short(element.text)))}"
        elif isinstance(element, ImageSet):
            label += f" ({len(element.images)} images)"
        elif hasattr(element, "url"):
            label += f" [dim]{escape(element.url)}[/dim]"
        node = tree.add(label)

        if isinstance(element, Container):
            _add_elements(node, element.items)
        elif isinstance(element, ColumnSet):
            for column in element.columns:
                width = "" if column.width is None else f" width={column.width}"
                _add_elements(node.add(f"[cyan]Column[/cyan]{escape(width)}"), column.items)
        elif isinstance(element, FactSet):
            for fact in element.facts:
                node.add(f"{escape(fact.title)}: {escape(fact.value)}")
        elif isinstance(element, ActionSet):
            _add_actions(node, element.actions)


def _card_label(card: AdaptiveCard) -> str:
    return f"[bold]AdaptiveCard[/bold] v{card.version.value}"


def _fill_card(node: Tree, card: AdaptiveCard) -> None:
    _add_elements(node.add("body"), card.body)
    if card.actions:
        _add_actions(node.add("actions"), card.actions)


def _add_card(tree: Tree, card: AdaptiveCard) -> None:
    _fill_card(tree.add(_card_label(card)), card)


def card_tree(card: AdaptiveCard) -> Tree:
    """Render a card's structure as a rich Tree."""
    root = Tree(_card_label(card))
    _fill_card(root, card)
    return root


@click.command("validate")
@click.argument("source", type=click.File("rb"))
@click.option("--json-output", "--json", is_flag=True)
def validate_cmd(source, json_output: bool):
    """Check that a file holds a valid Adaptive Card."""
    card = _load_card(source, json_output)
    if json_output:
        click.echo(json.dumps({"ok": True, "version": card.version.value, "elements": len(card.body)}))
    else:
        console.print(f"[green]OK[/green] AdaptiveCard v{card.version.value}, {len(card.body)} element(s)")


@click.command("format")
@click.argument("source", type=click.File("rb"))
@click.option("--indent", default=None, type=int, help="Indent width; 0 for compact output")
def format_cmd(source, indent: Optional[int]):
    """Re-emit a card in canonical wire form."""
    card = _load_card(source)
    click.echo(to_json(card, indent=_indent(indent)))


@click.command("inspect")
@click.argument("source", type=click.File("rb"))
@click.option("--json-output", "--json", is_flag=True)
def inspect_cmd(source, json_output: bool):
    """Show the element and action tree of a card."""
    card = _load_card(source, json_output)
    if json_output:
        click.echo(json.dumps(to_wire(card), indent=2))
        return
    console.print(card_tree(card))


@click.command("new")
@click.argument("text")
@click.option("--version", "version", type=click.Choice([v.value for v in Version]), default=None)
@click.option("--size", type=click.Choice([s.value for s in TextSize]), default=None)
@click.option("--weight", type=click.Choice([w.value for w in TextWeight]), default=None)
@click.option("--subtle", is_flag=True)
@click.option("--indent", default=None, type=int)
def new_cmd(text: str, version: Optional[str], size: Optional[str], weight: Optional[str],
            subtle: bool, indent: Optional[int]):
    """Print a new card holding one wrapping TextBlock."""
    version = version or _load_config().get("version")
    if version not in {v.value for v in Version}:
        version = Version.latest().value
    card = AdaptiveCard(
        version=Version(version),
        body=[
            TextBlock(
                text=text,
                size=TextSize(size) if size else None,
                weight=TextWeight(weight) if weight else None,
                wrap=True,
                is_subtle=True if subtle else None,
            )
        ],
    )
    click.echo(to_json(card, indent=_indent(indent)))
