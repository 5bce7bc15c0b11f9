"""CLI entry point for canvas-command.

Invoked as::

    canvascmd [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m canvascmd.cli.main

Commands
--------
classify    Classify a chat command into an action
explain     Show every keyword hit behind a classification
respond     Print the chat acknowledgment for a command
run         Classify a command and apply it to a layer file
colors      List the colour lexicon
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from canvascmd.classifier import CommandClassifier
    from canvascmd.document import LayerDocument
    from canvascmd.lexicon import Lexicon

console = Console()
err_console = Console(stderr=True)

EXIT_NOT_APPLIED = 2


def _classifier(ctx: click.Context) -> "CommandClassifier":
    """Return the classifier configured on the CLI group."""
    return ctx.find_root().obj["classifier"]


def _load_document_or_exit(path: str) -> "LayerDocument":
    """Load a layer file, exiting on error."""
    from canvascmd.document import DocumentError, LayerDocument

    try:
        return LayerDocument.load(path)
    except DocumentError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _params_text(params: Mapping[str, Any], lexicon: "Lexicon | None" = None) -> str:
    from canvascmd.action import thaw

    parts = []
    for key, value in thaw(params).items():
        text = f"{key}={value}"
        if key == "color" and lexicon is not None:
            name = lexicon.color_name(str(value))
            if name != value:
                text += f" ({name})"
        parts.append(text)
    return ", ".join(parts) or "-"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="canvas-command")
@click.option(
    "--lexicon",
    "lexicon_path",
    type=click.Path(exists=False),
    default=None,
    help="YAML file extending the built-in keyword tables.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, lexicon_path: str | None, verbose: bool) -> None:
    """Rule-based chat command interpreter for canvas documents."""
    from canvascmd.classifier import CommandClassifier
    from canvascmd.lexicon import LexiconError, load_lexicon

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )

    lexicon = None
    if lexicon_path:
        try:
            lexicon = load_lexicon(lexicon_path)
        except LexiconError as exc:
            err_console.print(f"[red]Lexicon error:[/red] {exc}")
            sys.exit(1)
    ctx.obj = {"classifier": CommandClassifier(lexicon=lexicon)}


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from canvascmd import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]canvas-command[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# classify command
# ---------------------------------------------------------------------------


@cli.command(name="classify")
@click.argument("text")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Output format (default: text).",
)
@click.pass_context
def classify_command(ctx: click.Context, text: str, output_format: str) -> None:
    """Classify a chat command into a structured action.

    TEXT is the chat command to classify.

    Examples:

    \b
        canvascmd classify "把文字改成紅色"
        canvascmd classify "放大選中的圖片" --format json
    """
    from canvascmd.action import ActionSerializer

    classifier = _classifier(ctx)
    action = classifier.classify(text)
    serializer = ActionSerializer()
    output_format = output_format.lower()

    if output_format == "json":
        click.echo(serializer.to_json(action))
        return
    if output_format == "yaml":
        click.echo(serializer.to_yaml(action), nl=False)
        return

    table = Table(show_header=False, box=None)
    table.add_row("[bold]intent[/bold]", action.intent.value)
    table.add_row("[bold]target[/bold]", action.target.value)
    table.add_row("[bold]params[/bold]", _params_text(action.params, classifier.lexicon))
    console.print(table)


# ---------------------------------------------------------------------------
# explain command
# ---------------------------------------------------------------------------


@cli.command(name="explain")
@click.argument("text")
@click.pass_context
def explain_command(ctx: click.Context, text: str) -> None:
    """Show every keyword hit behind a classification.

    The first hit of each field decides the action; later hits are
    shadowed by declaration order.
    """
    classifier = _classifier(ctx)
    classification = classifier.explain(text)
    action = classification.action
    winning = set(classification.winning)

    console.print(
        f"[bold]intent[/bold]={action.intent.value}  "
        f"[bold]target[/bold]={action.target.value}  "
        f"[bold]params[/bold]={_params_text(action.params, classifier.lexicon)}"
    )
    if not classification.hits:
        console.print("[dim]No keywords matched.[/dim]")
        return

    table = Table(title="Keyword hits")
    table.add_column("Field", style="cyan")
    table.add_column("Group")
    table.add_column("Keyword")
    table.add_column("Value")
    table.add_column("Used", justify="center")
    for hit in classification.hits:
        table.add_row(hit.field, hit.group, hit.keyword, hit.value, "✓" if hit in winning else "")
    console.print(table)

    for field_name, values in classification.conflicts.items():
        console.print(
            f"[yellow]Ambiguous {field_name}:[/yellow] {', '.join(values)} "
            f"(resolved to {values[0]})"
        )


# ---------------------------------------------------------------------------
# respond command
# ---------------------------------------------------------------------------


@cli.command(name="respond")
@click.argument("text")
@click.pass_context
def respond_command(ctx: click.Context, text: str) -> None:
    """Print the chat acknowledgment for a command."""
    from canvascmd.respond import respond, suggest_followups

    action = _classifier(ctx).classify(text)
    click.echo(respond(action))
    followups = suggest_followups(action)
    if followups:
        console.print(f"[dim]Next: {' / '.join(followups)}[/dim]")


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("text")
@click.option(
    "--layers",
    "layers_path",
    required=True,
    type=click.Path(exists=False),
    help="JSON or YAML file holding the layers.",
)
@click.option("--selected", default=None, help="Id of the selected layer (overrides the file).")
@click.option("--write", is_flag=True, default=False, help="Write mutated layers back to the file.")
@click.pass_context
def run_command(
    ctx: click.Context, text: str, layers_path: str, selected: str | None, write: bool
) -> None:
    """Classify TEXT and apply it to the layers in a file.

    Delete and duplicate commands are only proposed; nothing is changed
    until the caller confirms them.

    Examples:

    \b
        canvascmd run "把文字改成紅色" --layers canvas.yaml
        canvascmd run "放大" --layers canvas.json --selected photo --write
    """
    from canvascmd.executor import execute
    from canvascmd.respond import respond

    document = _load_document_or_exit(layers_path)
    if selected is not None:
        document.selected = selected

    action = _classifier(ctx).classify(text)
    outcome = execute(action, document.layers, document.selected, document.mutate)

    click.echo(respond(action))
    color = "green" if outcome.success else "red"
    console.print(f"[{color}]{outcome.message}[/{color}]")
    if outcome.suggestion:
        console.print(f"[dim]{outcome.suggestion}[/dim]")

    table = Table(title="Layers")
    table.add_column("Id", style="cyan")
    table.add_column("Type")
    table.add_column("Attributes")
    for layer in document.layers:
        marker = " *" if layer.id in outcome.affected else ""
        table.add_row(f"{layer.id}{marker}", layer.kind, _params_text(layer.attrs))
    console.print(table)

    if write and document.mutation_count:
        document.dump(layers_path)
        console.print(f"[green]Layers written to[/green] {layers_path}")

    if not outcome.success:
        sys.exit(EXIT_NOT_APPLIED)


# ---------------------------------------------------------------------------
# colors command
# ---------------------------------------------------------------------------


@cli.command(name="colors")
@click.pass_context
def colors_command(ctx: click.Context) -> None:
    """List the colour lexicon in match order."""
    lexicon = _classifier(ctx).lexicon
    table = Table(title="Colours")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name")
    table.add_column("Hex", style="cyan")
    for index, entry in enumerate(lexicon.colors, start=1):
        table.add_row(str(index), entry.name, entry.hex)
    console.print(table)


if __name__ == "__main__":
    cli()
