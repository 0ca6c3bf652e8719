"""
prompt-humanizer CLI - score and rewrite image-generation prompts.

Commands:
    prompt-humanizer transform "<prompt>"   Rewrite a prompt with realism modifiers
    prompt-humanizer analyze "<prompt>"     Score a prompt for AI-prone patterns
    prompt-humanizer suggest "<prompt>"     Recommend modifiers without rewriting
    prompt-humanizer modifiers              List the modifier vocabulary
    prompt-humanizer examples               Show example transformations

Each command also answers to its first letter (t, a, s, m, e).
"""

import json
import logging
import random
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from data_designer_prompt_humanizer.bands import score_badge
from data_designer_prompt_humanizer.core import InvalidPromptError, analyze_prompt
from data_designer_prompt_humanizer.modifiers import VOCABULARY
from data_designer_prompt_humanizer.transformer import TransformConfig, Transformer

app = typer.Typer(help="Transform AI image prompts for realistic outputs", no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)

EXAMPLE_PROMPTS = [
    "a woman in a coffee shop",
    "beautiful portrait of a man, 8k, trending on artstation",
    "city street at night",
    "person walking through a forest",
    "photo of a child playing",
]

_LISTING_LIMIT = 5


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Score image prompts for the generic AI look and rewrite them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _join_prompt(words: Optional[List[str]], action: str) -> str:
    prompt = " ".join(words or []).strip()
    if not prompt:
        err_console.print(f"[bold red]Error:[/bold red] Please provide a prompt to {action}")
        raise typer.Exit(1)
    return prompt


def _transformer(seed: Optional[int]) -> Transformer:
    return Transformer(random.Random(seed)) if seed is not None else Transformer()


def _echo_json(payload: dict) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _score_line(label: str, score: int) -> str:
    return f"{label}: {score_badge(score)} {score}/100"


# =============================================================================
# TRANSFORM
# =============================================================================


def transform(
    prompt: Optional[List[str]] = typer.Argument(None, help="Prompt to transform"),
    style: str = typer.Option("film", help="Photography style: film, digital or phone"),
    mood: str = typer.Option("natural", help="Lighting mood: natural, moody or harsh"),
    imperfections: str = typer.Option("medium", help="Imperfection level: low, medium or high"),
    preserve: bool = typer.Option(False, "--preserve", help="Keep flagged phrases instead of stripping them"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible modifier selection"),
):
    """Transform a prompt with realism modifiers."""
    text = _join_prompt(prompt, "transform")
    config = TransformConfig.resolve(style, mood, imperfections, preserve)
    try:
        result = _transformer(seed).transform(text, config)
    except InvalidPromptError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if as_json:
        _echo_json(result.to_payload())
        return

    console.print("\n[bold blue]IMAGE PROMPT HUMANIZER[/bold blue]\n")
    console.print("[bold]ORIGINAL:[/bold]", f'"{escape(result.original)}"', soft_wrap=True)
    console.print("  " + _score_line("Score", result.original_score) + " (higher = more AI-prone)\n")
    console.print("[bold]TRANSFORMED:[/bold]", f'"{escape(result.transformed)}"', soft_wrap=True)
    console.print("  " + _score_line("Score", result.new_score))
    sign = "+" if result.improvement > 0 else ""
    console.print(f"  Improvement: {sign}{result.improvement} points\n")

    console.print("[bold]ISSUES FIXED:[/bold]")
    for name in result.issues_fixed or ["(none)"]:
        console.print(f"  • {name}")
    console.print("\n[bold]MODIFIERS ADDED:[/bold]")
    for modifier in result.modifiers_added:
        console.print(f"  + {modifier}")


# =============================================================================
# ANALYZE
# =============================================================================


def analyze(
    prompt: Optional[List[str]] = typer.Argument(None, help="Prompt to analyze"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Analyze a prompt for AI-prone patterns."""
    text = _join_prompt(prompt, "analyze")
    analysis = analyze_prompt(text)

    if as_json:
        _echo_json(analysis.to_payload())
        return

    console.print("\n[bold blue]PROMPT ANALYSIS[/bold blue]\n")
    console.print(f'PROMPT: "{escape(text)}"', soft_wrap=True)
    console.print(_score_line("SCORE", analysis.score))
    console.print(f"  AI-prone patterns: {analysis.ai_score}")
    console.print(f"  Realism indicators: {analysis.realism_score}\n")

    if not analysis.issues:
        console.print("[bold green]NO ISSUES FOUND ✓[/bold green]")
        return

    table = Table(title=f"Issues found ({analysis.issue_count})")
    table.add_column("Issue", style="bold")
    table.add_column("Weight", justify="right")
    table.add_column("Suggestion")
    for issue in analysis.issues:
        table.add_row(issue.name, str(issue.weight), issue.suggestion)
    console.print(table)


# =============================================================================
# SUGGEST
# =============================================================================

_SUGGESTION_LABELS = {
    "camera": "📷 Camera/Film",
    "lighting": "💡 Lighting",
    "imperfections": "🎞️ Imperfections",
    "composition": "📐 Composition",
    "human_details": "👤 Human Details",
}


def suggest(
    prompt: Optional[List[str]] = typer.Argument(None, help="Prompt to get suggestions for"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible suggestions"),
):
    """Get suggestions without transforming."""
    text = _join_prompt(prompt, "get suggestions for")
    suggestions = _transformer(seed).suggest(text)

    if as_json:
        _echo_json(suggestions.to_payload())
        return

    console.print("\n[bold blue]SUGGESTIONS[/bold blue]\n")
    console.print(f'PROMPT: "{escape(text)}"', soft_wrap=True)
    console.print(_score_line("SCORE", suggestions.score) + "\n")
    if suggestions.issues:
        console.print("[bold]FIX THESE:[/bold]")
        for issue in suggestions.issues:
            console.print(f"  ⚠️  {issue.name}: {issue.suggestion}")
    console.print("\n[bold]RECOMMENDED ADDITIONS:[/bold]")
    for key, phrases in suggestions.recommended_additions.items():
        console.print(f"\n  {_SUGGESTION_LABELS.get(key, key)}:")
        for phrase in phrases:
            console.print(f"     + {phrase}")


# =============================================================================
# MODIFIERS / EXAMPLES
# =============================================================================


def modifiers(
    full: bool = typer.Option(False, "--all", help="List every phrase instead of a sample"),
):
    """List available realism modifiers."""
    table = Table(title="Realism modifiers")
    table.add_column("Category", style="bold")
    table.add_column("Phrases")
    for name, phrases in VOCABULARY.items():
        shown = phrases if full else phrases[:_LISTING_LIMIT]
        more = "" if full or len(phrases) <= _LISTING_LIMIT else f" (+{len(phrases) - _LISTING_LIMIT} more)"
        table.add_row(name, ", ".join(shown) + more)
    console.print(table)


def examples(
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible examples"),
):
    """Show example transformations."""
    transformer = _transformer(seed)
    console.print("\n[bold blue]EXAMPLE TRANSFORMATIONS[/bold blue]")
    for example in EXAMPLE_PROMPTS:
        result = transformer.transform(example)
        console.print(f'\nBEFORE: "{example}"', soft_wrap=True)
        console.print("  " + _score_line("Score", result.original_score))
        console.print(f'AFTER:  "{escape(result.transformed)}"', soft_wrap=True)
        console.print("  " + _score_line("Score", result.new_score))
        console.print("─" * 60)


for _name, _fn in (
    ("transform", transform),
    ("analyze", analyze),
    ("suggest", suggest),
    ("modifiers", modifiers),
    ("examples", examples),
):
    app.command(_name)(_fn)
    app.command(_name[0], hidden=True)(_fn)


if __name__ == "__main__":
    app()
