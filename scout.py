"""Scout CLI: tokenize text, validate collections, build and score indexes.

Four commands: tokenize, validate, index, score.
Uses typer for argument parsing and rich for formatted terminal output.
The index lives only for the duration of a command.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from scout_core.index import index_collection
from scout_core.scoring import (
    calculate_inverse_document_frequency,
    calculate_term_frequency,
    calculate_tfidf,
    count_documents,
)
from scout_core.text import tokenize as tokenize_text
from scout_core.text import normalize_term, words
from scout_core.validator import validate_collection

app = typer.Typer(help="Scout: shingle inverted index and TF-IDF scoring.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ── tokenize ────────────────────────────────────────────────────────


@app.command()
def tokenize(
    text: str = typer.Argument(..., help="Text to tokenize"),
    show_words: bool = typer.Option(
        False, "--words", help="Show stop-word-filtered words instead of shingles"
    ),
):
    """Print the tokens produced for TEXT."""
    tokens = words(text) if show_words else list(tokenize_text(text))
    if not tokens:
        console.print("[yellow]No tokens produced.[/yellow]")
        return
    console.print(" ".join(tokens))
    console.print(f"\n{len(tokens)} token(s)", style="dim")


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(collection_path: str = typer.Argument(..., help="Path to collection JSON")):
    """Check a collection file for syntactic and semantic errors."""
    passed, errors = validate_collection(collection_path)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {err}")
        raise typer.Exit(code=1)


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(collection_path: str = typer.Argument(..., help="Path to collection JSON")):
    """Load a collection and build its inverted index."""
    with console.status("[bold blue]Indexing documents..."):
        _, summary = index_collection(collection_path)

    table = Table(title="Indexing Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Documents", str(summary["documents"]))
    table.add_row("Unique Tokens", str(summary["tokens"]))
    table.add_row("References", str(summary["references"]))
    console.print(table)


# ── score ───────────────────────────────────────────────────────────


@app.command()
def score(
    collection_path: str = typer.Argument(..., help="Path to collection JSON"),
    term: str = typer.Option("", "--term", help="Term to score"),
    as_json: bool = typer.Option(
        False, "--json", help="Print the term's references and scores as JSON"
    ),
):
    """Show term frequency, IDF and TF-IDF for a term."""
    if not term:
        console.print("[red]Error: --term is required[/red]")
        raise typer.Exit(code=1)

    term = normalize_term(term)
    with console.status("[bold blue]Indexing documents..."):
        inverted_index, _ = index_collection(collection_path)

    total = count_documents(inverted_index)
    if total == 0:
        console.print(
            Panel("[bold red]✗ Collection produced no indexed documents[/bold red]", border_style="red")
        )
        raise typer.Exit(code=1)

    tf = calculate_term_frequency(term, inverted_index)
    idf = calculate_inverse_document_frequency(term, inverted_index)
    tfidf = calculate_tfidf(term, inverted_index, total)

    if as_json:
        console.print_json(
            data={
                "term": term,
                "documents": total,
                "idf": idf,
                "tfidf": tfidf,
                "references": [ref.to_dict() for ref in inverted_index.get(term, [])],
            }
        )
        return

    console.print(f'\n[bold]Term:[/bold] "{term}"')
    console.print()

    if tf:
        table = Table(title="Term Frequency")
        table.add_column("Document", style="cyan", justify="right")
        table.add_column("Count", justify="right")
        for doc_id, count in sorted(tf.items(), key=lambda x: x[1], reverse=True):
            table.add_row(str(doc_id), str(count))
        console.print(table)
    else:
        console.print(f"[yellow]'{term}' does not occur in the index.[/yellow]")

    console.print(
        Panel(
            f"[bold]Documents:[/bold] {total}  |  "
            f"[bold]IDF:[/bold] {idf:.4f}  |  "
            f"[bold]TF-IDF:[/bold] {tfidf:.4f}",
            title="Score",
        )
    )


if __name__ == "__main__":
    app()
