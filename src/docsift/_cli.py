"""CLI for docsift - interactive TUI, one-shot query, and config."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docsift._config import DocsiftConfig
from docsift._errors import ConfigError, LoadError
from docsift._logging import configure_logging
from docsift._search import search_documents
from docsift._store import Document, load_documents

app = typer.Typer(
    name="docsift",
    help="Search a directory of text documents from the terminal",
    no_args_is_help=True,
)
console = Console()

RootArg = Annotated[
    Path,
    typer.Argument(help="Directory to load documents from", envvar="DOCSIFT_ROOT"),
]
ExtOpt = Annotated[
    list[str] | None,
    typer.Option("--ext", "-e", help="File suffix to include (repeatable, default from config)"),
]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file path"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")]


def _load_config(path: Path | None) -> DocsiftConfig:
    try:
        return DocsiftConfig.load(path)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


def _load(root: Path, config: DocsiftConfig, ext: list[str] | None) -> list[Document]:
    suffixes = ext or config.extensions
    try:
        return load_documents(root, suffixes=suffixes, encoding=config.encoding)
    except LoadError as e:
        console.print(f"[red]Load error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def tui(
    root: RootArg,
    ext: ExtOpt = None,
    config_path: ConfigOpt = None,
    log_file: Annotated[
        Path | None, typer.Option("--log-file", help="Write debug log to this file")
    ] = None,
    verbose: VerboseOpt = False,
) -> None:
    """Launch the interactive search TUI."""
    config = _load_config(config_path)
    configure_logging(verbose=verbose, log_file=log_file or config.log_file)
    documents = _load(root, config, ext)

    from docsift._tui import DocsiftApp

    # The TUI owns the terminal from here on
    configure_logging(verbose=verbose, log_file=log_file or config.log_file, console=False)
    DocsiftApp(documents, styles=config.styles, root=str(root)).run()


@app.command()
def query(
    term: Annotated[str, typer.Argument(help="Literal, case-sensitive search term")],
    root: RootArg,
    ext: ExtOpt = None,
    config_path: ConfigOpt = None,
    format_: Annotated[
        str, typer.Option("--format", "-f", help="Output format: pretty, json, paths")
    ] = "pretty",
    verbose: VerboseOpt = False,
) -> None:
    """Run a single search and print the matching paths."""
    if format_ not in ("pretty", "json", "paths"):
        console.print(f"[red]Unknown format:[/red] {escape(format_)}")
        raise typer.Exit(2)

    config = _load_config(config_path)
    configure_logging(verbose=verbose, log_file=config.log_file)
    documents = _load(root, config, ext)
    results = search_documents(documents, term) if term.strip() else []

    if format_ == "json":
        output = [
            {"path": doc.path, "in_path": term in doc.path, "in_content": term in doc.content}
            for doc in results
        ]
        console.print_json(json.dumps(output))

    elif format_ == "paths":
        for doc in results:
            console.print(doc.path, markup=False, highlight=False, soft_wrap=True)

    else:  # pretty
        _print_pretty_results(term, results)


def _print_pretty_results(term: str, results: list[Document]) -> None:
    """Print results in pretty format."""
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(title=f"Results for: [cyan]{escape(term)}[/cyan]")
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Path", style="green")
    table.add_column("Matched in", style="yellow", width=12)

    for position, doc in enumerate(results, start=1):
        where = "path" if term in doc.path else "content"
        table.add_row(str(position), escape(doc.path), where)

    console.print(table)
    console.print(f"\n[dim]{len(results)} match(es)[/dim]")


@app.command()
def config(
    show: Annotated[bool, typer.Option("--show", help="Show current config")] = False,
    init: Annotated[bool, typer.Option("--init", help="Create default config file")] = False,
    config_path: ConfigOpt = None,
) -> None:
    """Manage docsift configuration."""
    if init:
        path = DocsiftConfig.bootstrap(config_path)
        console.print(f"[green]Created config file:[/green] {escape(str(path))}")
        return

    if show:
        cfg = _load_config(config_path)
        console.print("[bold]Docsift Configuration[/bold]")
        console.print(
            f"  Config file: {config_path or DocsiftConfig.get_config_path()}", markup=False
        )
        console.print(f"  Extensions: {', '.join(cfg.extensions)}")
        console.print(f"  Encoding: {cfg.encoding}")
        console.print(f"  Log file: {cfg.log_file or '(none)'}", markup=False)
        console.print(
            f"  Styles: selected={cfg.styles.selected_foreground} on "
            f"{cfg.styles.selected_background}, regular={cfg.styles.regular_foreground}",
            markup=False,
        )
        return

    # Default: show help
    console.print("Use --show to view config or --init to create default config file.")


def main() -> None:
    """Entry point for docsift."""
    app()


if __name__ == "__main__":
    main()
