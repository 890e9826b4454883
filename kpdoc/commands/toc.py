"""Komenda: kpdoc toc — łańcuch nawigacji (spis treści) zbioru dokumentów."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from kpdoc._config import get_settings
from kpdoc.commands.build import _show_issues
from loader import load_directory

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = get_settings()

    source_dir = Path(args.source_dir) if args.source_dir else settings.source_dir
    order_file = Path(args.order) if args.order else source_dir / settings.order_file

    try:
        result = load_directory(
            source_dir,
            settings.extensions,
            order_file=order_file,
            require_order_file=bool(args.order),
            exclude=(settings.out_dir,),
        )
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(2)

    docset = result.docset
    if not len(docset):
        console.print("[yellow]Brak dokumentów.[/yellow]")
        _show_issues(result.issues)
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NR",        justify="right", no_wrap=True, style="dim")
    table.add_column("DOKUMENT",  no_wrap=True, style="bold cyan")
    table.add_column("TYTUŁ",     no_wrap=False, max_width=50)
    table.add_column("POPRZEDNI", no_wrap=True, style="dim")
    table.add_column("NASTĘPNY",  no_wrap=True, style="dim")

    for i, doc in enumerate(docset, 1):
        prev_doc = docset.previous_of(doc.identifier)
        next_doc = docset.next_of(doc.identifier)
        table.add_row(
            str(i),
            escape(doc.identifier),
            escape(doc.title[:80]),
            escape(prev_doc.identifier) if prev_doc else "-",
            escape(next_doc.identifier) if next_doc else "-",
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(docset)} dokumentów, {len(docset.edges)} krawędzi nawigacji[/dim]\n")
    _show_issues(result.issues)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "toc",
        help="Wyświetla kolejność dokumentów i łańcuch nawigacji prev/next.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje katalog dokumentów i wyświetla ich kolejność (z pliku kolejności,
a następnie alfabetycznie) wraz z sąsiadami w łańcuchu nawigacji.

Przykłady:
  kpdoc toc docs
  kpdoc toc docs --order docs/toc.txt
        """,
    )
    p.add_argument(
        "source_dir",
        metavar="KATALOG",
        nargs="?",
        default=None,
        help="Katalog źródłowy (domyślnie: KPDOC_SOURCE_DIR lub '.').",
    )
    p.add_argument(
        "--order",
        metavar="PLIK",
        default=None,
        help="Plik kolejności dokumentów (domyślnie: <KATALOG>/toc.txt, jeśli istnieje; brak jawnie podanego pliku to ostrzeżenie).",
    )
    p.set_defaults(func=run)
