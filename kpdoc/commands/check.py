"""Komenda: kpdoc check — walidacja źródeł i odnośników bez renderowania."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from data_model.report import Severity
from kpdoc._config import get_settings
from kpdoc.commands.build import _show_issues
from loader import load_directory
from validator import check_links

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

    issues = result.issues + check_links(result.docset)
    errors = sum(1 for i in issues if i.severity is Severity.ERROR)
    warnings = len(issues) - errors
    links = sum(1 for doc in result.docset for _ in doc.iter_links())

    console.print(
        f"Sprawdzono [bold]{len(result.docset)}[/bold]/{result.sources} dokumentów, "
        f"[bold]{links}[/bold] odnośników."
    )
    _show_issues(issues)

    if errors:
        console.print(f"[red]Błędów: {errors}[/red], ostrzeżeń: {warnings}")
        raise SystemExit(1)
    if warnings:
        console.print(f"[yellow]Ostrzeżeń: {warnings}[/yellow]")
    else:
        console.print("[green]OK[/green]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Sprawdza źródła i odnośniki między dokumentami (bez renderowania).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje katalog dokumentów i sprawdza:
  - czy każde źródło da się zdekodować i sparsować
  - czy każdy odnośnik wewnętrzny wskazuje istniejący dokument
  - czy kotwice (#fragment) istnieją wśród nagłówków dokumentu docelowego

Kod wyjścia 1 przy co najmniej jednym błędzie.

Przykłady:
  kpdoc check docs
  kpdoc check docs --order docs/toc.txt
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
