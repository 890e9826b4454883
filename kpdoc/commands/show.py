"""Komenda: kpdoc show — podgląd bloków jednego pliku źródłowego."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model.documents import (
    Block,
    CodeBlock,
    Heading,
    Link,
    ListItem,
    Paragraph,
    Quote,
    Table as TableBlock,
    ThematicBreak,
    plain_text,
)
from data_model.errors import MalformedDocumentError
from loader import Source, load_document

console = Console()

# Kolory per rodzaj bloku
KIND_STYLE: dict[str, str] = {
    "heading":   "bold cyan",
    "paragraph": "white",
    "code":      "green",
    "link":      "blue",
    "list":      "yellow",
    "table":     "magenta",
    "quote":     "dim white",
    "break":     "dim",
}


def _describe(block: Block) -> tuple[str, str, str]:
    """(rodzaj, poziom, podgląd treści) dla wiersza tabeli."""
    match block:
        case Heading(level=level, anchor=anchor):
            return "heading", str(level), f"{escape(block.text)}  [dim]#{escape(anchor)}[/dim]"
        case Paragraph(spans=spans):
            return "paragraph", "-", escape(plain_text(spans))
        case CodeBlock(language=language, text=text):
            lines = text.count("\n") + 1 if text else 0
            return "code", "-", escape(f"[{language or 'bez języka'}] {lines} linii")
        case Link(text=text, target=target):
            return "link", "-", escape(f"{text} → {target}")
        case ListItem(spans=spans, ordered=ordered, depth=depth, number=number):
            marker = f"{number}." if ordered else "•"
            return "list", str(depth), escape(f"{marker} {plain_text(spans)}")
        case TableBlock(header=header, rows=rows):
            return "table", "-", f"{len(header)} kolumn, {len(rows)} wierszy"
        case Quote(spans=spans):
            return "quote", "-", escape(plain_text(spans))
        case ThematicBreak():
            return "break", "-", "—"
    return type(block).__name__.lower(), "-", ""


def run(args: argparse.Namespace) -> None:
    path = Path(args.file)
    if not path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {escape(str(path))}")
        raise SystemExit(1)

    source = Source(identifier=args.doc_id or path.name, data=path.read_bytes(), path=str(path))

    try:
        doc = load_document(source)
    except MalformedDocumentError as e:
        console.print(f"[red]Błąd parsowania:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(
        f"Dokument: [bold]{escape(doc.identifier)}[/bold]  "
        f"format=[cyan]{doc.format}[/cyan]  "
        f"tytuł=[cyan]{escape(doc.title)}[/cyan]  "
        f"wyjście=[dim]{escape(doc.output_path)}[/dim]"
    )

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NR",     justify="right", no_wrap=True, style="dim")
    table.add_column("RODZAJ", no_wrap=True)
    table.add_column("LVL",    justify="right", no_wrap=True, style="dim")
    table.add_column("TREŚĆ",  no_wrap=False, max_width=80)

    for i, block in enumerate(doc.blocks, 1):
        kind, level, preview = _describe(block)
        style = KIND_STYLE.get(kind, "white")
        table.add_row(str(i), f"[{style}]{kind}[/{style}]", level, preview[:200])

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(doc.blocks)} bloków[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Wyświetla bloki jednego pliku źródłowego (.md / .html).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje pojedynczy plik źródłowy i wyświetla listę jego bloków
(nagłówki, akapity, bloki kodu, listy, tabele, odnośniki).

Przykłady:
  kpdoc show docs/basic-syntax.md
  kpdoc show docs/idioms.html --doc-id idioms.html
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku źródłowego.",
    )
    p.add_argument(
        "--doc-id",
        metavar="ID",
        default=None,
        help="Identyfikator dokumentu (domyślnie: nazwa pliku).",
    )
    p.set_defaults(func=run)
