"""Komenda: kpdoc build — renderowanie zbioru dokumentów do HTML."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model.documents import DocumentSet
from data_model.report import BuildReport, Issue
from kpdoc._config import get_settings
from loader import load_directory
from renderer import DEFAULT_TEMPLATE, build_site, load_template, write_artifacts

console = Console()

SEVERITY_STYLE: dict[str, str] = {
    "error":   "red",
    "warning": "yellow",
}


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_issues(issues: list[Issue]) -> None:
    if not issues:
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("POZIOM",   no_wrap=True)
    table.add_column("KOD",      no_wrap=True, style="bold")
    table.add_column("DOKUMENT", no_wrap=True, style="cyan")
    table.add_column("OPIS",     no_wrap=False, max_width=80)

    for issue in issues:
        style = SEVERITY_STYLE.get(issue.severity, "white")
        table.add_row(
            f"[{style}]{issue.severity}[/{style}]",
            issue.code,
            escape(issue.identifier),
            escape(issue.message),
        )

    console.print()
    console.print(table)


def _show_documents(docset: DocumentSet) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NR",      justify="right", no_wrap=True, style="dim")
    table.add_column("ŹRÓDŁO",  no_wrap=True, style="bold cyan")
    table.add_column("WYJŚCIE", no_wrap=True)
    table.add_column("BLOKI",   justify="right", no_wrap=True)
    table.add_column("TYTUŁ",   no_wrap=False, max_width=50)

    for i, doc in enumerate(docset, 1):
        table.add_row(
            str(i),
            escape(doc.identifier),
            escape(doc.output_path),
            str(len(doc.blocks)),
            escape(doc.title[:80]),
        )

    console.print()
    console.print(table)


def _print_summary(report: BuildReport) -> None:
    console.print()
    if report.failure_count:
        status = f"[red]Gotowe z {report.failure_count} błędami[/red]"
    elif report.warning_count:
        status = f"[yellow]Gotowe z {report.warning_count} ostrzeżeniami[/yellow]"
    else:
        status = "[green]Gotowe[/green]"
    console.print(
        f"{status} — dokumentów: {report.documents}, "
        f"wczytanych: {report.loaded}, "
        f"wyrenderowanych: {report.rendered}, "
        f"błędów: {report.failure_count}, "
        f"ostrzeżeń: {report.warning_count}"
    )


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = get_settings()

    source_dir = Path(args.source_dir) if args.source_dir else settings.source_dir
    out_dir    = Path(args.out) if args.out else settings.out_dir
    order_file = Path(args.order) if args.order else source_dir / settings.order_file
    index_path = None if args.no_index else settings.index_name

    template = DEFAULT_TEMPLATE
    if args.template:
        try:
            template = load_template(Path(args.template))
        except FileNotFoundError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise SystemExit(1)

    console.print(f"Wczytywanie [bold]{escape(str(source_dir))}[/bold] …")

    try:
        result = load_directory(
            source_dir,
            settings.extensions,
            order_file=order_file,
            require_order_file=bool(args.order),
            exclude=(out_dir,),
        )
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(2)

    if result.sources == 0:
        console.print("[yellow]Brak dokumentów do przetworzenia.[/yellow]")
        return

    output = build_site(
        result,
        strict_links=args.strict_links or settings.strict_links,
        index_path=index_path,
        template=template,
        lang=settings.lang,
    )
    report = output.report

    if report.unreadable:
        _show_issues(report.issues)
        console.print("[red]Żadnego źródła nie udało się wczytać — przerwano.[/red]")
        raise SystemExit(2)

    written = write_artifacts(output.artifacts, out_dir)
    console.print(f"[green]HTML:[/green] {escape(str(out_dir))}  ({len(written)} plików)")

    if args.show:
        _show_documents(result.docset)

    _show_issues(report.issues)
    _print_summary(report)

    code = report.exit_code(warnings_as_errors=args.warnings_as_errors)
    if code:
        raise SystemExit(code)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Renderuje katalog dokumentów do HTML (+ spis treści).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje wszystkie dokumenty (.md, .html) z katalogu źródłowego, renderuje
je do HTML z nawigacją prev/next i zapisuje wraz ze spisem treści.

Błąd jednego dokumentu nie przerywa przebiegu; na końcu wypisywane jest
podsumowanie błędów i ostrzeżeń.

Kody wyjścia:
  0  bez błędów (ostrzeżenia dopuszczalne)
  1  co najmniej jeden błąd (lub ostrzeżenie z --warnings-as-errors)
  2  żadnego źródła nie udało się wczytać / brak katalogu

Przykłady:
  kpdoc build docs
  kpdoc build docs --out public --show
  kpdoc build docs --order docs/toc.txt --strict-links
  kpdoc build docs --template page.html --no-index
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
        "--out", "-o",
        metavar="KATALOG",
        default=None,
        help="Katalog wyjściowy (domyślnie: KPDOC_OUT_DIR lub 'site').",
    )
    p.add_argument(
        "--order",
        metavar="PLIK",
        default=None,
        help="Plik kolejności dokumentów (domyślnie: <KATALOG>/toc.txt, jeśli istnieje; brak jawnie podanego pliku to ostrzeżenie).",
    )
    p.add_argument(
        "--template",
        metavar="PLIK",
        default=None,
        help="Szablon strony HTML z placeholderami {{TITLE}}, {{NAV}}, {{BODY}} …",
    )
    p.add_argument(
        "--strict-links",
        action="store_true",
        help="Zepsuty odnośnik jest błędem dokumentu (domyślnie: ostrzeżenie).",
    )
    p.add_argument(
        "--warnings-as-errors",
        action="store_true",
        help="Zakończ z kodem 1, jeśli wystąpiło jakiekolwiek ostrzeżenie.",
    )
    p.add_argument(
        "--no-index",
        action="store_true",
        help="Nie generuj spisu treści.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę dokumentów w terminalu po zapisie.",
    )
    p.set_defaults(func=run)
