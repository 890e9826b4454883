"""
kpdoc — narzędzie CLI do budowania statycznej dokumentacji.

Użycie:
  kpdoc <komenda> [opcje]

Komendy:
  build   Renderuje katalog dokumentów do HTML (+ spis treści).
  check   Sprawdza źródła i odnośniki między dokumentami.
  show    Wyświetla bloki jednego pliku źródłowego.
  toc     Wyświetla kolejność dokumentów i łańcuch nawigacji.

Konfiguracja: zmienne środowiskowe KPDOC_* (patrz kpdoc/_config.py).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from kpdoc.commands import build as cmd_build
from kpdoc.commands import check as cmd_check
from kpdoc.commands import show as cmd_show
from kpdoc.commands import toc as cmd_toc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kpdoc",
        description="kpdoc — statyczna dokumentacja: wczytywanie, renderowanie, walidacja.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="kpdoc 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_build.add_parser(subparsers)
    cmd_check.add_parser(subparsers)
    cmd_show.add_parser(subparsers)
    cmd_toc.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
