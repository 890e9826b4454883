"""
markup/patterns.py — wzorce regex do klasyfikacji linii źródła Markdown.

Każdy LinePattern zawiera:
  - kind  : rodzaj linii (FENCE, HEADING, BREAK, LIST, QUOTE, TABLE, BLANK)
  - regex : skompilowany wzorzec (dopasowanie całej linii)

Wzorce są testowane w kolejności; pierwsza pasująca wygrywa.
Linia niepasująca do żadnego wzorca to zwykły tekst (TEXT).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

LineKind = Literal["BLANK", "FENCE", "HEADING", "BREAK", "LIST", "QUOTE", "TABLE", "TEXT"]


@dataclass(frozen=True, slots=True)
class LinePattern:
    kind: LineKind
    regex: re.Pattern[str]


def _p(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.UNICODE)


PATTERNS: list[LinePattern] = [
    LinePattern("BLANK", _p(r"^[ \t]*$")),
    # ``` kotlin   /   ~~~~
    LinePattern(
        "FENCE",
        _p(r"^(?P<indent> *)(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>.*?)[ \t]*$"),
    ),
    # ## Tytuł ##
    LinePattern(
        "HEADING",
        _p(r"^ {0,3}(?P<hashes>#{1,6})(?:[ \t]+(?P<text>.*?))?(?:[ \t]+#+)?[ \t]*$"),
    ),
    # ---  /  * * *  /  ___   (musi być przed LIST: "* * *" to nie element listy)
    LinePattern(
        "BREAK",
        _p(r"^ {0,3}(?P<char>[-*_])(?:[ \t]*(?P=char)){2,}[ \t]*$"),
    ),
    # - element  /  * element  /  1. element  /  2) element
    LinePattern(
        "LIST",
        _p(r"^(?P<indent>[ \t]*)(?P<marker>[-*+]|\d{1,9}[.)])(?:[ \t]+(?P<text>.*))?$"),
    ),
    LinePattern("QUOTE", _p(r"^ {0,3}>[ ]?(?P<text>.*)$")),
    LinePattern("TABLE", _p(r"^ {0,3}\|.*$")),
]

# Podkreślenie nagłówka setext poziomu 1 (poziom 2 to BREAK z samych "-")
SETEXT_H1_RE = _p(r"^ {0,3}=+[ \t]*$")
SETEXT_H2_RE = _p(r"^ {0,3}-+[ \t]*$")

# Wiersz rozdzielający nagłówek tabeli: | --- | :---: |
TABLE_DELIMITER_RE = _p(r"^ {0,3}\|?[ \t]*:?-+:?[ \t]*(?:\|[ \t]*:?-+:?[ \t]*)*\|?[ \t]*$")

# Podział wiersza tabeli na komórki (nie dzielimy po "\|")
TABLE_CELL_SPLIT_RE = _p(r"(?<!\\)\|")


def classify(line: str) -> tuple[LineKind, re.Match[str] | None]:
    """Zwraca (rodzaj, dopasowanie) dla pojedynczej linii."""
    for pattern in PATTERNS:
        m = pattern.regex.match(line)
        if m:
            if pattern.kind == "FENCE" and m.group("fence")[0] == "`" and "`" in m.group("info"):
                # ```x``` w jednej linii to kod inline, nie płot
                continue
            return pattern.kind, m
    return "TEXT", None


def closes_fence(line: str, fence: str) -> bool:
    """Czy linia zamyka płot otwarty ciągiem `fence`."""
    stripped = line.strip()
    if not stripped or stripped[0] != fence[0]:
        return False
    return len(stripped) >= len(fence) and set(stripped) == {fence[0]}
