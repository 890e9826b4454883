"""
markup/parser.py — parsowanie źródła Markdown do krotki bloków.

Architektura:
  tekst → normalize_newlines() → linie
  → classify() (patterns.PATTERNS) → rodzaj linii
  → _BlockParser: maszyna stanów po liniach (akapit otwarty / zamknięty)
  → tuple[Block, ...]

Kluczowe funkcje publiczne:
  parse_markdown(text, identifier) -> tuple[Block, ...]

Niezamknięty blok kodu to błąd MalformedDocumentError (z numerem linii
otwierającego płotu) — reszty dokumentu nie da się wtedy jednoznacznie
zinterpretować.
"""

from __future__ import annotations

import re

from data_model.documents import (
    Block,
    CodeBlock,
    Heading,
    Link,
    ListItem,
    Paragraph,
    Quote,
    Spans,
    Table,
    ThematicBreak,
    plain_text,
)
from data_model.errors import MalformedDocumentError
from markup.inline import parse_inline
from markup.patterns import (
    SETEXT_H1_RE,
    SETEXT_H2_RE,
    TABLE_CELL_SPLIT_RE,
    TABLE_DELIMITER_RE,
    classify,
    closes_fence,
)
from markup.text import AnchorRegistry, join_lines, normalize_newlines

# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_markdown(text: str, identifier: str = "") -> tuple[Block, ...]:
    """
    Parsuje tekst Markdown i zwraca bloki w kolejności dokumentu.

    Args:
        text:       Treść źródła (dowolne końce linii).
        identifier: Identyfikator dokumentu (tylko do komunikatów błędów).

    Raises:
        MalformedDocumentError: niezamknięty blok kodu.
    """
    lines = normalize_newlines(text).split("\n")
    return _BlockParser(lines, identifier).parse()


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _strip_indent(line: str, width: int) -> str:
    """Usuwa co najwyżej `width` spacji z początku linii."""
    n = 0
    while n < width and n < len(line) and line[n] == " ":
        n += 1
    return line[n:]


def _table_cells(line: str) -> tuple[Spans, ...]:
    s = line.strip()
    if s.startswith("|"):
        s = s[1:]
    if s.endswith("|") and not s.endswith("\\|"):
        s = s[:-1]
    return tuple(parse_inline(cell.strip()) for cell in TABLE_CELL_SPLIT_RE.split(s))


class _BlockParser:
    def __init__(self, lines: list[str], identifier: str) -> None:
        self._lines = lines
        self._identifier = identifier
        self._blocks: list[Block] = []
        self._paragraph: list[str] = []
        self._anchors = AnchorRegistry()

    def parse(self) -> tuple[Block, ...]:
        lines = self._lines
        i = 0
        while i < len(lines):
            line = lines[i]
            kind, m = classify(line)

            # Podkreślenie setext zamienia otwarty akapit w nagłówek
            if self._paragraph and kind != "BLANK":
                if SETEXT_H1_RE.match(line):
                    self._setext_heading(1)
                    i += 1
                    continue
                if SETEXT_H2_RE.match(line):
                    self._setext_heading(2)
                    i += 1
                    continue

            if kind == "BLANK":
                self._flush_paragraph()
                i += 1
            elif kind == "FENCE":
                self._flush_paragraph()
                i = self._fenced_code(i, m)
            elif kind == "HEADING":
                self._flush_paragraph()
                self._heading(len(m.group("hashes")), m.group("text") or "")
                i += 1
            elif kind == "BREAK":
                self._flush_paragraph()
                self._blocks.append(ThematicBreak())
                i += 1
            elif kind == "LIST":
                self._flush_paragraph()
                i = self._list_item(i, m)
            elif kind == "QUOTE":
                self._flush_paragraph()
                i = self._quote(i)
            elif kind == "TABLE" and i + 1 < len(lines) and TABLE_DELIMITER_RE.match(lines[i + 1]):
                self._flush_paragraph()
                i = self._table(i)
            else:
                self._paragraph.append(line)
                i += 1

        self._flush_paragraph()
        return tuple(self._blocks)

    # ------------------------------------------------------------------
    # Akapity i nagłówki
    # ------------------------------------------------------------------

    def _flush_paragraph(self) -> None:
        if not self._paragraph:
            return
        spans = parse_inline(join_lines(self._paragraph))
        self._paragraph = []
        if len(spans) == 1 and isinstance(spans[0], Link):
            self._blocks.append(spans[0])
        elif spans:
            self._blocks.append(Paragraph(spans))

    def _heading(self, level: int, raw: str) -> None:
        spans = parse_inline(raw.strip())
        anchor = self._anchors.make(plain_text(spans))
        self._blocks.append(Heading(level=level, spans=spans, anchor=anchor))

    def _setext_heading(self, level: int) -> None:
        raw = join_lines(self._paragraph)
        self._paragraph = []
        self._heading(level, raw)

    # ------------------------------------------------------------------
    # Bloki wieloliniowe
    # ------------------------------------------------------------------

    def _fenced_code(self, start: int, m: re.Match[str]) -> int:
        indent = len(m.group("indent"))
        fence = m.group("fence")
        info = m.group("info").split()
        language = info[0] if info else ""

        body: list[str] = []
        i = start + 1
        while i < len(self._lines):
            line = self._lines[i]
            if closes_fence(line, fence):
                self._blocks.append(CodeBlock(language=language, text="\n".join(body)))
                return i + 1
            body.append(_strip_indent(line, indent))
            i += 1

        raise MalformedDocumentError(
            self._identifier,
            f"niezamknięty blok kodu '{fence}'",
            line=start + 1,
        )

    def _list_item(self, start: int, m: re.Match[str]) -> int:
        indent = len(m.group("indent").expandtabs(4))
        marker = m.group("marker")
        ordered = marker[-1] in ".)" and marker[:-1].isdigit()

        parts = [m.group("text") or ""]
        i = start + 1
        # Linie kontynuacji: zwykły tekst bez pustej linii pomiędzy
        while i < len(self._lines) and classify(self._lines[i])[0] == "TEXT":
            parts.append(self._lines[i])
            i += 1

        self._blocks.append(ListItem(
            spans=parse_inline(join_lines(parts)),
            ordered=ordered,
            depth=indent // 2,
            number=int(marker[:-1]) if ordered else None,
        ))
        return i

    def _quote(self, start: int) -> int:
        parts: list[str] = []
        i = start
        while i < len(self._lines):
            kind, m = classify(self._lines[i])
            if kind == "QUOTE":
                parts.append(m.group("text"))
            elif kind == "TEXT" and parts and parts[-1].strip():
                parts.append(self._lines[i])  # leniwa kontynuacja
            else:
                break
            i += 1

        self._blocks.append(Quote(parse_inline(join_lines(parts))))
        return i

    def _table(self, start: int) -> int:
        header = _table_cells(self._lines[start])
        width = len(header)
        rows: list[tuple[Spans, ...]] = []

        i = start + 2  # pomijamy wiersz rozdzielający
        while i < len(self._lines) and classify(self._lines[i])[0] == "TABLE":
            cells = _table_cells(self._lines[i])
            # Wyrównaj do szerokości nagłówka
            cells = (cells + ((),) * width)[:width]
            rows.append(cells)
            i += 1

        self._blocks.append(Table(header=header, rows=tuple(rows)))
        return i
