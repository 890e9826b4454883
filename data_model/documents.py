"""
data_model/documents.py — model dokumentu: spany inline, bloki, Document, DocumentSet.

Document odpowiada jednej stronie dokumentacji; jego treść to uporządkowana
krotka bloków (Block). Zbiór dokumentów z łańcuchem nawigacji (prev/next)
tworzy DocumentSet.

Wszystkie struktury są niemutowalne (frozen) — tworzone raz, przy ładowaniu.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from .errors import DuplicateDocumentError

# Rozszerzenia plików źródłowych zamieniane na .html w ścieżce wyjściowej
_SOURCE_SUFFIXES = (".md", ".markdown", ".html", ".htm")


# ---------------------------------------------------------------------------
# Spany inline
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Text:
    text: str


@dataclass(frozen=True, slots=True)
class Code:
    text: str            # dosłowna treść `kodu` (bez backticków)


@dataclass(frozen=True, slots=True)
class Emphasis:
    spans: Spans         # treść może zawierać kod i odnośniki

    @property
    def text(self) -> str:
        return plain_text(self.spans)


@dataclass(frozen=True, slots=True)
class Strong:
    spans: Spans

    @property
    def text(self) -> str:
        return plain_text(self.spans)


@dataclass(frozen=True, slots=True)
class Link:
    """
    Odnośnik: tekst wyświetlany + cel.

    - target: ścieżka względna do innego dokumentu ("basics.md#zmienne"),
              sam fragment ("#zmienne") albo zewnętrzny URL.

    Używany zarówno jako span inline, jak i jako samodzielny blok
    (akapit składający się wyłącznie z jednego odnośnika).
    """
    text: str
    target: str


Inline = Text | Code | Emphasis | Strong | Link
Spans = tuple[Inline, ...]


def plain_text(spans: Spans) -> str:
    """Tekst wyświetlany spanów, bez formatowania."""
    return "".join(s.text for s in spans)


def iter_spans(spans: Spans) -> Iterator[Inline]:
    """Spany w kolejności, razem z zagnieżdżonymi w Emphasis/Strong."""
    for span in spans:
        yield span
        if isinstance(span, (Emphasis, Strong)):
            yield from iter_spans(span.spans)


# ---------------------------------------------------------------------------
# Bloki
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Heading:
    level: int           # 1..6
    spans: Spans
    anchor: str          # unikalny w obrębie dokumentu slug (id w HTML)

    @property
    def text(self) -> str:
        return plain_text(self.spans)


@dataclass(frozen=True, slots=True)
class Paragraph:
    spans: Spans


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """
    Blok kodu. Treść nigdy nie jest interpretowana ani wykonywana —
    przechowywana i emitowana bajt w bajt.
    """
    language: str        # "" gdy brak info stringa
    text: str


@dataclass(frozen=True, slots=True)
class ListItem:
    spans: Spans
    ordered: bool
    depth: int = 0       # 0 = najwyższy poziom listy
    number: int | None = None


@dataclass(frozen=True, slots=True)
class Table:
    header: tuple[Spans, ...]
    rows: tuple[tuple[Spans, ...], ...]


@dataclass(frozen=True, slots=True)
class Quote:
    spans: Spans


@dataclass(frozen=True, slots=True)
class ThematicBreak:
    pass


Block = Heading | Paragraph | CodeBlock | Link | ListItem | Table | Quote | ThematicBreak


def block_spans(block: Block) -> Iterator[Inline]:
    """Wszystkie spany inline bloku (w tym komórki tabel i zagnieżdżone), w kolejności."""
    match block:
        case Heading(spans=spans) | Paragraph(spans=spans) | ListItem(spans=spans) | Quote(spans=spans):
            yield from iter_spans(spans)
        case Table(header=header, rows=rows):
            for cell in header:
                yield from iter_spans(cell)
            for row in rows:
                for cell in row:
                    yield from iter_spans(cell)
        case _:
            return


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class SourceFormat(StrEnum):
    MARKDOWN = "markdown"
    HTML     = "html"


def output_path_for(identifier: str) -> str:
    """'basics/syntax.md' → 'basics/syntax.html'."""
    root, ext = posixpath.splitext(identifier)
    if ext.lower() in _SOURCE_SUFFIXES:
        return root + ".html"
    return identifier + ".html"


@dataclass(frozen=True, slots=True)
class Document:
    identifier: str      # względna ścieżka POSIX, unikalna w zbiorze
    source_path: str     # skąd wczytano (ścieżka pliku lub opis źródła)
    text: str            # surowa treść po dekodowaniu
    blocks: tuple[Block, ...]
    title: str
    format: SourceFormat = SourceFormat.MARKDOWN

    @property
    def output_path(self) -> str:
        return output_path_for(self.identifier)

    def headings(self) -> list[Heading]:
        return [b for b in self.blocks if isinstance(b, Heading)]

    def iter_links(self) -> Iterator[Link]:
        """Wszystkie odnośniki dokumentu — blokowe i inline — w kolejności."""
        for block in self.blocks:
            if isinstance(block, Link):
                yield block
                continue
            for span in block_spans(block):
                if isinstance(span, Link):
                    yield span


# ---------------------------------------------------------------------------
# Nawigacja i zbiór dokumentów
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NavigationEdge:
    """Para kolejnych dokumentów w łańcuchu nawigacji (prev → next)."""
    previous: str
    next: str


@dataclass(frozen=True, slots=True)
class DocumentSet:
    """
    Uporządkowany zbiór dokumentów + liniowy łańcuch nawigacji.

    Kolejność `documents` wyznacza kolejność spisu treści; `edges` łączą
    sąsiednie dokumenty w tej kolejności.
    """
    documents: tuple[Document, ...] = ()
    edges: tuple[NavigationEdge, ...] = ()
    _by_id: dict[str, Document] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_id: dict[str, Document] = {}
        for doc in self.documents:
            if doc.identifier in by_id:
                raise DuplicateDocumentError(doc.identifier)
            by_id[doc.identifier] = doc
        object.__setattr__(self, "_by_id", by_id)

    @classmethod
    def chain(cls, documents: list[Document] | tuple[Document, ...]) -> DocumentSet:
        """Buduje zbiór z krawędziami nawigacji wynikającymi z kolejności."""
        docs = tuple(documents)
        edges = tuple(
            NavigationEdge(previous=a.identifier, next=b.identifier)
            for a, b in zip(docs, docs[1:])
        )
        return cls(documents=docs, edges=edges)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def get(self, identifier: str) -> Document | None:
        return self._by_id.get(identifier)

    @property
    def identifiers(self) -> list[str]:
        return [d.identifier for d in self.documents]

    def previous_of(self, identifier: str) -> Document | None:
        for edge in self.edges:
            if edge.next == identifier:
                return self._by_id.get(edge.previous)
        return None

    def next_of(self, identifier: str) -> Document | None:
        for edge in self.edges:
            if edge.previous == identifier:
                return self._by_id.get(edge.next)
        return None
