"""
loader/loader.py — budowanie dokumentów i zbioru dokumentów ze źródeł.

Publiczne API:
  load_document(source)                               -> Document
  load_documents(sources, order)                      -> LoadResult
  load_directory(root, extensions, order_file, exclude, require_order_file) -> LoadResult
  order_documents(documents, order)                   -> (list[Document], list[Issue])

Błąd jednego źródła (MalformedDocumentError, duplikat identyfikatora) jest
izolowany: trafia do LoadResult.issues, pozostałe źródła są przetwarzane dalej.
"""

from __future__ import annotations

import pathlib
import posixpath
from dataclasses import dataclass, field

from data_model.documents import Block, Document, DocumentSet, Heading, SourceFormat
from data_model.errors import DocsetError, DuplicateDocumentError, ErrorCode, MalformedDocumentError
from data_model.report import Issue, Severity
from html_parser.parser import parse_html
from markup.parser import parse_markdown

from .sources import DEFAULT_EXTENSIONS, Source, read_order_file, sources_from_directory

_HTML_SUFFIXES = {".html", ".htm"}


# ---------------------------------------------------------------------------
# Jeden dokument
# ---------------------------------------------------------------------------

def detect_format(identifier: str) -> SourceFormat:
    ext = posixpath.splitext(identifier)[1].lower()
    return SourceFormat.HTML if ext in _HTML_SUFFIXES else SourceFormat.MARKDOWN


def infer_title(blocks: tuple[Block, ...], identifier: str) -> str:
    """Tytuł = tekst pierwszego nagłówka; w braku — nazwa pliku bez rozszerzenia."""
    for block in blocks:
        if isinstance(block, Heading) and block.text.strip():
            return block.text.strip()
    return posixpath.splitext(posixpath.basename(identifier))[0]


def decode_source(source: Source) -> str:
    """Dekoduje bajty źródła jako UTF-8 (BOM dopuszczalny)."""
    if source.read_error:
        raise MalformedDocumentError(
            source.identifier,
            f"nie można odczytać pliku ({source.read_error})",
        )
    try:
        text = source.data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(
            source.identifier,
            f"niepoprawne UTF-8 (bajt {e.start})",
        ) from e
    if "\x00" in text:
        raise MalformedDocumentError(source.identifier, "plik binarny (bajt NUL)")
    return text


def load_document(source: Source) -> Document:
    """
    Tworzy Document z pojedynczego źródła.

    Raises:
        MalformedDocumentError: źródło nie jest tekstem lub znaczniki są uszkodzone.
    """
    text = decode_source(source)
    fmt = detect_format(source.identifier)
    if fmt is SourceFormat.HTML:
        blocks = parse_html(text, source.identifier)
    else:
        blocks = parse_markdown(text, source.identifier)

    return Document(
        identifier=source.identifier,
        source_path=source.path,
        text=text,
        blocks=blocks,
        title=infer_title(blocks, source.identifier),
        format=fmt,
    )


# ---------------------------------------------------------------------------
# Zbiór dokumentów
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class LoadResult:
    """
    - docset:  poprawnie wczytane dokumenty z łańcuchem nawigacji
    - issues:  błędy źródeł i ostrzeżenia kolejności
    - sources: liczba źródeł wejściowych (także tych odrzuconych)
    """

    docset: DocumentSet
    issues: list[Issue] = field(default_factory=list)
    sources: int = 0


def order_documents(
    documents: list[Document],
    order: list[str] | None = None,
) -> tuple[list[Document], list[Issue]]:
    """
    Ustala kolejność dokumentów: najpierw wymienione w `order` (w tej
    kolejności), potem pozostałe posortowane po identyfikatorze.
    """
    by_id = {d.identifier: d for d in documents}
    issues: list[Issue] = []
    ordered: list[Document] = []
    placed: set[str] = set()

    for ident in order or []:
        doc = by_id.get(ident)
        if doc is None:
            issues.append(Issue(
                code=ErrorCode.ORDER_UNKNOWN_DOCUMENT,
                identifier=ident,
                message=f"Plik kolejności wymienia nieznany dokument '{ident}'",
                severity=Severity.WARNING,
            ))
            continue
        if ident not in placed:
            ordered.append(doc)
            placed.add(ident)

    ordered.extend(sorted(
        (d for d in documents if d.identifier not in placed),
        key=lambda d: d.identifier,
    ))
    return ordered, issues


def load_documents(sources: list[Source], order: list[str] | None = None) -> LoadResult:
    """Jeden Document na źródło; błędy pojedynczych źródeł nie przerywają ładowania."""
    documents: list[Document] = []
    seen: set[str] = set()
    issues: list[Issue] = []

    for source in sources:
        try:
            if source.identifier in seen:
                raise DuplicateDocumentError(source.identifier)
            doc = load_document(source)
        except DocsetError as e:
            issues.append(Issue.from_error(e))
            continue
        seen.add(doc.identifier)
        documents.append(doc)

    ordered, order_issues = order_documents(documents, order)
    issues.extend(order_issues)
    return LoadResult(
        docset=DocumentSet.chain(ordered),
        issues=issues,
        sources=len(sources),
    )


def _read_order(order_file: pathlib.Path) -> tuple[list[str] | None, list[Issue]]:
    """Plik kolejności → (kolejność, zgłoszenia); nieczytelny plik jest pomijany."""
    try:
        return read_order_file(order_file), []
    except (OSError, UnicodeDecodeError) as e:
        reason = "niepoprawne UTF-8" if isinstance(e, UnicodeDecodeError) else (e.strerror or str(e))
        return None, [Issue(
            code=ErrorCode.ORDER_FILE_UNREADABLE,
            identifier=order_file.name,
            message=(
                f"Nie można odczytać pliku kolejności '{order_file}' ({reason}); "
                f"dokumenty w kolejności alfabetycznej."
            ),
            severity=Severity.WARNING,
        )]


def load_directory(
    root: pathlib.Path,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    order_file: pathlib.Path | None = None,
    exclude: tuple[pathlib.Path, ...] = (),
    require_order_file: bool = False,
) -> LoadResult:
    """
    Wczytuje katalog źródeł. `order_file` ustala kolejność nawigacji; sam
    plik kolejności nie jest dokumentem.

    Brak pliku kolejności jest pomijany po cichu, chyba że
    require_order_file=True (plik podany jawnie): wtedy, tak jak plik
    nieczytelny, daje ostrzeżenie W_ORDER_FILE_UNREADABLE.

    Raises:
        FileNotFoundError: brak katalogu `root`.
    """
    sources = sources_from_directory(root, extensions, exclude=exclude)

    order: list[str] | None = None
    order_issues: list[Issue] = []
    if order_file is not None and (require_order_file or order_file.exists()):
        order, order_issues = _read_order(order_file)

    result = load_documents(sources, order)
    result.issues.extend(order_issues)
    return result
