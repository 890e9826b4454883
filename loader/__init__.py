"""
loader — wczytywanie źródeł tekstowych do niemutowalnych dokumentów.

Interfejs publiczny:
    Source                 — identyfikator + surowe bajty
    load_document          — jedno źródło → Document (MalformedDocumentError)
    load_documents         — lista źródeł → LoadResult (DocumentSet + issues)
    load_directory         — katalog (+ opcjonalny plik kolejności) → LoadResult

Typowe użycie:
    from loader import load_directory

    result = load_directory(Path("docs"), order_file=Path("docs/toc.txt"))
    for issue in result.issues:
        print(issue.code, issue.identifier, issue.message)
"""

from .sources import (
    DEFAULT_EXTENSIONS,
    Source,
    normalize_identifier,
    read_order_file,
    sources_from_directory,
)
from .loader import (
    LoadResult,
    decode_source,
    detect_format,
    infer_title,
    load_directory,
    load_document,
    load_documents,
    order_documents,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "Source",
    "normalize_identifier",
    "read_order_file",
    "sources_from_directory",
    "LoadResult",
    "decode_source",
    "detect_format",
    "infer_title",
    "load_directory",
    "load_document",
    "load_documents",
    "order_documents",
]
