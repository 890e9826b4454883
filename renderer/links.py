"""
renderer/links.py — rozwiązywanie odnośników między dokumentami.

Reguły:
  - cel zewnętrzny (http, https, ftp, mailto, "//host") → bez zmian
  - inny schemat (javascript:, data: …) → BrokenLinkError
  - sam fragment ("#kotwica") → bez zmian
  - cel wewnętrzny → ścieżka względem katalogu dokumentu źródłowego,
    normalizowana i szukana w zbiorze: najpierw po identyfikatorze
    ("basics.md"), potem po ścieżce wyjściowej ("basics.html", "basics")
  - brak celu w zbiorze → BrokenLinkError
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from data_model.documents import Document, DocumentSet, output_path_for
from data_model.errors import BrokenLinkError


# Schematy przepuszczane jako odnośniki zewnętrzne; pozostałe (javascript:,
# data:, vbscript: …) są traktowane jak zepsuty odnośnik
SAFE_SCHEMES = frozenset({"http", "https", "ftp", "mailto"})


@dataclass(frozen=True, slots=True)
class ResolvedLink:
    href: str
    external: bool = False
    identifier: str | None = None   # dokument docelowy (dla wewnętrznych)


def url_scheme(target: str) -> str:
    return urlsplit(target.strip()).scheme.lower()


def is_external(target: str) -> bool:
    """Bezpieczny odnośnik zewnętrzny: dozwolony schemat albo "//host"."""
    if target.strip().startswith("//"):
        return True
    return url_scheme(target) in SAFE_SCHEMES


def relative_href(from_output: str, to_output: str) -> str:
    """Ścieżka do `to_output` widziana z pliku `from_output` (oba względem katalogu wyjściowego)."""
    return posixpath.relpath(to_output, posixpath.dirname(from_output) or ".")


def _find_target(docset: DocumentSet, identifier: str) -> Document | None:
    doc = docset.get(identifier)
    if doc is not None:
        return doc
    wanted = output_path_for(identifier)
    for candidate in docset:
        if candidate.output_path == wanted:
            return candidate
    return None


def resolve_link(docset: DocumentSet, source_id: str, target: str) -> ResolvedLink:
    """
    Rozwiązuje cel odnośnika z dokumentu `source_id`.

    Raises:
        BrokenLinkError: wewnętrzny cel nie istnieje w zbiorze (lub jest pusty)
            albo cel ma niedozwolony schemat URL.
    """
    target = target.strip()
    if is_external(target):
        return ResolvedLink(href=target, external=True)
    scheme = url_scheme(target)
    if scheme:
        raise BrokenLinkError(
            source_id, target, reason=f"niedozwolony schemat URL ({scheme}:) w odnośniku",
        )

    parts = urlsplit(target)
    path, fragment = unquote(parts.path), parts.fragment
    if not path:
        if fragment:
            return ResolvedLink(href=f"#{fragment}", identifier=source_id)
        raise BrokenLinkError(source_id, target)

    identifier = posixpath.normpath(posixpath.join(posixpath.dirname(source_id), path))
    doc = None if identifier.startswith("../") else _find_target(docset, identifier)
    if doc is None:
        raise BrokenLinkError(source_id, target)

    href = relative_href(output_path_for(source_id), doc.output_path)
    if fragment:
        href += f"#{fragment}"
    return ResolvedLink(href=href, identifier=doc.identifier)
