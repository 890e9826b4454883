"""
validator/link_checker.py — walidacja odnośników całego zbioru bez renderowania.

Etapy (dla każdego odnośnika każdego dokumentu):
  A — rozwiązanie celu w zbiorze (resolve_link) → E_BROKEN_LINK
  B — istnienie kotwicy (#fragment) wśród nagłówków celu → W_MISSING_ANCHOR

Odnośniki zewnętrzne nie są sprawdzane (brak dostępu do sieci).
"""

from __future__ import annotations

from urllib.parse import unquote, urlsplit

from data_model.documents import Document, DocumentSet
from data_model.errors import BrokenLinkError, ErrorCode
from data_model.report import Issue, Severity
from renderer.links import resolve_link


def _anchors(doc: Document) -> set[str]:
    return {h.anchor for h in doc.headings()}


def check_document(docset: DocumentSet, doc: Document) -> list[Issue]:
    """Zgłoszenia dla odnośników jednego dokumentu, w kolejności wystąpienia."""
    issues: list[Issue] = []
    for link in doc.iter_links():
        # A — cel
        try:
            resolved = resolve_link(docset, doc.identifier, link.target)
        except BrokenLinkError as e:
            issues.append(Issue.from_error(e))
            continue
        if resolved.external or resolved.identifier is None:
            continue

        # B — kotwica
        fragment = unquote(urlsplit(link.target.strip()).fragment)
        if not fragment:
            continue
        target_doc = docset.get(resolved.identifier)
        if target_doc is not None and fragment not in _anchors(target_doc):
            issues.append(Issue(
                code=ErrorCode.MISSING_ANCHOR,
                identifier=doc.identifier,
                message=(
                    f"{doc.identifier}: kotwica '#{fragment}' nie istnieje "
                    f"w dokumencie '{target_doc.identifier}'"
                ),
                severity=Severity.WARNING,
            ))
    return issues


def check_links(docset: DocumentSet) -> list[Issue]:
    """Wszystkie problemy z odnośnikami w zbiorze (dokumenty w kolejności nawigacji)."""
    issues: list[Issue] = []
    for doc in docset:
        issues.extend(check_document(docset, doc))
    return issues
