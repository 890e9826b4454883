"""
data_model/errors.py — kody błędów i wyjątki przetwarzania zbioru dokumentów.

MalformedDocumentError — źródła nie da się zdekodować / sparsować
    (błąd krytyczny tylko dla tego jednego dokumentu).
BrokenLinkError — cel odnośnika wewnętrznego nie istnieje w zbiorze lub ma
    niedozwolony schemat URL
    (błąd naprawialny: renderer może zdegradować go do ostrzeżenia).
DuplicateDocumentError — identyfikator dokumentu powtarza się w zbiorze.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody zgłoszeń (E_ = błąd, W_ = ostrzeżenie)."""

    MALFORMED_DOCUMENT     = "E_MALFORMED_DOCUMENT"
    BROKEN_LINK            = "E_BROKEN_LINK"
    DUPLICATE_IDENTIFIER   = "E_DUPLICATE_IDENTIFIER"
    INDEX_COLLISION        = "E_INDEX_COLLISION"
    OUTPUT_COLLISION       = "E_OUTPUT_COLLISION"
    ORDER_UNKNOWN_DOCUMENT = "W_ORDER_UNKNOWN_DOCUMENT"
    ORDER_FILE_UNREADABLE  = "W_ORDER_FILE_UNREADABLE"
    MISSING_ANCHOR         = "W_MISSING_ANCHOR"


class DocsetError(ValueError):
    """Bazowy wyjątek: zawsze związany z identyfikatorem dokumentu."""

    code: ErrorCode

    def __init__(self, identifier: str, message: str) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.message = message


class MalformedDocumentError(DocsetError):
    code = ErrorCode.MALFORMED_DOCUMENT

    def __init__(self, identifier: str, reason: str, line: int | None = None) -> None:
        where = f" (linia {line})" if line is not None else ""
        super().__init__(identifier, f"{identifier}: {reason}{where}")
        self.reason = reason
        self.line = line


class BrokenLinkError(DocsetError):
    code = ErrorCode.BROKEN_LINK

    def __init__(self, identifier: str, target: str, reason: str | None = None) -> None:
        detail = reason or "odnośnik do nieistniejącego dokumentu"
        super().__init__(identifier, f"{identifier}: {detail} '{target}'")
        self.target = target
        self.reason = reason


class DuplicateDocumentError(DocsetError):
    code = ErrorCode.DUPLICATE_IDENTIFIER

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier, f"Zduplikowany identyfikator dokumentu: '{identifier}'")
