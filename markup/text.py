"""
markup/text.py — normalizacja tekstu źródłowego i identyfikatory kotwic.

Co robimy:
  - Ujednolicenie końców linii (\\r\\n, \\r → \\n) przed parsowaniem
  - Scalanie linii akapitu (obcięcie wcięć, bez zmiany treści)
  - Slugi nagłówków do atrybutu id (ASCII, małe litery, myślniki)

Czego NIE robimy: nie dotykamy treści bloków kodu poza końcami linii.
"""

from __future__ import annotations

import re
import unicodedata

_NEWLINE_RE = re.compile(r"\r\n?")


def normalize_newlines(text: str) -> str:
    return _NEWLINE_RE.sub("\n", text)


def join_lines(lines: list[str]) -> str:
    """Scala linie akapitu: obcina białe znaki na brzegach, łączy przez \\n."""
    return "\n".join(line.strip() for line in lines).strip()


def slugify(text: str, max_len: int = 80) -> str:
    """Zamień tekst nagłówka na bezpieczny identyfikator ASCII."""
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\s-]", "", text).strip().lower()
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"-{2,}", "-", text)
    return text[:max_len].strip("-") or "section"


class AnchorRegistry:
    """
    Wydaje unikalne w obrębie dokumentu kotwice: tytul, tytul-1, tytul-2 …

    make(title)    — slug z tytułu nagłówka
    reserve(id)    — jawny id (np. atrybut id w HTML); zajęty dostaje sufiks
    """

    def __init__(self) -> None:
        self._used: set[str] = set()
        self._next: dict[str, int] = {}

    def make(self, title: str) -> str:
        return self._unique(slugify(title))

    def reserve(self, anchor: str) -> str:
        return self._unique(anchor.strip() or "section")

    def _unique(self, base: str) -> str:
        anchor = base
        n = self._next.get(base, 1)
        # "a-1" mogło już paść jako osobny tytuł lub jawny id
        while anchor in self._used:
            anchor = f"{base}-{n}"
            n += 1
        self._next[base] = n
        self._used.add(anchor)
        return anchor
