"""
loader/sources.py — surowe źródła dokumentów (identyfikator + bajty).

Publiczne API:
  Source(identifier, data, path)                 — jedno źródło
  normalize_identifier(raw)                      -> str
  sources_from_directory(root, extensions)       -> list[Source]
  read_order_file(path)                          -> list[str]
"""

from __future__ import annotations

import pathlib
import posixpath
from dataclasses import dataclass

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".markdown", ".html", ".htm")


def normalize_identifier(raw: str) -> str:
    """
    Normalizuje identyfikator do względnej ścieżki POSIX.

    'docs\\\\basics.md' → 'docs/basics.md', './a/../b.md' → 'b.md'.
    Odrzuca (ValueError) identyfikatory puste, absolutne i wychodzące poza katalog.
    """
    ident = raw.replace("\\", "/").strip()
    if not ident:
        raise ValueError("Pusty identyfikator dokumentu.")
    if ident.startswith("/"):
        raise ValueError(f"Identyfikator dokumentu musi być względny: '{raw}'")
    ident = posixpath.normpath(ident)
    if ident == ".." or ident.startswith("../"):
        raise ValueError(f"Identyfikator dokumentu wychodzi poza katalog: '{raw}'")
    return ident


@dataclass(frozen=True, slots=True)
class Source:
    identifier: str
    data: bytes
    path: str = ""         # skąd pochodzą bajty (do komunikatów)
    read_error: str = ""   # niepusty, gdy pliku nie dało się odczytać

    def __post_init__(self) -> None:
        object.__setattr__(self, "identifier", normalize_identifier(self.identifier))
        if not self.path:
            object.__setattr__(self, "path", self.identifier)

    @classmethod
    def from_text(cls, identifier: str, text: str) -> Source:
        return cls(identifier=identifier, data=text.encode("utf-8"))


def sources_from_directory(
    root: pathlib.Path,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    exclude: tuple[pathlib.Path, ...] = (),
) -> list[Source]:
    """
    Wczytuje (jednorazowo, sekwencyjnie) wszystkie pliki o podanych
    rozszerzeniach z katalogu `root`, rekurencyjnie, w kolejności ścieżek.

    Identyfikatorem jest ścieżka względem `root`. Katalogi z `exclude`
    (np. katalog wyjściowy leżący wewnątrz `root`) są pomijane.
    """
    if not root.is_dir():
        raise FileNotFoundError(f"Brak katalogu źródłowego: {root}")

    exts = {e.lower() for e in extensions}
    excluded = [e.resolve() for e in exclude]
    paths = sorted(
        p for p in root.rglob("*")
        if p.is_file()
        and p.suffix.lower() in exts
        and not any(p.resolve().is_relative_to(e) for e in excluded)
    )
    sources: list[Source] = []
    for p in paths:
        identifier = p.relative_to(root).as_posix()
        try:
            data = p.read_bytes()
        except OSError as e:
            # Źródło zostaje w wyniku; load_document zgłosi je jako uszkodzone
            sources.append(Source(identifier, b"", str(p), read_error=e.strerror or str(e)))
            continue
        sources.append(Source(identifier, data, str(p)))
    return sources


def read_order_file(path: pathlib.Path) -> list[str]:
    """
    Wczytuje plik kolejności dokumentów.

    Oczekiwany format (jeden identyfikator na linię)::

        # Podstawy
        getting-started.md
        basic-syntax.md

    Puste linie i komentarze (#) są pomijane. Wpis, który nie jest poprawnym
    identyfikatorem ("/a.md", "../x.md"), zostaje dosłownie: order_documents
    zgłosi go jako nieznany dokument.

    Raises:
        OSError:            pliku nie da się odczytać.
        UnicodeDecodeError: plik nie jest w UTF-8.
    """
    order: list[str] = []
    for line in path.read_text(encoding="utf-8-sig").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            order.append(normalize_identifier(line))
        except ValueError:
            order.append(line)
    return order
