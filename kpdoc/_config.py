"""Ustawienia kpdoc — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on", "tak"}


@dataclass(frozen=True, slots=True)
class Settings:
    source_dir: pathlib.Path
    out_dir: pathlib.Path
    extensions: tuple[str, ...]
    order_file: str          # nazwa pliku kolejności, względem source_dir
    index_name: str          # ścieżka spisu treści w katalogu wyjściowym
    lang: str
    strict_links: bool


def _extensions(raw: str) -> tuple[str, ...]:
    exts = []
    for part in raw.split(","):
        part = part.strip().lower()
        if part:
            exts.append(part if part.startswith(".") else f".{part}")
    return tuple(exts)


def get_settings() -> Settings:
    return Settings(
        source_dir   = pathlib.Path(os.getenv("KPDOC_SOURCE_DIR", ".")),
        out_dir      = pathlib.Path(os.getenv("KPDOC_OUT_DIR",    "site")),
        extensions   = _extensions(os.getenv("KPDOC_EXTENSIONS",  ".md,.markdown,.html,.htm")),
        order_file   = os.getenv("KPDOC_ORDER_FILE", "toc.txt"),
        index_name   = os.getenv("KPDOC_INDEX_NAME", "toc.html"),
        lang         = os.getenv("KPDOC_LANG",       "en"),
        strict_links = os.getenv("KPDOC_STRICT_LINKS", "0").strip().lower() in _TRUE,
    )
