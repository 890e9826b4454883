"""
renderer/build.py — renderowanie całego zbioru i zapis artefaktów.

Publiczne API:
  build_site(load_result, strict_links, index_path, template, lang) -> BuildOutput
  write_artifacts(artifacts, out_dir)                               -> list[Path]

Polityka błędów: błąd jednego dokumentu trafia do raportu jako ERROR,
zepsuty odnośnik (tryb nie-strict) jako WARNING; przebieg zawsze obejmuje
wszystkie dokumenty, a liczniki są podsumowywane w BuildReport. Dwa dokumenty
o tej samej ścieżce wyjściowej (a.md i a.html) to błąd drugiego z nich.
"""

from __future__ import annotations

import pathlib
from dataclasses import dataclass, field

from data_model.errors import DocsetError, ErrorCode
from data_model.report import BuildReport, Issue
from loader.loader import LoadResult

from .html import HtmlRenderer
from .index import DEFAULT_INDEX_PATH, render_index
from .template import DEFAULT_TEMPLATE


@dataclass(slots=True)
class BuildOutput:
    """
    - artifacts: ścieżka wyjściowa (względna, POSIX) → treść HTML
    - report:    podsumowanie przebiegu
    """

    artifacts: dict[str, str] = field(default_factory=dict)
    report: BuildReport = field(default_factory=BuildReport)


def build_site(
    load_result: LoadResult,
    *,
    strict_links: bool = False,
    index_path: str | None = DEFAULT_INDEX_PATH,
    template: str = DEFAULT_TEMPLATE,
    lang: str = "en",
) -> BuildOutput:
    """Renderuje wszystkie dokumenty zbioru (sekwencyjnie) i opcjonalnie spis treści."""
    docset = load_result.docset
    report = BuildReport(
        documents=load_result.sources,
        loaded=len(docset),
        issues=list(load_result.issues),
    )

    # Spis treści nie może nadpisać strony dokumentu
    if index_path is not None:
        for doc in docset:
            if doc.output_path == index_path:
                report.issues.append(Issue(
                    code=ErrorCode.INDEX_COLLISION,
                    identifier=doc.identifier,
                    message=(
                        f"Ścieżka wyjściowa '{doc.output_path}' koliduje ze spisem "
                        f"treści — spis treści nie zostanie wygenerowany."
                    ),
                ))
                index_path = None
                break

    renderer = HtmlRenderer(
        docset,
        strict_links=strict_links,
        template=template,
        index_path=index_path,
        lang=lang,
    )

    artifacts: dict[str, str] = {}
    owners: dict[str, str] = {}   # ścieżka wyjściowa → dokument, który ją zajął
    for doc in docset:
        owner = owners.setdefault(doc.output_path, doc.identifier)
        if owner != doc.identifier:
            report.issues.append(Issue(
                code=ErrorCode.OUTPUT_COLLISION,
                identifier=doc.identifier,
                message=(
                    f"Ścieżka wyjściowa '{doc.output_path}' jest już zajęta przez "
                    f"'{owner}', dokument pominięto."
                ),
            ))
            continue
        try:
            result = renderer.render(doc)
        except DocsetError as e:
            report.issues.append(Issue.from_error(e))
            continue
        artifacts[result.output_path] = result.html
        report.issues.extend(result.issues)
        report.rendered += 1

    if index_path is not None and len(docset):
        artifacts[index_path] = render_index(docset, index_path, template=template, lang=lang)

    return BuildOutput(artifacts=artifacts, report=report)


def write_artifacts(artifacts: dict[str, str], out_dir: pathlib.Path) -> list[pathlib.Path]:
    """Zapisuje artefakty jako pliki UTF-8, tworząc brakujące katalogi."""
    written: list[pathlib.Path] = []
    for rel_path, content in sorted(artifacts.items()):
        path = out_dir / pathlib.PurePosixPath(rel_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written
