"""
renderer — renderowanie dokumentów do HTML.

Interfejs publiczny:
    HtmlRenderer, RenderResult — strona jednego dokumentu
    resolve_link, ResolvedLink — rozwiązywanie odnośników między dokumentami
    render_index               — spis treści
    build_site, BuildOutput    — cały zbiór + raport
    write_artifacts            — zapis na dysk

Typowe użycie:
    from loader import load_directory
    from renderer import build_site, write_artifacts

    output = build_site(load_directory(Path("docs")))
    write_artifacts(output.artifacts, Path("site"))
    raise SystemExit(output.report.exit_code())
"""

from .links import ResolvedLink, is_external, relative_href, resolve_link
from .template import DEFAULT_TEMPLATE, escape_attr, escape_text, fill_template, load_template
from .html import HtmlRenderer, RenderResult
from .index import DEFAULT_INDEX_PATH, render_index, render_index_body
from .build import BuildOutput, build_site, write_artifacts

__all__ = [
    "ResolvedLink",
    "is_external",
    "relative_href",
    "resolve_link",
    "DEFAULT_TEMPLATE",
    "escape_attr",
    "escape_text",
    "fill_template",
    "load_template",
    "HtmlRenderer",
    "RenderResult",
    "DEFAULT_INDEX_PATH",
    "render_index",
    "render_index_body",
    "BuildOutput",
    "build_site",
    "write_artifacts",
]
