"""renderer/index.py — spis treści zbioru dokumentów (kolejność nawigacji)."""

from __future__ import annotations

import posixpath

from data_model.documents import DocumentSet

from .links import relative_href
from .template import DEFAULT_TEMPLATE, escape_attr, escape_text, fill_template

DEFAULT_INDEX_PATH = "toc.html"
_INDEX_TITLE = "Contents"
_SUBSECTION_LEVEL = 2   # nagłówki tego poziomu trafiają do spisu jako podpunkty


def render_index_body(docset: DocumentSet, index_path: str = DEFAULT_INDEX_PATH) -> str:
    out = [f"<h1>{_INDEX_TITLE}</h1>", '<ol class="toc">']
    for doc in docset:
        href = relative_href(index_path, doc.output_path)
        out.append(f'<li><a href="{escape_attr(href)}">{escape_text(doc.title)}</a>')
        sections = [h for h in doc.headings() if h.level == _SUBSECTION_LEVEL]
        if sections:
            out.append("<ul>")
            for h in sections:
                out.append(
                    f'<li><a href="{escape_attr(href)}#{escape_attr(h.anchor)}">'
                    f"{escape_text(h.text)}</a></li>"
                )
            out.append("</ul>")
        out.append("</li>")
    out.append("</ol>")
    return "\n".join(out)


def render_index(
    docset: DocumentSet,
    index_path: str = DEFAULT_INDEX_PATH,
    template: str = DEFAULT_TEMPLATE,
    lang: str = "en",
) -> str:
    """Pełna strona spisu treści; zawsze deterministyczna dla danego zbioru."""
    return fill_template(template, {
        "TITLE": _INDEX_TITLE,
        "LANG":  escape_attr(lang),
        "NAV":   "",
        "BODY":  render_index_body(docset, index_path),
        "INDEX": escape_attr(posixpath.basename(index_path)),
    })
