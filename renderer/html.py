"""
renderer/html.py — renderowanie dokumentu do strony HTML.

Architektura:
  Document → bloki → _block() (listy grupowane w _list()) → treść <main>
  + nawigacja prev/next z DocumentSet.edges
  → fill_template() → RenderResult

Renderowanie jest funkcją czystą: ten sam Document i ten sam DocumentSet
dają bajtowo identyczny wynik; ostrzeżenia zbierane są lokalnie dla
każdego wywołania render().

Kluczowe klasy publiczne:
  HtmlRenderer(docset, strict_links, template, index_path, lang)
  RenderResult(identifier, output_path, html, issues)
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model.documents import (
    Block,
    Code,
    CodeBlock,
    Document,
    DocumentSet,
    Emphasis,
    Heading,
    Link,
    ListItem,
    Paragraph,
    Quote,
    Spans,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from data_model.errors import BrokenLinkError
from data_model.report import Issue, Severity

from .links import relative_href, resolve_link
from .template import DEFAULT_TEMPLATE, escape_attr, escape_text, fill_template


@dataclass(frozen=True, slots=True)
class RenderResult:
    identifier: str
    output_path: str
    html: str
    issues: tuple[Issue, ...] = ()


class HtmlRenderer:
    """
    Renderer HTML dla dokumentów jednego zbioru.

    Użycie:
        renderer = HtmlRenderer(docset)
        result   = renderer.render(docset.get("basics.md"))

    strict_links=True: BrokenLinkError przerywa renderowanie dokumentu;
    domyślnie zepsuty odnośnik staje się nieaktywnym <a> + ostrzeżeniem.
    """

    def __init__(
        self,
        docset: DocumentSet,
        *,
        strict_links: bool = False,
        template: str = DEFAULT_TEMPLATE,
        index_path: str | None = None,
        lang: str = "en",
    ) -> None:
        self._docset = docset
        self._strict_links = strict_links
        self._template = template
        self._index_path = index_path
        self._lang = lang

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def render(self, document: Document) -> RenderResult:
        """
        Renderuje pełną stronę dokumentu.

        Raises:
            BrokenLinkError: tylko przy strict_links=True.
        """
        issues: list[Issue] = []
        body = self.render_body(document, issues)
        index_href = (
            relative_href(document.output_path, self._index_path)
            if self._index_path else ""
        )
        page = fill_template(self._template, {
            "TITLE": escape_text(document.title),
            "LANG":  escape_attr(self._lang),
            "NAV":   self._nav(document, index_href),
            "BODY":  body,
            "INDEX": escape_attr(index_href),
        })
        return RenderResult(
            identifier=document.identifier,
            output_path=document.output_path,
            html=page,
            issues=tuple(issues),
        )

    def render_body(self, document: Document, issues: list[Issue]) -> str:
        """Sama treść dokumentu (bez szablonu); ostrzeżenia dopisywane do `issues`."""
        parts: list[str] = []
        pending: list[ListItem] = []

        for block in document.blocks:
            if isinstance(block, ListItem):
                pending.append(block)
                continue
            if pending:
                parts.append(self._list(pending, document, issues))
                pending = []
            parts.append(self._block(block, document, issues))

        if pending:
            parts.append(self._list(pending, document, issues))
        return "\n".join(parts)

    # ------------------------------------------------------------------
    # Bloki
    # ------------------------------------------------------------------

    def _block(self, block: Block, document: Document, issues: list[Issue]) -> str:
        match block:
            case Heading(level=level, spans=spans, anchor=anchor):
                inner = self._spans(spans, document, issues)
                return f'<h{level} id="{escape_attr(anchor)}">{inner}</h{level}>'
            case Paragraph(spans=spans):
                return f"<p>{self._spans(spans, document, issues)}</p>"
            case CodeBlock(language=language, text=text):
                cls = f' class="language-{escape_attr(language)}"' if language else ""
                return f"<pre><code{cls}>{escape_text(text)}</code></pre>"
            case Link():
                return f"<p>{self._link(block, document, issues)}</p>"
            case Table(header=header, rows=rows):
                return self._table(header, rows, document, issues)
            case Quote(spans=spans):
                return f"<blockquote><p>{self._spans(spans, document, issues)}</p></blockquote>"
            case ThematicBreak():
                return "<hr>"
            case ListItem():
                return self._list([block], document, issues)
        raise TypeError(f"Nieznany typ bloku: {type(block).__name__}")

    def _list(self, items: list[ListItem], document: Document, issues: list[Issue]) -> str:
        """Grupa kolejnych elementów listy → zagnieżdżone <ul>/<ol> wg depth."""
        out: list[str] = []
        stack: list[tuple[int, str]] = []  # (depth, tag) otwartych list

        for item in items:
            tag = "ol" if item.ordered else "ul"
            while stack and stack[-1][0] > item.depth:
                out.append(f"</li></{stack.pop()[1]}>")
            if stack and stack[-1][0] == item.depth:
                if stack[-1][1] == tag:
                    out.append("</li>")
                else:
                    out.append(f"</li></{stack.pop()[1]}>")
            if not stack or stack[-1][0] < item.depth:
                if tag == "ol" and item.number not in (None, 1):
                    out.append(f'<ol start="{item.number}">')
                else:
                    out.append(f"<{tag}>")
                stack.append((item.depth, tag))
            out.append(f"<li>{self._spans(item.spans, document, issues)}")

        while stack:
            out.append(f"</li></{stack.pop()[1]}>")
        return "\n".join(out)

    def _table(
        self,
        header: tuple[Spans, ...],
        rows: tuple[tuple[Spans, ...], ...],
        document: Document,
        issues: list[Issue],
    ) -> str:
        out = ["<table>"]
        if header:
            cells = "".join(f"<th>{self._spans(c, document, issues)}</th>" for c in header)
            out.append(f"<thead><tr>{cells}</tr></thead>")
        out.append("<tbody>")
        for row in rows:
            cells = "".join(f"<td>{self._spans(c, document, issues)}</td>" for c in row)
            out.append(f"<tr>{cells}</tr>")
        out.append("</tbody>")
        out.append("</table>")
        return "\n".join(out)

    # ------------------------------------------------------------------
    # Inline
    # ------------------------------------------------------------------

    def _spans(self, spans: Spans, document: Document, issues: list[Issue]) -> str:
        parts: list[str] = []
        for span in spans:
            match span:
                case Text(text=text):
                    parts.append(escape_text(text))
                case Code(text=text):
                    parts.append(f"<code>{escape_text(text)}</code>")
                case Emphasis(spans=inner):
                    parts.append(f"<em>{self._spans(inner, document, issues)}</em>")
                case Strong(spans=inner):
                    parts.append(f"<strong>{self._spans(inner, document, issues)}</strong>")
                case Link():
                    parts.append(self._link(span, document, issues))
        return "".join(parts)

    def _link(self, link: Link, document: Document, issues: list[Issue]) -> str:
        text = escape_text(link.text or link.target)
        try:
            resolved = resolve_link(self._docset, document.identifier, link.target)
        except BrokenLinkError as e:
            if self._strict_links:
                raise
            issues.append(Issue.from_error(e, Severity.WARNING))
            return (
                f'<a class="broken-link" aria-disabled="true" '
                f'title="{escape_attr(link.target)}">{text}</a>'
            )
        rel = ' rel="external"' if resolved.external else ""
        return f'<a href="{escape_attr(resolved.href)}"{rel}>{text}</a>'

    # ------------------------------------------------------------------
    # Nawigacja
    # ------------------------------------------------------------------

    def _nav(self, document: Document, index_href: str) -> str:
        prev_doc = self._docset.previous_of(document.identifier)
        next_doc = self._docset.next_of(document.identifier)

        parts: list[str] = []
        if prev_doc is not None:
            href = relative_href(document.output_path, prev_doc.output_path)
            parts.append(
                f'<a rel="prev" href="{escape_attr(href)}">&larr; {escape_text(prev_doc.title)}</a>'
            )
        if index_href:
            parts.append(f'<a rel="index" href="{escape_attr(index_href)}">Contents</a>')
        if next_doc is not None:
            href = relative_href(document.output_path, next_doc.output_path)
            parts.append(
                f'<a rel="next" href="{escape_attr(href)}">{escape_text(next_doc.title)} &rarr;</a>'
            )

        if not parts:
            return ""
        return '<nav class="pager">' + " | ".join(parts) + "</nav>"
