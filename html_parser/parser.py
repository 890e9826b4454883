"""html_parser/parser.py — parsowanie strony HTML do bloków dokumentu."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from data_model.documents import (
    Block,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    Inline,
    Link,
    ListItem,
    Paragraph,
    Quote,
    Spans,
    Strong,
    Table,
    Text,
    ThematicBreak,
    plain_text,
)
from markup.text import AnchorRegistry

# Tagi blokowe (determinują granice bloków treści)
_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
_HEADING_LEVEL: dict[str, int] = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
_LIST_TAGS = {"ul", "ol"}
_BLOCK_TAGS: set[str] = {
    "div", "p", "article", "section", "main", "aside", "nav",
    "header", "footer", "blockquote", "pre", "hr",
    "li", "ul", "ol",
    "td", "th", "tr", "table",
    "form", "fieldset", "details", "summary", "figure",
} | _HEADING_TAGS

# Tagi zawierające szum (nie treść)
_NOISE_TAGS = {"script", "style", "noscript", "template"}

_INLINE_STYLE: dict[str, type[Emphasis] | type[Strong]] = {
    "em": Emphasis, "i": Emphasis, "strong": Strong, "b": Strong,
}

_WS_RE = re.compile(r"[ \t\r\n\f]+")
_LANG_CLASS_RE = re.compile(r"^(?:language|lang)-(.+)$")


# ---------------------------------------------------------------------------
# Spany inline
# ---------------------------------------------------------------------------

def _inline_spans(el: Tag, skip: frozenset[str] | set[str] = frozenset()) -> Spans:
    """Spłaszcza zawartość elementu do spanów; `skip` — pomijane tagi dzieci."""
    spans: list[Inline] = []

    def add_text(text: str) -> None:
        text = _WS_RE.sub(" ", text)
        if not text:
            return
        if spans and isinstance(spans[-1], Text):
            spans[-1] = Text(spans[-1].text + text)
        else:
            spans.append(Text(text))

    def walk(node: Tag) -> None:
        for child in node.children:
            if isinstance(child, Comment):
                continue
            if isinstance(child, NavigableString):
                add_text(str(child))
                continue
            if not isinstance(child, Tag):
                continue
            name = child.name
            if name in _NOISE_TAGS or name in skip:
                continue
            if name == "a":
                spans.append(Link(
                    text=_WS_RE.sub(" ", child.get_text()).strip(),
                    target=str(child.get("href", "")),
                ))
            elif name == "code":
                spans.append(Code(child.get_text()))
            elif name in _INLINE_STYLE:
                spans.append(_INLINE_STYLE[name](_inline_spans(child, skip)))
            elif name == "br":
                add_text("\n")
            else:
                walk(child)

    walk(el)

    # Obetnij białe znaki na brzegach
    if spans and isinstance(spans[0], Text):
        spans[0] = Text(spans[0].text.lstrip())
    if spans and isinstance(spans[-1], Text):
        spans[-1] = Text(spans[-1].text.rstrip())
    return tuple(s for s in spans if not (isinstance(s, Text) and not s.text))


def _code_language(el: Tag) -> str:
    for cls in el.get("class") or []:
        m = _LANG_CLASS_RE.match(cls)
        if m:
            return m.group(1)
    return ""


# ---------------------------------------------------------------------------
# Bloki
# ---------------------------------------------------------------------------

def _extract_blocks(body: Tag) -> list[Block]:
    """
    Przechodzi drzewo DOM i zwraca spłaszczoną listę bloków.

    Reguła unikania duplikowania treści:
    - Nagłówek, pre, p, blockquote, tabela: emituje cały blok, bez rekurencji.
    - Lista: emituje elementy, rekuruje tylko w zagnieżdżone listy.
    - Blok liściasty (brak blokowych dzieci): emituje akapit z całej treści.
    - Blok kontenerowy (ma blokowe dzieci): rekuruje w dzieci, sam nie emituje.
    """
    blocks: list[Block] = []
    anchors = AnchorRegistry()

    def paragraph(el: Tag) -> None:
        spans = _inline_spans(el)
        if len(spans) == 1 and isinstance(spans[0], Link):
            blocks.append(spans[0])
        elif spans:
            blocks.append(Paragraph(spans))

    def walk_list(el: Tag, depth: int) -> None:
        ordered = el.name == "ol"
        start = str(el.get("start", "1"))
        number = int(start) if start.isdigit() else 1
        for li in el.find_all("li", recursive=False):
            blocks.append(ListItem(
                spans=_inline_spans(li, skip=_LIST_TAGS),
                ordered=ordered,
                depth=depth,
                number=number if ordered else None,
            ))
            number += 1
            for nested in li.find_all(_LIST_TAGS, recursive=False):
                walk_list(nested, depth + 1)

    def table(el: Tag) -> None:
        rows = el.find_all("tr")
        if not rows:
            return
        header: tuple[Spans, ...] = ()
        if rows[0].find("th"):
            header = tuple(_inline_spans(c) for c in rows[0].find_all(["th", "td"]))
            rows = rows[1:]
        body_rows = tuple(
            tuple(_inline_spans(c) for c in r.find_all(["th", "td"]))
            for r in rows
        )
        blocks.append(Table(header=header, rows=body_rows))

    def walk(el: Tag) -> None:
        name = el.name
        if name in _NOISE_TAGS:
            return
        if name in _HEADING_TAGS:
            spans = _inline_spans(el)
            if spans:
                blocks.append(Heading(
                    level=_HEADING_LEVEL[name],
                    spans=spans,
                    anchor=(
                        anchors.reserve(str(el["id"])) if el.get("id")
                        else anchors.make(plain_text(spans))
                    ),
                ))
            return  # nie rekurujemy w nagłówki
        if name == "pre":
            code = el.find("code") or el
            blocks.append(CodeBlock(
                language=_code_language(code) or _code_language(el),
                text=code.get_text(),
            ))
        elif name in _LIST_TAGS:
            walk_list(el, 0)
        elif name == "table":
            table(el)
        elif name == "blockquote":
            blocks.append(Quote(_inline_spans(el)))
        elif name == "hr":
            blocks.append(ThematicBreak())
        elif name == "p":
            paragraph(el)
        elif name in _BLOCK_TAGS:
            has_block_child = any(
                isinstance(c, Tag) and c.name in _BLOCK_TAGS
                for c in el.children
            )
            if not has_block_child:
                paragraph(el)
            else:
                for child in el.children:
                    if isinstance(child, Tag):
                        walk(child)
        else:
            # nieblokowy element (body, html, span itp.) — rekurujemy
            for child in el.children:
                if isinstance(child, Tag):
                    walk(child)

    for child in body.children:
        if isinstance(child, Tag):
            walk(child)

    return blocks


def parse_html(text: str, identifier: str = "") -> tuple[Block, ...]:
    """Parsuje źródło HTML do krotki bloków (identifier — tylko informacyjnie)."""
    soup = BeautifulSoup(text, "html.parser")

    for tag in soup.find_all(_NOISE_TAGS):
        tag.decompose()

    body: Tag = soup.find("body") or soup  # type: ignore[assignment]
    return tuple(_extract_blocks(body))
