"""
markup/inline.py — parsowanie tekstu akapitu na spany inline.

Rozpoznawane konstrukcje (w kolejności priorytetu):
  \\*            — escape: znak dosłowny
  `kod`          — kod inline (dowolnie długi ciąg backticków)
  <https://…>    — autolink
  [tekst](cel)   — odnośnik (opcjonalny "tytuł" jest pomijany)
  **mocno** / __mocno__   (treść parsowana rekurencyjnie)
  *kursywa* / _kursywa_  (podkreślenie tylko na granicy słowa)

Wszystko inne (w tym surowy HTML) zostaje zwykłym tekstem — escapowanie
odbywa się dopiero w rendererze.
"""

from __future__ import annotations

import re

from data_model.documents import Code, Emphasis, Inline, Link, Spans, Strong, Text

_INLINE_RE = re.compile(
    r"""
      \\(?P<escaped>[\\`*_{}\[\]()\#+\-.!<>|~])
    | (?P<ticks>`+)(?P<code>.+?)(?<!`)(?P=ticks)(?!`)
    | <(?P<autolink>(?:https?|ftp)://[^\s<>]+|mailto:[^\s<>]+)>
    | \[(?P<link_text>(?:\\.|[^\]\\])*)\]\(\s*(?P<link_target><[^>]*>|[^\s()]*)(?:\s+"[^"]*")?\s*\)
    | \*\*(?P<strong>\S(?:.*?\S)?)\*\*
    | (?<!\w)__(?P<strong_u>\S(?:.*?\S)?)__(?!\w)
    | \*(?P<em>[^*\s](?:[^*]*?[^*\s])?)\*
    | (?<!\w)_(?P<em_u>[^_\s](?:[^_]*?[^_\s])?)_(?!\w)
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPE_RE = re.compile(r"\\([\\`*_{}\[\]()#+\-.!<>|~])")


def _unescape(text: str) -> str:
    return _ESCAPE_RE.sub(r"\1", text)


def _code_text(raw: str) -> str:
    # Jedna spacja po obu stronach jest separatorem: `` `x` `` → "`x`"
    raw = raw.replace("\n", " ")
    if len(raw) >= 2 and raw[0] == " " and raw[-1] == " " and raw.strip():
        return raw[1:-1]
    return raw


def _append_text(spans: list[Inline], text: str) -> None:
    if not text:
        return
    if spans and isinstance(spans[-1], Text):
        spans[-1] = Text(spans[-1].text + text)
    else:
        spans.append(Text(text))


def parse_inline(text: str) -> Spans:
    """Zamienia tekst akapitu na krotkę spanów; sąsiednie Text są scalane."""
    spans: list[Inline] = []
    pos = 0
    for m in _INLINE_RE.finditer(text):
        _append_text(spans, text[pos:m.start()])
        pos = m.end()

        if m.group("escaped") is not None:
            _append_text(spans, m.group("escaped"))
        elif m.group("ticks") is not None:
            spans.append(Code(_code_text(m.group("code"))))
        elif m.group("autolink") is not None:
            url = m.group("autolink")
            spans.append(Link(text=url, target=url))
        elif m.group("link_target") is not None:
            target = m.group("link_target")
            if target.startswith("<") and target.endswith(">"):
                target = target[1:-1]
            spans.append(Link(text=_unescape(m.group("link_text")), target=target))
        elif m.group("strong") is not None or m.group("strong_u") is not None:
            spans.append(Strong(parse_inline(m.group("strong") or m.group("strong_u"))))
        else:
            spans.append(Emphasis(parse_inline(m.group("em") or m.group("em_u"))))

    _append_text(spans, text[pos:])
    return tuple(spans)
