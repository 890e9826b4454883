"""
markup — parser lekkiego znacznikowania (podzbiór Markdown, styl GitHub).

Interfejs publiczny:
    parse_markdown(text, identifier) -> tuple[Block, ...]
    parse_inline(text)               -> tuple[Inline, ...]
    slugify(text)                    -> str
"""

from .inline import parse_inline
from .parser import parse_markdown
from .text import AnchorRegistry, normalize_newlines, slugify

__all__ = [
    "parse_markdown",
    "parse_inline",
    "slugify",
    "normalize_newlines",
    "AnchorRegistry",
]
