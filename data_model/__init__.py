"""
data_model — struktury danych zbioru dokumentów kpdoc.

Użycie:
  from data_model import Document, DocumentSet, Heading, CodeBlock, ...

Moduły:
  documents — spany inline (Text, Code, Emphasis, Strong, Link), bloki
              (Heading, Paragraph, CodeBlock, ListItem, Table, Quote,
              ThematicBreak), Document, NavigationEdge, DocumentSet
  errors    — ErrorCode, DocsetError, MalformedDocumentError,
              BrokenLinkError, DuplicateDocumentError
  report    — Severity, Issue, BuildReport
"""

from .errors import (
    ErrorCode,
    DocsetError,
    MalformedDocumentError,
    BrokenLinkError,
    DuplicateDocumentError,
)
from .documents import (
    Text,
    Code,
    Emphasis,
    Strong,
    Link,
    Inline,
    Spans,
    plain_text,
    iter_spans,
    Heading,
    Paragraph,
    CodeBlock,
    ListItem,
    Table,
    Quote,
    ThematicBreak,
    Block,
    block_spans,
    SourceFormat,
    output_path_for,
    Document,
    NavigationEdge,
    DocumentSet,
)
from .report import (
    Severity,
    Issue,
    BuildReport,
)

__all__ = [
    # errors
    "ErrorCode",
    "DocsetError",
    "MalformedDocumentError",
    "BrokenLinkError",
    "DuplicateDocumentError",
    # documents
    "Text",
    "Code",
    "Emphasis",
    "Strong",
    "Link",
    "Inline",
    "Spans",
    "plain_text",
    "iter_spans",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "ListItem",
    "Table",
    "Quote",
    "ThematicBreak",
    "Block",
    "block_spans",
    "SourceFormat",
    "output_path_for",
    "Document",
    "NavigationEdge",
    "DocumentSet",
    # report
    "Severity",
    "Issue",
    "BuildReport",
]
