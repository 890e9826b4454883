import pytest

from data_model import (
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    Link,
    ListItem,
    MalformedDocumentError,
    Paragraph,
    Quote,
    Table,
    Text,
    ThematicBreak,
)
from markup import parse_markdown


def test_heading_and_paragraph():
    blocks = parse_markdown("# Title\n\nSome text.")
    assert blocks == (
        Heading(level=1, spans=(Text("Title"),), anchor="title"),
        Paragraph((Text("Some text."),)),
    )


def test_paragraph_lines_are_joined():
    blocks = parse_markdown("first line\n  second line\n")
    assert blocks == (Paragraph((Text("first line\nsecond line"),)),)


def test_heading_closing_hashes_are_removed():
    (heading,) = parse_markdown("## Basic syntax ##")
    assert heading.level == 2
    assert heading.text == "Basic syntax"
    assert heading.anchor == "basic-syntax"


def test_hash_without_space_is_not_a_heading():
    assert parse_markdown("#hashtag") == (Paragraph((Text("#hashtag"),)),)


def test_fenced_code_is_verbatim():
    source = '```kotlin\nfun main() {\n    println("*hi* <b>")\n}\n```'
    assert parse_markdown(source) == (
        CodeBlock(language="kotlin", text='fun main() {\n    println("*hi* <b>")\n}'),
    )


def test_fence_content_is_not_parsed_as_markup():
    source = "```\n# not a heading\n- not a list\n[not](a-link.md)\n```"
    (block,) = parse_markdown(source)
    assert isinstance(block, CodeBlock)
    assert block.text == "# not a heading\n- not a list\n[not](a-link.md)"


def test_tilde_fence_may_contain_backtick_fence():
    assert parse_markdown("~~~python\n```\n~~~") == (CodeBlock(language="python", text="```"),)


def test_indented_fence_strips_its_indentation():
    source = "- item\n\n  ```kotlin\n  val x = 1\n    nested()\n  ```"
    blocks = parse_markdown(source)
    assert blocks[1] == CodeBlock(language="kotlin", text="val x = 1\n  nested()")


def test_unterminated_fence_is_malformed():
    with pytest.raises(MalformedDocumentError) as exc:
        parse_markdown("# T\n\n```\ncode", identifier="broken.md")
    assert exc.value.identifier == "broken.md"
    assert exc.value.line == 3


def test_crlf_newlines_are_normalized():
    assert parse_markdown("# T\r\n\r\n```\r\na\r\n```") == (
        Heading(level=1, spans=(Text("T"),), anchor="t"),
        CodeBlock(language="", text="a"),
    )


def test_lists_with_nesting_and_numbers():
    blocks = parse_markdown("- a\n- b\n  - c\n3. three")
    assert blocks == (
        ListItem(spans=(Text("a"),), ordered=False, depth=0),
        ListItem(spans=(Text("b"),), ordered=False, depth=0),
        ListItem(spans=(Text("c"),), ordered=False, depth=1),
        ListItem(spans=(Text("three"),), ordered=True, depth=0, number=3),
    )


def test_list_item_continuation_line():
    assert parse_markdown("- item\n  continues") == (
        ListItem(spans=(Text("item\ncontinues"),), ordered=False, depth=0),
    )


def test_setext_headings():
    blocks = parse_markdown("Title\n=====\nSub\n---")
    assert blocks == (
        Heading(level=1, spans=(Text("Title"),), anchor="title"),
        Heading(level=2, spans=(Text("Sub"),), anchor="sub"),
    )


def test_thematic_break_between_paragraphs():
    assert parse_markdown("a\n\n---\n\nb") == (
        Paragraph((Text("a"),)),
        ThematicBreak(),
        Paragraph((Text("b"),)),
    )


def test_star_break_is_not_a_list():
    assert parse_markdown("* * *") == (ThematicBreak(),)


def test_pipe_table():
    source = "| Kotlin | Python |\n|---|:---:|\n| `val` | `x = 1` |\n| only |"
    assert parse_markdown(source) == (
        Table(
            header=((Text("Kotlin"),), (Text("Python"),)),
            rows=(
                ((Code("val"),), (Code("x = 1"),)),
                ((Text("only"),), ()),
            ),
        ),
    )


def test_pipe_line_without_delimiter_is_text():
    assert parse_markdown("| just text") == (Paragraph((Text("| just text"),)),)


def test_standalone_link_becomes_link_block():
    assert parse_markdown("[Next: Basics](basics.md)") == (
        Link(text="Next: Basics", target="basics.md"),
    )


def test_block_quote():
    assert parse_markdown("> Note: *x*\nlazy") == (
        Quote((Text("Note: "), Emphasis((Text("x"),)), Text("\nlazy"))),
    )


def test_duplicate_heading_anchors_are_unique():
    blocks = parse_markdown("## Usage\n## Usage\n## Usage")
    assert [b.anchor for b in blocks] == ["usage", "usage-1", "usage-2"]


def test_raw_html_is_kept_as_text():
    assert parse_markdown("<div>hi</div>") == (Paragraph((Text("<div>hi</div>"),)),)
