from data_model import Code, Emphasis, Link, Strong, Text
from markup import parse_inline


def test_plain_text_is_single_span():
    assert parse_inline("plain words") == (Text("plain words"),)


def test_code_span_keeps_content_literally():
    assert parse_inline("Use `val x = 1` here") == (
        Text("Use "),
        Code("val x = 1"),
        Text(" here"),
    )


def test_markup_characters_inside_code_are_not_formatting():
    assert parse_inline("`a*b*c <d>`") == (Code("a*b*c <d>"),)


def test_double_backticks_allow_single_backtick_inside():
    assert parse_inline("``a`b``") == (Code("a`b"),)


def test_strong_and_emphasis():
    assert parse_inline("**bold** and *em* and _also em_") == (
        Strong((Text("bold"),)),
        Text(" and "),
        Emphasis((Text("em"),)),
        Text(" and "),
        Emphasis((Text("also em"),)),
    )


def test_spaced_asterisks_are_plain_text():
    assert parse_inline("2 * 3 * 4") == (Text("2 * 3 * 4"),)


def test_underscores_inside_identifiers_are_plain_text():
    assert parse_inline("call snake_case_name now") == (Text("call snake_case_name now"),)


def test_backslash_escapes():
    assert parse_inline(r"\*not em\*") == (Text("*not em*"),)


def test_link():
    assert parse_inline("see [next page](B.md) now") == (
        Text("see "),
        Link(text="next page", target="B.md"),
        Text(" now"),
    )


def test_link_title_is_dropped():
    assert parse_inline('[K](https://kotlinlang.org "Kotlin")') == (
        Link(text="K", target="https://kotlinlang.org"),
    )


def test_autolink():
    assert parse_inline("docs: <https://kotlinlang.org/docs/>") == (
        Text("docs: "),
        Link(text="https://kotlinlang.org/docs/", target="https://kotlinlang.org/docs/"),
    )


def test_raw_html_stays_text():
    assert parse_inline("<b>hi</b>") == (Text("<b>hi</b>"),)


def test_links_and_code_inside_strong_are_parsed():
    assert parse_inline("**see [x](b.md)** and *`val`*") == (
        Strong((Text("see "), Link(text="x", target="b.md"))),
        Text(" and "),
        Emphasis((Code("val"),)),
    )


def test_strong_exposes_plain_text():
    (strong,) = parse_inline("**a [b](c.md)**")
    assert strong.text == "a b"
