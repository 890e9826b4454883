import pytest
from bs4 import BeautifulSoup

from data_model import BrokenLinkError, ErrorCode, Severity
from renderer import HtmlRenderer, escape_text


def _render(load_texts, texts, identifier, **kwargs):
    docset = load_texts(texts).docset
    return HtmlRenderer(docset, **kwargs).render(docset.get(identifier))


def test_link_to_loaded_document_is_resolved(load_texts):
    result = _render(load_texts, {"A.md": "# Title\n[next](B.md)", "B.md": "# Other"}, "A.md")
    assert '<a href="B.html">next</a>' in result.html
    assert result.output_path == "A.html"
    assert result.issues == ()


def test_rendering_is_idempotent(load_texts):
    texts = {
        "A.md": "# A\n\n- one\n  - two\n\n[missing](gone.md)\n\n```kotlin\nval x = 1\n```",
        "B.md": "# B",
    }
    docset = load_texts(texts).docset
    renderer = HtmlRenderer(docset, index_path="toc.html")
    first = renderer.render(docset.get("A.md"))
    second = renderer.render(docset.get("A.md"))
    assert first.html == second.html
    assert first.issues == second.issues
    assert HtmlRenderer(docset, index_path="toc.html").render(docset.get("A.md")).html == first.html


def test_code_block_text_is_preserved_verbatim(load_texts):
    code = 'fun main() {\n    val s = "<b>*bold*</b> & __x__"\n    if (a < b && c > d) println(s)\n}'
    result = _render(load_texts, {"code.md": f"# Code\n\n```kotlin\n{code}\n```\n"}, "code.md")

    soup = BeautifulSoup(result.html, "html.parser")
    element = soup.select_one("pre > code.language-kotlin")
    assert element.get_text() == code
    assert escape_text(code) in result.html
    assert soup.find("em") is None
    assert soup.find("strong") is None
    assert soup.find("b") is None


def test_template_placeholders_inside_content_are_not_expanded(load_texts):
    result = _render(load_texts, {"t.md": "# T\n\n```\n{{BODY}} {{TITLE}}\n```"}, "t.md")
    assert "{{BODY}} {{TITLE}}" in result.html


def test_inline_text_is_escaped(load_texts):
    result = _render(load_texts, {"x.md": "# X\n\n<script>alert(1)</script> & more"}, "x.md")
    assert "<script>" not in result.html
    assert "&lt;script&gt;alert(1)&lt;/script&gt; &amp; more" in result.html


def test_dangling_link_is_disabled_with_warning(load_texts):
    result = _render(load_texts, {"only.md": "[x](missing.md)"}, "only.md")

    soup = BeautifulSoup(result.html, "html.parser")
    anchor = soup.select_one("main a")
    assert anchor.get("href") is None
    assert "broken-link" in anchor["class"]
    assert anchor.get_text() == "x"

    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.code is ErrorCode.BROKEN_LINK
    assert issue.severity is Severity.WARNING
    assert issue.identifier == "only.md"


def test_strict_links_raise(load_texts):
    with pytest.raises(BrokenLinkError):
        _render(load_texts, {"only.md": "[x](missing.md)"}, "only.md", strict_links=True)


def test_prev_next_and_index_navigation(load_texts):
    texts = {"a.md": "# Alpha", "b.md": "# Beta", "c.md": "# Gamma"}
    result = _render(load_texts, texts, "b.md", index_path="toc.html")

    soup = BeautifulSoup(result.html, "html.parser")
    nav = soup.select_one("nav.pager")
    assert nav.select_one('a[rel="prev"]')["href"] == "a.html"
    assert "Alpha" in nav.select_one('a[rel="prev"]').get_text()
    assert nav.select_one('a[rel="next"]')["href"] == "c.html"
    assert nav.select_one('a[rel="index"]')["href"] == "toc.html"


def test_navigation_from_subdirectory_is_relative(load_texts):
    texts = {"intro.md": "# Intro", "basics/syntax.md": "# Syntax"}
    docset = load_texts(texts, order=["intro.md", "basics/syntax.md"]).docset
    result = HtmlRenderer(docset, index_path="toc.html").render(docset.get("basics/syntax.md"))
    assert 'rel="prev" href="../intro.html"' in result.html
    assert 'rel="index" href="../toc.html"' in result.html


def test_single_document_has_no_navigation(load_texts):
    result = _render(load_texts, {"a.md": "# A"}, "a.md")
    assert "<nav" not in result.html


def test_nested_lists(load_texts):
    result = _render(load_texts, {"l.md": "- a\n  - b\n- c\n\n3. three\n4. four"}, "l.md")
    soup = BeautifulSoup(result.html, "html.parser")
    assert len(soup.select("main > ul > li")) == 2
    assert soup.select_one("main > ul > li > ul > li").get_text(strip=True) == "b"
    ol = soup.select_one("main > ol")
    assert ol["start"] == "3"
    assert [li.get_text(strip=True) for li in ol.find_all("li")] == ["three", "four"]


def test_blocks_markup(load_texts):
    source = (
        "# Title\n\n## Usage\n\n"
        "| Kotlin | Python |\n|---|---|\n| `val` | name |\n\n"
        "> tip\n\n---\n\nSee **this** and *that*."
    )
    result = _render(load_texts, {"b.md": source}, "b.md", lang="pl")
    html = result.html
    assert '<html lang="pl">' in html
    assert "<title>Title</title>" in html
    assert '<h2 id="usage">Usage</h2>' in html
    assert "<th>Kotlin</th>" in html
    assert "<td><code>val</code></td>" in html
    assert "<blockquote><p>tip</p></blockquote>" in html
    assert "<hr>" in html
    assert "<strong>this</strong>" in html
    assert "<em>that</em>" in html


def test_external_link_is_marked(load_texts):
    result = _render(load_texts, {"e.md": "See <https://kotlinlang.org>."}, "e.md")
    assert '<a href="https://kotlinlang.org" rel="external">https://kotlinlang.org</a>' in result.html


@pytest.mark.parametrize("target", [
    "javascript:alert%28document.cookie%29",
    "JavaScript:alert%281%29",
    "data:text/html;base64,PHNjcmlwdD4=",
    "vbscript:msgbox",
])
def test_unsafe_url_schemes_render_as_disabled_links(load_texts, target):
    result = _render(load_texts, {"x.md": f"[click]({target})"}, "x.md")

    soup = BeautifulSoup(result.html, "html.parser")
    anchor = soup.select_one("main a")
    assert anchor.get("href") is None
    assert "broken-link" in anchor["class"]
    assert "href=" not in str(soup.select_one("main"))
    assert [i.code for i in result.issues] == [ErrorCode.BROKEN_LINK]
    assert result.issues[0].severity is Severity.WARNING


def test_link_inside_strong_is_resolved(load_texts):
    result = _render(load_texts, {"a.md": "**see [b](b.md)**", "b.md": "# B"}, "a.md")
    assert '<strong>see <a href="b.html">b</a></strong>' in result.html
