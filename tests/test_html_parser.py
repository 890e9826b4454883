from data_model import (
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    Link,
    ListItem,
    Paragraph,
    Quote,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from html_parser.parser import parse_html

PAGE = """<!DOCTYPE html>
<html><head><title>Page</title><script>track()</script></head>
<body>
<h1>Null safety</h1>
<p>Use <code>?.</code> and <a href="basics.html">basics</a>.</p>
<pre><code class="language-kotlin">val a: String? = null
println(a?.length)</code></pre>
<ul><li>one</li><li>two<ul><li>nested</li></ul></li></ul>
<p><a href="next.html">Next</a></p>
</body></html>
"""


def test_page_structure():
    assert parse_html(PAGE, "null-safety.html") == (
        Heading(level=1, spans=(Text("Null safety"),), anchor="null-safety"),
        Paragraph((
            Text("Use "),
            Code("?."),
            Text(" and "),
            Link(text="basics", target="basics.html"),
            Text("."),
        )),
        CodeBlock(language="kotlin", text="val a: String? = null\nprintln(a?.length)"),
        ListItem(spans=(Text("one"),), ordered=False, depth=0),
        ListItem(spans=(Text("two"),), ordered=False, depth=0),
        ListItem(spans=(Text("nested"),), ordered=False, depth=1),
        Link(text="Next", target="next.html"),
    )


def test_noise_tags_are_dropped():
    blocks = parse_html("<div><script>evil()</script><p>kept</p><style>p{}</style></div>")
    assert blocks == (Paragraph((Text("kept"),)),)


def test_heading_id_is_used_as_anchor():
    (heading,) = parse_html('<h2 id="custom">Title</h2>')
    assert heading.anchor == "custom"


def test_inline_styles_and_whitespace_collapsing():
    (para,) = parse_html("<p>a  <strong>bold</strong>\n  <em>em</em></p>")
    assert para == Paragraph((Text("a "), Strong((Text("bold"),)), Text(" "), Emphasis((Text("em"),))))


def test_ordered_list_start():
    blocks = parse_html('<ol start="4"><li>four</li><li>five</li></ol>')
    assert [b.number for b in blocks] == [4, 5]
    assert all(b.ordered for b in blocks)


def test_table_blockquote_and_rule():
    html = (
        "<table><tr><th>Kotlin</th><th>Python</th></tr>"
        "<tr><td><code>val</code></td><td>name</td></tr></table>"
        "<blockquote>Tip</blockquote><hr>"
    )
    assert parse_html(html) == (
        Table(
            header=((Text("Kotlin"),), (Text("Python"),)),
            rows=(((Code("val"),), (Text("name"),)),),
        ),
        Quote((Text("Tip"),)),
        ThematicBreak(),
    )


def test_leaf_div_becomes_paragraph():
    assert parse_html("<div>just text</div>") == (Paragraph((Text("just text"),)),)


def test_explicit_heading_ids_stay_unique():
    blocks = parse_html(
        '<h2 id="intro">A</h2><h2>Intro</h2><h2 id="intro">B</h2><h2 id="intro-1">C</h2>'
    )
    anchors = [b.anchor for b in blocks]
    assert anchors[0] == "intro"
    assert len(set(anchors)) == len(anchors)
    assert anchors == ["intro", "intro-1", "intro-2", "intro-1-1"]


def test_nested_inline_styles_keep_links():
    (para,) = parse_html('<p><strong>see <a href="b.html">b</a></strong></p>')
    assert para == Paragraph((Strong((Text("see "), Link(text="b", target="b.html"))),))
