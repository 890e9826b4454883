from bs4 import BeautifulSoup

from data_model import ErrorCode, Severity
from loader import Source, load_documents
from renderer import build_site, write_artifacts


def test_dangling_link_builds_with_warning(load_texts):
    output = build_site(load_texts({"only.md": "[x](missing.md)"}))
    report = output.report

    assert sorted(output.artifacts) == ["only.html", "toc.html"]
    assert report.documents == 1
    assert report.rendered == 1
    assert report.failure_count == 0
    assert report.warning_count == 1
    assert report.warnings[0].code is ErrorCode.BROKEN_LINK
    assert report.exit_code() == 0
    assert report.exit_code(warnings_as_errors=True) == 1


def test_malformed_document_does_not_stop_the_build(load_texts):
    output = build_site(load_texts({
        "bad.md": "# Bad\n\n```kotlin\nval x = 1\n",
        "good.md": "# Good",
    }))
    report = output.report

    assert "good.html" in output.artifacts
    assert "bad.html" not in output.artifacts
    assert report.failure_count == 1
    assert report.errors[0].code is ErrorCode.MALFORMED_DOCUMENT
    assert report.errors[0].identifier == "bad.md"
    assert report.exit_code() == 1


def test_nothing_readable_exits_with_2():
    result = load_documents([
        Source("a.md", b"\xff\xfe\xfa"),
        Source("b.md", b"```\nno end"),
    ])
    output = build_site(result)
    assert output.artifacts == {}
    assert output.report.unreadable
    assert output.report.failure_count == 2
    assert output.report.exit_code() == 2


def test_empty_input_is_success():
    output = build_site(load_documents([]))
    assert output.artifacts == {}
    assert output.report.exit_code() == 0


def test_strict_links_turn_broken_link_into_error(load_texts):
    output = build_site(
        load_texts({"a.md": "# A\n\n[x](gone.md)", "b.md": "# B"}),
        strict_links=True,
    )
    report = output.report

    assert "a.html" not in output.artifacts
    assert "b.html" in output.artifacts
    assert report.rendered == 1
    assert report.errors[0].code is ErrorCode.BROKEN_LINK
    assert report.errors[0].severity is Severity.ERROR
    assert report.exit_code() == 1


def test_index_lists_documents_in_navigation_order(load_texts):
    output = build_site(load_texts(
        {"b.md": "# Beta\n\n## Usage", "a.md": "# Alpha"},
        order=["b.md", "a.md"],
    ))
    soup = BeautifulSoup(output.artifacts["toc.html"], "html.parser")
    entries = soup.select("ol.toc > li > a")
    assert [a["href"] for a in entries] == ["b.html", "a.html"]
    assert [a.get_text() for a in entries] == ["Beta", "Alpha"]
    assert soup.select_one("ol.toc ul a")["href"] == "b.html#usage"


def test_index_collision_skips_index(load_texts):
    output = build_site(load_texts({"toc.md": "# My toc", "a.md": "# A"}))
    report = output.report

    assert output.artifacts["toc.html"].count("My toc") >= 1
    assert "Contents" not in output.artifacts["a.html"]
    assert [i.code for i in report.errors] == [ErrorCode.INDEX_COLLISION]
    assert report.exit_code() == 1


def test_no_index(load_texts):
    output = build_site(load_texts({"a.md": "# A"}), index_path=None)
    assert list(output.artifacts) == ["a.html"]


def test_custom_template(load_texts):
    template = "<x>{{TITLE}}|{{INDEX}}|{{BODY}}</x>"
    output = build_site(load_texts({"a.md": "# A"}), template=template)
    assert output.artifacts["a.html"].startswith("<x>A|toc.html|<h1")
    assert output.artifacts["toc.html"].startswith("<x>Contents|toc.html|")



def test_write_artifacts_creates_directories(tmp_path):
    written = write_artifacts(
        {"basics/syntax.html": "<p>s</p>", "index.html": "<p>ź</p>"},
        tmp_path / "site",
    )
    assert [p.relative_to(tmp_path / "site").as_posix() for p in written] == [
        "basics/syntax.html",
        "index.html",
    ]
    assert (tmp_path / "site" / "index.html").read_text(encoding="utf-8") == "<p>ź</p>"


def test_documents_sharing_an_output_path_are_not_overwritten(load_texts):
    output = build_site(load_texts({
        "a.md": "# From markdown",
        "a.html": "<h1>From html</h1>",
        "b.md": "# B",
    }))
    report = output.report

    assert sorted(output.artifacts) == ["a.html", "b.html", "toc.html"]
    assert "From html" in output.artifacts["a.html"]
    assert report.rendered == 2
    assert [(i.code, i.identifier) for i in report.errors] == [
        (ErrorCode.OUTPUT_COLLISION, "a.md"),
    ]
    assert "a.html" in report.errors[0].message
    assert report.exit_code() == 1


def test_markdown_and_markdown_suffix_collide(load_texts):
    output = build_site(load_texts({"a.markdown": "# One", "a.md": "# Two"}), index_path=None)
    assert list(output.artifacts) == ["a.html"]
    assert output.report.failure_count == 1
