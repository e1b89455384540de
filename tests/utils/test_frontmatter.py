from markupsafe import Markup

from flatblog.utils import frontmatter


def test_split_fragments() -> None:
    src = "---\ntitle: Hello\n---\n# Body\n"
    assert frontmatter.split_fragments(src) == ["\ntitle: Hello\n", "\n# Body\n"]

    # no closing delimiter
    assert frontmatter.split_fragments("---\ntitle: Hello\n") == ["\ntitle: Hello\n"]

    # the delimiter only counts when it makes up the whole line
    src = "---\ntitle: a---b\n---\nbody ---\n"
    assert frontmatter.split_fragments(src) == ["\ntitle: a---b\n", "\nbody ---\n"]

    assert frontmatter.split_fragments("") == []


def test_parse_basic() -> None:
    record = frontmatter.parse("\ntitle: Hello\nslug:  hello \npublished_at: 2024-03-01\n")
    assert record["title"] == "Hello"
    assert record["slug"] == "hello"
    assert record["published_at"] == "2024-03-01"


def test_parse_escapes_values() -> None:
    record = frontmatter.parse("title: X & Y\nsummary: <b>bold</b>")
    assert record["title"] == "X &amp; Y"
    assert record["summary"] == "&lt;b&gt;bold&lt;/b&gt;"

    # escaped values are marked safe, so they don't get escaped twice
    assert isinstance(record["title"], Markup)
    assert Markup("<p>{}</p>").format(record["title"]) == "<p>X &amp; Y</p>"


def test_parse_splits_on_first_colon_only() -> None:
    record = frontmatter.parse("link: https://example.com/a:b")
    assert record == {"link": "https://example.com/a:b"}


def test_parse_line_without_colon() -> None:
    record = frontmatter.parse("title: Hello\ndraft")
    assert record["draft"] == ""
    assert record["title"] == "Hello"


def test_parse_keys_are_kept_verbatim() -> None:
    record = frontmatter.parse(" title : Hello")
    assert record == {" title ": "Hello"}


def test_parse_skips_delimiter_lines() -> None:
    record = frontmatter.parse("---\ntitle: Hello\n---")
    assert "---" not in record
    assert record["title"] == "Hello"


def test_parse_duplicate_keys() -> None:
    record = frontmatter.parse("title: first\ntitle: second")
    assert record == {"title": "second"}


def test_parse_empty_lines() -> None:
    # an empty line is a colon-less line with an empty key
    record = frontmatter.parse("\ntitle: Hello\n")
    assert record[""] == ""
    assert frontmatter.parse("") == {"": ""}


def test_parse_escapes_quotes() -> None:
    record = frontmatter.parse('title: it\'s "x"')
    assert record["title"] == "it&#39;s &#34;x&#34;"
    assert Markup(record["title"]).unescape() == 'it\'s "x"'
