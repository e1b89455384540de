# Line-oriented front matter support for post sources.
#
# A post source starts with a block of `key: value` lines fenced by `---`
# lines. This is intentionally not YAML: values are taken verbatim (trimmed
# and HTML-escaped), and malformed lines degrade to partial data instead of
# raising, so callers never have to handle a parse error.

import re
from typing import Final

from markupsafe import Markup, escape

FRONTMATTER_DELIMITER: Final = "---"
FRONTMATTER_BOUNDARY_RE: Final = re.compile(r"(?m)^---$")

# Values are Markup instances, i.e. already escaped for HTML output.
FrontMatterRecord = dict[str, str]


def split_fragments(text: str) -> list[str]:
    """Splits a post source on lines consisting of exactly ``---``.

    Only empty fragments are dropped, so for a typical source the result is
    ``[metadata, body]``. A source with an opening delimiter but no closing
    one yields just the metadata fragment.
    """

    return [x for x in FRONTMATTER_BOUNDARY_RE.split(text) if x]


def parse(block: str) -> FrontMatterRecord:
    """Decodes a front matter block into a key/value record.

    For each line, the key is the text before the first colon and the value
    is the trimmed, HTML-escaped text after it. A line without any colon
    becomes a key with an empty value. Literal delimiter lines are skipped.
    Repeated keys overwrite earlier ones.
    """

    record: FrontMatterRecord = {}
    for line in block.split("\n"):
        if line == FRONTMATTER_DELIMITER:
            continue

        key, colon, value = line.partition(":")
        record[key] = escape(value.strip()) if colon else Markup("")

    return record
