import os
import pathlib
from typing import Any

from ..utils import frontmatter
from ..utils.frontmatter import FrontMatterRecord


def published_at_key(record: FrontMatterRecord) -> str:
    # Dates are stored as YYYY-MM-DD, which orders correctly as plain strings.
    # Any other encoding misorders; this is a format contract, not a general
    # date comparison. Records without the key sort as the lowest value.
    return record.get("published_at", "")


def load_index(directory: os.PathLike[Any] | str) -> list[FrontMatterRecord]:
    """Builds the blog index from every entry under ``directory``.

    Each entry is read as a post source and only its front matter is kept;
    post bodies are never rendered here. The result is sorted by
    ``published_at``, newest first. The index is rebuilt from disk on every
    call.

    Every directory entry counts as a post, whatever its extension. I/O
    errors (including an entry that is itself a directory) propagate.
    """

    directory = pathlib.Path(directory)
    records: list[FrontMatterRecord] = []

    # sorted so that posts sharing a date keep a stable relative order
    for name in sorted(os.listdir(directory)):
        text = (directory / name).read_text(encoding="utf-8")
        fragments = frontmatter.split_fragments(text)
        records.append(frontmatter.parse(fragments[0]) if fragments else {})

    records.sort(key=published_at_key, reverse=True)
    return records
