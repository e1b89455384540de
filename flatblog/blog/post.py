from dataclasses import dataclass
import os
import pathlib
from typing import Any, Final, TYPE_CHECKING

from markupsafe import escape

from ..utils import frontmatter
from ..utils.frontmatter import FrontMatterRecord
from ..utils.markdown import MarkdownRenderer

if TYPE_CHECKING:
    from ..log import BlogLogger

POST_SOURCE_SUFFIX: Final = ".md"


class PostNotFoundError(Exception):
    def __init__(self, identifier: str | None) -> None:
        super().__init__()
        self._identifier = identifier

    @property
    def identifier(self) -> str | None:
        return self._identifier

    def __str__(self) -> str:
        return f"post not found: {self._identifier}"

    def __repr__(self) -> str:
        return f"PostNotFoundError({self._identifier!r})"


class MalformedPostError(Exception):
    """The post source exists but lacks a body block."""

    def __init__(self, path: os.PathLike[Any]) -> None:
        super().__init__()
        self._path = path

    def __str__(self) -> str:
        return f"malformed post source (no body after front matter): {self._path}"

    def __repr__(self) -> str:
        return f"MalformedPostError({self._path!r})"


@dataclass
class PostDocument:
    header: FrontMatterRecord
    body: str
    """Rendered HTML of the post body"""

    source: str = ""
    """Markdown source of the post body"""

    def get(self, key: str, default: str = "") -> str:
        return self.header.get(key, default)

    @property
    def title(self) -> str:
        return self.get("title")


def post_source_path(directory: os.PathLike[Any] | str, identifier: str) -> pathlib.Path:
    return pathlib.Path(directory) / f"{identifier}{POST_SOURCE_SUFFIX}"


def render_body(
    renderer: MarkdownRenderer,
    text: str,
    logger: "BlogLogger | None" = None,
) -> str:
    """Renders a post body, substituting a diagnostic on renderer failure."""

    try:
        return renderer.render(text).strip()
    except Exception as e:
        if logger is not None:
            logger.W(f"failed to render post body: {e}")
        return f"Parsing of post failed: {escape(str(e))}"


def load_post(
    identifier: str | None,
    directory: os.PathLike[Any] | str,
    renderer: MarkdownRenderer,
    logger: "BlogLogger | None" = None,
) -> PostDocument:
    """Loads the post named by ``identifier`` from ``directory``.

    Raises :class:`PostNotFoundError` if there is no ``<identifier>.md``,
    before anything is read or rendered. Raises :class:`MalformedPostError`
    if the source has no body block after its front matter.
    """

    if not identifier:
        raise PostNotFoundError(identifier)

    path = post_source_path(directory, identifier)
    if not path.exists():
        raise PostNotFoundError(identifier)

    fragments = frontmatter.split_fragments(path.read_text(encoding="utf-8"))
    if len(fragments) < 2:
        raise MalformedPostError(path)

    header = frontmatter.parse(fragments[0])
    body = render_body(renderer, fragments[1], logger)
    return PostDocument(header, body, fragments[1])
