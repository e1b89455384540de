from functools import cached_property
from typing import TYPE_CHECKING

from ..utils.frontmatter import FrontMatterRecord
from ..utils.markdown import CommonMarkRenderer, MarkdownRenderer
from ..utils.porcelain import PorcelainEntity, PorcelainEntityType
from .index import load_index
from .post import PostDocument, load_post

if TYPE_CHECKING:
    from ..config import SiteConfig


class PostStore:
    """Site-bound access to the post corpus.

    Nothing is cached between calls: every `index()` rescans the posts
    directory and every `get()` re-reads the post source.
    """

    def __init__(
        self,
        config: "SiteConfig",
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        self._config = config
        self._logger = config.logger
        self._renderer_override = renderer

    @cached_property
    def renderer(self) -> MarkdownRenderer:
        if self._renderer_override is not None:
            return self._renderer_override
        return CommonMarkRenderer()

    @property
    def posts_dir(self) -> str:
        return str(self._config.posts_dir)

    def index(self) -> list[FrontMatterRecord]:
        self._logger.D(f"building post index from {self.posts_dir}")
        records = load_index(self.posts_dir)
        self._logger.D(f"indexed {len(records)} post(s)")
        return records

    def get(self, identifier: str | None) -> PostDocument:
        self._logger.D(f"loading post '{identifier}' from {self.posts_dir}")
        return load_post(identifier, self.posts_dir, self.renderer, self._logger)


def index_entry_to_porcelain(record: FrontMatterRecord) -> "PorcelainPostIndexEntryV1":
    return {
        "ty": PorcelainEntityType.PostIndexEntryV1,
        "slug": record.get("slug", ""),
        "title": record.get("title", ""),
        "published_at": record.get("published_at", ""),
        "metadata": dict(record),
    }


def post_to_porcelain(identifier: str, doc: PostDocument) -> "PorcelainPostV1":
    return {
        "ty": PorcelainEntityType.PostV1,
        "id": identifier,
        "title": doc.title,
        "metadata": dict(doc.header),
        "html": doc.body,
    }


class PorcelainPostIndexEntryV1(PorcelainEntity):
    slug: str
    title: str
    published_at: str
    metadata: dict[str, str]


class PorcelainPostV1(PorcelainEntity):
    id: str
    title: str
    metadata: dict[str, str]
    html: str
