from markupsafe import Markup
from rich import box
from rich.table import Table
from rich.text import Text

from ..config import SiteConfig
from ..log import BlogLogger
from ..utils.frontmatter import FrontMatterRecord
from ..utils.markdown import PostStyledMarkdown
from .post import MalformedPostError, PostDocument, PostNotFoundError
from .store import index_entry_to_porcelain, post_to_porcelain


def _plain(v: str) -> str:
    # front matter values are stored HTML-escaped
    return Markup(v).unescape()


def print_post_index(logger: BlogLogger, records: list[FrontMatterRecord]) -> None:
    tbl = Table(box=box.SIMPLE, show_edge=False)
    tbl.add_column("Published")
    tbl.add_column("Slug")
    tbl.add_column("Title")
    tbl.add_column("Author")

    for r in records:
        tbl.add_row(
            Text(_plain(r.get("published_at", ""))),
            Text(_plain(r.get("slug", "")), style="bold green"),
            Text(_plain(r.get("title", ""))),
            Text(_plain(r.get("author", ""))),
        )

    logger.stdout(tbl)


def print_post(logger: BlogLogger, doc: PostDocument) -> None:
    logger.stdout(Text(_plain(doc.title), style="bold"))

    meta = [_plain(doc.get(k)) for k in ("published_at", "author")]
    if meta_line := " | ".join(x for x in meta if x):
        logger.stdout(Text(meta_line, style="dim"))

    logger.stdout("")
    logger.stdout(PostStyledMarkdown(doc.source))
    logger.stdout("")


def _ensure_posts_dir(cfg: SiteConfig) -> bool:
    if cfg.posts_dir.is_dir():
        return True
    cfg.logger.F(f"posts directory [yellow]{cfg.posts_dir}[/] does not exist")
    cfg.logger.I("pass [yellow]--site[/] to point at the site root")
    return False


def do_post_list(cfg: SiteConfig) -> int:
    logger = cfg.logger
    if not _ensure_posts_dir(cfg):
        return 1

    records = cfg.store.index()

    if cfg.is_porcelain:
        with logger.porcelain_output() as po:
            po.emit_all(index_entry_to_porcelain(r) for r in records)
        return 0

    logger.stdout("[bold green]Posts:[/]\n")
    if not records:
        logger.stdout("  (no post)")
        return 0

    print_post_index(logger, records)
    return 0


def do_post_read(cfg: SiteConfig, identifier: str) -> int:
    logger = cfg.logger
    if not _ensure_posts_dir(cfg):
        return 1

    try:
        doc = cfg.store.get(identifier)
    except PostNotFoundError:
        logger.F(f"there is no post with ID '{identifier}'")
        return 1
    except MalformedPostError as e:
        logger.F(str(e))
        return 1

    if cfg.is_porcelain:
        with logger.porcelain_output() as po:
            po.emit(post_to_porcelain(identifier, doc))
        return 0

    print_post(logger, doc)
    return 0
