from flatblog.blog.store import PostStore, index_entry_to_porcelain, post_to_porcelain
from flatblog.config import SiteConfig
from flatblog.utils.porcelain import PorcelainEntityType

from ..fixtures import SiteFixture


def test_post_store(site: SiteFixture, site_config: SiteConfig) -> None:
    site.add_post("a", "A", "2024-01-01")
    site.add_post("b", "B", "2024-01-02")

    store = site_config.store
    assert store is site_config.store
    assert [r["title"] for r in store.index()] == ["B", "A"]
    assert store.get("a").title == "A"

    # the index is rebuilt on every call
    site.add_post("c", "C", "2024-01-03")
    assert [r["title"] for r in store.index()] == ["C", "B", "A"]


def test_post_store_custom_renderer(site: SiteFixture, site_config: SiteConfig) -> None:
    class UpperRenderer:
        def render(self, text: str) -> str:
            return text.upper()

    site.add_post("a", "A", body="hello")
    store = PostStore(site_config, UpperRenderer())
    assert store.get("a").body == "HELLO"


def test_porcelain_conversion(site: SiteFixture, site_config: SiteConfig) -> None:
    site.add_post("hello", "Hello", "2024-03-01", slug="hello")

    (record,) = site_config.store.index()
    entry = index_entry_to_porcelain(record)
    assert entry["ty"] == PorcelainEntityType.PostIndexEntryV1
    assert entry["slug"] == "hello"
    assert entry["title"] == "Hello"
    assert entry["published_at"] == "2024-03-01"
    assert entry["metadata"]["title"] == "Hello"

    post = post_to_porcelain("hello", site_config.store.get("hello"))
    assert post["ty"] == PorcelainEntityType.PostV1
    assert post["id"] == "hello"
    assert post["title"] == "Hello"
    assert post["html"].startswith("<h1>")
