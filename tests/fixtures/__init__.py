from contextlib import redirect_stderr, redirect_stdout
from dataclasses import dataclass
import io
import pathlib

import pytest

from flatblog.cli.main import main as flatblog_main
from flatblog.config import SiteConfig
from flatblog.log import BlogConsoleLogger, BlogLogger
from flatblog.utils.global_mode import GlobalMode


def make_post_source(
    title: str,
    published_at: str | None = None,
    body: str = "# Hello\n\nSome text.\n",
    **metadata: str,
) -> str:
    lines = [f"title: {title}"]
    if published_at is not None:
        lines.append(f"published_at: {published_at}")
    lines.extend(f"{k}: {v}" for k, v in metadata.items())
    return "---\n" + "\n".join(lines) + "\n---\n" + body


class SiteFixture:
    """A throwaway site root with a posts directory."""

    def __init__(self, root: pathlib.Path) -> None:
        self.root = root
        self.posts_dir = root / "posts"
        self.posts_dir.mkdir(parents=True, exist_ok=True)

    def add_file(self, name: str, content: str) -> pathlib.Path:
        path = self.posts_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    def add_post(
        self,
        post_id: str,
        title: str,
        published_at: str | None = None,
        body: str = "# Hello\n\nSome text.\n",
        **metadata: str,
    ) -> pathlib.Path:
        content = make_post_source(title, published_at, body, **metadata)
        return self.add_file(f"{post_id}.md", content)

    def add_image(self, name: str) -> pathlib.Path:
        images_dir = self.root / "public" / "images" / "posts"
        images_dir.mkdir(parents=True, exist_ok=True)
        path = images_dir / name
        path.write_bytes(b"\x89PNG\r\n\x1a\n")
        return path

    def write_config(self, content: str) -> pathlib.Path:
        path = self.root / "flatblog.toml"
        path.write_text(content, encoding="utf-8")
        return path


@pytest.fixture
def mock_gm() -> GlobalMode:
    return GlobalMode(argv0="flatblog", main_file="flatblog/__main__.py")


@pytest.fixture
def blog_logger(mock_gm: GlobalMode) -> BlogLogger:
    """Fixture for creating a BlogLogger instance."""
    return BlogConsoleLogger(mock_gm)


@pytest.fixture
def site(tmp_path: pathlib.Path) -> SiteFixture:
    return SiteFixture(tmp_path / "site")


@pytest.fixture
def site_config(
    site: SiteFixture,
    mock_gm: GlobalMode,
    blog_logger: BlogLogger,
) -> SiteConfig:
    return SiteConfig(mock_gm, blog_logger, site.root)


@dataclass
class CLIRunResult:
    exit_code: int
    stdout: str
    stderr: str


class CLITestHarness:
    def __init__(self, env: dict[str, str], site: SiteFixture) -> None:
        self._env = env
        self.site = site

    def __call__(self, *args: str) -> CLIRunResult:
        return self.run(*args)

    def run(self, *args: str) -> CLIRunResult:
        argv = ["flatblog", "--site", str(self.site.root), *args]
        stdout_io = io.StringIO()
        stderr_io = io.StringIO()
        with redirect_stdout(stdout_io), redirect_stderr(stderr_io):
            gm = GlobalMode.from_env(self._env, argv)
            gm.record_invocation(argv[0], __file__)
            logger = BlogConsoleLogger(gm, stdout=stdout_io, stderr=stderr_io)
            exit_code = flatblog_main(gm, logger, argv)
        return CLIRunResult(exit_code, stdout_io.getvalue(), stderr_io.getvalue())


@pytest.fixture
def flatblog_cli_runner(site: SiteFixture) -> CLITestHarness:
    return CLITestHarness(env={}, site=site)
