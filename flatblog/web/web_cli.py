import argparse
from typing import TYPE_CHECKING

from ..cli.cmd import BaseCommand

if TYPE_CHECKING:
    from ..config import SiteConfig


class RenderCommand(
    BaseCommand,
    cmd="render",
    help="Render one page of the site to stdout",
):
    @classmethod
    def configure_args(cls, p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "path",
            type=str,
            nargs="?",
            default="/",
            help="URL path of the page to render (default: /)",
        )

    @classmethod
    def main(cls, cfg: "SiteConfig", args: argparse.Namespace) -> int:
        from .serving import do_render

        path: str = args.path
        return do_render(cfg, path)


class ServeCommand(
    BaseCommand,
    cmd="serve",
    help="Serve the site with the development web server",
):
    @classmethod
    def configure_args(cls, p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--host",
            type=str,
            default=None,
            help="Interface to listen on (default: from site config)",
        )
        p.add_argument(
            "--port",
            "-p",
            type=int,
            default=None,
            help="Port to listen on (default: from site config)",
        )

    @classmethod
    def main(cls, cfg: "SiteConfig", args: argparse.Namespace) -> int:
        from .serving import do_serve

        host: str | None = args.host
        port: int | None = args.port
        return do_serve(cfg, host, port)
