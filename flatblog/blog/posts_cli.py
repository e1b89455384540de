import argparse
from typing import TYPE_CHECKING

from ..cli.cmd import BaseCommand

if TYPE_CHECKING:
    from ..config import SiteConfig


class ListCommand(
    BaseCommand,
    cmd="list",
    aliases=["ls"],
    help="List posts, newest first",
):
    @classmethod
    def main(cls, cfg: "SiteConfig", args: argparse.Namespace) -> int:
        from .posts import do_post_list

        return do_post_list(cfg)


class ReadCommand(
    BaseCommand,
    cmd="read",
    help="Read a post in the terminal",
    description="Outputs the post with the given ID (its file name without the .md suffix) to the console.",
):
    @classmethod
    def configure_args(cls, p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "post",
            type=str,
            help="ID of the post to read",
        )

    @classmethod
    def main(cls, cfg: "SiteConfig", args: argparse.Namespace) -> int:
        from .posts import do_post_read

        post_id: str = args.post
        return do_post_read(cfg, post_id)
