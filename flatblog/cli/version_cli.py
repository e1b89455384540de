import argparse
from typing import TYPE_CHECKING

from .cmd import BaseCommand

if TYPE_CHECKING:
    from ..config import SiteConfig


class VersionCommand(
    BaseCommand,
    cmd="version",
    help="Print version information",
):
    @classmethod
    def main(cls, cfg: "SiteConfig", args: argparse.Namespace) -> int:
        return cli_version(cfg, args)


def cli_version(cfg: "SiteConfig", args: argparse.Namespace) -> int:
    from ..version import COPYRIGHT_NOTICE, FLATBLOG_SEMVER

    cfg.logger.stdout(f"flatblog {FLATBLOG_SEMVER}\n")
    cfg.logger.stdout(COPYRIGHT_NOTICE)
    return 0
