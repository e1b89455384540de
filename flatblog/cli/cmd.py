import argparse
from typing import Callable, TYPE_CHECKING

from . import ENTRYPOINT_NAME

if TYPE_CHECKING:
    from ..config import SiteConfig

    CLIEntrypoint = Callable[["SiteConfig", argparse.Namespace], int]


class BaseCommand:
    """A ``flatblog`` subcommand.

    Subclasses register themselves when defined, passing the command name
    and argparse metadata as class keywords::

        class ListCommand(BaseCommand, cmd="list", help="..."): ...

    Only modules imported by `builtin_commands` end up in the CLI.
    """

    registry: "list[type[BaseCommand]]" = []

    cmd: str
    aliases: list[str]
    help: str | None
    description: str | None

    def __init_subclass__(
        cls,
        cmd: str,
        aliases: list[str] | None = None,
        help: str | None = None,
        description: str | None = None,
        **kwargs: object,
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls.cmd = cmd
        cls.aliases = aliases or []
        cls.help = help
        cls.description = description
        BaseCommand.registry.append(cls)

    @classmethod
    def configure_args(cls, p: argparse.ArgumentParser) -> None:
        pass

    @classmethod
    def main(cls, cfg: "SiteConfig", args: argparse.Namespace) -> int:
        raise NotImplementedError


def _configure_global_args(p: argparse.ArgumentParser) -> None:
    from .version_cli import cli_version

    p.add_argument(
        "-V",
        "--version",
        action="store_const",
        dest="func",
        const=cli_version,
        help="Print version information",
    )
    p.add_argument(
        "--porcelain",
        action="store_true",
        help="Give the output in a machine-friendly format if applicable",
    )
    p.add_argument(
        "--site",
        type=str,
        default=None,
        help="Root directory of the site (defaults to $FLATBLOG_SITE or the current directory)",
    )


def build_argparse() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=ENTRYPOINT_NAME,
        description="Render a blog from a directory of markdown posts",
    )
    _configure_global_args(p)

    # a bare `flatblog` prints the usage
    def _print_help(cfg: "SiteConfig", args: argparse.Namespace) -> int:
        p.print_help()
        return 0

    p.set_defaults(func=_print_help)

    sp = p.add_subparsers(title="subcommands")
    for cmd_cls in BaseCommand.registry:
        subp = sp.add_parser(
            cmd_cls.cmd,
            aliases=cmd_cls.aliases,
            help=cmd_cls.help,
            description=cmd_cls.description or cmd_cls.help,
        )
        cmd_cls.configure_args(subp)
        subp.set_defaults(func=cmd_cls.main)

    return p
