import sys
from typing import TYPE_CHECKING

from ..config import SiteConfig
from ..config.errors import SiteConfigError
from ..log import BlogLogger
from ..utils.global_mode import GlobalMode

if TYPE_CHECKING:
    from .cmd import CLIEntrypoint


def main(gm: GlobalMode, logger: BlogLogger, argv: list[str]) -> int:
    from .cmd import build_argparse
    from . import builtin_commands

    del builtin_commands

    args = build_argparse().parse_args(argv[1:])
    gm.is_porcelain = args.porcelain

    logger.D(f"__main__.__file__ = {gm.main_file}, sys.executable = {sys.executable}")
    logger.D(f"argv[0] = {gm.argv0}, args = {args}")

    try:
        cfg = SiteConfig.load_from_config(gm, logger, args.site)
    except SiteConfigError as e:
        logger.F(f"cannot load site config: {e}")
        return 1

    func: "CLIEntrypoint" = args.func
    return func(cfg, args)
