#!/usr/bin/env python3

import os
import sys

from flatblog.utils.global_mode import GlobalMode


def entrypoint() -> None:
    gm = GlobalMode.from_env(os.environ, sys.argv)

    # NOTE: rich is only pulled in by the logger, so initialization of
    # logging is deferred until we know we have something to run

    if not sys.argv:
        from flatblog.log import BlogConsoleLogger

        logger = BlogConsoleLogger(gm)
        logger.F("no argv?")
        sys.exit(1)

    gm.record_invocation(sys.argv[0], __file__)

    from flatblog.cli.main import main
    from flatblog.log import BlogConsoleLogger

    logger = BlogConsoleLogger(gm)
    sys.exit(main(gm, logger, sys.argv))


if __name__ == "__main__":
    entrypoint()
