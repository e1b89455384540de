from dataclasses import dataclass
import os
from typing import Final, Mapping, TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Self

ENV_DEBUG: Final = "FLATBLOG_DEBUG"
ENV_SITE_ROOT: Final = "FLATBLOG_SITE"

TRUTHY_ENV_VAR_VALUES: Final = {"1", "true", "x", "y", "yes"}


def is_env_var_truthy(env: Mapping[str, str], var: str) -> bool:
    if v := env.get(var):
        return v.lower() in TRUTHY_ENV_VAR_VALUES
    return False


def _wants_porcelain(argv: list[str]) -> bool:
    # --porcelain is a global flag, so it can only appear before the
    # subcommand name. Scanning stops at the first positional, which keeps
    # e.g. `flatblog read --porcelain` from matching.
    for arg in argv[1:]:
        if arg == "--porcelain":
            return True
        if not arg.startswith("-"):
            return False
    return False


@dataclass
class GlobalMode:
    """Process-wide switches known before any site config is read.

    The logger needs these before argparse has run, so porcelain mode is
    first guessed from argv and later overwritten with the parsed value.
    """

    is_debug: bool = False
    is_porcelain: bool = False
    site_root: str | None = None
    """Fallback site root for when ``--site`` is not given"""

    argv0: str = ""
    main_file: str = ""

    def record_invocation(self, argv0: str, main_file: str) -> None:
        self.argv0 = argv0
        self.main_file = main_file

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        argv: list[str] | None = None,
    ) -> "Self":
        if env is None:
            env = os.environ
        return cls(
            is_debug=is_env_var_truthy(env, ENV_DEBUG),
            is_porcelain=_wants_porcelain(argv or []),
            site_root=env.get(ENV_SITE_ROOT) or None,
        )
