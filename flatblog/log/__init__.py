import abc
import datetime
from functools import cached_property
import io
import sys
import time
from typing import Any, Final, TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    # rich is only needed once something is actually printed
    from rich.console import Console, RenderableType
    from rich.text import Text

from ..utils.global_mode import GlobalMode
from ..utils.porcelain import PorcelainEntity, PorcelainEntityType, PorcelainOutput

# Levels are single letters: D(ebug), F(atal), I(nfo), W(arn).
LEVEL_PREFIXES: Final = {
    "F": "[bold red]fatal error:[/]",
    "I": "[bold green]info:[/]",
    "W": "[bold yellow]warn:[/]",
}


class PorcelainLogV1(PorcelainEntity):
    t: int
    """Timestamp of the message line in microseconds"""

    lvl: str
    msg: str
    """Message with console markup rendered away"""


def _debug_time_format(x: datetime.datetime) -> "Text":
    from rich.text import Text

    return Text(f"debug: [{x.isoformat()}]")


def _render_plain(message: "RenderableType", *objects: Any, sep: str) -> str:
    from rich.console import Console

    with io.StringIO() as buf:
        Console(file=buf).print(message, *objects, sep=sep, end="")
        return buf.getvalue()


class BlogLogger(metaclass=abc.ABCMeta):
    """Where flatblog's output and diagnostics go.

    Primary output (post listings, posts read in the terminal, rendered
    pages) goes through `stdout` or `porcelain_output`. Everything else is a
    leveled log line, which the web app and the CLI share.
    """

    @abc.abstractmethod
    def stdout(
        self,
        message: "RenderableType",
        *objects: Any,
        sep: str = " ",
        end: str = "\n",
    ) -> None: ...

    @abc.abstractmethod
    def porcelain_output(self) -> PorcelainOutput: ...

    @abc.abstractmethod
    def log(self, lvl: str, message: "RenderableType", *objects: Any, sep: str = " ") -> None:
        """Emits one log line at level ``lvl``."""

    def D(self, message: "RenderableType", *objects: Any, sep: str = " ") -> None:
        self.log("D", message, *objects, sep=sep)

    def F(self, message: "RenderableType", *objects: Any, sep: str = " ") -> None:
        self.log("F", message, *objects, sep=sep)

    def I(self, message: "RenderableType", *objects: Any, sep: str = " ") -> None:  # noqa: E743
        self.log("I", message, *objects, sep=sep)

    def W(self, message: "RenderableType", *objects: Any, sep: str = " ") -> None:
        self.log("W", message, *objects, sep=sep)


class BlogConsoleLogger(BlogLogger):
    """Logs to stderr and prints output to stdout, through rich consoles.

    Debug lines are dropped unless debug mode is on. In porcelain mode every
    log line becomes a `log-v1` entity on stderr, leaving stdout to the
    porcelain output proper.
    """

    def __init__(
        self,
        gm: GlobalMode,
        stdout: TextIO = sys.stdout,
        stderr: TextIO = sys.stderr,
    ) -> None:
        self._gm = gm
        self._stdout = stdout
        self._stderr = stderr

    @cached_property
    def _out_console(self) -> "Console":
        from rich.console import Console

        return Console(file=self._stdout, highlight=False, soft_wrap=True)

    @cached_property
    def _err_console(self) -> "Console":
        from rich.console import Console

        return Console(
            file=self._stderr,
            highlight=False,
            soft_wrap=True,
            log_time_format=_debug_time_format,
        )

    def stdout(
        self,
        message: "RenderableType",
        *objects: Any,
        sep: str = " ",
        end: str = "\n",
    ) -> None:
        self._out_console.print(message, *objects, sep=sep, end=end)

    def porcelain_output(self) -> PorcelainOutput:
        return PorcelainOutput(self._stdout)

    def log(self, lvl: str, message: "RenderableType", *objects: Any, sep: str = " ") -> None:
        if lvl == "D" and not self._gm.is_debug:
            return

        if self._gm.is_porcelain:
            entry: PorcelainLogV1 = {
                "ty": PorcelainEntityType.LogV1,
                "t": int(time.time() * 1000000),
                "lvl": lvl,
                "msg": _render_plain(message, *objects, sep=sep),
            }
            with PorcelainOutput(self._stderr) as po:
                po.emit(entry)
            return

        if lvl == "D":
            # report the location that called D(), not log() or D() itself
            self._err_console.log(message, *objects, sep=sep, _stack_offset=3)
            return

        self._err_console.print(f"{LEVEL_PREFIXES[lvl]} {message}", *objects, sep=sep)
