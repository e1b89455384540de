import enum
import json
import sys
from typing import Iterable, TextIO, TypedDict, TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Self

if sys.version_info >= (3, 11):

    class PorcelainEntityType(enum.StrEnum):
        LogV1 = "log-v1"
        PostIndexEntryV1 = "post-index-entry-v1"
        PostV1 = "post-v1"

else:

    class PorcelainEntityType(str, enum.Enum):
        LogV1 = "log-v1"
        PostIndexEntryV1 = "post-index-entry-v1"
        PostV1 = "post-v1"


class PorcelainEntity(TypedDict):
    ty: PorcelainEntityType


def dumps_entity(obj: PorcelainEntity) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


class PorcelainOutput:
    """JSON Lines sink for ``--porcelain`` mode, one entity per line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = sys.stdout if stream is None else stream

    def __enter__(self) -> "Self":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._stream.flush()

    def emit(self, obj: PorcelainEntity) -> None:
        self._stream.write(dumps_entity(obj) + "\n")

    def emit_all(self, objs: Iterable[PorcelainEntity]) -> int:
        n = 0
        for obj in objs:
            self.emit(obj)
            n += 1
        return n
