import enum
from typing import NamedTuple


class ViewKind(enum.Enum):
    HOME = "home"
    SHOW = "show"
    ABOUT = "about"
    NOT_FOUND = "not_found"


class ViewSelector(NamedTuple):
    view: ViewKind
    identifier: str | None = None
    status: int = 200


def dispatch(path: str) -> ViewSelector:
    """Maps a URL path to the view that should handle it.

    Only the first path segment matters, except for ``/posts/<identifier>``.
    A missing identifier is passed on as ``None`` for the show view to deal
    with.
    """

    route = path.strip("/").split("/")
    head = route[0]

    if head == "":
        return ViewSelector(ViewKind.HOME)
    elif head == "posts":
        identifier = route[1] if len(route) > 1 else None
        return ViewSelector(ViewKind.SHOW, identifier or None)
    elif head == "about":
        return ViewSelector(ViewKind.ABOUT)
    else:
        return ViewSelector(ViewKind.NOT_FOUND, status=404)
