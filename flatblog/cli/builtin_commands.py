from ..blog import posts_cli
from ..web import web_cli
from . import version_cli

# Should be kept in sync with the list of builtin commands
__all__ = [
    "posts_cli",
    "web_cli",
    "version_cli",
]
