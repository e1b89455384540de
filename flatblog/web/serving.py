from rich.text import Text
from werkzeug.test import Client

from ..config import SiteConfig
from .app import BlogApp


def do_render(cfg: SiteConfig, path: str) -> int:
    """Renders a single URL path of the site to stdout."""

    logger = cfg.logger
    client = Client(BlogApp(cfg))
    resp = client.get(path)

    logger.I(f"{path}: {resp.status}")
    if resp.location is not None:
        logger.I(f"redirects to [yellow]{resp.location}[/]")

    logger.stdout(Text(resp.get_data(as_text=True)), end="")
    return 0 if resp.status_code < 400 else 1


def do_serve(cfg: SiteConfig, host: str | None, port: int | None) -> int:
    from werkzeug.serving import run_simple

    host = host or cfg.server_host
    port = port or cfg.server_port

    logger = cfg.logger
    logger.I(f"serving [green]{cfg.site_root}[/] at http://{host}:{port}/")

    run_simple(
        host,
        port,
        BlogApp(cfg),
        use_reloader=cfg.is_debug,
        use_debugger=cfg.is_debug,
        threaded=True,
    )
    return 0
