from typing import TYPE_CHECKING

from markupsafe import Markup
from werkzeug.wrappers import Response

from .routing import ViewSelector

if TYPE_CHECKING:
    from .app import BlogApp


def home(app: "BlogApp", sel: ViewSelector) -> Response:
    posts = app.store.index()
    return app.render("home.html.jinja", sel.status, posts=posts)


def show(app: "BlogApp", sel: ViewSelector) -> Response:
    post = app.store.get(sel.identifier)

    # the header image is optional and falls back to a plain title
    image_url = None
    if image := post.get("image"):
        # front matter values are HTML-escaped; the file name on disk is not
        if (app.config.images_dir / Markup(image).unescape()).is_file():
            image_url = Markup("{}/{}").format(app.config.images_url_prefix, Markup(image))

    return app.render("show.html.jinja", sel.status, post=post, image_url=image_url)


def about(app: "BlogApp", sel: ViewSelector) -> Response:
    return app.render("about.html.jinja", sel.status)


def not_found(app: "BlogApp", sel: ViewSelector) -> Response:
    return app.render("not_found.html.jinja", sel.status)
