from typing import Any, Callable, Final, Iterable, TYPE_CHECKING

from werkzeug.exceptions import HTTPException, InternalServerError
from werkzeug.middleware.shared_data import SharedDataMiddleware
from werkzeug.utils import redirect
from werkzeug.wrappers import Request, Response

from ..blog.post import MalformedPostError, PostNotFoundError
from ..utils.templating import make_html_env, render_template_str
from . import views
from .routing import ViewKind, ViewSelector, dispatch

if TYPE_CHECKING:
    from _typeshed.wsgi import StartResponse, WSGIApplication, WSGIEnvironment

    from ..blog.store import PostStore
    from ..config import SiteConfig

    ViewFunc = Callable[["BlogApp", ViewSelector], Response]

VIEWS: "Final[dict[ViewKind, ViewFunc]]" = {
    ViewKind.HOME: views.home,
    ViewKind.SHOW: views.show,
    ViewKind.ABOUT: views.about,
    ViewKind.NOT_FOUND: views.not_found,
}


class BlogApp:
    """WSGI application serving a flatblog site.

    Static files under the site's public directory are served as-is; every
    other request goes through `dispatch`.
    """

    def __init__(self, config: "SiteConfig", store: "PostStore | None" = None) -> None:
        self.config = config
        self.logger = config.logger
        self.store = config.store if store is None else store
        self.jinja_env = make_html_env(config.templates_dir)

        self.wsgi_app: "WSGIApplication" = self._wsgi_app
        if config.public_dir.is_dir():
            self.wsgi_app = SharedDataMiddleware(
                self.wsgi_app,
                {"/": str(config.public_dir)},
            )

    def render(self, template_name: str, status: int, **context: Any) -> Response:
        context.setdefault("site_title", self.config.title)
        html = render_template_str(self.jinja_env, template_name, context)
        return Response(html, status=status, mimetype="text/html")

    def dispatch_request(self, request: Request) -> Response | HTTPException:
        sel = dispatch(request.path)
        self.logger.D(f"{request.method} {request.path} -> {sel}")

        try:
            return VIEWS[sel.view](self, sel)
        except PostNotFoundError as e:
            self.logger.D(f"{e}, redirecting to {self.config.not_found_path}")
            return redirect(self.config.not_found_path, 302)
        except MalformedPostError as e:
            self.logger.F(str(e))
            return InternalServerError()

    def _wsgi_app(
        self,
        environ: "WSGIEnvironment",
        start_response: "StartResponse",
    ) -> Iterable[bytes]:
        request = Request(environ)
        response = self.dispatch_request(request)
        return response(environ, start_response)

    def __call__(
        self,
        environ: "WSGIEnvironment",
        start_response: "StartResponse",
    ) -> Iterable[bytes]:
        return self.wsgi_app(environ, start_response)
