import os
from typing import Any

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader


def make_html_env(override_dir: os.PathLike[Any] | str | None = None) -> Environment:
    """Returns a Jinja environment for the site's HTML views.

    Templates found in ``override_dir`` take precedence over the bundled
    ones, so a site can restyle any page or partial by dropping a file of the
    same name there.
    """

    loaders: list[BaseLoader] = []
    if override_dir is not None and os.path.isdir(override_dir):
        loaders.append(FileSystemLoader(override_dir))
    loaders.append(PackageLoader("flatblog.web", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=True,
        auto_reload=True,  # site templates may be edited while serving
        keep_trailing_newline=True,
    )


def render_template_str(env: Environment, template_name: str, data: dict[str, Any]) -> str:
    tmpl = env.get_template(template_name)
    return tmpl.render(data)
