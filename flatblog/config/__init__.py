from functools import cached_property
import os
import pathlib
from typing import Any, Final, Sequence, TypedDict, TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import NotRequired, Self

    from ..blog.store import PostStore
    from ..log import BlogLogger
    from ..utils.global_mode import GlobalMode

from . import errors
from . import schema


CONFIG_FILENAME: Final = "flatblog.toml"

DEFAULT_SITE_TITLE: Final = "flatblog"
DEFAULT_NOT_FOUND_PATH: Final = "/404"
DEFAULT_POSTS_DIR: Final = "posts"
DEFAULT_PUBLIC_DIR: Final = "public"
DEFAULT_IMAGES_DIR: Final = "images/posts"
DEFAULT_TEMPLATES_DIR: Final = "templates"
DEFAULT_SERVER_HOST: Final = "127.0.0.1"
DEFAULT_SERVER_PORT: Final = 8000


class SiteConfigSiteType(TypedDict):
    title: "NotRequired[str]"
    not_found_path: "NotRequired[str]"


class SiteConfigContentType(TypedDict):
    posts_dir: "NotRequired[str]"
    public_dir: "NotRequired[str]"
    images_dir: "NotRequired[str]"
    templates_dir: "NotRequired[str]"


class SiteConfigServerType(TypedDict):
    host: "NotRequired[str]"
    port: "NotRequired[int]"


class SiteConfigRootType(TypedDict):
    site: "NotRequired[SiteConfigSiteType]"
    content: "NotRequired[SiteConfigContentType]"
    server: "NotRequired[SiteConfigServerType]"


class SiteConfig:
    def __init__(
        self,
        gm: "GlobalMode",
        logger: "BlogLogger",
        site_root: os.PathLike[Any] | str,
    ) -> None:
        self._gm = gm
        self.logger = logger
        self.site_root = pathlib.Path(site_root)

        # all defaults
        self.title = DEFAULT_SITE_TITLE
        self.not_found_path = DEFAULT_NOT_FOUND_PATH
        self.posts_dir_name = DEFAULT_POSTS_DIR
        self.public_dir_name = DEFAULT_PUBLIC_DIR
        self.images_dir_name = DEFAULT_IMAGES_DIR
        self.templates_dir_name = DEFAULT_TEMPLATES_DIR
        self.server_host = DEFAULT_SERVER_HOST
        self.server_port = DEFAULT_SERVER_PORT

    def _apply_config(self, config_data: SiteConfigRootType) -> None:
        for section, kvs in config_data.items():
            schema.validate_section(section)
            if not isinstance(kvs, dict):
                raise errors.InvalidConfigSectionError(section)
            for k, v in kvs.items():
                self.set_by_key((section, k), v)

    def get_by_key(self, key: str | Sequence[str]) -> object:
        attr_name = self._get_attr_name_by_key(key)
        if attr_name is None:
            raise errors.InvalidConfigKeyError(key)
        return getattr(self, attr_name)

    def set_by_key(self, key: str | Sequence[str], value: object) -> None:
        attr_name = self._get_attr_name_by_key(key)
        if attr_name is None:
            raise errors.InvalidConfigKeyError(key)
        schema.ensure_valid_config_kv(key, True, value)
        setattr(self, attr_name, value)

    @classmethod
    def _get_attr_name_by_key(cls, key: str | Sequence[str]) -> str | None:
        parsed_key = schema.parse_config_key(key)
        if len(parsed_key) != 2:
            return None

        section, leaf = parsed_key
        if section == schema.SECTION_SITE:
            if leaf == schema.KEY_SITE_TITLE:
                return "title"
            elif leaf == schema.KEY_SITE_NOT_FOUND_PATH:
                return "not_found_path"
        elif section == schema.SECTION_CONTENT:
            if leaf == schema.KEY_CONTENT_POSTS_DIR:
                return "posts_dir_name"
            elif leaf == schema.KEY_CONTENT_PUBLIC_DIR:
                return "public_dir_name"
            elif leaf == schema.KEY_CONTENT_IMAGES_DIR:
                return "images_dir_name"
            elif leaf == schema.KEY_CONTENT_TEMPLATES_DIR:
                return "templates_dir_name"
        elif section == schema.SECTION_SERVER:
            if leaf == schema.KEY_SERVER_HOST:
                return "server_host"
            elif leaf == schema.KEY_SERVER_PORT:
                return "server_port"
        return None

    @property
    def is_debug(self) -> bool:
        return self._gm.is_debug

    @property
    def is_porcelain(self) -> bool:
        return self._gm.is_porcelain

    # Relative directories are resolved against the site root; absolute ones
    # are taken as-is (pathlib's `/` does exactly that).

    @property
    def posts_dir(self) -> pathlib.Path:
        return self.site_root / self.posts_dir_name

    @property
    def public_dir(self) -> pathlib.Path:
        return self.site_root / self.public_dir_name

    @property
    def images_dir(self) -> pathlib.Path:
        return self.public_dir / self.images_dir_name

    @property
    def images_url_prefix(self) -> str:
        return "/" + self.images_dir_name.strip("/")

    @property
    def templates_dir(self) -> pathlib.Path:
        return self.site_root / self.templates_dir_name

    @property
    def config_file(self) -> pathlib.Path:
        return self.site_root / CONFIG_FILENAME

    @cached_property
    def store(self) -> "PostStore":
        from ..blog.store import PostStore

        return PostStore(self)

    def _try_apply_config_file(self, path: os.PathLike[Any]) -> None:
        import tomlkit
        from tomlkit.exceptions import ParseError

        try:
            with open(path, "rb") as fp:
                data: Any = tomlkit.load(fp).unwrap()
        except FileNotFoundError:
            return
        except ParseError as e:
            raise errors.MalformedConfigFileError(path) from e

        self.logger.D(f"applying config: {data}")
        self._apply_config(data)

    @classmethod
    def load_from_config(
        cls,
        gm: "GlobalMode",
        logger: "BlogLogger",
        site_root: os.PathLike[Any] | str | None = None,
    ) -> "Self":
        if site_root is None:
            site_root = gm.site_root or os.getcwd()

        obj = cls(gm, logger, site_root)
        obj.logger.D(f"trying config file at site root: {obj.config_file}")
        obj._try_apply_config_file(obj.config_file)
        return obj
