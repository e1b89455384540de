from typing import Final, Sequence

from .errors import (
    InvalidConfigKeyError,
    InvalidConfigSectionError,
    InvalidConfigValueError,
    InvalidConfigValueTypeError,
)


def parse_config_key(key: str | Sequence[str]) -> list[str]:
    if isinstance(key, str):
        return key.split(".")
    return list(key)


SECTION_SITE: Final = "site"
KEY_SITE_TITLE: Final = "title"
KEY_SITE_NOT_FOUND_PATH: Final = "not_found_path"

SECTION_CONTENT: Final = "content"
KEY_CONTENT_POSTS_DIR: Final = "posts_dir"
KEY_CONTENT_PUBLIC_DIR: Final = "public_dir"
KEY_CONTENT_IMAGES_DIR: Final = "images_dir"
KEY_CONTENT_TEMPLATES_DIR: Final = "templates_dir"

SECTION_SERVER: Final = "server"
KEY_SERVER_HOST: Final = "host"
KEY_SERVER_PORT: Final = "port"

_EXPECTED_TYPES: Final[dict[str, dict[str, type]]] = {
    SECTION_SITE: {
        KEY_SITE_TITLE: str,
        KEY_SITE_NOT_FOUND_PATH: str,
    },
    SECTION_CONTENT: {
        KEY_CONTENT_POSTS_DIR: str,
        KEY_CONTENT_PUBLIC_DIR: str,
        KEY_CONTENT_IMAGES_DIR: str,
        KEY_CONTENT_TEMPLATES_DIR: str,
    },
    SECTION_SERVER: {
        KEY_SERVER_HOST: str,
        KEY_SERVER_PORT: int,
    },
}


def validate_section(section: str) -> None:
    if section not in _EXPECTED_TYPES:
        raise InvalidConfigSectionError(section)


def get_expected_type_for_config_key(key: str | Sequence[str]) -> type:
    parsed_key = parse_config_key(key)
    if len(parsed_key) != 2:
        # for now there's no nested config option
        raise InvalidConfigKeyError(key)

    section, sel = parsed_key
    try:
        return _EXPECTED_TYPES[section][sel]
    except KeyError:
        raise InvalidConfigKeyError(key) from None


def ensure_valid_config_kv(
    key: str | Sequence[str],
    check_val: bool = False,
    val: object | None = None,
) -> None:
    expected_type = get_expected_type_for_config_key(key)
    if not check_val:
        return

    ensure_value_type(key, val, expected_type)

    section, sel = parse_config_key(key)
    if section == SECTION_SITE:
        return _extra_validate_section_site_kv(key, sel, val)
    elif section == SECTION_SERVER:
        return _extra_validate_section_server_kv(key, sel, val)


def ensure_value_type(
    key: str | Sequence[str],
    val: object | None,
    expected: type,
) -> None:
    # bool is a subclass of int, but `port = true` is not a valid port
    if isinstance(val, bool) and expected is not bool:
        raise InvalidConfigValueTypeError(key, val, expected)
    if not isinstance(val, expected):
        raise InvalidConfigValueTypeError(key, val, expected)


def _extra_validate_section_site_kv(
    key: str | Sequence[str],
    sel: str,
    val: object | None,
) -> None:
    if sel == KEY_SITE_NOT_FOUND_PATH:
        # value type is already ensured earlier
        assert isinstance(val, str)
        if not val.startswith("/"):
            raise InvalidConfigValueError(key, val, "must be an absolute URL path")


def _extra_validate_section_server_kv(
    key: str | Sequence[str],
    sel: str,
    val: object | None,
) -> None:
    if sel == KEY_SERVER_PORT:
        assert isinstance(val, int)
        if not 0 < val < 65536:
            raise InvalidConfigValueError(key, val, "must be a valid TCP port")
