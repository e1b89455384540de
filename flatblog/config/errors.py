from os import PathLike
from typing import Any, Sequence


def format_key(key: str | Sequence[str]) -> str:
    return key if isinstance(key, str) else ".".join(key)


class SiteConfigError(Exception):
    """A site's ``flatblog.toml`` cannot be applied."""


class InvalidConfigSectionError(SiteConfigError):
    def __init__(self, section: str) -> None:
        super().__init__(section)
        self.section = section

    def __str__(self) -> str:
        return f"invalid config section: {self.section}"


class InvalidConfigKeyError(SiteConfigError):
    def __init__(self, key: str | Sequence[str]) -> None:
        super().__init__(key)
        self.key = format_key(key)

    def __str__(self) -> str:
        return f"invalid config key: {self.key}"


class InvalidConfigValueTypeError(SiteConfigError, TypeError):
    def __init__(self, key: str | Sequence[str], val: object, expected: type) -> None:
        super().__init__(key, val, expected)
        self.key = format_key(key)
        self.val = val
        self.expected = expected

    def __str__(self) -> str:
        return f"config key {self.key} expects type {self.expected.__name__}, got {self.val!r}"


class InvalidConfigValueError(SiteConfigError, ValueError):
    def __init__(self, key: str | Sequence[str], val: object, reason: str) -> None:
        super().__init__(key, val, reason)
        self.key = format_key(key)
        self.val = val
        self.reason = reason

    def __str__(self) -> str:
        return f"invalid config value for key {self.key}: {self.val!r} ({self.reason})"


class MalformedConfigFileError(SiteConfigError):
    def __init__(self, path: PathLike[Any]) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"malformed config file: {self.path}"
