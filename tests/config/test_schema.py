import pytest

from flatblog.config import errors, schema


def test_parse_config_key() -> None:
    assert schema.parse_config_key("site.title") == ["site", "title"]
    assert schema.parse_config_key(["site", "title"]) == ["site", "title"]
    assert schema.parse_config_key("site") == ["site"]


def test_get_expected_type_for_config_key() -> None:
    assert schema.get_expected_type_for_config_key("site.title") is str
    assert schema.get_expected_type_for_config_key("server.port") is int

    with pytest.raises(errors.InvalidConfigKeyError):
        schema.get_expected_type_for_config_key("site.nonexistent")
    with pytest.raises(errors.InvalidConfigKeyError):
        schema.get_expected_type_for_config_key("nonexistent.title")
    with pytest.raises(errors.InvalidConfigKeyError):
        schema.get_expected_type_for_config_key("site")


def test_ensure_valid_config_kv() -> None:
    schema.ensure_valid_config_kv("site.title")
    schema.ensure_valid_config_kv("site.title", True, "My blog")
    schema.ensure_valid_config_kv("site.not_found_path", True, "/404")
    schema.ensure_valid_config_kv("server.port", True, 1)
    schema.ensure_valid_config_kv("server.port", True, 65535)

    with pytest.raises(errors.InvalidConfigValueTypeError):
        schema.ensure_valid_config_kv("server.port", True, "8000")
    with pytest.raises(errors.InvalidConfigValueTypeError):
        schema.ensure_valid_config_kv("server.port", True, False)
    with pytest.raises(errors.InvalidConfigValueError):
        schema.ensure_valid_config_kv("server.port", True, 0)
    with pytest.raises(errors.InvalidConfigValueError):
        schema.ensure_valid_config_kv("site.not_found_path", True, "404")


def test_error_messages() -> None:
    e = errors.InvalidConfigValueError("server.port", 0, "must be a valid TCP port")
    assert str(e) == "invalid config value for key server.port: 0 (must be a valid TCP port)"
    assert str(errors.InvalidConfigSectionError("foo")) == "invalid config section: foo"
    assert str(errors.InvalidConfigKeyError("site.foo")) == "invalid config key: site.foo"

    # sequence keys are shown dotted
    assert str(errors.InvalidConfigKeyError(["site", "foo"])) == "invalid config key: site.foo"
    e2 = errors.InvalidConfigValueTypeError(("server", "port"), "80", int)
    assert str(e2) == "config key server.port expects type int, got '80'"


def test_error_hierarchy() -> None:
    for e in (
        errors.InvalidConfigSectionError("foo"),
        errors.InvalidConfigKeyError("site.foo"),
        errors.InvalidConfigValueTypeError("site.title", 1, str),
        errors.InvalidConfigValueError("server.port", 0, "bad"),
    ):
        assert isinstance(e, errors.SiteConfigError)

    assert isinstance(errors.InvalidConfigValueTypeError("site.title", 1, str), TypeError)
    assert isinstance(errors.InvalidConfigValueError("server.port", 0, "bad"), ValueError)
