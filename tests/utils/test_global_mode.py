from flatblog.utils.global_mode import (
    ENV_DEBUG,
    ENV_SITE_ROOT,
    GlobalMode,
    is_env_var_truthy,
)


def test_is_env_var_truthy() -> None:
    env = {"A": "1", "B": "YES", "C": "0", "D": "", "E": "no"}
    assert is_env_var_truthy(env, "A")
    assert is_env_var_truthy(env, "B")
    assert not is_env_var_truthy(env, "C")
    assert not is_env_var_truthy(env, "D")
    assert not is_env_var_truthy(env, "E")
    assert not is_env_var_truthy(env, "F")


def test_global_mode_from_env() -> None:
    gm = GlobalMode.from_env({ENV_DEBUG: "true", ENV_SITE_ROOT: "/srv/blog"})
    assert gm.is_debug
    assert not gm.is_porcelain
    assert gm.site_root == "/srv/blog"

    gm = GlobalMode.from_env({ENV_SITE_ROOT: ""})
    assert gm == GlobalMode()
    assert gm.site_root is None

    gm.record_invocation("flatblog", "/x/__main__.py")
    assert gm.argv0 == "flatblog"
    assert gm.main_file == "/x/__main__.py"


def test_porcelain_guess_from_argv() -> None:
    gm = GlobalMode.from_env({}, ["flatblog", "--porcelain", "list"])
    assert gm.is_porcelain

    gm = GlobalMode.from_env({}, ["flatblog", "-V", "--porcelain"])
    assert gm.is_porcelain

    gm = GlobalMode.from_env({}, ["flatblog", "--site", "x", "--porcelain", "list"])
    assert not gm.is_porcelain  # "x" stops the scan

    # flags after the subcommand are not global ones
    gm = GlobalMode.from_env({}, ["flatblog", "read", "--porcelain"])
    assert not gm.is_porcelain

    gm.is_porcelain = True
    assert gm.is_porcelain
