from tests.fixtures import (  # noqa: F401
    blog_logger,
    flatblog_cli_runner,
    mock_gm,
    site,
    site_config,
)
