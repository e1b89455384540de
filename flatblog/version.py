from typing import Final

FLATBLOG_SEMVER: Final = "0.3.0"

COPYRIGHT_NOTICE: Final = """\
Copyright (C) flatblog contributors.
License: Apache-2.0 <https://www.apache.org/licenses/LICENSE-2.0>
\
"""
