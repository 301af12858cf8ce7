# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

__version__ = "0.3.0"

_match = re.match(r"(\d+)\.(\d+)\.(\d+)(?:(a|b|rc)(\d+))?$", __version__)
_level, _serial = _match.group(4, 5)

version_info = VersionInfo(
    int(_match.group(1)),
    int(_match.group(2)),
    int(_match.group(3)),
    {"a": "alpha", "b": "beta", "rc": "candidate"}.get(_level, "final"),
    int(_serial) if _serial else 0,
)
