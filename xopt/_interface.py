#!/usr/bin/env python3
"""
Shared constants and exit codes for xopt.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from importlib.metadata import PackageNotFoundError, version
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from typing import ClassVar, Any

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
try:
    __version__ = version("xopt")
except PackageNotFoundError:
    __version__ = "0.0.0"

# -- token markers
MARKER             : Final[str]              = "-"
MAX_MARKERS        : Final[int]              = 2
LONG_SEP           : Final[str]              = "="
DOUBLE_DASH_TOKEN  : Final[str]              = "--"

# -- extras growth
EXTRAS_INIT        : Final[int]              = 10
EXTRAS_STEP        : Final[int]              = 10

# -- config
TOOL_PREFIX        : Final[str]              = "tool.xopt"
XOPT_PREFIX        : Final[str]              = "xopt"
XOPT_TOML          : Final[str]              = "xopt.toml"
PYPROJ_TOML        : Final[str]              = "pyproject.toml"
DEFAULT_FILENAMES  : Final[tuple[str, ...]]  = (XOPT_TOML, PYPROJ_TOML)

# -- help
HELP_PAD           : Final[int]              = 24
DEFAULT_ARG_DESC   : Final[str]              = "VALUE"

TRUE_STRS          : Final[frozenset[str]]   = frozenset({"1", "true", "yes", "on", "y", "t"})
FALSE_STRS         : Final[frozenset[str]]   = frozenset({"0", "false", "no", "off", "n", "f"})

##--|
class ExitCodes(enum.IntEnum):
    SUCCESS          = 0
    PARSE_FAIL       = 1
    BAD_CONFIG       = 2
    UNKNOWN_FAIL     = 3
