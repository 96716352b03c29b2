#!/usr/bin/env python3
"""
Public Access point for xopt Structures
"""
from __future__ import annotations

from xopt._structs.option_spec import OptionSpec
from xopt._structs.option_table import OptionTable
from xopt._structs.extras import ExtrasList
from xopt._structs.result import ParseResult
from xopt._structs.logger_spec import LoggerSpec
