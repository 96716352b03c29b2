#!/usr/bin/env python3
"""
Rendering of usage text from an option table.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import Iterable

# ##-- end stdlib imports

# ##-- 1st party imports
from xopt._interface import HELP_PAD
from xopt._structs.option_spec import OptionSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

DEFAULT_USAGE = "[opts...]"

def render_help(name:str, options:Iterable[OptionSpec], *, usage:None|str=None, prefix:None|str=None, suffix:None|str=None, pad:int=HELP_PAD) -> str:
    """
    usage: {name} {usage}

    {prefix}

      -s, --long=VALUE        description
      ...

    {suffix}
    """
    lines = [f"usage: {name} {usage or DEFAULT_USAGE}"]
    if prefix:
        lines += ["", prefix]

    rows = [_option_line(x, pad) for x in options]
    if rows:
        lines.append("")
        lines += rows

    if suffix:
        lines += ["", suffix]

    return "\n".join(lines)

def _option_line(option:OptionSpec, pad:int) -> str:
    key = option.usage_key()
    if option.short is None:
        # align long only options with the long column of the others
        key = f"    {key}"

    if pad <= len(key):
        return f"  {key}  {option.desc}"

    return f"  {key:<{pad}}{option.desc}"
