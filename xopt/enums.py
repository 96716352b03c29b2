#!/usr/bin/env python3
"""
These are the core enums and flags used to convey parse configuration around xopt.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import functools as ftz
from typing import Iterable

# ##-- end stdlib imports

class Context_f(enum.Flag):
    """ Flags to control how a context parses an argument vector.
      Each is independent of the others.
    """
    KEEP_FIRST       = enum.auto()
    STRICT_ORDERING  = enum.auto()
    NO_CONDENSE      = enum.auto()
    SLOPPY_SHORTS    = enum.auto()
    STRICT           = enum.auto()
    DOUBLE_DASH      = enum.auto()

    @classmethod
    def build(cls, vals:str|Iterable[str]|Context_f|None) -> Context_f:
        """ Build a flag set from names, eg: ["strict", "no-condense"] """
        match vals:
            case None:
                return cls(0)
            case Context_f():
                return vals
            case str():
                vals = [vals]
            case _:
                pass

        vals   = list(vals)
        names  = [x.strip().upper().replace("-", "_") for x in vals]
        if (missing:=[x for x, name in zip(vals, names) if name not in cls.__members__]):
            raise KeyError("Unknown context flags", missing)

        return ftz.reduce(lambda acc, x: acc | cls[x], names, cls(0))

class TokenSize_e(enum.IntEnum):
    """ The number of leading markers on a token, capped at 2 """
    EXTRA  = 0
    SHORT  = 1
    LONG   = 2
