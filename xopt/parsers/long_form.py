#!/usr/bin/env python3
"""
Expansion of double marker tokens: --verbose, --output=file, --output file

"""
##-- imports
from __future__ import annotations

import logging as logmod
from collections.abc import Sequence
from typing import Any

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import xopt.errors as xerrs
from xopt._abstract import OptionTable_p, TokenExpander_i
from xopt._interface import LONG_SEP
from xopt.enums import Context_f
from xopt.utils.check_protocol import check_protocol

@check_protocol
class LongFormExpander(TokenExpander_i):
    """
    Resolves the name after a double marker against the option table.
    The name can carry an inline value after the separator,
    otherwise a value requiring option consumes the next token.
    """

    def __init__(self, options:OptionTable_p, flags:Context_f):
        self._options = options
        self._strict  = Context_f.STRICT in flags

    def expand(self, content:str, args:Sequence[str], idx:int, data:Any) -> int:
        name, sep, value = content.partition(LONG_SEP)
        match name:
            case "":
                option, requires_value = None, False
            case _:
                option, requires_value = self._options.lookup(name, long=True)

        match option:
            case None if self._strict:
                raise xerrs.UnknownOption("invalid argument: --%s", name)
            case None:
                logging.debug("Ignoring unknown long: --%s", name)
            case _ if bool(sep):
                option.assign(data, value)
            case _ if requires_value and idx + 1 < len(args):
                idx += 1
                option.assign(data, args[idx])
            case _ if requires_value:
                raise xerrs.MissingValue("missing option value: %s", option.key_str(long=True))
            case _:
                option.assign(data, None)

        return idx
