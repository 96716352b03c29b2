#!/usr/bin/env python3
"""
Expansion of single marker tokens: -v, -vo, -ofile

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
from xopt.enums import Context_f
from xopt.utils.check_protocol import check_protocol

@check_protocol
class ShortFormExpander(TokenExpander_i):
    """
    Resolves the characters after a single marker against the option table.

    -ab    : a and b are separate options, unless NO_CONDENSE
    -ofile : o with an inline value of 'file', if SLOPPY_SHORTS
    -o val : o consumes the next token, if it requires a value

    A value requiring option can only be the last character of a combined token.
    """

    def __init__(self, options:OptionTable_p, flags:Context_f):
        self._options     = options
        self._no_condense = Context_f.NO_CONDENSE in flags
        self._sloppy      = Context_f.SLOPPY_SHORTS in flags
        self._strict      = Context_f.STRICT in flags

    def expand(self, content:str, args:Sequence[str], idx:int, data:Any) -> int:
        match len(content):
            case x if 1 < x and self._no_condense and not self._sloppy:
                raise xerrs.CombinationNotAllowed("short options cannot be combined: %s", args[idx])
            case x if 1 < x and self._sloppy:
                self._expand_sloppy(content, data)
                return idx
            case _:
                return self._expand_each(content, args, idx, data)

    def _expand_sloppy(self, content:str, data:Any) -> None:
        """ first char is the option, the rest is its value.
          Whether the option takes a value is for its assignment to decide
        """
        head, value = content[0], content[1:]
        option, _   = self._options.lookup(head)
        match option:
            case None if self._strict:
                raise xerrs.UnknownOption("invalid argument: -%s", head)
            case None:
                logging.debug("Ignoring unknown sloppy short: -%s", head)
            case _:
                option.assign(data, value)

    def _expand_each(self, content:str, args:Sequence[str], idx:int, data:Any) -> int:
        last = len(content) - 1
        for i, char in enumerate(content):
            option, requires_value = self._options.lookup(char)
            match option:
                case None if self._strict:
                    raise xerrs.UnknownOption("invalid argument: -%s", char)
                case None:
                    logging.debug("Ignoring unknown short, and the rest of its token: -%s", content[i:])
                    break
                case _ if requires_value and i < last:
                    raise xerrs.CombinedValueNotLast("combined short option requiring value not last: %s", option.key_str())
                case _ if requires_value and idx + 1 < len(args):
                    # The next token is taken whole, even if it looks like an option
                    idx += 1
                    option.assign(data, args[idx])
                case _ if requires_value:
                    raise xerrs.MissingValue("missing option value: %s", option.key_str())
                case _:
                    option.assign(data, None)

        return idx
