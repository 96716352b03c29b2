#!/usr/bin/env python3
"""
The parse context: a name, an option table and flags,
created once and used for as many parses as needed.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeAlias

# ##-- end stdlib imports

# ##-- 1st party imports
import xopt.errors as xerrs
from xopt._structs.option_spec import OptionSpec
from xopt._structs.option_table import OptionTable
from xopt._structs.result import ParseResult
from xopt.enums import Context_f
from xopt.help import render_help
from xopt.parsers.parser import XoptParser

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

OptionSource: TypeAlias = OptionTable|Iterable[OptionSpec|Mapping]

class XoptContext:
    """ A handle over an option table and its parse flags.
      Holds no per-parse state, so a single context can be reused.
    """

    __slots__ = ("name", "_options", "_flags")

    def __init__(self, name:str, options:OptionTable, flags:Context_f):
        self.name     = name
        self._options = options
        self._flags   = flags

    @staticmethod
    def create(name:str, options:None|OptionSource, flags:Context_f|Iterable[str]|None=None) -> XoptContext:
        """ Build a context. The table is not validated until its first lookup """
        logging.debug("Creating context: %s", name)
        try:
            return XoptContext(name, OptionTable.build(options), Context_f.build(flags))
        except MemoryError:
            raise xerrs.AllocationError("could not allocate context") from None

    def parse(self, args:Sequence[str], data:Any=None) -> ParseResult:
        """ Parse args, assigning option values into data.
          Raises an XoptError on failure
        """
        return XoptParser(self._options, self._flags).parse(args, data)

    def try_parse(self, args:Sequence[str], data:Any=None) -> ParseResult:
        """ As parse, but failure is returned as the result's error """
        try:
            return self.parse(args, data)
        except xerrs.XoptError as err:
            return ParseResult(error=err)

    def defaults(self) -> dict[str, Any]:
        return self._options.defaults()

    def help(self, *, usage:None|str=None, prefix:None|str=None, suffix:None|str=None) -> str:
        return render_help(self.name, self._options, usage=usage, prefix=prefix, suffix=suffix)

    def __repr__(self):
        return f"<XoptContext: {self.name} : {self._flags}>"
