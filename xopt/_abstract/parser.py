#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import TYPE_CHECKING, Any, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from abc import abstractmethod

if TYPE_CHECKING:
    from xopt._structs.result import ParseResult

class ArgParser_i:
    """
    A Single standard process point for turning the list of passed in args,
    into values set on a destination, and a list of extras
    """

    @abstractmethod
    def parse(self, args:Sequence[str], data:Any) -> ParseResult:
        pass

class TokenExpander_i:
    """
    Handles a single option-looking token,
    returning the index of the last token it consumed
    """

    @abstractmethod
    def expand(self, content:str, args:Sequence[str], idx:int, data:Any) -> int:
        pass
