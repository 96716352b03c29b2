#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, model_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
import xopt.errors as xerrs

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParseResult(BaseModel, arbitrary_types_allowed=True):
    """ The outcome of a single parse.
      Either the extras collected, or the error that stopped the parse. Never both.
    """

    extras : None|list[str]        = None
    error  : None|xerrs.XoptError  = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> ParseResult:
        match self.extras, self.error:
            case None, None:
                raise ValueError("A ParseResult needs extras or an error")
            case list(), xerrs.XoptError():
                raise ValueError("A ParseResult can't have both extras and an error")
            case _:
                return self

    @property
    def count(self) -> int:
        if self.extras is None:
            return 0
        return len(self.extras)

    @property
    def message(self) -> None|str:
        if self.error is None:
            return None
        return str(self.error)

    def unwrap(self) -> list[str]:
        """ The extras, or raise the error """
        if self.error is not None:
            raise self.error
        return self.extras

    def __bool__(self) -> bool:
        return self.error is None
