#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import ClassVar

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Global Vars:

# Body:
class XoptError(Exception):
    """
      The base class for all xopt Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg : ClassVar[str] = "Non-Specific xopt Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except (TypeError, ValueError, IndexError):
            return str(self.args)

    @property
    def message(self) -> str:
        return str(self)

class BackendError(XoptError):
    pass

class FrontendError(XoptError):
    pass

class UserError(XoptError):
    pass

class AllocationError(BackendError):
    """ Storage for a context or the extras list could not be obtained """
    general_msg = "xopt Allocation Failure:"
    pass
