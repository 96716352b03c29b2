#!/usr/bin/env python3
"""
These are the xopt specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 1st party imports
from xopt._errors.base import (XoptError, BackendError, FrontendError,
                               UserError, AllocationError)
from xopt._errors.config import ConfigError, InvalidConfigError, MissingConfigError
from xopt._errors.parse import (ParseError, CombinationNotAllowed, UnknownOption,
                                MissingValue, CombinedValueNotLast,
                                OrderingViolation, AssignmentError)

# ##-- end 1st party imports
