#!/usr/bin/env python3
"""
These are the errors that can occur while parsing an argument vector
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import XoptError, UserError

class ParseError(UserError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "xopt CLI Parsing Failure:"
    pass

class CombinationNotAllowed(ParseError):
    """ Short options were combined into one token while the context forbids it """
    general_msg = "Combined Short Options:"
    pass

class UnknownOption(ParseError):
    """ A strict context was given an option not in its table """
    general_msg = "Unknown Option:"
    pass

class MissingValue(ParseError):
    """ An option requiring a value was the last argument """
    general_msg = "Missing Option Value:"
    pass

class CombinedValueNotLast(ParseError):
    """ A value requiring short option was followed by other options in its token """
    general_msg = "Combined Value Not Last:"
    pass

class OrderingViolation(ParseError):
    """ An option appeared after a positional argument """
    general_msg = "Option After Argument:"
    pass

class AssignmentError(ParseError):
    """ A raw value could not be converted or stored for its option """
    general_msg = "Option Assignment Failure:"
    pass
