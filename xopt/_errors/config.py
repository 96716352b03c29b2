#!/usr/bin/env python3
"""
These are the errors that can occur while loading xopt config
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

class ConfigError(UserError):
    """ Although the config was loaded, its format was incorrect """
    general_msg = "xopt Config Error:"
    pass

class InvalidConfigError(ConfigError):
    """ Trying to read a toml file or one of its option tables,
    something went wrong.
    """
    general_msg = "Invalid xopt Config:"
    pass

class MissingConfigError(ConfigError):
    """ An expected config file or value was not found """
    general_msg = "xopt Config Error:"
    pass
