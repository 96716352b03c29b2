#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from xopt._interface import MARKER, MAX_MARKERS
from xopt.enums import TokenSize_e

def classify(token:str) -> tuple[TokenSize_e, str]:
    """ Count the leading markers of a token, capped at two,
      and return the size with the content that follows them.

      'a'   -> (EXTRA, 'a')
      '-ab' -> (SHORT, 'ab')
      '--a' -> (LONG,  'a')
    """
    size = 0
    for char in token[:MAX_MARKERS]:
        if char != MARKER:
            break
        size += 1

    return TokenSize_e(size), token[size:]
