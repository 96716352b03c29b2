#!/usr/bin/env python3
"""
xopt : A small command line option parser.

Create a context from a table of options and some flags,
then parse argument vectors with it:

    ctx    = xopt.context("prog", [OptionSpec(name="verbose", short="v")], xopt.Context_f.STRICT)
    result = ctx.parse(sys.argv, data)
"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__
from .enums import Context_f
from .context import XoptContext
from .utils.check_protocol import check_protocol

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

context = XoptContext.create
