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
from xopt._abstract import ArgParser_i, OptionTable_p
from xopt._structs.extras import ExtrasList
from xopt._structs.result import ParseResult
from xopt.enums import Context_f, TokenSize_e
from xopt.parsers.classifier import classify
from xopt.parsers.long_form import LongFormExpander
from xopt.parsers.short_form import ShortFormExpander
from xopt.utils.check_protocol import check_protocol

@check_protocol
class XoptParser(ArgParser_i):
    """
    Walk argv, token by token:

    # prog [-abc] [-o val] [--name[=val]] [extras...] [-- extras...]

    options are assigned into the destination as they are found,
    everything else is collected, in order, as extras.
    The first error stops the parse, and no extras are returned.
    """

    def __init__(self, options:OptionTable_p, flags:Context_f):
        self._flags           = flags
        self._start           = 0 if Context_f.KEEP_FIRST in flags else 1
        self._strict_ordering = Context_f.STRICT_ORDERING in flags
        self._double_dash     = Context_f.DOUBLE_DASH in flags
        self._short           = ShortFormExpander(options, flags)
        self._long            = LongFormExpander(options, flags)

    def parse(self, args:Sequence[str], data:Any) -> ParseResult:
        logging.debug("Parsing args: %s", args)
        try:
            extras = self._run(args, data)
        except xerrs.XoptError as err:
            logging.info("Parse failed: %s", err)
            raise

        logging.debug("Parsed extras: %s", extras)
        return ParseResult(extras=extras.to_list())

    def _run(self, args:Sequence[str], data:Any) -> ExtrasList:
        extras = ExtrasList()
        idx    = self._start
        while idx < len(args):
            token         = args[idx]
            size, content = classify(token)
            logging.debug("Handling: %s, Size: %s", token, size.name)
            match size:
                case TokenSize_e.LONG if self._double_dash and not bool(content):
                    logging.debug("Forwarding remaining args to extras")
                    extras.extend(args[idx+1:])
                    break
                case TokenSize_e.EXTRA:
                    extras.append(token)
                case _ if self._strict_ordering and bool(extras):
                    raise xerrs.OrderingViolation("options cannot be specified after arguments: %s", token)
                case TokenSize_e.SHORT:
                    idx = self._short.expand(content, args, idx, data)
                case TokenSize_e.LONG:
                    idx = self._long.expand(content, args, idx, data)

            idx += 1

        return extras
