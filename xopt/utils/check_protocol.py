#!/usr/bin/env python3
"""
Class decorator to fail at import time, rather than at parse time,
when a parser component doesn't fulfil its contracts.

    @check_protocol
    class ShortFormExpander(TokenExpander_i): ...

    @check_protocol(OptionTable_p)
    class OptionTable: ...
"""

##-- builtin imports
from __future__ import annotations

import logging as logmod
from typing import Any, Final

##-- end builtin imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

PROTO_INTERNALS : Final[set[str]] = {"__init__", "__subclasshook__", "__init_subclass__", "__class_getitem__", "__annotate__"}

def _resolved(cls:type) -> dict[str, Any]:
    """ The class's attributes, undescribed, as the mro resolves them """
    found = {}
    for klass in reversed(cls.__mro__):
        found.update(vars(klass))
    return found

def _is_abstract(val:Any) -> bool:
    return bool(getattr(val, "__isabstractmethod__", False))

def _abstracts(cls:type) -> list[str]:
    return [x for x, val in _resolved(cls).items() if _is_abstract(val)]

def _missing_members(cls:type, proto:type) -> list[str]:
    available = _resolved(cls)
    members   = [x for x, val in vars(proto).items()
                 if x not in PROTO_INTERNALS and (callable(val) or isinstance(val, (property, staticmethod, classmethod)))]
    return [x for x in members if x not in available or _is_abstract(available[x])]

def check_protocol(*protos:type) -> Any:
    """ Decorator. Check the class has no abstractmethods left,
      and provides the members of any explicitly passed protocols.
    """
    match protos:
        case [type() as cls] if not getattr(cls, "_is_protocol", False):
            # used bare
            return _check(cls, [])
        case _:
            return lambda cls: _check(cls, protos)

def _check(cls:type, protos:tuple[type, ...]|list[type]) -> type:
    if bool(abstracts:=_abstracts(cls)):
        raise NotImplementedError(f"Class has Abstract Methods: {cls.__module__} : {cls.__name__} : {abstracts}")

    for proto in protos:
        if bool(missing:=_missing_members(cls, proto)):
            raise NotImplementedError(f"Class doesn't implement {proto.__name__}: {cls.__module__} : {cls.__name__} : {missing}")

    logging.debug("Protocols checked: %s", cls.__name__)
    return cls
