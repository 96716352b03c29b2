#!/usr/bin/env python3
"""
The ordered table of options a context parses against.

Entries are converted to OptionSpecs on first lookup,
so a table with a bad entry can still be built and handed around.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import ValidationError

# ##-- end 3rd party imports

# ##-- 1st party imports
import xopt.errors as xerrs
from xopt._structs.option_spec import OptionSpec
from xopt._abstract.protocols import Buildable_p, OptionTable_p
from xopt.utils.check_protocol import check_protocol

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@check_protocol(Buildable_p, OptionTable_p)
class OptionTable:
    """ An ordered, read-only sequence of option descriptors.
      Lookup returns the first entry matching, in declaration order.
    """

    def __init__(self, entries:None|Iterable[OptionSpec|Mapping]=None):
        self._entries = list(entries or [])

    @staticmethod
    def build(data:None|OptionTable|Iterable[OptionSpec|Mapping]) -> OptionTable:
        match data:
            case OptionTable():
                return data
            case None:
                return OptionTable()
            case _:
                return OptionTable(data)

    @ftz.cached_property
    def _specs(self) -> list[OptionSpec]:
        specs = []
        for i, entry in enumerate(self._entries):
            try:
                specs.append(OptionSpec.build(entry))
            except (ValidationError, TypeError) as err:
                raise xerrs.InvalidConfigError("Invalid option table entry %s: %s", i, err) from None

        return specs

    @ftz.cached_property
    def _shorts(self) -> dict[str, OptionSpec]:
        shorts = {}
        for spec in self._specs:
            if spec.short is not None:
                shorts.setdefault(spec.short, spec)
        return shorts

    @ftz.cached_property
    def _longs(self) -> dict[str, OptionSpec]:
        longs = {}
        for spec in self._specs:
            if spec.long is not None:
                longs.setdefault(spec.long, spec)
        return longs

    def lookup(self, name:str, *, long:bool=False) -> tuple[None|OptionSpec, bool]:
        """ Get the option for a short character or long name,
          and whether it requires a value
        """
        match long:
            case True:
                found = self._longs.get(name, None)
            case False:
                found = self._shorts.get(name, None)

        logging.debug("Lookup: %s -> %s", name, found)
        if found is None:
            return None, False

        return found, found.requires_value

    def defaults(self) -> dict[str, Any]:
        """ A dict of each option's default value, for options that store into a destination """
        return { x.name : x.default for x in self._specs if x.callback is None }

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self):
        return f"<OptionTable: {len(self)}>"
