#!/usr/bin/env python3
"""
The growable list positional arguments are collected into.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import Iterable, Iterator
from typing import Final

# ##-- end stdlib imports

# ##-- 1st party imports
import xopt.errors as xerrs
from xopt._interface import EXTRAS_INIT, EXTRAS_STEP

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ExtrasList:
    """ Append only, ordered, with capacity grown in fixed steps.
      Holds references to the original tokens.
    """

    def __init__(self, capacity:int=EXTRAS_INIT, step:int=EXTRAS_STEP):
        self._step  = step
        self._count = 0
        try:
            self._store : list[None|str] = [None] * capacity
        except MemoryError:
            raise xerrs.AllocationError("could not allocate extras array") from None

    @property
    def capacity(self) -> int:
        return len(self._store)

    def append(self, token:str) -> None:
        if self._count == self.capacity:
            self._grow()

        self._store[self._count] = token
        self._count += 1

    def extend(self, tokens:Iterable[str]) -> None:
        for token in tokens:
            self.append(token)

    def _grow(self) -> None:
        logging.debug("Growing extras: %s -> %s", self.capacity, self.capacity + self._step)
        try:
            self._store.extend([None] * self._step)
        except MemoryError:
            raise xerrs.AllocationError("could not realloc arguments array") from None

    def to_list(self) -> list[str]:
        return self._store[:self._count]

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return 0 < self._count

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_list())

    def __getitem__(self, idx):
        return self.to_list()[idx]

    def __repr__(self):
        return f"<ExtrasList: {self._count}/{self.capacity}>"
