#!/usr/bin/env python3
"""
The narrow contracts the parser holds its collaborators to.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import abc
import logging as logmod
from typing import Any, Iterator, Protocol, runtime_checkable

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@runtime_checkable
class Buildable_p(Protocol):
    """ For things that need building, but don't have a separate factory """

    @staticmethod
    def build(*args) -> Any:
        pass

@runtime_checkable
class OptionStruct_p(Protocol):
    """ An option descriptor: its names, and how to put a value into a destination """

    @property
    def requires_value(self) -> bool:
        pass

    @abc.abstractmethod
    def assign(self, data:Any, value:None|str) -> None:
        """ Convert value and store it in data, or raise an AssignmentError """
        pass

    @abc.abstractmethod
    def key_str(self, *, long:bool=False) -> str:
        pass

@runtime_checkable
class OptionTable_p(Protocol):
    """ Maps a short character or long name to its option descriptor """

    @abc.abstractmethod
    def lookup(self, name:str, *, long:bool=False) -> tuple[None|OptionStruct_p, bool]:
        """ returns (option|None, requires_value) """
        pass

    @abc.abstractmethod
    def __iter__(self) -> Iterator[OptionStruct_p]:
        pass
