#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
import xopt.errors as xerrs
from xopt._abstract import OptionTable_p
from xopt.structs import OptionSpec, OptionTable

class TestOptionTable:

    def test_initial(self):
        table = OptionTable()
        assert(isinstance(table, OptionTable))
        assert(isinstance(table, OptionTable_p))
        assert(not bool(table))

    def test_build(self):
        table = OptionTable.build([OptionSpec(name="a", short="a")])
        assert(isinstance(table, OptionTable))
        assert(len(table) == 1)
        assert(OptionTable.build(table) is table)
        assert(not bool(OptionTable.build(None)))

    def test_lookup_short(self):
        spec  = OptionSpec(name="output", short="o", long="output", type=str)
        table = OptionTable([spec])
        found, requires = table.lookup("o")
        assert(found is spec)
        assert(requires)

    def test_lookup_long(self):
        spec  = OptionSpec(name="verbose", short="v", long="verbose")
        table = OptionTable([spec])
        found, requires = table.lookup("verbose", long=True)
        assert(found is spec)
        assert(not requires)

    def test_lookup_kinds_are_separate(self):
        table = OptionTable([OptionSpec(name="v", short="v"), OptionSpec(name="x", long="x")])
        assert(table.lookup("v", long=True) == (None, False))
        assert(table.lookup("x") == (None, False))

    def test_lookup_missing(self):
        table = OptionTable([])
        assert(table.lookup("z") == (None, False))

    def test_first_match_wins(self):
        first  = OptionSpec(name="first", short="a", long="same")
        second = OptionSpec(name="second", short="a", long="same", type=str)
        table  = OptionTable([first, second])
        assert(table.lookup("a")[0] is first)
        assert(table.lookup("same", long=True)[0] is first)

    def test_dict_entries(self):
        table = OptionTable([{"name": "count", "short": "n", "type": "int"}])
        found, requires = table.lookup("n")
        assert(isinstance(found, OptionSpec))
        assert(requires)

    def test_bad_entry_found_on_lookup(self):
        table = OptionTable([{"name": "bad"}])
        assert(len(table) == 1)
        with pytest.raises(xerrs.InvalidConfigError):
            table.lookup("b")

    def test_iter_in_order(self):
        specs = [OptionSpec(name=x, short=x) for x in "cab"]
        table = OptionTable(specs)
        assert([x.name for x in table] == ["c", "a", "b"])

    def test_defaults(self, mocker):
        table = OptionTable([
            OptionSpec(name="verbose", short="v", default=False),
            OptionSpec(name="output", short="o", type=str),
            OptionSpec(name="hook", short="k", callback=mocker.Mock()),
            ])
        assert(table.defaults() == {"verbose": False, "output": None})
