#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
from xopt.enums import Context_f, TokenSize_e

class TestContextFlags:

    def test_independent(self):
        flags = Context_f.STRICT | Context_f.KEEP_FIRST
        assert(Context_f.STRICT in flags)
        assert(Context_f.KEEP_FIRST in flags)
        assert(Context_f.NO_CONDENSE not in flags)

    def test_build_none(self):
        assert(Context_f.build(None) == Context_f(0))

    def test_build_passthrough(self):
        assert(Context_f.build(Context_f.STRICT) is Context_f.STRICT)

    def test_build_str(self):
        assert(Context_f.build("strict") == Context_f.STRICT)

    def test_build_names(self):
        flags = Context_f.build(["strict", "no-condense", " Sloppy_Shorts "])
        assert(flags == Context_f.STRICT | Context_f.NO_CONDENSE | Context_f.SLOPPY_SHORTS)

    def test_build_empty(self):
        assert(Context_f.build([]) == Context_f(0))

    def test_build_unknown(self):
        with pytest.raises(KeyError) as raised:
            Context_f.build(["strict", "blah"])

        assert(raised.value.args[1] == ["blah"])

class TestTokenSize:

    def test_values(self):
        assert(TokenSize_e(0) is TokenSize_e.EXTRA)
        assert(TokenSize_e(1) is TokenSize_e.SHORT)
        assert(TokenSize_e(2) is TokenSize_e.LONG)
