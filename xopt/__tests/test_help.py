#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
from xopt.help import render_help
from xopt.structs import OptionSpec

@pytest.fixture(scope="function")
def specs():
    return [
        OptionSpec(name="verbose", short="v", long="verbose", desc="be loud"),
        OptionSpec(name="output",  short="o", long="output", type=str, arg_desc="FILE", desc="where to write"),
        OptionSpec(name="level",   long="level", type=int, optional=True, desc="how much"),
        ]

class TestHelp:

    def test_usage_line(self, specs):
        text = render_help("prog", specs)
        assert(text.splitlines()[0] == "usage: prog [opts...]")

    def test_custom_usage(self, specs):
        text = render_help("prog", specs, usage="[-v] FILES...")
        assert(text.splitlines()[0] == "usage: prog [-v] FILES...")

    def test_options_in_order(self, specs):
        lines = render_help("prog", specs).splitlines()
        assert(len(lines) == 5)
        assert(lines[1] == "")
        assert("--verbose" in lines[2])
        assert("--output=FILE" in lines[3])
        assert("--level[=VALUE]" in lines[4])

    def test_descriptions_aligned(self, specs):
        lines = render_help("prog", specs).splitlines()[2:]
        starts = {x.index(spec.desc) for x, spec in zip(lines, specs)}
        assert(len(starts) == 1)

    def test_long_only_indented(self, specs):
        lines = render_help("prog", specs).splitlines()
        assert(lines[4].startswith("      --level"))

    def test_long_key_overflows(self):
        spec = OptionSpec(name="x", long="a-very-long-option-name", type=str, desc="desc")
        line = render_help("prog", [spec]).splitlines()[2]
        assert(line.endswith("=VALUE  desc"))

    def test_prefix_suffix(self, specs):
        text  = render_help("prog", specs, prefix="Does things.", suffix="See also: man prog")
        lines = text.splitlines()
        assert(lines[2] == "Does things.")
        assert(lines[-1] == "See also: man prog")

    def test_no_options(self):
        assert(render_help("prog", []) == "usage: prog [opts...]")
