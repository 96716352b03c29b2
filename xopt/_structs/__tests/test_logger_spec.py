#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
from pydantic import ValidationError
from tomlguard import TomlGuard
from xopt.structs import LoggerSpec

class TestLoggerSpec:

    def test_initial(self):
        spec = LoggerSpec(name="xopt_test.initial")
        assert(spec.level == logmod.WARNING)
        assert(spec.target == "stderr")

    def test_build_dict(self):
        spec = LoggerSpec.build({"name": "xopt_test.build", "level": "debug"})
        assert(spec.level == logmod.DEBUG)

    def test_build_tomlguard(self):
        spec = LoggerSpec.build(TomlGuard({"name": "xopt_test.guard", "level": "INFO"}), target="stdout")
        assert(spec.level == logmod.INFO)
        assert(spec.target == "stdout")

    def test_bad_level(self):
        with pytest.raises(ValidationError):
            LoggerSpec(name="xopt_test.bad", level="blah")

    def test_bad_target(self):
        with pytest.raises(ValidationError):
            LoggerSpec(name="xopt_test.bad", target="file")

    def test_apply(self):
        spec   = LoggerSpec(name="xopt_test.apply", level="INFO", target="stdout")
        logger = spec.apply()
        assert(logger is logmod.getLogger("xopt_test.apply"))
        assert(logger.level == logmod.INFO)
        assert(len(logger.handlers) == 1)
        assert(not logger.propagate)

    def test_apply_pass(self):
        spec   = LoggerSpec(name="xopt_test.pass", target="pass")
        logger = spec.apply()
        assert(not bool(logger.handlers))

    def test_apply_clears(self):
        spec   = LoggerSpec(name="xopt_test.clear", target="stderr", clear_handlers=True)
        spec.apply()
        logger = spec.apply()
        assert(len(logger.handlers) == 1)

    def test_apply_disabled(self):
        spec   = LoggerSpec(name="xopt_test.disabled", disabled=True)
        logger = spec.apply()
        assert(logger.disabled)

    def test_root(self):
        spec = LoggerSpec(name="root", target="pass")
        assert(spec.get() is logmod.getLogger())
