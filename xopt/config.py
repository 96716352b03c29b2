#!/usr/bin/env python3
"""
Loading contexts from toml.

Either a dedicated file:

    [xopt]
    name  = "prog"
    flags = ["strict"]
    [[xopt.options]]
    name  = "output"
    short = "o"
    type  = "str"

or the [tool.xopt] table of a pyproject.toml
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import tomllib
from collections.abc import Mapping

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import ValidationError
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import xopt.errors as xerrs
from xopt._interface import XOPT_PREFIX
from xopt._structs.logger_spec import LoggerSpec
from xopt._structs.option_spec import OptionSpec
from xopt.context import XoptContext
from xopt.enums import Context_f

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def load_config(*paths:str|pl.Path) -> TomlGuard:
    """ Read toml files, merging their top level tables in order """
    data = {}
    for path in map(pl.Path, paths):
        logging.debug("Loading config: %s", path)
        if not path.is_file():
            raise xerrs.MissingConfigError("Config file not found: %s", str(path))
        try:
            data.update(tomllib.loads(path.read_text()))
        except tomllib.TOMLDecodeError as err:
            raise xerrs.InvalidConfigError("Failed to read toml: %s : %s", str(path), err) from None

    return TomlGuard(data)

def _xopt_table(config:TomlGuard) -> TomlGuard:
    match config:
        case _ if XOPT_PREFIX in config:
            return config.xopt
        case _ if "tool" in config and XOPT_PREFIX in config.tool:
            return config.tool.xopt
        case _:
            raise xerrs.MissingConfigError("No [xopt] or [tool.xopt] table in config")

def context_from_config(config:TomlGuard|Mapping, *, name:None|str=None) -> XoptContext:
    """ Build a context from the xopt table of a loaded config """
    if not isinstance(config, TomlGuard):
        config = TomlGuard(config)

    table      = _xopt_table(config)
    ctx_name   = name or table.on_fail(XOPT_PREFIX, str).name()
    flag_names = table.on_fail([], list).flags()
    options    = table.on_fail([], list).options()

    try:
        flags = Context_f.build(list(flag_names))
    except KeyError as err:
        raise xerrs.InvalidConfigError("Unknown context flags: %s", err.args[1]) from None

    try:
        specs = [OptionSpec.build(x) for x in options]
    except (ValidationError, TypeError) as err:
        raise xerrs.InvalidConfigError("Invalid option in config: %s", err) from None

    logging.info("Loaded %s options for: %s", len(specs), ctx_name)
    return XoptContext.create(ctx_name, specs, flags)

def loggers_from_config(config:TomlGuard|Mapping) -> list[LoggerSpec]:
    """ Build LoggerSpecs from the [[xopt.logging]] tables of a config """
    if not isinstance(config, TomlGuard):
        config = TomlGuard(config)

    try:
        table = _xopt_table(config)
    except xerrs.MissingConfigError:
        return []

    try:
        return [LoggerSpec.build(x) for x in table.on_fail([], list).logging()]
    except (ValidationError, TypeError) as err:
        raise xerrs.InvalidConfigError("Invalid logging spec in config: %s", err) from None
