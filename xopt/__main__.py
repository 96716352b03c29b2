#!/usr/bin/env python3
"""
The xopt cli runner.

Load an option table from toml, parse the given args with it,
and print the values and extras that result:

    xopt -c pyproject.toml -- prog -vo out.txt extra
"""
# Imports:
from __future__ import annotations

import json
import logging as logmod
import sys
from collections.abc import Sequence
from typing import Final

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

import xopt.errors as xerrs
from xopt._interface import ExitCodes, __version__
from xopt._structs.logger_spec import LoggerSpec
from xopt._structs.option_spec import OptionSpec
from xopt.config import context_from_config, load_config, loggers_from_config
from xopt.context import XoptContext
from xopt.enums import Context_f

PROG_NAME    : Final[str]              = "xopt"
CLI_FLAGS    : Final[Context_f]        = Context_f.STRICT | Context_f.DOUBLE_DASH
CLI_OPTIONS  : Final[list[OptionSpec]] = [
    OptionSpec(name="config",  short="c", long="config",  type=str, arg_desc="FILE", desc="toml file declaring the option table"),
    OptionSpec(name="verbose", short="v", long="verbose", desc="log the parse at debug level"),
    OptionSpec(name="quiet",   short="q", long="quiet",   desc="only print extras"),
    OptionSpec(name="help",    short="h", long="help",    desc="print this help"),
    OptionSpec(name="version",            long="version", desc="print the version"),
    ]

class XoptMain:
    """ Parses its own args with xopt, then the target args with the configured context """

    def __init__(self):
        self.cli = XoptContext.create(PROG_NAME, CLI_OPTIONS, CLI_FLAGS)

    def run(self, argv:Sequence[str]) -> ExitCodes:
        cli_args = self.cli.defaults()
        try:
            targets = self.cli.parse(argv, cli_args).extras
        except xerrs.ParseError as err:
            print(f"{PROG_NAME}: {err}", file=sys.stderr)
            return ExitCodes.PARSE_FAIL

        self.setup_logging(cli_args)
        match cli_args:
            case {"help": True}:
                print(self.cli.help(usage="[-v] [-q] -c FILE [--] PROG ARGS..."))
                return ExitCodes.SUCCESS
            case {"version": True}:
                print(f"{PROG_NAME} {__version__}")
                return ExitCodes.SUCCESS
            case {"config": None}:
                print(f"{PROG_NAME}: no config file given, use -c FILE", file=sys.stderr)
                return ExitCodes.BAD_CONFIG
            case _:
                pass

        try:
            config = load_config(cli_args['config'])
            target = context_from_config(config)
            for spec in loggers_from_config(config):
                spec.apply()
        except xerrs.ConfigError as err:
            print(f"{PROG_NAME}: {err}", file=sys.stderr)
            return ExitCodes.BAD_CONFIG

        values = target.defaults()
        result = target.try_parse(targets, values)
        if not bool(result):
            print(f"{target.name}: {result.message}", file=sys.stderr)
            return ExitCodes.PARSE_FAIL

        self.report(values, result.extras, quiet=cli_args['quiet'])
        return ExitCodes.SUCCESS

    def setup_logging(self, cli_args:dict) -> None:
        level = "DEBUG" if cli_args.get("verbose", False) else "WARNING"
        LoggerSpec(name="xopt", level=level, target="stderr", propagate=True, clear_handlers=True).apply()

    def report(self, values:dict, extras:list[str], *, quiet:bool=False) -> None:
        if not quiet:
            for key, val in values.items():
                print(f"{key} = {json.dumps(val, default=str)}")

        print(f"extras = {json.dumps(extras)}")

def main():
    sys.exit(XoptMain().run(sys.argv))

if __name__ == "__main__":
    main()
