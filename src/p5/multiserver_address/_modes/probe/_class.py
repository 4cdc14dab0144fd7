#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import math
    import typing
    import argparse

    from . import _logic as _logic_module
    from ... import _common as _common_module

    _name = __package__.split(".")[-1]
    _name = _name.replace("_", "-")

    _parse_addresses = _common_module.parse_addresses
    _make_cli_validator = _common_module.cli_validator.make

    _routine = _logic_module.routine
    _default_timeout = _logic_module.default_timeout

    class _Class(_common_module.Mode):
        @property
        def name(self) -> str: return _name

        def setup_cli(self, parser: argparse.ArgumentParser):
            assert isinstance(parser, argparse.ArgumentParser)

            # noinspection PyShadowingNames
            @self.__cli_validator.decorator(key = parser.add_argument(
                "-t", "--timeout", required = False,
                help = f"connection timeout in seconds ({_default_timeout} as default)",
                dest = f"{self.name}/timeout", metavar = "SECONDS"
            ).dest)
            def _routine(value: typing.Optional[str]):
                if value is None: return _default_timeout
                assert isinstance(value, str)
                value = float(value)
                assert math.isfinite(value)
                assert 0 < value
                return value

            # noinspection PyShadowingNames
            @self.__cli_validator.decorator(key = parser.add_argument(
                nargs = 1, help = "multiserver address (`;` separated list allowed)",
                dest = f"{self.name}/address", metavar = "ADDRESS"
            ).dest)
            def _routine(value: typing.List[str]):  # noqa: F811
                assert isinstance(value, list)
                value, = value
                return _parse_addresses(value = value)

        def validate_cli(self, arguments: dict):
            assert isinstance(arguments, dict)
            self.__cli_validator(arguments, allow_unknown = True)

        def __call__(self, cli: dict):
            assert isinstance(cli, dict)
            _timeout = cli[f"{self.name}/timeout"]
            _addresses = cli[f"{self.name}/address"]
            _routine(addresses = _addresses, timeout = _timeout)

        def __init__(self):
            super().__init__()
            self.__cli_validator = _make_cli_validator()

    class _Result(object):
        Class = _Class

    return _Result


_private = _private()
try: Class = _private.Class
finally: del _private


# noinspection PyArgumentList
def make(*args, **kwargs): return Class(*args, **kwargs)
