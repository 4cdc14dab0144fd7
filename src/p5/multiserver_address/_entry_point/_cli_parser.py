#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import argparse

    from .. import _common as _common_module

    _make_validator = _common_module.cli_validator.make
    _platform_info = _common_module.platform_info.make()

    class _Class(object):
        @property
        def subparsers(self): return self.__subparsers

        def parse(self, *args, **kwargs):
            _known, _unknown = self.__backend.parse_known_args(*args, **kwargs)
            if _unknown: raise ValueError("unrecognized arguments: %s" % " ".join(_unknown))
            _known = vars(_known)
            self.__validator(arguments = _known, allow_unknown = True)
            return _known

        def help(self): return self.__backend.format_help()

        def __init__(self):
            super().__init__()
            self.__validator = _make_validator()
            self.__backend = argparse.ArgumentParser(
                prog = _platform_info.program,
                description = "ssb multiserver address parser",
                exit_on_error = False
            )
            self.__subparsers = self.__backend.add_subparsers(
                title = "action", required = True, dest = "action"
            )

    class _Result(object):
        Class = _Class

    return _Result


_private = _private()
try: Class = _private.Class
finally: del _private


# noinspection PyArgumentList
def make(*args, **kwargs): return Class(*args, **kwargs)
