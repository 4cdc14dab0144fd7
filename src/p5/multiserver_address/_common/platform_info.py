#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import os
    import sys

    _package = __package__.split(".")
    assert "_common" == _package.pop()
    _package = ".".join(_package)

    def _make_program():
        try: _argv = sys.argv[0]
        except IndexError: _argv = None
        if _argv and ("-c" != _argv) and ("__main__.py" != os.path.basename(_argv)): return os.path.basename(_argv)
        return f"python3 -m {_package}"

    class _Class(object):
        @property
        def package(self): return _package

        @property
        def program(self): return _make_program()

        @property
        def tty(self):
            try: return sys.stderr.isatty()
            except (AttributeError, ValueError): return False

    class _Result(object):
        Class = _Class

    return _Result


_private = _private()
try: Class = _private.Class
finally: del _private


# noinspection PyArgumentList
def make(*args, **kwargs): return Class(*args, **kwargs)
