#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import argparse

    class _Class(object):
        @property
        def name(self) -> str: raise NotImplementedError()

        def setup_cli(self, parser: argparse.ArgumentParser):
            assert isinstance(parser, argparse.ArgumentParser)
            raise NotImplementedError()

        def validate_cli(self, arguments: dict):
            assert isinstance(arguments, dict)
            raise NotImplementedError()

        def __call__(self, cli: dict):
            assert isinstance(cli, dict)
            raise NotImplementedError()

    class _Result(object):
        Class = _Class

    return _Result


_private = _private()
try: Class = _private.Class
finally: del _private
