#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import typing

    class _Class(object):
        def decorator(self, key: str):
            assert isinstance(key, str)
            assert key
            assert key not in self.__delegates

            def _result(delegate: typing.Callable):
                assert callable(delegate)
                self.__delegates[key] = delegate
                return delegate

            return _result

        def __call__(self, arguments: dict, allow_unknown: bool = False):
            assert isinstance(arguments, dict)
            assert isinstance(allow_unknown, bool)
            if not allow_unknown:
                for _key in arguments.keys(): assert _key in self.__delegates, f"unknown argument: {_key}"
            for _key, _delegate in self.__delegates.items():
                _value = arguments[_key]
                try: arguments[_key] = _delegate(_value)
                except Exception as _exception: raise ValueError(f"invalid {_key}: {_value}") from _exception
            return arguments

        def __init__(self):
            super().__init__()
            self.__delegates = dict()

    class _Result(object):
        Class = _Class

    return _Result


_private = _private()
try: Class = _private.Class
finally: del _private


# noinspection PyArgumentList
def make(*args, **kwargs): return Class(*args, **kwargs)
