#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import sys
    import json
    import typing

    from ... import _common as _common_module

    _MultiserverAddress = _common_module.multiserver_address.Class

    def _routine(addresses: typing.Iterable[_MultiserverAddress], indent: typing.Optional[int] = None):
        assert (indent is None) or isinstance(indent, int)
        _document = list()
        for _address in addresses:
            assert isinstance(_address, _MultiserverAddress)
            _document.append(_address.to_dict())
        assert _document
        print(json.dumps(_document, indent = indent), file = sys.stdout, flush = True)

    class _Result(object):
        routine = _routine

    return _Result


_private = _private()
try: routine = _private.routine
finally: del _private
