#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import sys
    import json
    import typing
    import asyncio
    import contextlib

    from ... import _common as _common_module

    _MultiserverAddress = _common_module.multiserver_address.Class

    _default_timeout = +3.0e+0

    @contextlib.asynccontextmanager
    async def _open_peer(peer: _MultiserverAddress, timeout: float):
        assert isinstance(peer, _MultiserverAddress)
        _address = peer.address
        _action = {
            "unix": lambda: asyncio.open_unix_connection(path = _address.path),
            "ip": lambda: asyncio.open_connection(host = _address.host, port = peer.port),
            "url": lambda: asyncio.open_connection(host = _address.host, port = peer.port)
        }[_address.kind]
        _reader, _writer = await asyncio.wait_for(_action(), timeout = timeout)
        try: yield _reader, _writer
        finally: _writer.close()

    async def _probe(peer: _MultiserverAddress, timeout: float):
        try:
            async with _open_peer(peer = peer, timeout = timeout): pass
        except (OSError, asyncio.TimeoutError): return False
        return True

    async def _coroutine(addresses: typing.Tuple[_MultiserverAddress, ...], timeout: float):
        return await asyncio.gather(*(_probe(peer = _address, timeout = timeout) for _address in addresses))

    def _routine(addresses: typing.Iterable[_MultiserverAddress], timeout: float = _default_timeout):
        addresses = tuple(addresses)
        assert addresses
        assert isinstance(timeout, float)
        assert 0 < timeout
        _results = asyncio.run(_coroutine(addresses = addresses, timeout = timeout))
        assert len(addresses) == len(_results)
        for _address, _reachable in zip(addresses, _results):
            assert isinstance(_reachable, bool)
            print(json.dumps({"multiserver": str(_address), "reachable": _reachable}), file = sys.stdout, flush = True)
        sys.exit(0 if any(_results) else 1)

    class _Result(object):
        routine = _routine
        default_timeout = _default_timeout

    return _Result


_private = _private()
try:
    routine = _private.routine
    default_timeout = _private.default_timeout
finally: del _private
