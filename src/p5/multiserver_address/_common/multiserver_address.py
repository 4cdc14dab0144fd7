#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import typing

    from . import multikey as _multikey_module
    from . import address_type as _address_type_module

    _Multikey = _multikey_module.Class
    _AddressType = _address_type_module.Base
    _SocketFilePath = _address_type_module.SocketFilePath

    def _format_transport(address: _AddressType, port: typing.Optional[int]):
        if isinstance(address, _SocketFilePath): return f"unix:{address.path}"
        return f"net:{address.host}:{port}"

    def _format_transform(pub_key: typing.Optional[_Multikey]):
        if pub_key is None: return "noauth"
        return f"shs:{pub_key.to_base64()}"

    class _Class(object):
        @property
        def address(self) -> _AddressType: return self.__address

        @property
        def port(self) -> typing.Optional[int]: return self.__port

        @property
        def pub_key(self) -> typing.Optional[_Multikey]: return self.__pub_key

        def to_dict(self):
            _pub_key = self.__pub_key
            if _pub_key is not None: _pub_key = _pub_key.to_legacy_string()
            return {
                "address": self.__address.to_dict(),
                "port": self.__port,
                "pub_key": _pub_key,
                "multiserver": str(self)
            }

        def __str__(self):
            return "~".join((
                _format_transport(address = self.__address, port = self.__port),
                _format_transform(pub_key = self.__pub_key)
            ))

        def __repr__(self): return f"MultiserverAddress({str(self)!r})"

        def __eq__(self, other):
            if not isinstance(other, _Class): return NotImplemented
            return (self.__address, self.__port, self.__pub_key) == (other.address, other.port, other.pub_key)

        def __hash__(self): return hash((self.__address, self.__port, self.__pub_key))

        def __init__(
            self, address: _AddressType, port: typing.Optional[int] = None, pub_key: typing.Optional[_Multikey] = None
        ):
            super().__init__()
            assert isinstance(address, _AddressType)
            if isinstance(address, _SocketFilePath): assert port is None
            else:
                assert isinstance(port, int)
                assert 0 < port
                assert 65536 > port
            assert (pub_key is None) or isinstance(pub_key, _Multikey)
            self.__address = address
            self.__port = port
            self.__pub_key = pub_key

    def _join(addresses: typing.Iterable[_Class]):
        addresses = tuple(addresses)
        assert addresses
        for _address in addresses: assert isinstance(_address, _Class)
        return ";".join(str(_address) for _address in addresses)

    class _Result(object):
        Class = _Class
        join = _join

    return _Result


_private = _private()
try:
    Class = _private.Class
    join = _private.join
finally: del _private


# noinspection PyArgumentList
def make(*args, **kwargs): return Class(*args, **kwargs)
