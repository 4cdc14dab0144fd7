#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import base64
    import binascii

    from . import errors as _errors_module

    _algorithm = "ed25519"
    _key_size = 32
    _legacy_prefix = "@"
    _legacy_suffix = f".{_algorithm}"

    def _decode(value: str):
        assert isinstance(value, str)
        if not value: raise _errors_module.NoPubKeyString()
        try: value = base64.b64decode(value.encode("ascii"), validate = True)
        except (UnicodeError, binascii.Error) as _exception: raise _errors_module.PubKeyNotBase64(value) from _exception
        return value

    class _Class(object):
        @property
        def algorithm(self): return _algorithm

        @property
        def data(self): return self.__data

        def to_base64(self): return base64.b64encode(self.__data).decode("ascii")

        def to_legacy_string(self): return f"{_legacy_prefix}{self.to_base64()}{_legacy_suffix}"

        @classmethod
        def from_ed25519(cls, data: bytes):
            assert isinstance(data, (bytes, bytearray))
            if _key_size != len(data): raise _errors_module.PubKeyInvalidLength(f"{len(data)} bytes")
            return cls(data = bytes(data))

        @classmethod
        def from_base64(cls, value: str): return cls.from_ed25519(data = _decode(value = value))

        @classmethod
        def from_legacy_string(cls, value: str):
            assert isinstance(value, str)
            if not (value.startswith(_legacy_prefix) and value.endswith(_legacy_suffix)):
                raise _errors_module.PubKeyInvalidFormat(value)
            return cls.from_base64(value = value[len(_legacy_prefix):-len(_legacy_suffix)])

        def __eq__(self, other):
            if not isinstance(other, _Class): return NotImplemented
            return self.__data == other.data

        def __hash__(self): return hash((_algorithm, self.__data))

        def __repr__(self): return f"Multikey({self.to_legacy_string()!r})"

        def __str__(self): return self.to_legacy_string()

        def __init__(self, data: bytes):
            super().__init__()
            assert isinstance(data, bytes)
            assert _key_size == len(data)
            self.__data = data

    class _Result(object):
        Class = _Class

    return _Result


_private = _private()
try: Class = _private.Class
finally: del _private


# noinspection PyArgumentList
def make(*args, **kwargs): return Class(*args, **kwargs)
