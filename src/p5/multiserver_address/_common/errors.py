#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import typing

    class _Error(ValueError):
        message = "could not parse address"

        @property
        def value(self): return self.__value

        def __str__(self):
            if self.__value is None: return self.message
            return f"{self.message}: {self.__value!r}"

        def __init__(self, value: typing.Optional[str] = None):
            assert (value is None) or isinstance(value, str)
            super().__init__(value)
            self.__value = value

    class _ParseError(_Error): message = "could not parse address"

    class _UnsupportedProtocol(_ParseError): message = "unsupported protocol"

    class _NoAddressString(_Error): message = "could not find network address in string"

    class _NoIpString(_Error): message = "could not find ip in address string"

    class _IpInvalid(_Error): message = "could not parse ip"

    class _UrlInvalid(_Error): message = "could not parse url"

    class _SocketPathInvalid(_Error): message = "could not parse socket file path"

    class _NoPortString(_Error): message = "could not find port in address string"

    class _PortNotNumeric(_Error): message = "port was not numeric"

    class _PortOutOfRange(_Error): message = "port out of range"

    class _NoPubKeyString(_Error): message = "could not find pub key in address string"

    class _PubKeyNotBase64(_Error): message = "could not decode pub key as base64"

    class _PubKeyInvalidLength(_Error): message = "pub key is not 32 bytes long"

    class _PubKeyInvalidFormat(_Error): message = "pub key is not a legacy ed25519 string"

    class _Result(object):
        Error = _Error
        ParseError = _ParseError
        UnsupportedProtocol = _UnsupportedProtocol
        NoAddressString = _NoAddressString
        NoIpString = _NoIpString
        IpInvalid = _IpInvalid
        UrlInvalid = _UrlInvalid
        SocketPathInvalid = _SocketPathInvalid
        NoPortString = _NoPortString
        PortNotNumeric = _PortNotNumeric
        PortOutOfRange = _PortOutOfRange
        NoPubKeyString = _NoPubKeyString
        PubKeyNotBase64 = _PubKeyNotBase64
        PubKeyInvalidLength = _PubKeyInvalidLength
        PubKeyInvalidFormat = _PubKeyInvalidFormat

    return _Result


_private = _private()
try:
    Error = _private.Error
    ParseError = _private.ParseError
    UnsupportedProtocol = _private.UnsupportedProtocol
    NoAddressString = _private.NoAddressString
    NoIpString = _private.NoIpString
    IpInvalid = _private.IpInvalid
    UrlInvalid = _private.UrlInvalid
    SocketPathInvalid = _private.SocketPathInvalid
    NoPortString = _private.NoPortString
    PortNotNumeric = _private.PortNotNumeric
    PortOutOfRange = _private.PortOutOfRange
    NoPubKeyString = _private.NoPubKeyString
    PubKeyNotBase64 = _private.PubKeyNotBase64
    PubKeyInvalidLength = _private.PubKeyInvalidLength
    PubKeyInvalidFormat = _private.PubKeyInvalidFormat
finally: del _private
