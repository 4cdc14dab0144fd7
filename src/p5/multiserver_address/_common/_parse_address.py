#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import re
    import pathlib
    import ipaddress

    from . import errors as _errors_module
    from . import multikey as _multikey_module
    from . import address_type as _address_type_module
    from . import multiserver_address as _multiserver_address_module

    _Multikey = _multikey_module.Class
    _make_multiserver_address = _multiserver_address_module.make

    _list_separator = ";"
    _segment_separator = "~"
    _field_separator = ":"
    _noauth = "noauth"

    _ip_like_pattern = re.compile(r"[0-9.]+")
    _port_pattern = re.compile(r"[0-9]+")
    _max_port_size = len(str(65535))

    def _parse_ip(value: str, version: int = None):
        try: value = ipaddress.ip_address(value)
        except ValueError as _exception: raise _errors_module.IpInvalid(value) from _exception
        if (version is not None) and (version != value.version): raise _errors_module.IpInvalid(str(value))
        return _address_type_module.Ip(value = value)

    def _parse_domain(value: str):
        try: _ascii = value.encode("idna").decode("ascii")
        except UnicodeError as _exception: raise _errors_module.UrlInvalid(value) from _exception
        _ascii = _ascii.lower()
        if not _address_type_module.is_domain(value = _ascii): raise _errors_module.UrlInvalid(value)
        return _address_type_module.Url(host = _ascii)

    def _parse_host(value: str):
        if not value: raise _errors_module.NoAddressString()
        if value.startswith("["):
            if not value.endswith("]"): raise _errors_module.IpInvalid(value)
            value = value[1:-1]
            if not value: raise _errors_module.NoIpString()
            return _parse_ip(value = value, version = 6)
        if (_field_separator in value) or (_ip_like_pattern.fullmatch(value) is not None): return _parse_ip(value = value)
        return _parse_domain(value = value)

    def _parse_port(value: str):
        if not value: raise _errors_module.NoPortString()
        if _port_pattern.fullmatch(value) is None: raise _errors_module.PortNotNumeric(value)
        if _max_port_size < len(value.lstrip("0")): raise _errors_module.PortOutOfRange(value)
        _port = int(value, base = 10)
        if not ((0 < _port) and (65536 > _port)): raise _errors_module.PortOutOfRange(value)
        return _port

    def _parse_net(value: str):
        _host, _separator, _port = value.rpartition(_field_separator)
        if not _separator: raise _errors_module.NoPortString(value)
        _port = _parse_port(value = _port)
        return _parse_host(value = _host), _port

    def _parse_unix(value: str):
        if not value: raise _errors_module.NoAddressString()
        if not _address_type_module.is_socket_path(value = value): raise _errors_module.SocketPathInvalid(value)
        return _address_type_module.SocketFilePath(path = pathlib.PurePosixPath(value).as_posix()), None

    _transports = {"net": _parse_net, "unix": _parse_unix}

    def _parse_transport(value: str):
        _name, _separator, _data = value.partition(_field_separator)
        if not _separator: raise _errors_module.ParseError(value)
        try: _action = _transports[_name]
        except KeyError: raise _errors_module.UnsupportedProtocol(_name)
        return _action(value = _data)

    def _parse_transform(value: str):
        if _noauth == value: return None
        _name, _separator, _data = value.partition(_field_separator)
        if "shs" != _name: raise _errors_module.UnsupportedProtocol(_name)
        if not _separator: raise _errors_module.NoPubKeyString()
        return _Multikey.from_base64(value = _data)

    def _parse_item(value: str):
        if not value: raise _errors_module.ParseError(value)
        try: _transport, _transform = value.split(_segment_separator)
        except ValueError: raise _errors_module.ParseError(value)
        _address, _port = _parse_transport(value = _transport)
        _pub_key = _parse_transform(value = _transform)
        return _make_multiserver_address(address = _address, port = _port, pub_key = _pub_key)

    def _check_line(value: str):
        assert isinstance(value, str)
        if not value: raise _errors_module.ParseError(value)
        if value.strip() != value: raise _errors_module.ParseError(value)
        if 1 != len(f"{value}\r\n".splitlines()): raise _errors_module.ParseError(value)
        return value

    def _routine(value: str):
        value = _check_line(value = value)
        if _list_separator in value: raise _errors_module.ParseError(value)
        return _parse_item(value = value)

    def _many(value: str):
        value = _check_line(value = value)
        return tuple(_parse_item(value = _item) for _item in value.split(_list_separator))

    class _Result(object):
        routine = _routine
        many = _many

    return _Result


_private = _private()
try:
    routine = _private.routine
    many = _private.many
finally: del _private
