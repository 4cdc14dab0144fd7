#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__


def _private():
    import re
    import typing
    import pathlib
    import ipaddress
    import urllib.parse

    _url_scheme = "tcp"
    _reserved = frozenset("~;")
    _ip_like_pattern = re.compile(r"[0-9.]+")
    _label_pattern = re.compile(r"(?!-)[a-z0-9_-]{1,63}(?<!-)")
    _max_domain_size = 253
    _socket_path_suffixes = ("/", "/.", "/..")

    def _is_fragment(value: str):
        assert isinstance(value, str)
        if _reserved.intersection(value): return False
        return 1 == len(f"{value}\r\n".splitlines())

    def _is_domain(value: str):
        assert isinstance(value, str)
        if not value: return False
        if _max_domain_size < len(value): return False
        if _ip_like_pattern.fullmatch(value) is not None: return False
        for _label in value.split("."):
            if _label_pattern.fullmatch(_label) is None: return False
        return True

    def _is_socket_path(value: str):
        assert isinstance(value, str)
        if not value: return False
        if not _is_fragment(value = value): return False
        if value in {".", ".."}: return False
        for _suffix in _socket_path_suffixes:
            if value.endswith(_suffix): return False
        return True

    _IpValue = typing.Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

    class _Base(object):
        @property
        def kind(self) -> str: raise NotImplementedError()

        @property
        def value(self): raise NotImplementedError()

        def to_dict(self) -> dict: raise NotImplementedError()

        def __eq__(self, other):
            if not isinstance(other, _Base): return NotImplemented
            return (self.kind, self.value) == (other.kind, other.value)

        def __hash__(self): return hash((self.kind, self.value))

        def __repr__(self): return f"{self.__class__.__name__.lstrip('_')}({str(self.value)!r})"

    class _Ip(_Base):
        @property
        def kind(self): return "ip"

        @property
        def value(self): return self.__ip

        @property
        def ip(self) -> _IpValue: return self.__ip

        @property
        def host(self): return str(self.__ip)

        @property
        def version(self): return self.__ip.version

        def to_dict(self): return {"type": self.kind, "host": self.host, "version": self.version}

        def __init__(self, value: typing.Union[str, _IpValue]):
            super().__init__()
            if isinstance(value, str): value = ipaddress.ip_address(value)
            assert isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address))
            assert _is_fragment(value = str(value))
            self.__ip = value

    class _Url(_Base):
        @property
        def kind(self): return "url"

        @property
        def value(self): return self.__url.hostname

        @property
        def url(self) -> urllib.parse.SplitResult: return self.__url

        @property
        def host(self): return self.__url.hostname

        def to_dict(self): return {"type": self.kind, "host": self.host, "url": self.__url.geturl()}

        def __init__(self, host: str):
            super().__init__()
            assert isinstance(host, str)
            assert _is_domain(value = host)
            _url = urllib.parse.urlsplit(url = f"{_url_scheme}://{host}", allow_fragments = False)
            assert _url_scheme == _url.scheme
            assert host == _url.netloc
            assert host == _url.hostname
            assert not _url.path
            assert not _url.query
            self.__url = _url

    class _SocketFilePath(_Base):
        @property
        def kind(self): return "unix"

        @property
        def value(self): return self.__path

        @property
        def path(self) -> str: return self.__path

        def to_dict(self): return {"type": self.kind, "path": self.__path}

        def __init__(self, path: str):
            super().__init__()
            assert isinstance(path, str)
            assert _is_socket_path(value = path)
            path = pathlib.PurePosixPath(path).as_posix()
            assert _is_socket_path(value = path)
            self.__path = path

    class _Result(object):
        Base = _Base
        Ip = _Ip
        Url = _Url
        SocketFilePath = _SocketFilePath
        is_domain = _is_domain
        is_socket_path = _is_socket_path

    return _Result


_private = _private()
try:
    Base = _private.Base
    Ip = _private.Ip
    Url = _private.Url
    SocketFilePath = _private.SocketFilePath
    is_domain = _private.is_domain
    is_socket_path = _private.is_socket_path
finally: del _private
