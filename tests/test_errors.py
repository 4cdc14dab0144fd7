import pytest

from p5.multiserver_address import Error, errors, parse, parse_many

KEY = "HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4="


@pytest.mark.parametrize(
    ("value", "error"),
    [
        ("", errors.ParseError),
        (" net:10.0.0.1:8008~noauth", errors.ParseError),
        ("net:10.0.0.1:8008~noauth ", errors.ParseError),
        ("net:10.0.0.1:8008~noauth\nnet:10.0.0.2:8008~noauth", errors.ParseError),
        ("net:10.0.0.1:8008", errors.ParseError),
        ("net:10.0.0.1:8008~noauth~noauth", errors.ParseError),
        ("net10.0.0.1~noauth", errors.ParseError),
        ("ws:host.com:8008~noauth", errors.UnsupportedProtocol),
        ("net:10.0.0.1:8008~foo:bar", errors.UnsupportedProtocol),
        ("net:10.0.0.1:8008~shs-v2", errors.UnsupportedProtocol),
        ("net::8008~noauth", errors.NoAddressString),
        ("unix:~noauth", errors.NoAddressString),
        ("net:[]:8008~noauth", errors.NoIpString),
        ("net:999.1.1.1:8008~noauth", errors.IpInvalid),
        ("net:1.2.3:8008~noauth", errors.IpInvalid),
        ("net:gg::1:8008~noauth", errors.IpInvalid),
        ("net:[1.2.3.4]:8008~noauth", errors.IpInvalid),
        ("net:[::1:8008~noauth", errors.IpInvalid),
        ("net:-host.com:8008~noauth", errors.UrlInvalid),
        ("net:host-.com:8008~noauth", errors.UrlInvalid),
        ("net:host..com:8008~noauth", errors.UrlInvalid),
        ("net:host.com.:8008~noauth", errors.UrlInvalid),
        ("net:user@host.com:8008~noauth", errors.UrlInvalid),
        ("net:host.com/path:8008~noauth", errors.UrlInvalid),
        (f"net:{'a' * 64}.com:8008~noauth", errors.UrlInvalid),
        ("unix:/tmp/~noauth", errors.SocketPathInvalid),
        ("unix:/tmp/.~noauth", errors.SocketPathInvalid),
        ("unix:/tmp/..~noauth", errors.SocketPathInvalid),
        ("unix:.~noauth", errors.SocketPathInvalid),
        ("unix:..~noauth", errors.SocketPathInvalid),
        ("unix:a/..~noauth", errors.SocketPathInvalid),
        ("net:~noauth", errors.NoPortString),
        ("net:host.com~noauth", errors.NoPortString),
        ("net:host.com:~noauth", errors.NoPortString),
        ("net:host.com:80a~noauth", errors.PortNotNumeric),
        ("net:host.com:-1~noauth", errors.PortNotNumeric),
        ("net:host.com:٨٠~noauth", errors.PortNotNumeric),
        ("net:host.com:0~noauth", errors.PortOutOfRange),
        ("net:host.com:65536~noauth", errors.PortOutOfRange),
        (f"net:host.com:{'9' * 5000}~noauth", errors.PortOutOfRange),
        ("net:host.com:8008~shs", errors.NoPubKeyString),
        ("net:host.com:8008~shs:", errors.NoPubKeyString),
        ("net:host.com:8008~shs:not base64!", errors.PubKeyNotBase64),
        ("net:host.com:8008~shs:ключ", errors.PubKeyNotBase64),
        (f"net:host.com:8008~shs:{KEY[:-1]}", errors.PubKeyNotBase64),
        ("net:host.com:8008~shs:AAAA", errors.PubKeyInvalidLength),
    ],
)
def test_parse_errors(value: str, error: type):
    with pytest.raises(error):
        parse(value)


@pytest.mark.parametrize(
    "value",
    [
        ";",
        "net:10.0.0.1:8008~noauth;",
        ";net:10.0.0.1:8008~noauth",
        "net:10.0.0.1:8008~noauth;;net:10.0.0.2:8008~noauth",
    ],
)
def test_many_rejects_empty_items(value: str):
    with pytest.raises(errors.ParseError):
        parse_many(value)


def test_many_reports_first_invalid_item():
    with pytest.raises(errors.PortOutOfRange):
        parse_many("net:10.0.0.1:8008~noauth;net:10.0.0.2:0~noauth")


def test_errors_are_value_errors():
    assert issubclass(Error, ValueError)
    for _name in (
        "ParseError", "UnsupportedProtocol", "NoAddressString", "NoIpString", "IpInvalid", "UrlInvalid",
        "SocketPathInvalid", "NoPortString", "PortNotNumeric", "PortOutOfRange", "NoPubKeyString",
        "PubKeyNotBase64", "PubKeyInvalidLength", "PubKeyInvalidFormat",
    ):
        assert issubclass(getattr(errors, _name), Error)
    assert issubclass(errors.UnsupportedProtocol, errors.ParseError)


def test_error_classes_carry_their_messages():
    assert errors.UnsupportedProtocol.message == "unsupported protocol"
    assert errors.SocketPathInvalid.message == "could not parse socket file path"
    assert errors.UnsupportedProtocol.__module__ == errors.__name__
    assert str(errors.UnsupportedProtocol("ws")) == "unsupported protocol: 'ws'"


def test_error_message_carries_fragment():
    with pytest.raises(errors.PortNotNumeric) as info:
        parse("net:host.com:80a~noauth")
    assert info.value.value == "80a"
    assert str(info.value) == "port was not numeric: '80a'"


def test_error_message_without_fragment():
    assert str(errors.NoAddressString()) == "could not find network address in string"


def test_low_level_cause_is_chained():
    with pytest.raises(errors.IpInvalid) as info:
        parse("net:999.1.1.1:8008~noauth")
    assert isinstance(info.value.__cause__, ValueError)
