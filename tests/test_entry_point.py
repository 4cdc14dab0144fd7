import json
import socket

import pytest

from p5.multiserver_address._entry_point import routine

KEY = "HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4="


def test_parse_mode(capsys):
    routine(["parse", f"net:192.168.178.17:8008~shs:{KEY};unix:/run/ssb.sock~noauth"])
    document = json.loads(capsys.readouterr().out)
    assert [_item["multiserver"] for _item in document] == [
        f"net:192.168.178.17:8008~shs:{KEY}",
        "unix:/run/ssb.sock~noauth",
    ]
    assert document[0]["pub_key"] == f"@{KEY}.ed25519"
    assert document[1]["port"] is None


def test_parse_mode_indent(capsys):
    routine(["parse", "--indent", "2", "net:host.com:8008~noauth"])
    output = capsys.readouterr().out
    assert output.startswith("[\n  {")
    assert json.loads(output)[0]["address"]["type"] == "url"


def test_parse_mode_require_key(capsys):
    routine(["parse", "-k", f"net:host.com:8008~shs:{KEY}"])
    assert json.loads(capsys.readouterr().out)[0]["port"] == 8008
    with pytest.raises(ValueError):
        routine(["parse", "--require-key", "net:host.com:8008~noauth"])


def test_parse_mode_invalid_address(capsys):
    with pytest.raises(ValueError) as info:
        routine(["parse", "net:host.com:0~noauth"])
    assert "parse/address" in str(info.value)
    assert capsys.readouterr().out == ""


def test_unrecognized_arguments():
    with pytest.raises(ValueError):
        routine(["parse", "net:host.com:8008~noauth", "extra"])


def _probe(arguments, capsys):
    with pytest.raises(SystemExit) as info:
        routine(["probe", "--timeout", "2", *arguments])
    lines = capsys.readouterr().out.splitlines()
    return info.value.code, [json.loads(_line) for _line in lines]


def test_probe_reachable_tcp(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        port = listener.getsockname()[1]
        code, results = _probe([f"net:127.0.0.1:{port}~shs:{KEY}"], capsys)
    assert code == 0
    assert results == [{"multiserver": f"net:127.0.0.1:{port}~shs:{KEY}", "reachable": True}]


def test_probe_unreachable_tcp(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as placeholder:
        placeholder.bind(("127.0.0.1", 0))
        port = placeholder.getsockname()[1]
    code, results = _probe([f"net:127.0.0.1:{port}~noauth"], capsys)
    assert code == 1
    assert results[0]["reachable"] is False


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="unix sockets are not available")
def test_probe_mixed_unix(tmp_path, capsys):
    path = tmp_path / "ssb.sock"
    missing = tmp_path / "missing.sock"
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as listener:
        listener.bind(str(path))
        listener.listen(1)
        code, results = _probe([f"unix:{path}~noauth;unix:{missing}~noauth"], capsys)
    assert code == 0
    assert [_item["reachable"] for _item in results] == [True, False]


@pytest.mark.parametrize("timeout", ["0", "-1", "nan", "inf", "soon"])
def test_probe_rejects_bad_timeout(timeout: str):
    with pytest.raises(ValueError):
        routine(["probe", "--timeout", timeout, "net:127.0.0.1:8008~noauth"])
