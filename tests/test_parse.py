import pytest

from snipcheck.errors import MalformedLineError
from snipcheck.models import ConfigLine, Server, Snip
from snipcheck.processing.parse import parse_server, parse_servers, parse_snip, parse_snips


def test_parse_server():
    server = parse_server(ConfigLine(7, "add server web1 10.0.0.5 -comment \"front\""))
    assert server == Server(name="web1", ip_address="10.0.0.5", line=7)


def test_parse_server_strips_carriage_return():
    server = parse_server(ConfigLine(1, "add server web1 10.0.0.5\r"))
    assert server.ip_address == "10.0.0.5"


def test_parse_snip():
    snip = parse_snip(ConfigLine(3, "add ns ip 10.0.0.1 255.255.255.0 -vServer DISABLED"))
    assert snip == Snip(ip_address="10.0.0.1", subnet_mask="255.255.255.0", line=3)


def test_parse_snip_strips_carriage_return():
    snip = parse_snip(ConfigLine(3, "add ns ip 10.0.0.1 255.255.255.0\r"))
    assert snip.subnet_mask == "255.255.255.0"


def test_parse_server_missing_ip():
    with pytest.raises(MalformedLineError) as exc_info:
        parse_server(ConfigLine(12, "add server onlyname"))
    assert exc_info.value.line_number == 12
    assert "line 12" in str(exc_info.value)


def test_parse_snip_missing_mask():
    with pytest.raises(MalformedLineError):
        parse_snip(ConfigLine(2, "add ns ip 10.0.0.1\r"))


def test_parse_keeps_file_order():
    servers = parse_servers([
        ConfigLine(1, "add server b 10.0.0.2"),
        ConfigLine(2, "add server a 10.0.0.1"),
    ])
    assert [s.name for s in servers] == ["b", "a"]

    snips = parse_snips([
        ConfigLine(5, "add ns ip 10.1.0.1 255.255.0.0"),
        ConfigLine(9, "add ns ip 10.0.0.1 255.255.255.0"),
    ])
    assert [s.line for s in snips] == [5, 9]
