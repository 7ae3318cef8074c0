# snipcheck/processing/parse.py

from __future__ import annotations
from typing import Iterable, List, Tuple

from snipcheck.errors import MalformedLineError
from snipcheck.models import ConfigLine, Server, Snip
from snipcheck.utils.logging import get_logger

log = get_logger(__name__)

SERVER_PREFIX = "add server "
SNIP_PREFIX = "add ns ip "


def remove_config_keywords(text: str, keywords: str) -> str:
    """Drop the first occurrence of the CLI keywords from a config line."""
    return text.replace(keywords, "", 1)


def _leading_fields(line: ConfigLine, prefix: str, expected: str) -> Tuple[str, str]:
    body = remove_config_keywords(line.text, prefix).replace("\r", "")
    fields = body.split(" ")
    if len(fields) < 2 or not fields[0] or not fields[1]:
        raise MalformedLineError(line.number, line.text.rstrip("\r"), expected)
    return fields[0], fields[1]


def parse_server(line: ConfigLine) -> Server:
    name, ip_address = _leading_fields(line, SERVER_PREFIX, "add server <name> <ip>")
    return Server(name=name, ip_address=ip_address, line=line.number)


def parse_snip(line: ConfigLine) -> Snip:
    ip_address, mask = _leading_fields(line, SNIP_PREFIX, "add ns ip <ip> <mask>")
    return Snip(ip_address=ip_address, subnet_mask=mask, line=line.number)


def parse_servers(lines: Iterable[ConfigLine]) -> List[Server]:
    servers = [parse_server(line) for line in lines]
    log.info("Parsed %d server(s)", len(servers))
    return servers


def parse_snips(lines: Iterable[ConfigLine]) -> List[Snip]:
    snips = [parse_snip(line) for line in lines]
    log.info("Parsed %d SNIP(s)", len(snips))
    return snips
