# snipcheck/models.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLine:
    number: int             # 1-based line number in the config dump
    text: str               # fragment from the marker to end of line, may end in "\r"


@dataclass(frozen=True)
class Server:
    name: str               # "web1"
    ip_address: str         # dotted-decimal IPv4, "\r" already stripped
    line: int = 0           # source line, 0 when built by hand


@dataclass(frozen=True)
class Snip:
    ip_address: str         # interface address, e.g. "10.0.0.1"
    subnet_mask: str        # dotted-decimal mask, e.g. "255.255.255.0"
    line: int = 0
