# snipcheck/datasources/config_file.py

from __future__ import annotations
import re
from pathlib import Path
from typing import List, Optional, Union

from snipcheck.errors import ConfigReadError, PatternError
from snipcheck.models import ConfigLine, Server, Snip
from snipcheck.processing.parse import parse_servers, parse_snips
from snipcheck.utils.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]

SERVER_PATTERN = "(add server).*"
SNIP_PATTERN = "(add ns ip ).*"


def read_config_text(path: PathLike) -> str:
    """
    Read a whole config dump into memory.

    Line terminators are kept as-is (``newline=""``), so CRLF dumps still
    carry their ``\\r`` characters; the record parser strips them. Bytes that
    are not UTF-8 (hostnames, comments) are kept as surrogates instead of
    failing the read.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            text = f.read()
    except FileNotFoundError:
        raise ConfigReadError(path, "file not found") from None
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e

    log.debug("Read %d characters from %s", len(text), path)
    return text


def extract_lines(text: str, pattern: str) -> List[ConfigLine]:
    """
    Return every fragment of ``text`` matched by ``pattern``, in file order.

    The fixed patterns match from their marker to the end of the line; ``.``
    never crosses ``\\n`` but does keep a trailing ``\\r``.
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e

    lines: List[ConfigLine] = []
    line_number = 1
    last_pos = 0
    for match in regex.finditer(text):
        line_number += text.count("\n", last_pos, match.start())
        last_pos = match.start()
        lines.append(ConfigLine(number=line_number, text=match.group(0)))

    log.debug("Pattern %r matched %d line(s)", pattern, len(lines))
    return lines


class ConfigFileSource:
    """
    One NetScaler config dump on disk.

    The file is read lazily on first use and cached, so servers() and snips()
    share a single read.
    """

    def __init__(self, path: PathLike):
        self.path = Path(path)
        self._text: Optional[str] = None

    def text(self) -> str:
        if self._text is None:
            self._text = read_config_text(self.path)
        return self._text

    def server_lines(self) -> List[ConfigLine]:
        return extract_lines(self.text(), SERVER_PATTERN)

    def snip_lines(self) -> List[ConfigLine]:
        return extract_lines(self.text(), SNIP_PATTERN)

    def servers(self) -> List[Server]:
        return parse_servers(self.server_lines())

    def snips(self) -> List[Snip]:
        return parse_snips(self.snip_lines())
