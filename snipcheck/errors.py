# snipcheck/errors.py

from __future__ import annotations
from pathlib import Path
from typing import Optional, Union


class SnipCheckError(Exception):
    """Base class for every error the CLI reports and exits on."""


class ConfigReadError(SnipCheckError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read config file {self.path}: {reason}")


class PatternError(SnipCheckError):
    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"invalid extraction pattern {pattern!r}: {reason}")


class MalformedLineError(SnipCheckError):
    def __init__(self, line_number: int, text: str, expected: str):
        self.line_number = line_number
        self.text = text
        super().__init__(f"line {line_number}: malformed entry {text!r} (expected {expected})")


class UnknownSubnetMaskError(SnipCheckError):
    def __init__(self, mask: str, line_number: Optional[int] = None, suggestion: Optional[str] = None):
        self.mask = mask
        self.line_number = line_number
        self.suggestion = suggestion
        where = f"line {line_number}: " if line_number is not None else ""
        hint = f" (did you mean {suggestion}?)" if suggestion else ""
        super().__init__(f"{where}unknown subnet mask {mask!r}{hint}")


class InvalidCIDRError(SnipCheckError):
    def __init__(self, value: str, line_number: Optional[int] = None, reason: str = ""):
        self.value = value
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        detail = f" ({reason})" if reason else ""
        super().__init__(f"{where}invalid SNIP network {value!r}{detail}")


class InvalidIPAddressError(SnipCheckError):
    def __init__(self, value: str, line_number: Optional[int] = None):
        self.value = value
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}invalid server IPv4 address {value!r}")


class OutputFileError(SnipCheckError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot write output file {self.path}: {reason}")
