# src/namever/core/parser.py
from __future__ import annotations
import re
from dataclasses import dataclass

# (.*?)  (  v  N  )  – znacznik wersji tylko na samym końcu nazwy
VERSION_PATTERN = re.compile(r"^(.*?)\s*\(\s*v\s*([0-9]+)\s*\)\s*$", re.IGNORECASE)

MAX_VERSION = 2**31 - 1


class VersionOverflowError(ValueError):
    tag = "VersionOverflow"

    def __init__(self, raw: str):
        super().__init__(f"Version number out of range in name: {raw!r}")
        self.raw = raw


@dataclass(frozen=True)
class ParsedName:
    original: str
    base_name: str
    version: int | None = None

    @property
    def is_versioned(self) -> bool:
        return self.version is not None


def parse_version(digits: str, raw: str) -> int:
    n = int(digits, 10)
    if n > MAX_VERSION:
        raise VersionOverflowError(raw)
    return n


def parse(raw: str) -> ParsedName:
    """
    Rozbija nazwę na (base_name, version).
    "Report (v3)" -> ("Report", 3); "Report" -> ("Report", None).
    Rzuca VersionOverflowError, gdy numer wersji nie mieści się w zakresie.
    """
    original = raw.strip()
    match = VERSION_PATTERN.match(original)
    if match is None:
        return ParsedName(original=original, base_name=original)
    return ParsedName(
        original=original,
        base_name=match.group(1).strip(),
        version=parse_version(match.group(2), original),
    )
