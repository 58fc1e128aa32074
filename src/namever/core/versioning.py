# src/namever/core/versioning.py
from __future__ import annotations
from typing import Iterable

from namever.core.parser import MAX_VERSION, ParsedName, VersionOverflowError, parse
from namever.utils.naming import name_key, name_keys, with_version


def highest_version(base_name: str, existing: Iterable[str]) -> int:
    """
    Najwyższa wersja użyta już dla base_name (porównanie bez wielkości liter).
    Nazwy bez znacznika (vN) oraz z numerem poza zakresem nic nie wnoszą.
    """
    key = name_key(base_name)
    highest = 0
    for name in existing:
        try:
            other = parse(name)
        except VersionOverflowError:
            continue
        if other.version is not None and name_key(other.base_name) == key:
            highest = max(highest, other.version)
    return highest


def assign_next_version(parsed: ParsedName, existing: Iterable[str]) -> str:
    """
    Zwraca nazwę, która nie koliduje z żadną z `existing`.

    Nazwa bez kolizji wraca bez zmian (również z własnym znacznikiem vN).
    Przy kolizji: pierwsza wolna wersja powyżej max(parsed.version, najwyższa
    istniejąca wersja dla tej samej bazy).
    """
    existing = list(existing)
    taken = name_keys(existing)
    if name_key(parsed.original) not in taken:
        return parsed.original

    current = max(parsed.version or 0, highest_version(parsed.base_name, existing))
    while True:
        current += 1
        if current > MAX_VERSION:
            raise VersionOverflowError(parsed.original)
        candidate = with_version(parsed.base_name, current)
        if name_key(candidate) not in taken:
            return candidate
