# src/namever/utils/naming.py
from __future__ import annotations
from typing import Iterable

def name_key(name: str) -> str:
    return name.lower()

def name_keys(names: Iterable[str]) -> set[str]:
    return {name_key(n) for n in names}

def with_version(base_name: str, n: int) -> str:
    return f"{base_name} (v{n})"

def split_names(text: str | None, separator: str = ",") -> list[str]:
    """
    Tekst od użytkownika -> lista nazw: podział po separatorze,
    przycięcie spacji, puste wpisy pomijane.
    """
    if not text:
        return []
    return [part.strip() for part in text.split(separator) if part.strip()]

SEPARATOR_NAMES = {",": "comma", ";": "semicolon", "|": "pipe", "\t": "tab", " ": "space"}

def input_label(title: str, separator: str) -> str:
    sep = SEPARATOR_NAMES.get(separator, repr(separator))
    return f"{title} ({sep}-separated):"
