# src/namever/core/processor.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable

from namever.core.parser import VersionOverflowError, parse
from namever.core.versioning import assign_next_version

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    source: str
    final_name: str | None
    error: str | None = None   # "VersionOverflow" | None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def process_names(existing: Iterable[str], incoming: Iterable[str], logger=None) -> list[Resolution]:
    """
    Rozwiązuje kolejne nazwy względem rosnącego zbioru nazw zajętych.
    Każda rozwiązana nazwa trafia do zbioru przed przetworzeniem następnej.
    Błąd jednej nazwy (VersionOverflow) nie przerywa całej partii.
    """
    logger = logger or log
    all_names = list(existing)
    results: list[Resolution] = []

    for name in incoming:
        try:
            final = assign_next_version(parse(name), all_names)
        except VersionOverflowError as e:
            logger.warning(
                "version overflow for %r",
                name,
                extra={"event": "resolve", "source": name, "error": e.tag},
            )
            results.append(Resolution(source=name, final_name=None, error=e.tag, detail=str(e)))
            continue
        logger.debug(
            "resolved %r -> %r",
            name,
            final,
            extra={"event": "resolve", "source": name, "final": final},
        )
        all_names.append(final)
        results.append(Resolution(source=name, final_name=final))

    return results


def resolve_names(existing: Iterable[str], incoming: Iterable[str]) -> list[str]:
    """Jak process_names, ale zwraca same nazwy; pierwszy błąd jest rzucany dalej."""
    out: list[str] = []
    for r in process_names(existing, incoming):
        if not r.ok:
            raise VersionOverflowError(r.source)
        out.append(r.final_name)
    return out
