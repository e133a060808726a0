"""Búsqueda por nombre compartida por proyectos y entornos."""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar


class _Named(Protocol):
    @property
    def name(self) -> str: ...


NamedT = TypeVar("NamedT", bound=_Named)


def find_by_name(records: Iterable[NamedT], name: str, *, ignore_case: bool = False) -> NamedT | None:
    # Con ignore_case se prefiere la coincidencia exacta si existe.
    candidates = sorted(records, key=lambda r: r.name)
    for record in candidates:
        if record.name == name:
            return record
    if ignore_case:
        wanted = name.casefold()
        for record in candidates:
            if record.name.casefold() == wanted:
                return record
    return None
