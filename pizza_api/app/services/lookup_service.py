"""
Name lookup against the catalog.

``LookupService.find`` maps an optional pizza name to one of three
outcomes: ``Found`` carrying the matching record, ``NotFound`` when no
record has that name, or ``NameMissing`` when no name was supplied at
all.  Matching is exact and case-sensitive.  An empty string is an
ordinary name and simply matches nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from pizza_api.app.schemas.pizza import Pizza


@dataclass(frozen=True)
class Found:
    """A pizza with the requested name exists."""

    pizza: Pizza


@dataclass(frozen=True)
class NotFound:
    """No pizza has the requested name."""


@dataclass(frozen=True)
class NameMissing:
    """The request did not supply a pizza name."""


LookupOutcome = Union[Found, NotFound, NameMissing]


class LookupService:
    """Service resolving pizza names against a catalog."""

    @classmethod
    def find(cls, name: Optional[str], catalog: Iterable[Pizza]) -> LookupOutcome:
        """Look ``name`` up in ``catalog``, returning the first match."""
        if name is None:
            return NameMissing()
        for pizza in catalog:
            if pizza.name == name:
                return Found(pizza)
        return NotFound()
