"""
The fixed pizza catalog.

The catalog is an ordered, read-only collection of ``Pizza`` records.
It is built once per process and then shared by every invocation;
since nothing ever mutates it, concurrent reads need no locking.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from pizza_api.app.schemas.pizza import Pizza


DEFAULT_PIZZAS: Tuple[Pizza, ...] = (
    Pizza(name="veggie", price=10),
    Pizza(name="regina", price=12),
    Pizza(name="deluxe", price=14),
)


class CatalogError(ValueError):
    """Raised when a catalog would violate its invariants."""


class Catalog:
    """Immutable ordered sequence of pizzas with unique names."""

    __slots__ = ("_pizzas",)

    def __init__(self, pizzas: Iterable[Pizza]) -> None:
        items = tuple(pizzas)
        seen = set()
        for pizza in items:
            if pizza.name in seen:
                raise CatalogError(f"Duplicate pizza name in catalog: {pizza.name!r}")
            seen.add(pizza.name)
        self._pizzas = items

    def __iter__(self) -> Iterator[Pizza]:
        return iter(self._pizzas)

    def __len__(self) -> int:
        return len(self._pizzas)

    def __repr__(self) -> str:
        return f"Catalog({list(self.names())!r})"

    def names(self) -> Tuple[str, ...]:
        """Return the pizza names in catalog order."""
        return tuple(pizza.name for pizza in self._pizzas)


class CatalogService:
    """Service for building and sharing the pizza catalog."""

    _shared: Optional[Catalog] = None

    @classmethod
    def build(cls) -> Catalog:
        """Return a new catalog holding the default pizzas."""
        catalog = Catalog(DEFAULT_PIZZAS)
        logging.getLogger(__name__).info("Built pizza catalog with %d entries", len(catalog))
        return catalog

    @classmethod
    def get(cls) -> Catalog:
        """Return the process-wide catalog, building it on first use."""
        if cls._shared is None:
            cls._shared = cls.build()
        return cls._shared
