"""
Host-independent request handling.

Every adapter hands ``handle`` the parameters of one request as a
mapping and gets a ``ResponseDescriptor`` back.  Only the
``pizza_name`` key is read.  A missing key, a ``None`` value and an
empty string all count as "no name supplied".  When the parameter
was repeated, adapters pass every value as a list and the first one
wins, so all hosts answer a repeated parameter the same way.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pizza_api.app.services.catalog_service import Catalog, CatalogService
from pizza_api.app.services.lookup_service import Found, LookupService
from pizza_api.app.services.response_builder import ResponseDescriptor, ResponseService


PIZZA_NAME_PARAM = "pizza_name"

logger = logging.getLogger(__name__)


def extract_pizza_name(params: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Return the ``pizza_name`` parameter, or ``None`` if absent or empty."""
    if not params:
        return None
    value = params.get(PIZZA_NAME_PARAM)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None or value == "":
        return None
    return str(value)


def handle(params: Optional[Mapping[str, Any]], catalog: Optional[Catalog] = None) -> ResponseDescriptor:
    """Run one lookup invocation and return its response descriptor.

    ``catalog`` defaults to the shared process catalog.  Errors raised
    while shaping the response are logged and propagated; they signal
    a broken invariant, not a bad request.
    """
    if catalog is None:
        catalog = CatalogService.get()
    name = extract_pizza_name(params)
    outcome = LookupService.find(name, catalog)
    if isinstance(outcome, Found):
        logger.debug("Pizza %r found", name)
    else:
        logger.info("Pizza lookup failed for %r: %s", name, type(outcome).__name__)
    try:
        return ResponseService.build_response(outcome)
    except Exception:
        logger.exception("Could not build the response for %r", name)
        raise
