"""
Pizza lookup endpoints for API v1.

The pizza name may be given either as a path segment
(``/pizzas/regina``) or as the ``pizza_name`` query parameter
(``/pizzas?pizza_name=regina``).  A hit returns HTTP 200 with the
record; an unknown or missing name returns HTTP 400 with an ``error``
message.  Bodies are produced by the response builder and sent back
byte for byte.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from pizza_api.app.handlers.invocation import PIZZA_NAME_PARAM, handle
from pizza_api.app.schemas.pizza import Pizza, PizzaError
from pizza_api.app.services.catalog_service import Catalog, CatalogService

router = APIRouter()

_RESPONSES = {
    200: {"model": Pizza, "description": "The matching pizza"},
    400: {"model": PizzaError, "description": "Pizza not found or name not provided"},
}


def get_app_catalog(request: Request) -> Catalog:
    """Return the catalog built when the application was created."""
    catalog = getattr(request.app.state, "catalog", None)
    return catalog if catalog is not None else CatalogService.get()


def _respond(pizza_name: Union[str, List[str], None], catalog: Catalog) -> Response:
    descriptor = handle({PIZZA_NAME_PARAM: pizza_name}, catalog)
    return Response(
        content=descriptor.body,
        status_code=descriptor.status_code,
        media_type=descriptor.content_type,
    )


@router.get("", responses=_RESPONSES)
@router.get("/", responses=_RESPONSES, include_in_schema=False)
async def get_pizza_by_query(
    pizza_name: Optional[List[str]] = Query(None, description="Name of the pizza to look up; the first value wins when repeated"),
    catalog: Catalog = Depends(get_app_catalog),
) -> Response:
    """Look a pizza up by the ``pizza_name`` query parameter."""
    return _respond(pizza_name, catalog)


@router.get("/{pizza_name}", responses=_RESPONSES)
async def get_pizza(pizza_name: str, catalog: Catalog = Depends(get_app_catalog)) -> Response:
    """Look a pizza up by name."""
    return _respond(pizza_name, catalog)
