"""
Top-level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import pizzas

router = APIRouter()

router.include_router(pizzas.router, prefix="/pizzas", tags=["pizzas"])
