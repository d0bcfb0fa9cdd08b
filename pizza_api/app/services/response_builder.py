"""
Shape lookup outcomes into transport-agnostic responses.

A ``ResponseDescriptor`` holds the status code, content type and body
bytes of a response.  Adapters translate it into whatever their host
expects (a Starlette ``Response``, an API Gateway proxy dict, stdout).

Bodies are compact UTF-8 JSON: ``{"name":"regina","price":12}`` on
success and ``{"error":"Pizza not found"}`` on failure.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict

from pizza_api.app.schemas.pizza import Pizza
from pizza_api.app.services.lookup_service import Found, LookupOutcome, NameMissing, NotFound


JSON_CONTENT_TYPE = "application/json"

PIZZA_NOT_FOUND = "Pizza not found"
PIZZA_NAME_NOT_PROVIDED = "Pizza name not provided"


@dataclass(frozen=True)
class ResponseDescriptor:
    """Status, content type and body of one response, independent of the host."""

    status_code: int
    content_type: str
    body: bytes


class ResponseService:
    """Service turning lookup outcomes into response descriptors."""

    @staticmethod
    def _dump(payload: Dict[str, Any]) -> bytes:
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    @classmethod
    def build_success(cls, pizza: Pizza) -> ResponseDescriptor:
        """Return a 200 response describing ``pizza``."""
        body = cls._dump({"name": pizza.name, "price": pizza.price})
        return ResponseDescriptor(status_code=200, content_type=JSON_CONTENT_TYPE, body=body)

    @classmethod
    def build_failure(cls, message: str) -> ResponseDescriptor:
        """Return a 400 response carrying ``message`` as the error."""
        return ResponseDescriptor(status_code=400, content_type=JSON_CONTENT_TYPE, body=cls._dump({"error": message}))

    @classmethod
    def build_response(cls, outcome: LookupOutcome) -> ResponseDescriptor:
        """Map a lookup outcome to its response.

        Anything that is not a lookup outcome is a programming error and
        raises ``TypeError`` instead of producing a client error.
        """
        if isinstance(outcome, Found):
            return cls.build_success(outcome.pizza)
        if isinstance(outcome, NotFound):
            return cls.build_failure(PIZZA_NOT_FOUND)
        if isinstance(outcome, NameMissing):
            return cls.build_failure(PIZZA_NAME_NOT_PROVIDED)
        raise TypeError(f"Unsupported lookup outcome: {outcome!r}")
