"""
AWS Lambda entry point for the pizza lookup.

Handles API Gateway proxy events: the pizza name is read from the
route's path parameters (``/pizzas/{pizza_name}``) and, failing that,
from the query string.  ``multiValueQueryStringParameters`` is
preferred over ``queryStringParameters`` because the latter keeps only
the last value of a repeated parameter.  The catalog is built once per
container and reused by every warm invocation.
"""

import logging

from pizza_api.app.core.config import settings
from pizza_api.app.core.logging_config import setup_logging
from pizza_api.app.handlers.invocation import PIZZA_NAME_PARAM, handle
from pizza_api.app.services.catalog_service import CatalogService


setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

CATALOG = CatalogService.get()


def _parameters(event: dict) -> dict:
    path_params = event.get("pathParameters") or {}
    if path_params.get(PIZZA_NAME_PARAM):
        return path_params
    multi_params = event.get("multiValueQueryStringParameters") or {}
    if multi_params.get(PIZZA_NAME_PARAM):
        return multi_params
    return event.get("queryStringParameters") or {}


def lambda_handler(event, context):
    """Handle one API Gateway proxy request."""
    logger.debug("Received event for path %s", event.get("path") or event.get("rawPath"))
    descriptor = handle(_parameters(event), CATALOG)
    return {
        "statusCode": descriptor.status_code,
        "headers": {"content-type": descriptor.content_type},
        "body": descriptor.body.decode("utf-8"),
        "isBase64Encoded": False,
    }
