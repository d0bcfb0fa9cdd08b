"""
Tests for the pizza HTTP endpoints
"""
from fastapi.testclient import TestClient

from pizza_api.app.main import create_app


def test_get_pizza_by_path(client):
    response = client.get("/api/v1/pizzas/regina")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.content == b'{"name":"regina","price":12}'


def test_get_unknown_pizza(client):
    response = client.get("/api/v1/pizzas/unknown")
    assert response.status_code == 400
    assert response.headers["content-type"] == "application/json"
    assert response.content == b'{"error":"Pizza not found"}'


def test_get_pizza_by_query(client):
    response = client.get("/api/v1/pizzas", params={"pizza_name": "deluxe"})
    assert response.status_code == 200
    assert response.content == b'{"name":"deluxe","price":14}'


def test_missing_pizza_name(client):
    for path in ("/api/v1/pizzas", "/api/v1/pizzas/"):
        response = client.get(path)
        assert response.status_code == 400
        assert response.content == b'{"error":"Pizza name not provided"}'


def test_empty_query_parameter_counts_as_missing(client):
    response = client.get("/api/v1/pizzas?pizza_name=")
    assert response.status_code == 400
    assert response.content == b'{"error":"Pizza name not provided"}'


def test_repeated_requests_are_byte_identical(client):
    bodies = {client.get("/api/v1/pizzas/veggie").content for _ in range(5)}
    assert bodies == {b'{"name":"veggie","price":10}'}


def test_catalog_is_attached_to_app_state():
    app = create_app()
    assert app.state.catalog.names() == ("veggie", "regina", "deluxe")


def test_contract_violation_is_a_server_error(monkeypatch):
    from pizza_api.app.services.lookup_service import LookupService

    monkeypatch.setattr(LookupService, "find", classmethod(lambda cls, name, catalog: None))
    with TestClient(create_app(), raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/v1/pizzas/regina")
    assert response.status_code == 500


def test_openapi_documents_pizza_routes(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert "/api/v1/pizzas/{pizza_name}" in paths
    assert "/api/v1/pizzas" in paths
