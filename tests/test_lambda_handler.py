"""
Tests for the AWS Lambda adapter
"""
import json

from pizza_api.app.handlers.lambda_handler import lambda_handler


def test_path_parameter_lookup():
    result = lambda_handler({"pathParameters": {"pizza_name": "regina"}}, None)
    assert result["statusCode"] == 200
    assert result["headers"] == {"content-type": "application/json"}
    assert result["body"] == '{"name":"regina","price":12}'


def test_query_string_lookup():
    event = {"pathParameters": None, "queryStringParameters": {"pizza_name": "veggie"}}
    result = lambda_handler(event, None)
    assert result["statusCode"] == 200
    assert json.loads(result["body"]) == {"name": "veggie", "price": 10}


def test_unknown_pizza():
    result = lambda_handler({"pathParameters": {"pizza_name": "unknown"}}, None)
    assert result["statusCode"] == 400
    assert result["body"] == '{"error":"Pizza not found"}'


def test_no_parameters():
    result = lambda_handler({"pathParameters": None, "queryStringParameters": None}, None)
    assert result["statusCode"] == 400
    assert result["body"] == '{"error":"Pizza name not provided"}'


def test_repeated_invocations_are_identical():
    event = {"pathParameters": {"pizza_name": "deluxe"}}
    assert lambda_handler(event, None) == lambda_handler(event, None)
