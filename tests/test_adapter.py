import json

import pytest
from mangum import Mangum

from api import adapter
from api.adapter import as_api_gateway_event, create_handler
from core.settings import AdapterSettings

PREFIX = "/.netlify/functions/api"


def netlify_event(path, method="GET", query=None, body=None):
    """Lambda-compatible event as Netlify Functions deliver it."""
    query = query or {}
    return {
        "path": path,
        "httpMethod": method,
        "headers": {"host": "example.netlify.app", "content-type": "application/json"},
        "multiValueHeaders": {},
        "queryStringParameters": query,
        "multiValueQueryStringParameters": {k: [v] for k, v in query.items()},
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
        "rawUrl": f"https://example.netlify.app{path}",
        "rawQuery": "&".join(f"{k}={v}" for k, v in query.items()),
    }


def test_netlify_event_gets_api_gateway_keys():
    event = netlify_event(f"{PREFIX}/health")
    event["headers"]["x-nf-client-connection-ip"] = "203.0.113.9"

    converted = as_api_gateway_event(event)

    assert converted["resource"] == "/{proxy+}"
    assert converted["requestContext"] == {"identity": {"sourceIp": "203.0.113.9"}}
    assert converted["path"] == f"{PREFIX}/health"
    assert "requestContext" not in event


def test_api_gateway_event_is_left_alone():
    event = {"resource": "/{proxy+}", "requestContext": {"stage": "prod"}, "path": "/health"}

    assert as_api_gateway_event(event) is event


def test_create_handler_wraps_fresh_app(settings):
    settings.ADAPTER = AdapterSettings(FUNCTION_PATH_PREFIX="/fn/api")

    handler = create_handler(settings)

    assert isinstance(handler, Mangum)
    assert handler.config["api_gateway_base_path"] == "/fn/api"
    handler.app.container.unwire()


def test_prefixed_netlify_event_reaches_route(settings):
    event = as_api_gateway_event(
        netlify_event(f"{PREFIX}/exchange-rates", query={"base": "EUR"})
    )

    response = create_handler(settings)(event, {})

    assert response["statusCode"] == 200
    body = json.loads(response["body"])
    assert body["base_code"] == "EUR"
    assert body["conversion_rates"]["EUR"] == 1


def test_handler_serves_netlify_events_per_invocation(settings, monkeypatch):
    monkeypatch.setattr(adapter, "get_settings", lambda: settings)
    credentials = {"username": "carol", "password": "pa55word"}

    registered = adapter.handler(
        netlify_event(f"{PREFIX}/register", method="POST", body=credentials), {}
    )
    logged_in = adapter.handler(
        netlify_event(f"{PREFIX}/login", method="POST", body=credentials), {}
    )

    assert registered["statusCode"] == 201
    assert logged_in["statusCode"] == 200
    assert json.loads(logged_in["body"])["username"] == "carol"


@pytest.mark.parametrize("path", [f"{PREFIX}/nowhere", "/nowhere"])
def test_unknown_route_is_json_404(settings, path):
    response = create_handler(settings)(as_api_gateway_event(netlify_event(path)), {})

    assert response["statusCode"] == 404
    assert json.loads(response["body"]) == {"error": "Not Found", "status_code": 404}
