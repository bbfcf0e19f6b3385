"""Serverless entry point.

Mangum translates platform events to ASGI and strips the function's routing
prefix (``/.netlify/functions/api`` by default) so routes stay ``/register``,
``/conversions`` and so on. Netlify delivers Lambda-compatible events without
the API Gateway ``resource`` and ``requestContext`` keys; they are filled in
before dispatch so Mangum picks its API Gateway handler.
"""
from typing import Any, Dict, Optional

import structlog
from mangum import Mangum

from core.settings import Settings, get_settings

logger = structlog.get_logger("currency.adapter")


def as_api_gateway_event(event: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``event`` with the keys Mangum needs to treat it as API Gateway (REST)."""
    if "requestContext" in event:
        return event

    headers = event.get("headers") or {}
    source_ip = headers.get("x-nf-client-connection-ip") or headers.get("client-ip")
    return {
        **event,
        "resource": event.get("resource") or "/{proxy+}",
        "requestContext": {"identity": {"sourceIp": source_ip}},
        "body": event.get("body"),
    }


def create_handler(settings: Optional[Settings] = None) -> Mangum:
    """Build a fresh app and wrap it for the serverless runtime."""
    from api.main import create_fastapi_app

    settings = settings or get_settings()
    app = create_fastapi_app(settings)
    return Mangum(
        app,
        lifespan="auto",
        api_gateway_base_path=settings.ADAPTER.FUNCTION_PATH_PREFIX,
    )


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Platform entry point: one application per invocation, no shared state."""
    logger.debug("Handling invocation", path=event.get("path") or event.get("rawPath"))
    return create_handler()(as_api_gateway_event(event), context)
