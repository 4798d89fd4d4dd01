"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "token",
        "api_key",
        "secret",
        "auth",
        "access_token",
        "session",
        "cookie",
        "credentials",
    }
)

GRAPHQL_PAYLOAD_KEYS = ("query", "variables", "extensions")

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact query parameters whose names look sensitive."""
    return {
        key: "[REDACTED]" if any(s in key.lower() for s in SENSITIVE_KEYS) else value
        for key, value in params.items()
    }


def operation_name_from_document(query: Any) -> str | None:
    """Derive an operation label from a raw GraphQL document.

    Named mutations are prefixed with ``mutation:``; introspection queries
    map to ``__introspection``.
    """
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if isinstance(op, str) and op:
            return op
        return operation_name_from_document(params.get("query"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        op = data.get("operationName")
        if isinstance(op, str) and op:
            return op
        return operation_name_from_document(data.get("query"))

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context()

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))
                # Never log raw GraphQL payloads from the query string
                if request.url.path == "/graphql":
                    for k in GRAPHQL_PAYLOAD_KEYS:
                        if k in sanitized_params:
                            sanitized_params[k] = "[REDACTED]"

            graphql_operation = await extract_graphql_operation_name(request)

            log_data = {
                "method": request.method,
                "path": request.url.path,
                "query_params": sanitized_params,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
