"""Response error extraction for load test observability.

Parses Kitchen Shelf API error responses into human-readable messages.
Handles two response shapes:

- Request validation (400): {"detail": "Invalid request", "errors": [{"field": "...", "message": "..."}]}
- Shelf failures (404/409/503): {"error": {"kind": "...", "message": "..."}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    Gracefully handles unparseable bodies and missing fields.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if "errors" in body and isinstance(body["errors"], list):
        parts = []
        for err in body["errors"]:
            field = err.get("field")
            message = err.get("message", str(err))
            parts.append(f"{field}: {message}" if field else message)
        return " | ".join(parts)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict) and "message" in error:
            return f"{error.get('kind', 'Error')}: {error['message']}"
        if isinstance(error, dict):
            return " | ".join(f"{k}: {v}" for k, v in error.items())
        return str(error)

    # Unknown shape, stringify and truncate
    return str(body)[:300]
