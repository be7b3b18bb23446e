"""Request body helpers shared by the resources."""

from typing import Any

import falcon
import falcon.asgi


async def read_object(req: falcon.asgi.Request) -> dict[str, Any]:
    """JSON request body, which must be an object."""
    body = await req.get_media()
    if not isinstance(body, dict):
        raise falcon.HTTPBadRequest(description="Request body must be a JSON object")
    return body


def str_list(body: dict[str, Any], key: str) -> list[str]:
    """Optional list-of-strings field; absent or null means empty."""
    value = body.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise falcon.HTTPBadRequest(description=f"'{key}' must be a list of strings")
    return value


def optional_str(body: dict[str, Any], key: str) -> str | None:
    """Optional string field; absent or null means None."""
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise falcon.HTTPBadRequest(description=f"'{key}' must be a string")
    return value
