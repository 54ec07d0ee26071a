"""Translation of API responses into domain objects and errors."""

from typing import Any, Type, TypeVar

import httpx
import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from soular.adapter.error import RemoteError
from soular.domain.error import AuthError, NotFoundError, ValidationError

M = TypeVar("M", bound=BaseModel)


def error_message(response: httpx.Response) -> str:
    """Extract the server's error text.

    Non-2xx bodies are expected to be {"error": "..."}; anything else falls
    back to "HTTP <status>".
    """
    try:
        payload = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return f"HTTP {response.status_code}"


def raise_for_status(response: httpx.Response, resource: str, identifier: str) -> None:
    """Raise the domain error matching a non-2xx response.

    Args:
        response: Response to check
        resource: Resource name used in NotFoundError
        identifier: Resource id used in NotFoundError

    Raises:
        ValidationError: 400 or 422
        AuthError: 401 or 403
        NotFoundError: 404
        RemoteError: Any other non-2xx status
    """
    if response.is_success:
        return

    status = response.status_code
    message = error_message(response)
    logfire.warn(
        "API request failed",
        method=response.request.method,
        url=str(response.request.url),
        status_code=status,
        error=message,
    )

    if status in (400, 422):
        raise ValidationError(message)
    if status in (401, 403):
        raise AuthError(message)
    if status == 404:
        raise NotFoundError(resource, identifier, message)
    raise RemoteError(message, status_code=status)


def parse_json(response: httpx.Response) -> Any:
    """Decode a JSON body, treating malformed bodies as remote failures."""
    try:
        return response.json()
    except ValueError as e:
        raise RemoteError(
            f"Malformed response body: {e}", status_code=response.status_code
        ) from e


def parse_model(model: Type[M], payload: Any, key: str | None = None) -> M:
    """Validate a payload (or one key of it) into a model.

    Raises:
        RemoteError: If the payload does not have the expected shape
    """
    try:
        data = payload[key] if key is not None else payload
        return model.model_validate(data)
    except (KeyError, TypeError, PydanticValidationError) as e:
        raise RemoteError(f"Unexpected response shape for {model.__name__}: {e}") from e
