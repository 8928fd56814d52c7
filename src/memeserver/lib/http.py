"""Shared httpx helpers.

Translate transport and decoding failures into the ``FetchError`` family so
callers only ever deal with ``NetworkError`` and ``ProtocolError``.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import NetworkError, ProtocolError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


async def send(http: httpx.AsyncClient, method: str, url: str, **kwargs) -> httpx.Response:
    """Issue a request, raising ``NetworkError`` if no response comes back."""
    try:
        return await http.request(method, url, **kwargs)
    except httpx.RequestError as exc:
        raise NetworkError(f"{method} {url} failed: {exc!r}") from exc


def parse_json(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Validate a JSON response body into ``model``.

    The status code is not checked: an error page simply fails to parse.
    Raises ``ProtocolError`` when the body is not JSON or has the wrong shape.
    """
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        logger.debug("Unparsable body from %s: %r", response.url, response.content[:200])
        raise ProtocolError(
            f"unexpected response from {response.request.method} {response.url} "
            f"(status {response.status_code}): {exc.error_count()} validation error(s)"
        ) from exc
