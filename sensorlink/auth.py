"""Bearer-token checks run before the sensor service handlers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Optional, TypeVar, Union

from sensorlink.messages import RpcError, StatusCode

UNARY_TOKEN = "secret"
STREAM_TOKEN = "token"

Metadata = Mapping[str, Union[str, Sequence[str]]]

_T = TypeVar("_T")


def _values(metadata: Metadata, key: str) -> list[str]:
    """All values stored under ``key``, matched without regard to case."""
    found: list[str] = []
    for name, value in metadata.items():
        if name.lower() == key:
            found.extend([value] if isinstance(value, str) else value)
    return found


def is_valid_token(auth_header: str) -> bool:
    """Whether the header is exactly ``Bearer <token>`` with the unary token."""
    parts = auth_header.split(" ")
    return len(parts) == 2 and parts[0] == "Bearer" and parts[1] == UNARY_TOKEN


def unary_auth_interceptor(
    metadata: Optional[Metadata],
    request: Any,
    handler: Callable[[Any, Metadata], _T],
) -> _T:
    """Check the authorization header, then pass the request to ``handler``."""
    if metadata is None:
        raise RpcError(StatusCode.UNAUTHENTICATED, "Missing Metadata")
    headers = _values(metadata, "authorization")
    if not headers or not is_valid_token(headers[0]):
        raise RpcError(StatusCode.UNAUTHENTICATED, "Invalid or missing token")
    return handler(request, metadata)


def stream_auth_interceptor(
    metadata: Optional[Metadata],
    requests: Any,
    handler: Callable[[Any], _T],
) -> _T:
    """Check the authorization header before a stream is opened."""
    if metadata is None:
        raise RpcError(StatusCode.UNAUTHENTICATED, "Missing metadata")
    headers = _values(metadata, "authorization")
    if not headers or headers[0] != f"Bearer {STREAM_TOKEN}":
        raise RpcError(StatusCode.UNAUTHENTICATED, "Invalid or missing token")
    return handler(requests)