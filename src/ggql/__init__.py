from __future__ import annotations

from src.ggql.errors import (
    ConfigurationError,
    EncodingError,
    GraphQLRequestError,
    ReadError,
    TransportError,
)
from src.ggql.request import GraphQLRequest, new_request
from src.ggql.result import JSONResult

__all__ = [
    "ConfigurationError",
    "EncodingError",
    "GraphQLRequest",
    "GraphQLRequestError",
    "JSONResult",
    "ReadError",
    "TransportError",
    "new_request",
]
