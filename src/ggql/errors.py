from __future__ import annotations


class GraphQLRequestError(RuntimeError):
    """Raised when a GraphQL request cannot be built, sent or read."""


class ConfigurationError(GraphQLRequestError):
    """Raised when the request is executed without a query or mutation."""


class EncodingError(GraphQLRequestError):
    """Raised when the query payload cannot be serialized to JSON."""


class TransportError(GraphQLRequestError):
    """Raised when the HTTP request cannot be created or sent."""


class ReadError(GraphQLRequestError):
    """Raised when the response body cannot be fully read."""
