from __future__ import annotations
import copy
import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import httpx

from src.config import SETTINGS
from src.ggql.errors import ConfigurationError, ReadError, TransportError
from src.ggql.models import GraphQLPayload
from src.ggql.result import JSONResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphQLRequest:
    """
    Immutable builder for a single GraphQL POST request.

    Every configuration call returns a new builder that owns a fresh header
    dict and a deep copy of its variables; the receiver is left untouched, so
    derived builders never share mutable state. Header names are matched
    without regard to case. `query` stores the document text and
    `do` sends it. `execute` is the one-shot form of both.
    """

    endpoint: str
    _headers: Dict[str, str] = field(default_factory=dict, repr=False, hash=False)
    _variables: Dict[str, Any] = field(default_factory=dict, repr=False, hash=False)
    query_text: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "_headers", _merge_headers({}, self._headers))
        object.__setattr__(self, "_variables", copy.deepcopy(dict(self._variables)))

    @property
    def headers(self) -> Mapping[str, str]:
        return MappingProxyType(self._headers)

    @property
    def variables(self) -> Mapping[str, Any]:
        return MappingProxyType(self._variables)

    def _with_headers(self, headers: Dict[str, str]) -> "GraphQLRequest":
        return replace(self, _headers=headers)

    def _with_variables(self, variables: Dict[str, Any]) -> "GraphQLRequest":
        return replace(self, _variables=variables)

    def add_header(self, key: str, value: str) -> "GraphQLRequest":
        return self.add_headers({key: value})

    def add_headers(self, headers: Mapping[str, str]) -> "GraphQLRequest":
        """Merge headers in; later values win on key collision, ignoring case."""
        return self._with_headers(_merge_headers(self._headers, headers))

    def remove_headers(self, keys: Union[str, Iterable[str]]) -> "GraphQLRequest":
        """Drop the named headers, ignoring case. Absent keys are ignored."""
        dropped = _matching_headers(self._headers, _as_keys(keys))
        return self._with_headers({k: v for k, v in self._headers.items() if k not in dropped})

    def clear_headers(self) -> "GraphQLRequest":
        return self._with_headers({})

    def add_variable(self, key: str, value: Any) -> "GraphQLRequest":
        return self.add_variables({key: value})

    def add_variables(self, variables: Mapping[str, Any]) -> "GraphQLRequest":
        """Merge variables in; later values win on key collision."""
        return self._with_variables({**self._variables, **variables})

    def remove_variables(self, keys: Union[str, Iterable[str]]) -> "GraphQLRequest":
        """Drop the named variables. Absent keys are ignored."""
        dropped = set(_as_keys(keys))
        return self._with_variables({k: v for k, v in self._variables.items() if k not in dropped})

    def clear_variables(self) -> "GraphQLRequest":
        return self._with_variables({})

    def query(self, query: str) -> "GraphQLRequest":
        """Set the query or mutation document sent by `do`."""
        return replace(self, query_text=query)

    def build_headers(self) -> httpx.Headers:
        """Default headers first, then user headers, so a caller may override Content-Type."""
        headers = httpx.Headers(SETTINGS.default_headers)
        headers.update(self._headers)
        return headers

    def do(self, client: Optional[httpx.Client] = None) -> JSONResult:
        """
        Send the configured document as one POST and return the parsed body.

        Any HTTP status is accepted; GraphQL ``errors`` are left for the caller
        to inspect. A caller-supplied client is used as-is and left open.
        """
        if not self.query_text:
            raise ConfigurationError("no query/mutation provided")

        body = GraphQLPayload(query=self.query_text, variables=self._variables).to_json_bytes()

        if client is not None:
            return self._send(client, body)
        with httpx.Client(timeout=SETTINGS.timeout_seconds) as owned_client:
            return self._send(owned_client, body)

    def execute(self, query: str, client: Optional[httpx.Client] = None) -> JSONResult:
        """Set `query` and send it immediately."""
        return self.query(query).do(client)

    def _send(self, client: httpx.Client, body: bytes) -> JSONResult:
        try:
            request = client.build_request("POST", self.endpoint, content=body, headers=self.build_headers())
        except (httpx.InvalidURL, UnicodeEncodeError, TypeError) as exc:
            raise TransportError(f"creating request: {exc}") from exc

        logger.debug("POST %s (%d headers, %d variables)", self.endpoint, len(self._headers), len(self._variables))
        try:
            response = client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise TransportError(f"sending request: {exc}") from exc

        try:
            raw = response.read()
        except (httpx.RequestError, httpx.StreamError) as exc:
            raise ReadError(f"reading response: {exc}") from exc
        finally:
            response.close()

        logger.debug("Received %d bytes with status %s from %s", len(raw), response.status_code, self.endpoint)
        return JSONResult(raw)


def new_request(endpoint: str) -> GraphQLRequest:
    """Create a builder for `endpoint` with no headers or variables."""
    return GraphQLRequest(endpoint=endpoint)


def _as_keys(keys: Union[str, Iterable[str]]) -> List[str]:
    if isinstance(keys, str):
        return [keys]
    keys = list(keys)
    for key in keys:
        if not isinstance(key, str):
            raise TypeError(f"keys must be strings, got {type(key).__name__}")
    return keys


def _matching_headers(headers: Mapping[str, str], keys: Iterable[str]) -> List[str]:
    wanted = {key.lower() for key in keys}
    return [name for name in headers if name.lower() in wanted]


def _merge_headers(base: Mapping[str, str], updates: Mapping[str, str]) -> Dict[str, str]:
    merged = dict(base)
    for key, value in updates.items():
        for existing in _matching_headers(merged, [key]):
            del merged[existing]
        merged[key] = value
    return merged
