from __future__ import annotations
import json
from typing import Any, List, Optional, Union

import jsonpath_ng

_UNPARSED = object()


class JSONResult:
    """
    Lazily decoded view over a JSON document, or over one node inside it.

    The raw bytes are only decoded on first access. A body that is not valid
    JSON yields an invalid, missing node instead of raising, so callers check
    `is_valid` / `exists` the same way they check for an absent field.
    """

    def __init__(self, raw: Union[bytes, str] = b"") -> None:
        self._raw: bytes = raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)
        self._value: Any = _UNPARSED
        self._exists = True
        self._valid = True

    @classmethod
    def _node(cls, value: Any, exists: bool = True) -> "JSONResult":
        node = cls()
        node._raw = b""
        node._value = value
        node._exists = exists
        return node

    @classmethod
    def _missing(cls) -> "JSONResult":
        return cls._node(None, exists=False)

    def _load(self) -> Any:
        if self._value is _UNPARSED:
            try:
                self._value = json.loads(self._raw)
            except (ValueError, RecursionError):
                self._value = None
                self._exists = False
                self._valid = False
        return self._value

    @property
    def raw(self) -> bytes:
        """Response bytes as received; re-encoded JSON for derived nodes."""
        if not self._raw and self._exists and self._value is not _UNPARSED:
            return json.dumps(self._value, separators=(",", ":")).encode("utf-8")
        return self._raw

    @property
    def text(self) -> str:
        return self.raw.decode("utf-8", errors="replace")

    @property
    def value(self) -> Any:
        """Decoded Python value, or None when the node is missing or invalid."""
        return self._load()

    @property
    def exists(self) -> bool:
        self._load()
        return self._exists

    @property
    def is_valid(self) -> bool:
        self._load()
        return self._valid

    def get(self, path: str) -> "JSONResult":
        """
        Navigate by JSONPath, e.g. ``data.hello`` or ``data.items[0].name``.

        One match returns that node, several return a list node, none returns
        a missing node.
        """
        current = self._load()
        if not self._exists:
            return self._missing()
        matches = jsonpath_ng.parse(path).find(current)
        if not matches:
            return self._missing()
        values: List[Any] = [match.value for match in matches]
        return self._node(values[0] if len(values) == 1 else values)

    def __getitem__(self, key: Union[str, int]) -> "JSONResult":
        current = self._load()
        if isinstance(current, dict) and isinstance(key, str) and key in current:
            return self._node(current[key])
        if isinstance(current, list) and isinstance(key, int) and -len(current) <= key < len(current):
            return self._node(current[key])
        return self._missing()

    @property
    def data(self) -> "JSONResult":
        """The GraphQL ``data`` member, unvalidated."""
        return self["data"]

    @property
    def errors(self) -> "JSONResult":
        """The GraphQL ``errors`` member, unvalidated."""
        return self["errors"]

    def string(self, default: Optional[str] = None) -> Optional[str]:
        """Return the node as text: strings as-is, other present values as JSON."""
        current = self._load()
        if not self._exists:
            return default
        if isinstance(current, str):
            return current
        return json.dumps(current, separators=(",", ":"))

    def __str__(self) -> str:
        return self.string(default="") or ""

    def __bool__(self) -> bool:
        return self.exists

    def __repr__(self) -> str:
        if not self.exists:
            return "JSONResult(<missing>)" if self.is_valid else "JSONResult(<invalid>)"
        return f"JSONResult({self.value!r})"
