from __future__ import annotations
import json
from typing import Any, Dict

from pydantic import BaseModel, Field

from src.ggql.errors import EncodingError

class GraphQLPayload(BaseModel):
    """Body of a GraphQL POST request."""
    query: str
    variables: Dict[str, Any] = Field(default_factory=dict)

    def to_json_bytes(self) -> bytes:
        """Serialize to compact JSON; only `query` and `variables` are sent."""
        try:
            encoded = json.dumps(
                {"query": self.query, "variables": self.variables},
                separators=(",", ":"),
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"encoding content: {exc}") from exc
        return encoded.encode("utf-8")
