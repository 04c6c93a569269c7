from __future__ import annotations
from pydantic import BaseModel, Field

class Settings(BaseModel):
    """Centralized configuration for GraphQL requests."""

    timeout_seconds: float = Field(default=30.0, gt=0)
    content_type: str = Field(default="application/json")
    example_graphql_url: str = Field(default="https://countries.trevorblades.com/graphql")

    @property
    def default_headers(self) -> dict[str, str]:
        """Return the headers applied before any user-supplied header."""
        return {"Content-Type": self.content_type}

SETTINGS = Settings()
