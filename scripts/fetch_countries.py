from __future__ import annotations

import logging

from src.config import SETTINGS
from src.ggql.request import new_request

COUNTRY_BY_CODE_QUERY: str = """
query CountryByCode($code: ID!) {
  country(code: $code) {
    name
    capital
    currency
  }
}
"""


def main() -> None:
    """Look up one country and print a few fields read by path."""
    logging.basicConfig(level=logging.DEBUG)

    request = new_request(SETTINGS.example_graphql_url).add_header("Accept", "application/json")
    result = request.add_variable("code", "FR").execute(COUNTRY_BY_CODE_QUERY)

    if result.errors:
        print(f"GraphQL errors: {result.errors.string()}")
        return

    for field in ("name", "capital", "currency"):
        print(f"{field}: {result.get(f'data.country.{field}').string(default='-')}")


if __name__ == "__main__":
    main()
