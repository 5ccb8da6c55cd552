"""Resolve short region aliases to canonical CWA location names."""

from weatherproxy.config.defaults import DEFAULT_LOCATION, REGION_ALIASES


def pick_location_key(
    path_value: str | None,
    query_value: str | None,
    default: str = DEFAULT_LOCATION,
) -> str:
    """Pick the raw key: path parameter, then query parameter, then default."""
    return path_value or query_value or default


def resolve_location(raw: str) -> str:
    """Map an alias like "kinmen" to "金門縣".

    Unknown input is passed through untouched, so free-text names reach the
    upstream API unvalidated.
    """
    return REGION_ALIASES.get(str(raw).strip(), raw)
