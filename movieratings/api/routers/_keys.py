"""
Path parameter parsing shared by the routers.
"""

from movieratings.core.errors import NotFound
from movieratings.utils.validators import coerce_integer


def parse_key(value: str, not_found: str) -> int:
    """
    Parse an integer key from the URL.

    Raises:
        NotFound: If the value is not an integer, since no row can match it
    """
    try:
        return coerce_integer(value)
    except ValueError:
        raise NotFound(not_found)
