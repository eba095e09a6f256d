"""Generates geo URI text from locations."""

from decimal import Decimal
from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from geouri.location import Location

URI_SCHEME_NAME = "geo"

# RFC 5870 p-unreserved characters, allowed unencoded in parameter values.
PARAM_SAFE_CHARS = "[]:&+$"


def format_number(value: float) -> str:
    """Format a number the way it appears in a geo URI.

    Integral values have no decimal point. Other values use the shortest decimal text
    that reads back as the same float, without an exponent.

    Examples
    --------
    >>> format_number(1000.0)
    '1000'
    >>> format_number(5.134)
    '5.134'
    >>> format_number(1e-07)
    '0.0000001'
    """
    if value.is_integer():
        return str(int(value))
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_param(key: str, value: str) -> str:
    """Return a ``;key=value`` parameter with the value percent-encoded per RFC 5870."""
    return f";{key}={quote(value, safe=PARAM_SAFE_CHARS)}"


def format_location(location: "Location") -> str:
    """Return the canonical geo URI of a location.

    The CRS is only written when it is not WGS-84. Parameters that were ignored while
    parsing are not reproduced.
    """
    coords = [format_number(location.latitude), format_number(location.longitude)]
    if location.altitude is not None:
        coords.append(format_number(location.altitude))

    parts = [f"{URI_SCHEME_NAME}:{','.join(coords)}"]
    if not location.crs.is_default:
        parts.append(format_param("crs", location.crs.token))
    if location.uncertainty is not None:
        parts.append(format_param("u", format_number(location.uncertainty)))
    return "".join(parts)
