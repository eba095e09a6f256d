"""Conversions between locations and generic URL values."""

from pydantic import AnyUrl
from pydantic import ValidationError as PydanticValidationError

from geouri.exceptions import InvalidScheme
from geouri.generator import URI_SCHEME_NAME, format_location
from geouri.location import Location
from geouri.parser import parse


def to_url(location: Location) -> AnyUrl:
    """Return the geo URI of a location as a URL value."""
    return AnyUrl(format_location(location))


def from_url(url: AnyUrl | str) -> Location:
    """Return the location of a geo URL.

    Raises
    ------
    InvalidScheme
        Raised if the value is not a URL or not a geo URL.
    ParseError
        Raised if the geo URL is malformed.
    """
    if isinstance(url, str):
        try:
            url = AnyUrl(url)
        except PydanticValidationError as exc:
            msg = f"{url!r} is not a valid URL"
            raise InvalidScheme(msg, value=url) from exc

    if url.scheme != URI_SCHEME_NAME:
        msg = f"Expected a {URI_SCHEME_NAME} URL, got scheme {url.scheme!r}"
        raise InvalidScheme(msg, value=str(url))
    return parse(str(url))
