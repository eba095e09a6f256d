"""Coordinate reference systems of geo URIs.

Only WGS-84 has defined coordinate semantics. Any other ``crs`` token found
while parsing is kept verbatim in an :class:`OtherCrs` so that it is not lost.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import Field

from geouri.exceptions import InvalidCrs
from geouri.models import GeoUriBaseModel

WGS84_TOKEN = "wgs84"


class CrsKind(str, Enum):
    """Discriminates the coordinate reference system variants."""

    WGS84 = "wgs84"
    OTHER = "other"


class Wgs84Crs(GeoUriBaseModel):
    """The WGS-84 coordinate reference system.

    Latitude and longitude are in decimal degrees, altitude in meters.
    """

    kind: Literal[CrsKind.WGS84] = CrsKind.WGS84

    @property
    def token(self) -> str:
        """Return the value used for the ``crs`` parameter."""
        return WGS84_TOKEN

    @property
    def is_default(self) -> bool:
        """WGS-84 is implied when a geo URI has no crs parameter."""
        return True


class OtherCrs(GeoUriBaseModel):
    """A coordinate reference system that is not WGS-84, stored by its identifier."""

    kind: Literal[CrsKind.OTHER] = CrsKind.OTHER
    identifier: Annotated[str, Field(min_length=1)]

    @property
    def token(self) -> str:
        """Return the value used for the ``crs`` parameter."""
        return self.identifier

    @property
    def is_default(self) -> bool:
        """Return False, other systems are always written out."""
        return False


CoordRefSystem = Annotated[
    Union[Wgs84Crs, OtherCrs],
    Field(
        description="Coordinate reference system of the location.",
        discriminator="kind",
    ),
]

WGS84 = Wgs84Crs()


def crs_from_token(token: str) -> Union[Wgs84Crs, OtherCrs]:
    """Return the coordinate reference system identified by a (decoded) ``crs`` value.

    The comparison with ``wgs84`` ignores case, other identifiers keep theirs.

    Examples
    --------
    >>> crs_from_token("WGS84").is_default
    True
    >>> crs_from_token("epsg:4326").token
    'epsg:4326'
    """
    if not token:
        msg = "The crs parameter requires a value"
        raise InvalidCrs(msg, field="crs", value=token)
    if token.lower() == WGS84_TOKEN:
        return WGS84
    return OtherCrs(identifier=token)


def coerce_crs(value: Any) -> Any:
    """Convert a token, an OtherCrs or its mapping to a CRS model through crs_from_token.

    An OtherCrs named ``wgs84`` becomes WGS84 so that formatting and parsing agree. Other
    values are left for pydantic.
    """
    if isinstance(value, str):
        return crs_from_token(value)
    if isinstance(value, OtherCrs):
        return crs_from_token(value.identifier)
    if isinstance(value, Mapping) and value.get("kind") == CrsKind.OTHER:
        identifier = value.get("identifier")
        if isinstance(identifier, str):
            return crs_from_token(identifier)
    return value
