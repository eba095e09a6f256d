"""Defines a builder that accumulates location fields."""

from typing import Optional, Union

from geouri.crs import WGS84, OtherCrs, Wgs84Crs, crs_from_token
from geouri.exceptions import MissingField
from geouri.location import Location


class LocationBuilder:
    """Accumulates the fields of a location and validates them on build.

    Examples
    --------
    >>> location = LocationBuilder().latitude(52.107).longitude(5.134).uncertainty(1000).build()
    >>> str(location)
    'geo:52.107,5.134;u=1000'
    """

    def __init__(self) -> None:
        self._latitude: Optional[float] = None
        self._longitude: Optional[float] = None
        self._altitude: Optional[float] = None
        self._uncertainty: Optional[float] = None
        self._crs: Union[Wgs84Crs, OtherCrs] = WGS84

    def latitude(self, value: float) -> "LocationBuilder":
        self._latitude = value
        return self

    def longitude(self, value: float) -> "LocationBuilder":
        self._longitude = value
        return self

    def altitude(self, value: Optional[float]) -> "LocationBuilder":
        self._altitude = value
        return self

    def uncertainty(self, value: Optional[float]) -> "LocationBuilder":
        self._uncertainty = value
        return self

    def crs(self, value: Union[Wgs84Crs, OtherCrs, str]) -> "LocationBuilder":
        """Set the coordinate reference system, either as a model or as a token."""
        self._crs = crs_from_token(value) if isinstance(value, str) else value
        return self

    def build(self) -> Location:
        """Return the location.

        Raises
        ------
        MissingField
            Raised if the latitude or longitude was not set.
        ValidationError
            Raised if a field is out of its valid range.
        """
        if self._latitude is None:
            msg = "The latitude must be set before building a location"
            raise MissingField(msg, field="latitude")
        if self._longitude is None:
            msg = "The longitude must be set before building a location"
            raise MissingField(msg, field="longitude")

        return Location(
            latitude=self._latitude,
            longitude=self._longitude,
            altitude=self._altitude,
            uncertainty=self._uncertainty,
            crs=self._crs,
        )
