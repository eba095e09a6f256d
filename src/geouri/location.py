"""Defines the model for a geographic location encoded by a geo URI."""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from pydantic import Field, field_serializer, field_validator, model_validator
from typing_extensions import Annotated

from geouri.crs import WGS84, CoordRefSystem, CrsKind, coerce_crs
from geouri.generator import format_location
from geouri.models import GeoUriBaseModel
from geouri.validation import validate_location

if TYPE_CHECKING:
    from pydantic import AnyUrl

    from geouri.builder import LocationBuilder
    from geouri.parser import ParserConfig


class Location(GeoUriBaseModel):
    """Specifies a geographic location as described by a geo URI (RFC 5870).

    Instances are immutable and always valid: construction, parsing, building and
    deserialization all run the same checks.

    Examples
    --------
    >>> location = Location.parse("geo:52.107,5.134,3.6;u=1000")
    >>> location.altitude
    3.6
    >>> str(location.replace(altitude=None))
    'geo:52.107,5.134;u=1000'
    """

    latitude: Annotated[float, Field(description="Latitude in decimal degrees")]
    longitude: Annotated[float, Field(description="Longitude in decimal degrees")]
    altitude: Annotated[Optional[float], Field(description="Altitude in meters")] = None
    uncertainty: Annotated[
        Optional[float], Field(description="Radius of the uncertainty in meters")
    ] = None
    crs: CoordRefSystem = WGS84

    @field_validator("crs", mode="before")
    @classmethod
    def _coerce_crs(cls, value: Any) -> Any:
        return coerce_crs(value)

    @field_serializer("crs")
    def _serialize_crs(self, _) -> str:
        return self.crs.token

    @model_validator(mode="after")
    def _check_invariants(self) -> "Location":
        validate_location(
            self.latitude, self.longitude, self.altitude, self.uncertainty, self.crs
        )
        return self

    @classmethod
    def parse(cls, text: str, config: Optional["ParserConfig"] = None) -> "Location":
        """Parse a geo URI string. Refer to :func:`geouri.parser.parse`."""
        from geouri.parser import parse

        return parse(text, config=config)

    @classmethod
    def from_coordinates(
        cls, latitude: float, longitude: float, altitude: Optional[float] = None
    ) -> "Location":
        """Construct a WGS-84 location from plain coordinates."""
        return cls(latitude=latitude, longitude=longitude, altitude=altitude)

    @classmethod
    def from_url(cls, url: "AnyUrl | str") -> "Location":
        """Construct a location from a generic URL value."""
        from geouri.uri import from_url

        return from_url(url)

    @staticmethod
    def builder() -> "LocationBuilder":
        """Return a new builder for locations."""
        from geouri.builder import LocationBuilder

        return LocationBuilder()

    def replace(self, **changes: Any) -> "Location":
        """Return a new location with some fields changed. The result is validated."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self)(**data)

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Location":
        """Return a copy of the location. Updated fields are validated, see :meth:`replace`."""
        if update:
            return self.replace(**update)
        return super().model_copy(deep=deep)

    def to_url(self) -> "AnyUrl":
        """Return the location as a generic URL value."""
        from geouri.uri import to_url

        return to_url(self)

    @property
    def is_pole(self) -> bool:
        """Return True if the location is one of the WGS-84 poles."""
        return self.crs.kind == CrsKind.WGS84 and abs(self.latitude) == 90.0

    def __str__(self) -> str:
        return format_location(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        # The longitude has no meaning at the poles.
        return (
            self.crs.kind == other.crs.kind
            and self.crs.token == other.crs.token
            and self.latitude == other.latitude
            and (self.is_pole or self.longitude == other.longitude)
            and self.altitude == other.altitude
            and self.uncertainty == other.uncertainty
        )

    def __hash__(self) -> int:
        longitude = 0.0 if self.is_pole else self.longitude
        return hash(
            (
                self.crs.kind,
                self.crs.token,
                self.latitude,
                longitude,
                self.altitude,
                self.uncertainty,
            )
        )
