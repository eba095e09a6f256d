"""Validation rules shared by the parser, the builder and the Location model."""

import math
from typing import Optional, Union

from geouri.crs import CrsKind, OtherCrs, Wgs84Crs
from geouri.exceptions import InvalidNumber, InvalidUncertainty, OutOfRange

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# Latitude and longitude bounds per CRS. Unlisted systems use the WGS-84 bounds.
_COORDINATE_RANGES: dict[CrsKind, tuple[tuple[float, float], tuple[float, float]]] = {
    CrsKind.WGS84: (LATITUDE_RANGE, LONGITUDE_RANGE),
}


def check_finite(field: str, value: float) -> None:
    """Raise InvalidNumber if value is NaN or infinite."""
    if not math.isfinite(value):
        msg = f"The {field} must be a finite number, got {value}"
        raise InvalidNumber(msg, field=field, value=value)


def _check_range(field: str, value: float, bounds: tuple[float, float]) -> None:
    check_finite(field, value)
    low, high = bounds
    if not low <= value <= high:
        msg = f"The {field} must be between {low:g} and {high:g}, got {value}"
        raise OutOfRange(msg, field=field, value=value)


def validate_coordinates(
    latitude: float,
    longitude: float,
    crs: Union[Wgs84Crs, OtherCrs, None] = None,
) -> None:
    """Validate latitude and longitude against the coordinate reference system.

    Parameters
    ----------
    latitude : float
        Latitude in decimal degrees.
    longitude : float
        Longitude in decimal degrees.
    crs : Wgs84Crs | OtherCrs | None
        Coordinate reference system of the coordinates. Only WGS-84 defines ranges; other
        systems are held to the same ranges.

    Raises
    ------
    InvalidNumber
        Raised if a coordinate is not finite.
    OutOfRange
        Raised if a coordinate is outside its domain.
    """
    kind = CrsKind.WGS84 if crs is None else crs.kind
    latitude_range, longitude_range = _COORDINATE_RANGES.get(
        kind, _COORDINATE_RANGES[CrsKind.WGS84]
    )
    _check_range("latitude", latitude, latitude_range)
    _check_range("longitude", longitude, longitude_range)


def validate_altitude(altitude: Optional[float]) -> None:
    """Altitude has no range, but must be finite when given."""
    if altitude is not None:
        check_finite("altitude", altitude)


def validate_uncertainty(uncertainty: Optional[float]) -> None:
    """Raise InvalidUncertainty if the uncertainty is given and not a non-negative number."""
    if uncertainty is None:
        return
    if not math.isfinite(uncertainty) or uncertainty < 0.0:
        msg = f"The uncertainty must be a non-negative distance in meters, got {uncertainty}"
        raise InvalidUncertainty(msg, field="uncertainty", value=uncertainty)


def validate_location(
    latitude: float,
    longitude: float,
    altitude: Optional[float],
    uncertainty: Optional[float],
    crs: Union[Wgs84Crs, OtherCrs, None] = None,
) -> None:
    """Run every check a Location must pass."""
    validate_coordinates(latitude, longitude, crs)
    validate_altitude(altitude)
    validate_uncertainty(uncertainty)
