"""Maps locations to and from structured records (dictionaries and JSON)."""

import json
from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from geouri.exceptions import (
    GeoUriError,
    InvalidCrs,
    InvalidNumber,
    InvalidRecord,
    InvalidUncertainty,
    MissingField,
)
from geouri.location import Location

NUMBER_FIELDS = ("latitude", "longitude", "altitude")


def to_record(location: Location) -> dict[str, Any]:
    """Return the fields of a location in a JSON-compatible dictionary.

    The keys are ``latitude``, ``longitude``, ``altitude``, ``uncertainty`` and ``crs``, in
    that order. The CRS is written as its token.
    """
    return location.model_dump(mode="json")


def from_record(data: Mapping[str, Any]) -> Location:
    """Construct a location from a dictionary produced by :func:`to_record`.

    All invariants are checked, as for parsed locations.

    Raises
    ------
    MissingField
        Raised if the latitude or longitude is missing.
    InvalidNumber
        Raised if a coordinate is not a finite number.
    OutOfRange
        Raised if a coordinate is outside its domain.
    InvalidUncertainty
        Raised if the uncertainty is not a non-negative number.
    InvalidCrs
        Raised if the CRS is empty or not a token or tagged mapping.
    InvalidRecord
        Raised if data is not a mapping or has unknown fields.
    """
    if not isinstance(data, Mapping):
        msg = f"A location record must be a mapping, got {type(data).__name__}"
        raise InvalidRecord(msg, value=data)
    try:
        return Location.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise _convert_error(exc) from exc


def to_json(location: Location, indent: Optional[int] = None) -> str:
    """Return the record of a location as JSON text."""
    return json.dumps(to_record(location), indent=indent)


def from_json(text: str | bytes) -> Location:
    """Construct a location from JSON text produced by :func:`to_json`."""
    return from_record(json.loads(text))


def _convert_error(exc: PydanticValidationError) -> GeoUriError:
    """Translate the first pydantic error to the package's error taxonomy."""
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else None
    value = error.get("input")
    if error["type"] == "missing":
        msg = f"The {field} is required"
        return MissingField(msg, field=field)
    if field == "uncertainty":
        msg = f"Invalid uncertainty: {value!r}"
        return InvalidUncertainty(msg, field=field, value=value)
    if field in NUMBER_FIELDS:
        msg = f"Invalid {field}: {value!r}"
        return InvalidNumber(msg, field=field, value=value)
    if field == "crs":
        msg = f"Invalid coordinate reference system: {value!r}"
        return InvalidCrs(msg, field=field, value=value)
    msg = f"Invalid location record: {error['msg']}"
    return InvalidRecord(msg, field=field, value=value)
