"""Defines all exceptions in the package."""

import enum
from typing import Any, Optional


class ErrorKind(str, enum.Enum):
    """Identifies the kind of a geo URI error."""

    INVALID_SCHEME = "invalid_scheme"
    INVALID_COORDINATES = "invalid_coordinates"
    INVALID_NUMBER = "invalid_number"
    OUT_OF_RANGE = "out_of_range"
    INVALID_UNCERTAINTY = "invalid_uncertainty"
    INVALID_PARAMETER = "invalid_parameter"
    INVALID_CRS = "invalid_crs"
    UNSUPPORTED_CRS = "unsupported_crs"
    MISSING_FIELD = "missing_field"
    INVALID_RECORD = "invalid_record"


class GeoUriError(Exception):
    """Base class for all exceptions in the package"""

    kind: ErrorKind

    def __init__(self, msg: str, field: Optional[str] = None, value: Any = None) -> None:
        super().__init__(msg)
        self.field = field
        self.value = value


class ParseError(GeoUriError):
    """Base class for errors raised while parsing geo URI text."""


class ValidationError(GeoUriError):
    """Base class for errors raised while validating location values."""


class InvalidScheme(ParseError):
    """Raised if the input does not start with the geo URI scheme."""

    kind = ErrorKind.INVALID_SCHEME


class InvalidCoordinates(ParseError):
    """Raised if the coordinate part does not have two or three fields."""

    kind = ErrorKind.INVALID_COORDINATES


class InvalidNumber(ParseError, ValidationError):
    """Raised if a coordinate is not a parsable, finite decimal number."""

    kind = ErrorKind.INVALID_NUMBER


class OutOfRange(ParseError, ValidationError):
    """Raised if the latitude or longitude is outside its valid domain."""

    kind = ErrorKind.OUT_OF_RANGE


class InvalidUncertainty(ParseError, ValidationError):
    """Raised if the uncertainty is malformed or negative."""

    kind = ErrorKind.INVALID_UNCERTAINTY


class InvalidParameter(ParseError):
    """Raised if a parameter is malformed, or unknown or repeated in strict mode."""

    kind = ErrorKind.INVALID_PARAMETER


class UnsupportedCrs(ParseError):
    """Raised if strict CRS checking is enabled and the CRS is not WGS-84."""

    kind = ErrorKind.UNSUPPORTED_CRS


class MissingField(ValidationError):
    """Raised if a required field was never supplied."""

    kind = ErrorKind.MISSING_FIELD


class InvalidCrs(InvalidParameter, ValidationError):
    """Raised if a coordinate reference system identifier is empty or malformed."""

    kind = ErrorKind.INVALID_CRS


class InvalidRecord(ValidationError):
    """Raised if a structured record is not a mapping or has unexpected content."""

    kind = ErrorKind.INVALID_RECORD
