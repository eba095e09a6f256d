import importlib.metadata as metadata

from loguru import logger

logger.disable("geouri")

__version__ = metadata.metadata("geouri")["Version"]

from .builder import LocationBuilder
from .crs import WGS84, CoordRefSystem, CrsKind, OtherCrs, Wgs84Crs, crs_from_token
from .exceptions import (
    ErrorKind,
    GeoUriError,
    InvalidCoordinates,
    InvalidCrs,
    InvalidNumber,
    InvalidParameter,
    InvalidRecord,
    InvalidScheme,
    InvalidUncertainty,
    MissingField,
    OutOfRange,
    ParseError,
    UnsupportedCrs,
    ValidationError,
)
from .generator import format_location, format_number
from .location import Location
from .parser import ParserConfig, parse
from .serialization import from_json, from_record, to_json, to_record
from .uri import from_url, to_url

__all__ = (
    "CoordRefSystem",
    "CrsKind",
    "ErrorKind",
    "GeoUriError",
    "InvalidCoordinates",
    "InvalidCrs",
    "InvalidNumber",
    "InvalidParameter",
    "InvalidRecord",
    "InvalidScheme",
    "InvalidUncertainty",
    "Location",
    "LocationBuilder",
    "MissingField",
    "OtherCrs",
    "OutOfRange",
    "ParseError",
    "ParserConfig",
    "UnsupportedCrs",
    "ValidationError",
    "WGS84",
    "Wgs84Crs",
    "crs_from_token",
    "format_location",
    "format_number",
    "from_json",
    "from_record",
    "from_url",
    "parse",
    "to_json",
    "to_record",
    "to_url",
)
