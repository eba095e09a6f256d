"""Parses geo URI text into locations.

The parser is more liberal than RFC 5870 by default: parameters may come in any order,
unknown parameters are ignored, repeated ``crs``/``u`` parameters override earlier ones,
and numbers may use an exponent. A :class:`ParserConfig` with ``strict=True`` turns the
parameter leniencies into errors.
"""

import re
from typing import Optional, Union
from urllib.parse import unquote

from loguru import logger

from geouri.crs import WGS84, OtherCrs, Wgs84Crs, crs_from_token
from geouri.exceptions import (
    InvalidCoordinates,
    InvalidNumber,
    InvalidParameter,
    InvalidScheme,
    InvalidUncertainty,
    UnsupportedCrs,
)
from geouri.generator import URI_SCHEME_NAME
from geouri.location import Location
from geouri.models import GeoUriBaseModel
from geouri.validation import validate_coordinates

SCHEME_PREFIX = URI_SCHEME_NAME + ":"
CRS_PARAM = "crs"
UNCERTAINTY_PARAM = "u"
COORDINATE_FIELDS = ("latitude", "longitude", "altitude")

_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ParserConfig(GeoUriBaseModel):
    """Controls how tolerant the parser is."""

    strict: bool = False
    strict_crs: bool = False


DEFAULT_CONFIG = ParserConfig()


def parse(text: str, config: Optional[ParserConfig] = None) -> Location:
    """Parse a geo URI string into a Location.

    Parameters
    ----------
    text : str
        Geo URI, such as ``geo:52.107,5.134,3.6;u=1000``.
    config : ParserConfig | None
        Parser options, defaults to lenient parsing.

    Raises
    ------
    ParseError
        Raised for any malformed or invalid input. The subclass identifies the problem.

    Examples
    --------
    >>> parse("geo:52.107,5.134;u=1000").uncertainty
    1000.0
    >>> parse("geo:52.107,5.134;foo=bar", ParserConfig(strict=True))
    Traceback (most recent call last):
    ...
    geouri.exceptions.InvalidParameter: Unknown parameter 'foo' in geo URI
    """
    config = config or DEFAULT_CONFIG
    if text[: len(SCHEME_PREFIX)].lower() != SCHEME_PREFIX:
        msg = f"Missing geo URI scheme in {text!r}"
        raise InvalidScheme(msg, value=text)

    coords_part, *param_parts = text[len(SCHEME_PREFIX) :].split(";")
    latitude, longitude, altitude = _parse_coordinates(coords_part)
    validate_coordinates(latitude, longitude)

    crs: Union[Wgs84Crs, OtherCrs] = WGS84
    uncertainty: Optional[float] = None
    seen: set[str] = set()
    for part in param_parts:
        if not part:
            if config.strict:
                msg = "Empty parameter in geo URI"
                raise InvalidParameter(msg, value=part)
            continue

        key, sep, raw_value = part.partition("=")
        key = key.lower()
        value = _decode_value(key, raw_value) if sep else None
        if key in seen:
            if config.strict:
                msg = f"Duplicate parameter {key!r} in geo URI"
                raise InvalidParameter(msg, field=key, value=value)
            logger.debug("Parameter {} repeated in geo URI, using the last value", key)
        seen.add(key)

        if key == CRS_PARAM:
            crs = _parse_crs(value, config)
        elif key == UNCERTAINTY_PARAM:
            uncertainty = _parse_uncertainty(value)
        elif config.strict:
            msg = f"Unknown parameter {key!r} in geo URI"
            raise InvalidParameter(msg, field=key, value=value)
        else:
            logger.debug("Ignoring unknown geo URI parameter {}", key)

    return Location(
        latitude=latitude,
        longitude=longitude,
        altitude=altitude,
        uncertainty=uncertainty,
        crs=crs,
    )


def parse_decimal(field: str, text: str) -> float:
    """Parse a decimal number, raising InvalidNumber if it is not one."""
    if not _DECIMAL.fullmatch(text):
        msg = f"Invalid {field} in geo URI: {text!r}"
        raise InvalidNumber(msg, field=field, value=text)
    return float(text)


def _parse_coordinates(part: str) -> tuple[float, float, Optional[float]]:
    fields = part.split(",") if part else []
    if len(fields) not in (2, 3):
        msg = f"Expected 2 or 3 coordinates in geo URI, got {len(fields)}"
        raise InvalidCoordinates(msg, value=part)

    values = [parse_decimal(name, x) for name, x in zip(COORDINATE_FIELDS, fields)]
    altitude = values[2] if len(values) == 3 else None
    return values[0], values[1], altitude


def _parse_crs(value: Optional[str], config: ParserConfig) -> Union[Wgs84Crs, OtherCrs]:
    crs = crs_from_token(value or "")
    if config.strict_crs and not crs.is_default:
        msg = f"Unsupported coordinate reference system {crs.token!r}"
        raise UnsupportedCrs(msg, field=CRS_PARAM, value=crs.token)
    return crs


def _parse_uncertainty(value: Optional[str]) -> float:
    if value is None or not _DECIMAL.fullmatch(value):
        msg = f"Invalid uncertainty in geo URI: {value!r}"
        raise InvalidUncertainty(msg, field="uncertainty", value=value)
    uncertainty = float(value)
    if uncertainty < 0.0:
        msg = f"The uncertainty must not be negative, got {value}"
        raise InvalidUncertainty(msg, field="uncertainty", value=uncertainty)
    return uncertainty


def _decode_value(key: str, raw_value: str) -> str:
    try:
        return unquote(raw_value, errors="strict")
    except UnicodeDecodeError as exc:
        msg = f"Parameter {key!r} is not valid percent-encoded UTF-8: {raw_value!r}"
        raise InvalidParameter(msg, field=key, value=raw_value) from exc
