import json

import pytest

from geouri import (
    InvalidCrs,
    InvalidNumber,
    InvalidRecord,
    InvalidUncertainty,
    Location,
    MissingField,
    OtherCrs,
    OutOfRange,
    ValidationError,
    WGS84,
    from_json,
    from_record,
    to_json,
    to_record,
)


def test_to_record(location):
    record = to_record(location)
    assert list(record) == ["latitude", "longitude", "altitude", "uncertainty", "crs"]
    assert record == {
        "latitude": 52.107,
        "longitude": 5.134,
        "altitude": 3.6,
        "uncertainty": 1000.0,
        "crs": "wgs84",
    }


def test_record_round_trip(location):
    assert from_record(to_record(location)) == location
    other = location.replace(crs="epsg:4326", altitude=None)
    assert to_record(other)["crs"] == "epsg:4326"
    assert from_record(to_record(other)) == other


def test_from_record_defaults():
    location = from_record({"latitude": 1.0, "longitude": 2.0})
    assert location.altitude is None
    assert location.uncertainty is None
    assert location.crs == WGS84


def test_from_record_tagged_crs():
    location = from_record(
        {"latitude": 1.0, "longitude": 2.0, "crs": {"kind": "other", "identifier": "foo"}}
    )
    assert location.crs == OtherCrs(identifier="foo")


def test_from_record_out_of_range():
    with pytest.raises(OutOfRange) as exc_info:
        from_record({"latitude": 100.0, "longitude": 5.134})
    assert exc_info.value.field == "latitude"


def test_from_record_negative_uncertainty():
    with pytest.raises(InvalidUncertainty):
        from_record({"latitude": 1.0, "longitude": 2.0, "uncertainty": -1.0})
    with pytest.raises(InvalidUncertainty):
        from_record({"latitude": 1.0, "longitude": 2.0, "uncertainty": "far"})


def test_from_record_missing_field():
    with pytest.raises(MissingField) as exc_info:
        from_record({"longitude": 5.134})
    assert exc_info.value.field == "latitude"


def test_from_record_invalid_number():
    with pytest.raises(InvalidNumber) as exc_info:
        from_record({"latitude": 1.0, "longitude": "east"})
    assert exc_info.value.field == "longitude"


def test_from_record_unknown_field():
    with pytest.raises(InvalidRecord) as exc_info:
        from_record({"latitude": 1.0, "longitude": 2.0, "name": "home"})
    assert exc_info.value.field == "name"
    assert isinstance(exc_info.value, ValidationError)


@pytest.mark.parametrize("data", [[1, 2], "geo:1,2", None, 3.5])
def test_from_record_not_a_mapping(data):
    with pytest.raises(InvalidRecord):
        from_record(data)


@pytest.mark.parametrize(
    "crs",
    ["", {"kind": "other", "identifier": ""}, {"kind": "nope"}, 5],
)
def test_from_record_invalid_crs(crs):
    with pytest.raises(InvalidCrs) as exc_info:
        from_record({"latitude": 1.0, "longitude": 2.0, "crs": crs})
    assert isinstance(exc_info.value, ValidationError)
    assert exc_info.value.field == "crs"


def test_from_record_other_crs_named_wgs84():
    location = from_record(
        {"latitude": 1.0, "longitude": 2.0, "crs": {"kind": "other", "identifier": "WGS84"}}
    )
    assert location.crs == WGS84


def test_json_round_trip(location):
    text = to_json(location)
    assert json.loads(text)["uncertainty"] == 1000.0
    assert from_json(text) == location
    with pytest.raises(OutOfRange):
        from_json('{"latitude": 1.0, "longitude": 200.0}')


def test_pydantic_round_trip(location):
    data = location.model_dump()
    assert data["crs"] == "wgs84"
    assert Location.model_validate(data) == location
    assert Location.model_validate_json(location.model_dump_json()) == location
