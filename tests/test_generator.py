import pytest

from geouri import Location, OtherCrs, format_location, format_number, parse


@pytest.mark.parametrize(
    "value, expected",
    [
        (1000.0, "1000"),
        (0.0, "0"),
        (-0.0, "0"),
        (5.134, "5.134"),
        (-118.44, "-118.44"),
        (0.1, "0.1"),
        (1e-07, "0.0000001"),
        (123456789.125, "123456789.125"),
        (1e20, "100000000000000000000"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_minimal():
    location = Location(latitude=52.107, longitude=5.134, uncertainty=1000.0)
    assert format_location(location) == "geo:52.107,5.134;u=1000"
    assert str(location) == "geo:52.107,5.134;u=1000"


def test_format_optional_fields():
    location = Location(latitude=52.107, longitude=5.134)
    assert str(location) == "geo:52.107,5.134"
    assert str(location.replace(altitude=3.6)) == "geo:52.107,5.134,3.6"
    assert (
        str(location.replace(altitude=3.6, uncertainty=25_000.0))
        == "geo:52.107,5.134,3.6;u=25000"
    )


def test_format_drops_trailing_zeros():
    assert str(parse("geo:22.300,-118.4400;u=6.500")) == "geo:22.3,-118.44;u=6.5"


def test_format_omits_default_crs():
    assert str(parse("geo:48.198634,16.371648;crs=wgs84;u=40")) == "geo:48.198634,16.371648;u=40"


def test_format_other_crs_before_uncertainty():
    location = Location(latitude=1.5, longitude=2, uncertainty=3, crs=OtherCrs(identifier="foo"))
    assert str(location) == "geo:1.5,2;crs=foo;u=3"


def test_format_encodes_crs_token():
    location = Location(latitude=1, longitude=2, crs="my crs;x=1")
    text = str(location)
    assert text == "geo:1,2;crs=my%20crs%3Bx%3D1"
    assert parse(text) == location


def test_format_keeps_crs_paramchars():
    location = Location(latitude=1, longitude=2, crs="urn:ogc:def:crs:EPSG::4326")
    assert str(location) == "geo:1,2;crs=urn:ogc:def:crs:EPSG::4326"


def test_format_drops_unknown_parameters():
    assert str(parse("geo:1,2;foo=bar;u=3")) == "geo:1,2;u=3"


def test_format_is_idempotent(location):
    assert format_location(location) == format_location(location)
    assert format_location(parse(format_location(location))) == format_location(location)


@pytest.mark.parametrize(
    "location",
    [
        Location(latitude=52.107, longitude=5.134),
        Location(latitude=-33.8688, longitude=151.2093, altitude=-12.5),
        Location(latitude=90.0, longitude=0.0, uncertainty=0.0),
        Location(latitude=0.1 + 0.2, longitude=-179.999999, uncertainty=1e-07),
        Location(latitude=1.0, longitude=2.0, crs="epsg:4979", uncertainty=12.75),
        Location(latitude=1.0, longitude=2.0, crs=OtherCrs(identifier="WGS84")),
    ],
)
def test_round_trip(location):
    assert parse(format_location(location)) == location
