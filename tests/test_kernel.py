import pytest

from questmanager.kernel import GeoCoordinate, new_geo_coordinate

MOSCOW = GeoCoordinate(lat=55.7558, lon=37.6176)


@pytest.mark.parametrize(
    "lat, lon",
    [
        (55.7558, 37.6176),
        (90.0, 0.0),
        (-90.0, 0.0),
        (0.0, 180.0),
        (0.0, -180.0),
        (0.0, 0.0),
        (90.0, 180.0),
        (-90.0, -180.0),
        (89.999999, 179.999999),
        (-89.999999, -179.999999),
        (55.123456789, 37.987654321),
    ],
)
def test_new_geo_coordinate_valid(lat, lon):
    coord = new_geo_coordinate(lat, lon)
    assert coord.latitude == lat
    assert coord.longitude == lon


@pytest.mark.parametrize(
    "lat, lon",
    [
        (90.1, 0.0),
        (91.0, 0.0),
        (-90.1, 0.0),
        (-91.0, 0.0),
        (200.0, 0.0),
        (-200.0, 0.0),
        (1e10, 0.0),
        (-1e10, 0.0),
    ],
)
def test_new_geo_coordinate_invalid_latitude(lat, lon):
    with pytest.raises(ValueError) as info:
        new_geo_coordinate(lat, lon)
    assert "latitude" in str(info.value)
    assert "out of range" in str(info.value)


@pytest.mark.parametrize(
    "lat, lon",
    [
        (0.0, 180.1),
        (0.0, 181.0),
        (0.0, -180.1),
        (0.0, -181.0),
        (0.0, 360.0),
        (0.0, -360.0),
        (0.0, 1e10),
        (0.0, -1e10),
    ],
)
def test_new_geo_coordinate_invalid_longitude(lat, lon):
    with pytest.raises(ValueError) as info:
        new_geo_coordinate(lat, lon)
    assert "longitude" in str(info.value)
    assert "out of range" in str(info.value)


@pytest.mark.parametrize(
    "start, end, expected, tolerance",
    [
        (MOSCOW, MOSCOW, 0.0, 0.001),
        (MOSCOW, GeoCoordinate(59.9311, 30.3609), 635.0, 50.0),
        (MOSCOW, GeoCoordinate(40.7128, -74.0060), 7500.0, 200.0),
        (GeoCoordinate(0.0, 0.0), GeoCoordinate(0.0, 1.0), 111.32, 5.0),
    ],
)
def test_distance_to(start, end, expected, tolerance):
    distance = start.distance_to(end)
    assert distance == pytest.approx(expected, abs=tolerance)
    assert end.distance_to(start) == pytest.approx(distance, abs=0.001)


@pytest.mark.parametrize(
    "center, radius_km",
    [
        (GeoCoordinate(55.7558, 37.6176), 10.0),
        (GeoCoordinate(0.0, 0.0), 5.0),
        (GeoCoordinate(80.0, 0.0), 1.0),
    ],
)
def test_bounding_box_for_radius(center, radius_km):
    bbox = center.bounding_box_for_radius(radius_km)
    assert bbox.min_lat <= center.lat <= bbox.max_lat
    assert bbox.min_lon <= center.lon <= bbox.max_lon
    assert bbox.min_lat >= -90.0
    assert bbox.max_lat <= 90.0
    assert bbox.min_lon >= -180.0
    assert bbox.max_lon <= 180.0
    corners = [
        GeoCoordinate(bbox.min_lat, bbox.min_lon),
        GeoCoordinate(bbox.min_lat, bbox.max_lon),
        GeoCoordinate(bbox.max_lat, bbox.min_lon),
        GeoCoordinate(bbox.max_lat, bbox.max_lon),
    ]
    for corner in corners:
        assert center.distance_to(corner) <= radius_km * 1.5


def test_bounding_box_for_radius_polar_regions():
    bbox = GeoCoordinate(89.0, 0.0).bounding_box_for_radius(100.0)
    assert bbox.max_lon - bbox.min_lon > 90.0
    assert bbox.min_lat >= -90.0 and bbox.max_lat <= 90.0
    assert bbox.min_lon >= -180.0 and bbox.max_lon <= 180.0


def test_bounding_box_at_pole_spans_all_longitudes():
    bbox = GeoCoordinate(90.0, 0.0).bounding_box_for_radius(10.0)
    assert bbox.min_lon == -180.0
    assert bbox.max_lon == 180.0


def test_equals():
    coord1 = GeoCoordinate(55.7558, 37.6176)
    coord2 = GeoCoordinate(55.7558, 37.6176)
    coord3 = GeoCoordinate(55.7559, 37.6176)
    assert coord1.equals(coord2)
    assert coord2.equals(coord1)
    assert not coord1.equals(coord3)


def test_distance_to_edge_cases():
    west = GeoCoordinate(0.0, 179.0)
    east = GeoCoordinate(0.0, -179.0)
    assert west.distance_to(east) == pytest.approx(2.0 * 111.32, abs=10.0)

    near = GeoCoordinate(55.7559, 37.6177)
    small = MOSCOW.distance_to(near)
    assert 0.0 < small < 1.0


@pytest.mark.parametrize(
    "lat, lon",
    [
        (91.0, 181.0),
        (-91.0, -181.0),
        (91.0, -181.0),
        (-91.0, 181.0),
        (1000.0, 1000.0),
    ],
)
def test_new_geo_coordinate_both_invalid_reports_latitude(lat, lon):
    with pytest.raises(ValueError) as info:
        new_geo_coordinate(lat, lon)
    assert "latitude" in str(info.value)
    assert "out of range" in str(info.value)


def test_new_geo_coordinate_validation_messages():
    with pytest.raises(ValueError) as info:
        new_geo_coordinate(100.0, 0.0)
    message = str(info.value)
    assert "100.000000" in message
    assert "-90" in message
    assert "90" in message

    with pytest.raises(ValueError) as info:
        new_geo_coordinate(0.0, 200.0)
    message = str(info.value)
    assert "200.000000" in message
    assert "-180" in message
    assert "180" in message