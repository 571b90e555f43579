import pytest
from pydantic import ValidationError

from valhalla_client.enums import (
    Action,
    CostingModel,
    Filter,
    Format,
    ShapeFormat,
    ShapeMatch,
    Unit,
)
from valhalla_client.models import (
    CostingOptions,
    DirectionsOptions,
    Location,
    MapMatchingRequest,
    MatrixRequest,
    RouteRequest,
    SearchFilter,
    TraceAttributesFilter,
    TraceOptions,
)
from valhalla_client.shape import PRECISION_6, decode


@pytest.fixture
def trace_points():
    return [(40.088741, -8.875526), (40.089512, -8.874211), (40.091238, -8.871023)]


def test_location_payload_uses_wire_names_and_defaults():
    loc = Location(lat=40.1, lon=-8.8, time=1724230000)
    data = loc.model_dump(mode="json", exclude_none=True)
    assert data["lat"] == 40.1
    assert data["lon"] == -8.8
    assert data["time"] == 1724230000
    assert data["type"] == "break"
    assert data["heading_tolerance"] == 60
    assert data["minimum_reachability"] == 50
    assert data["preferred_side"] == "either"
    assert data["street_side_max_distance"] == 1000
    assert "display_lat" not in data
    assert "name" not in data


def test_location_display_point_needs_both_coordinates():
    half = Location(lat=1.0, lon=2.0, display_lat=1.1)
    assert half.display_lat is None and half.display_lon is None

    full = Location(lat=1.0, lon=2.0, display_lat=1.1, display_lon=2.1)
    assert (full.display_lat, full.display_lon) == (1.1, 2.1)


def test_location_from_point():
    loc = Location.from_point((38.5, -120.2), name="Home")
    assert (loc.lat, loc.lon, loc.name) == (38.5, -120.2, "Home")


def test_search_filter_defaults():
    data = SearchFilter().model_dump(mode="json")
    assert data["exclude_closures"] is True
    assert data["exclude_toll"] is False
    assert data["min_road_class"] == "service_other"
    assert data["max_road_class"] == "motorway"


def test_map_matching_requires_a_trace():
    with pytest.raises(ValidationError):
        MapMatchingRequest()


def test_map_matching_validation_error_is_value_error():
    with pytest.raises(ValueError):
        MapMatchingRequest(costing=CostingModel.BICYCLE)


def test_map_matching_shape_wins_over_encoded_polyline(trace_points):
    req = MapMatchingRequest(
        shape=[Location.from_point(p) for p in trace_points],
        encoded_polyline="_p~iF~ps|U",
    )
    payload = req.to_payload()
    assert "encoded_polyline" not in payload
    assert len(payload["shape"]) == 3
    assert payload["shape_match"] == "walk_or_snap"
    assert payload["costing"] == "auto"
    assert payload["use_timestamps"] is False


def test_map_matching_begin_time_and_durations_go_together():
    only_begin = MapMatchingRequest(encoded_polyline="_p~iF~ps|U", begin_time=1724230000)
    assert only_begin.begin_time is None
    assert "begin_time" not in only_begin.to_payload()

    both = MapMatchingRequest(encoded_polyline="_p~iF~ps|U", begin_time=1724230000, durations=[5])
    payload = both.to_payload()
    assert payload["begin_time"] == 1724230000
    assert payload["durations"] == [5]


def test_map_matching_from_coordinates_encodes_polyline6(trace_points):
    req = MapMatchingRequest.from_coordinates(
        trace_points,
        shape_match=ShapeMatch.MAP_SNAP,
        costing=CostingModel.PEDESTRIAN,
    )
    payload = req.to_payload()
    assert "shape" not in payload
    assert payload["shape_match"] == "map_snap"
    assert payload["costing"] == "pedestrian"
    decoded = decode(payload["encoded_polyline"], PRECISION_6)
    assert len(decoded) == len(trace_points)
    for (lat, lon), (exp_lat, exp_lon) in zip(decoded, trace_points):
        assert lat == pytest.approx(exp_lat, abs=1e-6)
        assert lon == pytest.approx(exp_lon, abs=1e-6)


def test_costing_options_are_keyed_by_costing_model():
    req = RouteRequest.from_coordinates(
        [(38.5, -120.2), (40.7, -120.95)],
        costing=CostingModel.TRUCK,
        costing_options=CostingOptions(height=4.1, hazmat=True, shortest=False),
    )
    payload = req.to_payload()
    assert payload["costing_options"] == {"truck": {"height": 4.1, "hazmat": True, "shortest": False}}


def test_empty_costing_options_are_dropped():
    req = RouteRequest.from_coordinates(
        [(38.5, -120.2), (40.7, -120.95)],
        costing_options=CostingOptions(),
    )
    assert "costing_options" not in req.to_payload()


def test_route_needs_two_locations():
    with pytest.raises(ValidationError):
        RouteRequest.from_coordinates([(38.5, -120.2)])


def test_directions_options_default_json():
    data = DirectionsOptions().model_dump(mode="json", exclude_none=True)
    assert data["units"] == "kilometers"
    assert data["language"] == "en-US"
    assert data["directions_type"] == "instructions"
    assert data["format"] == "json"
    assert data["banner_instructions"] is False
    assert data["voice_instructions"] is False
    assert "shape_format" not in data


def test_directions_options_json_drops_shape_format():
    opts = DirectionsOptions(shape_format=ShapeFormat.POLYLINE5)
    assert opts.shape_format is None


def test_directions_options_osrm():
    opts = DirectionsOptions(format=Format.OSRM)
    assert opts.shape_format is ShapeFormat.POLYLINE6
    assert opts.banner_instructions is True
    assert opts.voice_instructions is True

    opts = DirectionsOptions(format="osrm", shape_format="polyline5", voice_instructions=False)
    assert opts.shape_format is ShapeFormat.POLYLINE5
    assert opts.voice_instructions is False


def test_unit_accepts_short_forms():
    assert Unit("km") is Unit.KILOMETERS
    assert Unit("mi") is Unit.MILES
    assert DirectionsOptions(units="mi").units is Unit.MILES


def test_trace_attributes_filter_helpers():
    inc = TraceAttributesFilter.include_all()
    assert inc.action is Action.INCLUDE
    assert len(inc.attributes) == len(Filter)

    payload = TraceAttributesFilter.exclude_all().model_dump(mode="json")
    assert payload["action"] == "exclude"
    assert "edge.names" in payload["attributes"]
    assert "matched.distance_from_trace_point" in payload["attributes"]


def test_trace_options_only_sends_set_fields(trace_points):
    req = MapMatchingRequest.from_coordinates(
        trace_points,
        trace_options=TraceOptions(search_radius=50, gps_accuracy=5),
    )
    assert req.to_payload()["trace_options"] == {"search_radius": 50, "gps_accuracy": 5}


def test_matrix_defaults_to_square_matrix():
    req = MatrixRequest.from_coordinates([(38.5, -120.2), (40.7, -120.95)])
    payload = req.to_payload()
    assert len(payload["sources"]) == 2
    assert payload["targets"] == payload["sources"]


def test_matrix_payload():
    req = MatrixRequest.from_coordinates(
        [(38.5, -120.2)],
        [(40.7, -120.95), (43.252, -126.453)],
        costing="bicycle",
        units=Unit.MILES,
        verbose=True,
        shape_format=ShapeFormat.POLYLINE6,
        prioritize_by="distance",
    )
    payload = req.to_payload()
    assert payload["costing"] == "bicycle"
    assert payload["units"] == "miles"
    assert payload["verbose"] is True
    assert payload["shape_format"] == "polyline6"
    assert payload["prioritize_by"] == "distance"
    assert [t["lat"] for t in payload["targets"]] == [40.7, 43.252]
