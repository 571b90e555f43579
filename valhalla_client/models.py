from pydantic import BaseModel, Field, model_validator
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .enums import (
    Action,
    CostingModel,
    DirectionType,
    Filter,
    Format,
    Language,
    PreferredSide,
    PriorityType,
    RoadClass,
    ShapeFormat,
    ShapeMatch,
    SideOfStreet,
    TraceType,
    Unit,
)
from .shape import PRECISION_6, encode


class SearchFilter(BaseModel):
    exclude_tunnel: bool = False
    exclude_bridge: bool = False
    exclude_toll: bool = False
    exclude_ferry: bool = False
    exclude_ramp: bool = False
    exclude_closures: bool = True
    min_road_class: RoadClass = RoadClass.SERVICE_OTHER
    max_road_class: RoadClass = RoadClass.MOTORWAY


class Location(BaseModel):
    lat: float
    lon: float
    time: Optional[int] = Field(None, description="Epoch seconds, used with use_timestamps")
    type: TraceType = TraceType.BREAK
    heading: Optional[int] = None
    heading_tolerance: Optional[int] = 60
    street: Optional[str] = None
    way_id: Optional[int] = None
    minimum_reachability: Optional[int] = 50
    radius: Optional[int] = 0
    rank_candidates: Optional[bool] = False
    preferred_side: Optional[PreferredSide] = PreferredSide.EITHER
    display_lat: Optional[float] = None
    display_lon: Optional[float] = None
    search_cutoff: Optional[int] = 35
    node_snap_tolerance: Optional[int] = 5
    street_side_tolerance: Optional[int] = 5
    street_side_max_distance: Optional[int] = 1000
    street_side_cutoff: Optional[RoadClass] = None
    search_filter: Optional[SearchFilter] = None
    date_time: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    waiting: Optional[int] = None
    # Set by the service on echoed locations
    side_of_street: Optional[SideOfStreet] = None
    original_index: Optional[int] = None

    @model_validator(mode="after")
    def _display_point_needs_both(self):
        if self.display_lat is None or self.display_lon is None:
            self.display_lat = None
            self.display_lon = None
        return self

    @classmethod
    def from_point(cls, point: Sequence[float], **kwargs: Any) -> "Location":
        lat, lon = point
        return cls(lat=lat, lon=lon, **kwargs)


class CostingOptions(BaseModel):
    """
    Tuning knobs for the selected costing model. Only fields that are set
    are sent; the service applies its own defaults for the rest.
    """
    avoid_tolls: Optional[bool] = None
    avoid_highways: Optional[bool] = None
    avoid_ferries: Optional[bool] = None
    shortest: Optional[bool] = None
    maneuver_penalty: Optional[float] = None
    gate_cost: Optional[float] = None
    gate_access_cost: Optional[float] = None
    toll_booth_cost: Optional[float] = None
    toll_booth_access_cost: Optional[float] = None
    country_changing_penalty: Optional[float] = None
    # truck dimensions
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    axle_load: Optional[float] = None
    axle_count: Optional[int] = None
    hazmat: Optional[bool] = None
    motorway_factor: Optional[float] = None
    trunk_factor: Optional[float] = None
    primary_factor: Optional[float] = None
    secondary_factor: Optional[float] = None
    tertiary_factor: Optional[float] = None
    unclassified_factor: Optional[float] = None
    residential_factor: Optional[float] = None
    service_road_factor: Optional[float] = None
    top_speed: Optional[float] = None
    speed_factor: Optional[float] = None
    uturn_penalty: Optional[float] = None
    use_traffic: Optional[bool] = None
    # pedestrian
    walking_speed: Optional[float] = None
    walkway_factor: Optional[float] = None
    sidewalk_factor: Optional[float] = None
    alley_factor: Optional[float] = None
    driveway_factor: Optional[float] = None
    crossing_penalty: Optional[float] = None
    max_grade: Optional[float] = None
    # bicycle
    cycling_speed: Optional[float] = None
    bicycle_lane_factor: Optional[float] = None
    cycleway_factor: Optional[float] = None
    mountain_bike_factor: Optional[float] = None
    avoid_bad_surfaces: Optional[bool] = None
    # transit
    transit_mode_filters: Optional[Dict[str, Any]] = None
    transit_walking_distance: Optional[float] = None


class DirectionsOptions(BaseModel):
    units: Unit = Unit.KILOMETERS
    language: Language = Language.ENGLISH_US
    directions_type: DirectionType = DirectionType.INSTRUCTIONS
    format: Format = Format.JSON
    shape_format: Optional[ShapeFormat] = None
    banner_instructions: bool = True
    voice_instructions: bool = True
    alternates: Optional[int] = None

    @model_validator(mode="after")
    def _osrm_only_fields(self):
        # banner/voice instructions and shape_format only apply to OSRM output
        if self.format is Format.OSRM:
            if self.shape_format is None:
                self.shape_format = ShapeFormat.POLYLINE6
        else:
            self.shape_format = None
            self.banner_instructions = False
            self.voice_instructions = False
        return self


class TraceOptions(BaseModel):
    search_radius: Optional[int] = None
    gps_accuracy: Optional[int] = None
    breakage_distance: Optional[int] = None
    interpolation_distance: Optional[int] = None


class TraceAttributesFilter(BaseModel):
    action: Action
    attributes: List[Filter]

    @classmethod
    def include_all(cls) -> "TraceAttributesFilter":
        return cls(action=Action.INCLUDE, attributes=list(Filter))

    @classmethod
    def exclude_all(cls) -> "TraceAttributesFilter":
        return cls(action=Action.EXCLUDE, attributes=list(Filter))


class ValhallaRequest(BaseModel):
    costing: CostingModel = CostingModel.AUTO
    costing_options: Optional[CostingOptions] = None

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the service; costing options are keyed by costing model."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        options = payload.pop("costing_options", None)
        if options:
            payload["costing_options"] = {payload["costing"]: options}
        return payload


class MapMatchingRequest(ValhallaRequest):
    shape: Optional[List[Location]] = None
    encoded_polyline: Optional[str] = Field(None, description="polyline6 encoded trace")
    shape_match: ShapeMatch = ShapeMatch.WALK_OR_SNAP
    use_timestamps: bool = False
    directions_options: Optional[DirectionsOptions] = None
    trace_options: Optional[TraceOptions] = None
    begin_time: Optional[int] = None
    durations: Optional[List[int]] = None
    filters: Optional[TraceAttributesFilter] = None

    @model_validator(mode="after")
    def _one_trace_source(self):
        if self.shape is not None:
            self.encoded_polyline = None
        elif self.encoded_polyline is None:
            raise ValueError("either shape or encoded_polyline is required")
        if self.begin_time is None or self.durations is None:
            self.begin_time = None
            self.durations = None
        return self

    @classmethod
    def from_coordinates(cls, points: Iterable[Sequence[float]], **kwargs: Any) -> "MapMatchingRequest":
        """Build a request whose trace is sent as a polyline6 `encoded_polyline`."""
        return cls(encoded_polyline=encode(points, PRECISION_6), **kwargs)


class RouteRequest(ValhallaRequest):
    locations: List[Location] = Field(..., min_length=2)
    directions_options: Optional[DirectionsOptions] = None

    @classmethod
    def from_coordinates(cls, points: Iterable[Sequence[float]], **kwargs: Any) -> "RouteRequest":
        return cls(locations=[Location.from_point(p) for p in points], **kwargs)


class MatrixRequest(ValhallaRequest):
    sources: List[Location] = Field(..., min_length=1)
    targets: Optional[List[Location]] = None
    units: Optional[Unit] = None
    verbose: Optional[bool] = None
    matrix_locations: Optional[int] = None
    shape_format: Optional[ShapeFormat] = None
    filters: Optional[TraceAttributesFilter] = None
    prioritize_by: Optional[PriorityType] = None
    exclude_locations: Optional[List[int]] = None

    @model_validator(mode="after")
    def _square_matrix_by_default(self):
        if self.targets is None:
            self.targets = list(self.sources)
        return self

    @classmethod
    def from_coordinates(
        cls,
        sources: Iterable[Sequence[float]],
        targets: Optional[Iterable[Sequence[float]]] = None,
        **kwargs: Any,
    ) -> "MatrixRequest":
        return cls(
            sources=[Location.from_point(p) for p in sources],
            targets=[Location.from_point(p) for p in targets] if targets is not None else None,
            **kwargs,
        )
