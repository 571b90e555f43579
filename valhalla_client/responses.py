import warnings
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import Dict, List, Optional, Sequence, Type, Union

from .enums import (
    BicycleType,
    LaneDirection,
    ManeuverType,
    PedestrianType,
    TransitStopType,
    TransitType,
    TravelMode,
    Unit,
    VehicleType,
)
from .errors import PrecisionMismatchWarning
from .models import Location
from .shape import PRECISION_6, LatLon, decode

TravelType = Union[VehicleType, PedestrianType, BicycleType, TransitType]

_TRAVEL_TYPES: Dict[TravelMode, Type[TravelType]] = {
    TravelMode.DRIVE: VehicleType,
    TravelMode.PEDESTRIAN: PedestrianType,
    TravelMode.BICYCLE: BicycleType,
    TravelMode.TRANSIT: TransitType,
}


def _checked_shape(points: List[LatLon], precision: float) -> List[LatLon]:
    for lat, lon in points:
        if abs(lat) > 90.0 or abs(lon) > 180.0:
            warnings.warn(
                f"shape decoded at precision {precision:g} leaves lat/lon bounds "
                f"({lat}, {lon}); check the request's shape_format",
                PrecisionMismatchWarning,
                stacklevel=3,
            )
            break
    return points


class SummaryResponse(BaseModel):
    time: float
    length: float
    has_toll: bool = False
    has_ferry: bool = False
    has_highway: bool = False
    has_time_restrictions: bool = False
    min_lat: Optional[float] = None
    min_lon: Optional[float] = None
    max_lat: Optional[float] = None
    max_lon: Optional[float] = None
    cost: Optional[float] = None


class ManeuverSignElement(BaseModel):
    text: str
    consecutive_count: int = 0


class SignResponse(BaseModel):
    exit_number_elements: Optional[List[ManeuverSignElement]] = None
    exit_branch_elements: Optional[List[ManeuverSignElement]] = None
    exit_toward_elements: Optional[List[ManeuverSignElement]] = None
    exit_name_elements: Optional[List[ManeuverSignElement]] = None


class Lane(BaseModel):
    directions: LaneDirection
    active: Optional[LaneDirection] = None
    valid: Optional[LaneDirection] = None

    @field_validator("directions", "active", "valid", mode="before")
    @classmethod
    def _as_flags(cls, value):
        return LaneDirection(value) if isinstance(value, int) else value


class TransitStop(BaseModel):
    type: TransitStopType
    name: str
    arrival_date_time: Optional[str] = None
    departure_date_time: Optional[str] = None
    assumed_schedule: bool = False
    lat: float
    lon: float


class TransitInfo(BaseModel):
    onestop_id: str
    short_name: str = ""
    long_name: str = ""
    headsign: str = ""
    color: int = 0
    text_color: int = 0
    description: str = ""
    operator_onestop_id: str = ""
    operator_name: str = ""
    operator_url: str = ""
    transit_stops: List[TransitStop] = Field(default_factory=list)


class ManeuverResponse(BaseModel):
    type: ManeuverType
    instruction: Optional[str] = None
    verbal_succinct_transition_instruction: Optional[str] = None
    verbal_pre_transition_instruction: Optional[str] = None
    verbal_post_transition_instruction: Optional[str] = None
    street_names: List[str] = Field(default_factory=list)
    begin_street_names: List[str] = Field(default_factory=list)
    time: float
    length: float
    cost: Optional[float] = None
    begin_shape_index: int
    end_shape_index: int
    verbal_multi_cue: bool = False
    travel_mode: TravelMode
    # resolved against travel_mode, so it must come after it
    travel_type: TravelType
    toll: bool = False
    highway: bool = False
    ferry: bool = False
    sign: Optional[SignResponse] = None
    roundabout_exit_count: Optional[int] = None
    depart_instruction: Optional[str] = None
    verbal_depart_instruction: Optional[str] = None
    arrive_instruction: Optional[str] = None
    verbal_arrive_instruction: Optional[str] = None
    transit_info: Optional[TransitInfo] = None
    bearing_before: Optional[int] = None
    bearing_after: Optional[int] = None
    lanes: Optional[List[Lane]] = None

    @field_validator("travel_type", mode="before")
    @classmethod
    def _travel_type_for_mode(cls, value, info: ValidationInfo):
        enum_cls = _TRAVEL_TYPES.get(info.data.get("travel_mode"))
        if enum_cls is None or isinstance(value, enum_cls):
            return value
        return enum_cls(value)

    def shape_points(self, points: Sequence[LatLon]) -> List[LatLon]:
        """Slice of a leg's decoded shape covered by this maneuver."""
        return list(points[self.begin_shape_index:self.end_shape_index + 1])


class LegResponse(BaseModel):
    maneuvers: Optional[List[ManeuverResponse]] = None
    summary: Optional[SummaryResponse] = None
    shape: Optional[str] = None

    def coordinates(self, precision: float = PRECISION_6) -> List[LatLon]:
        """
        Decoded leg geometry as [(lat, lon), ...].

        `precision` must match the shape format the request asked for:
        1e-6 for the service default (polyline6), 1e-5 for polyline5.
        """
        if not self.shape:
            return []
        return _checked_shape(decode(self.shape, precision), precision)


class RouteResponse(BaseModel):
    status: int = 0
    status_message: str = ""
    units: str = Unit.KILOMETERS.value
    language: str = "en-US"
    summary: Optional[SummaryResponse] = None
    legs: Optional[List[LegResponse]] = None
    locations: Optional[List[Location]] = None

    def coordinates(self, precision: float = PRECISION_6) -> List[LatLon]:
        """Whole-trip geometry; the shared point where two legs meet appears once."""
        out: List[LatLon] = []
        for leg in self.legs or []:
            pts = leg.coordinates(precision)
            if out and pts and pts[0] == out[-1]:
                pts = pts[1:]
            out.extend(pts)
        return out


TripResponse = RouteResponse


class AlternateResponse(BaseModel):
    trip: TripResponse


class DirectionsResponse(BaseModel):
    trip: TripResponse
    alternates: Optional[List[AlternateResponse]] = None
    id: Optional[str] = None


class MapMatchingResponse(DirectionsResponse):
    pass


class MatrixElement(BaseModel):
    # null when the pair is unreachable
    time: Optional[float] = None
    distance: Optional[float] = None
    from_index: Optional[int] = None
    to_index: Optional[int] = None
    to_edge_distance: Optional[float] = None
    from_edge_distance: Optional[float] = None
    shape: Optional[str] = None


class MatrixResponse(BaseModel):
    sources: List[Location]
    targets: List[Location]
    sources_to_targets: List[List[Optional[MatrixElement]]]
    targets_to_sources: Optional[List[List[Optional[MatrixElement]]]] = None
    units: Unit = Unit.KILOMETERS
    shape: Optional[str] = None
    warnings: Optional[List[Dict]] = None
    id: Optional[str] = None

    def element(self, source: int, target: int) -> Optional[MatrixElement]:
        return self.sources_to_targets[source][target]
