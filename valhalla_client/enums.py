from enum import Enum, IntEnum, IntFlag
from typing import List


class Action(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


class CostingModel(str, Enum):
    AUTO = "auto"
    BICYCLE = "bicycle"
    PEDESTRIAN = "pedestrian"
    BUS = "bus"
    BIKESHARE = "bikeshare"
    TRUCK = "truck"
    HOV = "hov"  # deprecated server-side, behaves like auto
    TAXI = "taxi"
    MOTOR_SCOOTER = "motor_scooter"
    MOTORCYCLE = "motorcycle"
    MULTIMODAL = "multimodal"


class DirectionType(str, Enum):
    NONE = "none"
    MANEUVERS = "maneuvers"
    INSTRUCTIONS = "instructions"


class Format(str, Enum):
    JSON = "json"
    GPX = "gpx"
    OSRM = "osrm"
    PBF = "pbf"


class ShapeFormat(str, Enum):
    POLYLINE6 = "polyline6"
    POLYLINE5 = "polyline5"
    GEOJSON = "geojson"
    NO_SHAPE = "no_shape"


class ShapeMatch(str, Enum):
    EDGE_WALK = "edge_walk"
    MAP_SNAP = "map_snap"
    WALK_OR_SNAP = "walk_or_snap"


class TraceType(str, Enum):
    BREAK = "break"
    VIA = "via"
    THROUGH = "through"
    BREAK_THROUGH = "break_through"


class PreferredSide(str, Enum):
    SAME = "same"
    OPPOSITE = "opposite"
    EITHER = "either"


class SideOfStreet(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class RoadClass(str, Enum):
    MOTORWAY = "motorway"
    TRUNK = "trunk"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    UNCLASSIFIED = "unclassified"
    RESIDENTIAL = "residential"
    SERVICE_OTHER = "service_other"


class PriorityType(str, Enum):
    TIME = "time"
    DISTANCE = "distance"


class Unit(str, Enum):
    KILOMETERS = "kilometers"
    MILES = "miles"

    @classmethod
    def _missing_(cls, value):
        # the service also accepts (and sometimes echoes) the short forms
        return {"km": cls.KILOMETERS, "mi": cls.MILES}.get(value)


class Language(str, Enum):
    BULGARIAN = "bg-BG"
    CATALAN = "ca-ES"
    CZECH = "cs-CZ"
    DANISH = "da-DK"
    GERMAN = "de-DE"
    GREEK = "el-GR"
    ENGLISH_US = "en-US"
    ENGLISH_GB = "en-GB"
    ENGLISH_PIRATE = "en-US-x-pirate"
    SPANISH = "es-ES"
    ESTONIAN = "et-EE"
    FINNISH = "fi-FI"
    FRENCH = "fr-FR"
    HINDI = "hi-IN"
    HUNGARIAN = "hu-HU"
    ITALIAN = "it-IT"
    JAPANESE = "ja-JP"
    NORWEGIAN_BOKMAL = "nb-NO"
    DUTCH = "nl-NL"
    POLISH = "pl-PL"
    PORTUGUESE_PT = "pt-PT"
    PORTUGUESE_BR = "pt-BR"
    ROMANIAN = "ro-RO"
    RUSSIAN = "ru-RU"
    SLOVAK = "sk-SK"
    SLOVENIAN = "sl-SI"
    SWEDISH = "sv-SE"
    TURKISH = "tr-TR"
    UKRAINIAN = "uk-UA"


class TravelMode(str, Enum):
    DRIVE = "drive"
    PEDESTRIAN = "pedestrian"
    BICYCLE = "bicycle"
    TRANSIT = "transit"


class VehicleType(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    BUS = "bus"
    TRACTOR_TRAILER = "tractor_trailer"
    MOTOR_SCOOTER = "motor_scooter"


class PedestrianType(str, Enum):
    FOOT = "foot"
    WHEELCHAIR = "wheelchair"
    SEGWAY = "segway"


class BicycleType(str, Enum):
    ROAD = "road"
    CROSS = "cross"
    HYBRID = "hybrid"
    MOUNTAIN = "mountain"


class TransitType(str, Enum):
    TRAM = "tram"
    METRO = "metro"
    RAIL = "rail"
    BUS = "bus"
    FERRY = "ferry"
    CABLE_CAR = "cable_car"
    GONDOLA = "gondola"
    FUNICULAR = "funicular"


class TransitStopType(IntEnum):
    SIMPLE_STOP = 0
    STATION = 1


class ManeuverType(IntEnum):
    NONE = 0
    START = 1
    START_RIGHT = 2
    START_LEFT = 3
    DESTINATION = 4
    DESTINATION_RIGHT = 5
    DESTINATION_LEFT = 6
    BECOMES = 7
    CONTINUE = 8
    SLIGHT_RIGHT = 9
    RIGHT = 10
    SHARP_RIGHT = 11
    UTURN_RIGHT = 12
    UTURN_LEFT = 13
    SHARP_LEFT = 14
    LEFT = 15
    SLIGHT_LEFT = 16
    RAMP_STRAIGHT = 17
    RAMP_RIGHT = 18
    RAMP_LEFT = 19
    EXIT_RIGHT = 20
    EXIT_LEFT = 21
    STAY_STRAIGHT = 22
    STAY_RIGHT = 23
    STAY_LEFT = 24
    MERGE = 25
    ROUNDABOUT_ENTER = 26
    ROUNDABOUT_EXIT = 27
    FERRY_ENTER = 28
    FERRY_EXIT = 29
    TRANSIT = 30
    TRANSIT_TRANSFER = 31
    TRANSIT_REMAIN_ON = 32
    TRANSIT_CONNECTION_START = 33
    TRANSIT_CONNECTION_TRANSFER = 34
    TRANSIT_CONNECTION_DESTINATION = 35
    POST_TRANSIT_CONNECTION_DESTINATION = 36
    MERGE_RIGHT = 37
    MERGE_LEFT = 38
    ELEVATOR_ENTER = 39
    STEPS_ENTER = 40
    ESCALATOR_ENTER = 41
    BUILDING_ENTER = 42
    BUILDING_EXIT = 43


class LaneDirection(IntFlag):
    """Bit mask used by the `directions`, `active` and `valid` lane fields."""

    EMPTY = 0
    NONE = 1
    THROUGH = 2
    SHARP_LEFT = 4
    LEFT = 8
    SLIGHT_LEFT = 16
    SLIGHT_RIGHT = 32
    RIGHT = 64
    SHARP_RIGHT = 128
    REVERSE = 256
    MERGE_TO_LEFT = 512
    MERGE_TO_RIGHT = 1024

    @property
    def components(self) -> List["LaneDirection"]:
        return [d for d in type(self) if d.value and d in self]

    def describe(self) -> str:
        parts = [
            "".join(word.capitalize() for word in d.name.split("_"))
            for d in self.components
        ]
        return " + ".join(parts) if parts else "Empty"


class Filter(str, Enum):
    """Attribute keys accepted by `filters.attributes` on map-matching requests."""

    EDGE_NAMES = "edge.names"
    EDGE_LENGTH = "edge.length"
    EDGE_SPEED = "edge.speed"
    EDGE_SPEEDS_FADED = "edge.speeds_faded"
    EDGE_SPEEDS_NON_FADED = "edge.speeds_non_faded"
    EDGE_ROAD_CLASS = "edge.road_class"
    EDGE_BEGIN_HEADING = "edge.begin_heading"
    EDGE_END_HEADING = "edge.end_heading"
    EDGE_BEGIN_SHAPE_INDEX = "edge.begin_shape_index"
    EDGE_END_SHAPE_INDEX = "edge.end_shape_index"
    EDGE_TRAVERSABILITY = "edge.traversability"
    EDGE_USE = "edge.use"
    EDGE_TOLL = "edge.toll"
    EDGE_UNPAVED = "edge.unpaved"
    EDGE_TUNNEL = "edge.tunnel"
    EDGE_BRIDGE = "edge.bridge"
    EDGE_ROUNDABOUT = "edge.roundabout"
    EDGE_INTERNAL_INTERSECTION = "edge.internal_intersection"
    EDGE_DRIVE_ON_RIGHT = "edge.drive_on_right"
    EDGE_SURFACE = "edge.surface"
    EDGE_SIGN_EXIT_NUMBER = "edge.sign.exit_number"
    EDGE_SIGN_EXIT_BRANCH = "edge.sign.exit_branch"
    EDGE_SIGN_EXIT_TOWARD = "edge.sign.exit_toward"
    EDGE_SIGN_EXIT_NAME = "edge.sign.exit_name"
    EDGE_TRAVEL_MODE = "edge.travel_mode"
    EDGE_VEHICLE_TYPE = "edge.vehicle_type"
    EDGE_PEDESTRIAN_TYPE = "edge.pedestrian_type"
    EDGE_BICYCLE_TYPE = "edge.bicycle_type"
    EDGE_TRANSIT_TYPE = "edge.transit_type"
    EDGE_ID = "edge.id"
    EDGE_INDOOR = "edge.indoor"
    EDGE_WAY_ID = "edge.way_id"
    EDGE_WEIGHTED_GRADE = "edge.weighted_grade"
    EDGE_MAX_UPWARD_GRADE = "edge.max_upward_grade"
    EDGE_MAX_DOWNWARD_GRADE = "edge.max_downward_grade"
    EDGE_MEAN_ELEVATION = "edge.mean_elevation"
    EDGE_LANE_COUNT = "edge.lane_count"
    EDGE_CYCLE_LANE = "edge.cycle_lane"
    EDGE_BICYCLE_NETWORK = "edge.bicycle_network"
    EDGE_SAC_SCALE = "edge.sac_scale"
    EDGE_SHOULDER = "edge.shoulder"
    EDGE_SIDEWALK = "edge.sidewalk"
    EDGE_DENSITY = "edge.density"
    EDGE_SPEED_LIMIT = "edge.speed_limit"
    EDGE_TRUCK_SPEED = "edge.truck_speed"
    EDGE_TRUCK_ROUTE = "edge.truck_route"
    EDGE_COUNTRY_CROSSING = "edge.country_crossing"
    EDGE_FORWARD = "edge.forward"
    EDGE_TRAFFIC_SIGNAL = "edge.traffic_signal"
    NODE_INTERSECTING_EDGE_BEGIN_HEADING = "node.intersecting_edge.begin_heading"
    NODE_INTERSECTING_EDGE_FROM_EDGE_NAME_CONSISTENCY = "node.intersecting_edge.from_edge_name_consistency"
    NODE_INTERSECTING_EDGE_TO_EDGE_NAME_CONSISTENCY = "node.intersecting_edge.to_edge_name_consistency"
    NODE_INTERSECTING_EDGE_DRIVEABILITY = "node.intersecting_edge.driveability"
    NODE_INTERSECTING_EDGE_CYCLABILITY = "node.intersecting_edge.cyclability"
    NODE_INTERSECTING_EDGE_WALKABILITY = "node.intersecting_edge.walkability"
    NODE_INTERSECTING_EDGE_USE = "node.intersecting_edge.use"
    NODE_INTERSECTING_EDGE_ROAD_CLASS = "node.intersecting_edge.road_class"
    NODE_INTERSECTING_EDGE_LANE_COUNT = "node.intersecting_edge.lane_count"
    NODE_ELAPSED_TIME = "node.elapsed_time"
    NODE_ADMIN_INDEX = "node.admin_index"
    NODE_TYPE = "node.type"
    NODE_TRAFFIC_SIGNAL = "node.traffic_signal"
    NODE_FORK = "node.fork"
    NODE_TIME_ZONE = "node.time_zone"
    OSM_CHANGESET = "osm_changeset"
    SHAPE = "shape"
    ADMIN_COUNTRY_CODE = "admin.country_code"
    ADMIN_COUNTRY_TEXT = "admin.country_text"
    ADMIN_STATE_CODE = "admin.state_code"
    ADMIN_STATE_TEXT = "admin.state_text"
    MATCHED_POINT = "matched.point"
    MATCHED_TYPE = "matched.type"
    MATCHED_EDGE_INDEX = "matched.edge_index"
    MATCHED_BEGIN_ROUTE_DISCONTINUITY = "matched.begin_route_discontinuity"
    MATCHED_END_ROUTE_DISCONTINUITY = "matched.end_route_discontinuity"
    MATCHED_DISTANCE_ALONG_EDGE = "matched.distance_along_edge"
    MATCHED_DISTANCE_FROM_TRACE_POINT = "matched.distance_from_trace_point"
