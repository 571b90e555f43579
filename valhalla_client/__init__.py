from .client import ValhallaClient, configure, shared
from .errors import (
    ConfigurationError,
    MalformedPolylineError,
    PrecisionMismatchWarning,
    ResponseDecodingError,
    ServiceError,
    TransportError,
    ValhallaError,
)
from .models import (
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
from .responses import (
    DirectionsResponse,
    LegResponse,
    ManeuverResponse,
    MapMatchingResponse,
    MatrixElement,
    MatrixResponse,
    RouteResponse,
    TripResponse,
)
from .shape import PRECISION_5, PRECISION_6, decode, encode, precision_for

__version__ = "0.1.0"
