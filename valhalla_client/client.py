import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import urlparse

import requests
from pydantic import BaseModel, ValidationError

from .config import settings
from .errors import ConfigurationError, ResponseDecodingError, ServiceError, TransportError
from .models import MapMatchingRequest, MatrixRequest, RouteRequest
from .responses import DirectionsResponse, MapMatchingResponse, MatrixResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _normalize_base_url(url: str) -> str:
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Invalid server URL: {url!r}")
    return url.rstrip("/")


def _service_error(response: requests.Response) -> ServiceError:
    """
    Valhalla reports failures as
    {"error_code": 171, "error": "...", "status_code": 400, "status": "Bad Request"}.
    Anything else (proxy pages, empty bodies) keeps the raw text.
    """
    error_code = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and "error" in body:
        error_code = body.get("error_code")
        message = f"Valhalla error {error_code}: {body['error']}"
    else:
        message = f"Valhalla returned {response.status_code}: {(response.text or '')[:500]}"
    return ServiceError(message, status_code=response.status_code, error_code=error_code)


def _parse(model: Type[ResponseT], data: Any) -> ResponseT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ResponseDecodingError(f"Unexpected {model.__name__} payload: {e}") from e


class ValhallaClient:
    """
    Calls a Valhalla-compatible service and returns typed responses.

    base_url and timeout default to VALHALLA_URL / VALHALLA_TIMEOUT_S.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = _normalize_base_url(base_url or settings.valhalla_url)
        self.timeout = timeout if timeout is not None else settings.timeout_s
        self.session = session or requests.Session()

    def request(self, endpoint: str, payload: Dict[str, Any], method: str = "POST") -> Dict[str, Any]:
        """
        Send `payload` to `endpoint` and return the decoded JSON body.

        POST sends it as the request body, GET as the `json` query parameter.
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        method = method.upper()
        logger.debug("%s %s", method, url)
        try:
            if method == "POST":
                r = self.session.post(url, json=payload, timeout=self.timeout)
            elif method == "GET":
                r = self.session.get(
                    url,
                    params={"json": json.dumps(payload, separators=(",", ":"))},
                    timeout=self.timeout,
                )
            else:
                raise ValueError(f"Unsupported method: {method}")
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not r.ok:
            err = _service_error(r)
            logger.warning("%s %s -> %s", method, url, err)
            raise err

        try:
            return r.json()
        except ValueError as e:
            raise ResponseDecodingError(f"{method} {url} returned a non-JSON body") from e

    def trace_route(self, req: MapMatchingRequest, method: str = "POST") -> MapMatchingResponse:
        data = self.request("trace_route", req.to_payload(), method=method)
        return _parse(MapMatchingResponse, data)

    def route(self, req: RouteRequest, method: str = "POST") -> DirectionsResponse:
        data = self.request("route", req.to_payload(), method=method)
        return _parse(DirectionsResponse, data)

    def matrix(self, req: MatrixRequest, method: str = "POST") -> MatrixResponse:
        data = self.request("sources_to_targets", req.to_payload(), method=method)
        return _parse(MatrixResponse, data)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ValhallaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# Process-wide client, replaced via configure()
_shared: Optional[ValhallaClient] = None


def configure(server_url: str, **kwargs: Any) -> ValhallaClient:
    """Point the shared client at `server_url`. Raises ConfigurationError for a bad URL."""
    global _shared
    client = ValhallaClient(base_url=server_url, **kwargs)
    if _shared is not None:
        _shared.close()
    _shared = client
    return client


def shared() -> ValhallaClient:
    global _shared
    if _shared is None:
        _shared = ValhallaClient()
    return _shared
