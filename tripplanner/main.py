# tripplanner/main.py
import logging
from contextlib import asynccontextmanager
from typing import Literal

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .aggregator import ResultAggregator, build_aggregator
from .config import Settings, get_settings
from .errors import InvalidDestination, TransportFailure, TripPlannerError
from .models import Intent, SearchResultBundle
from .providers import EncyclopediaClient, PhotoClient, WeatherClient
from .resolver import DestinationResolver
from .transport import Transport

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


_transport: Transport | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _transport
    yield
    if _transport is not None:
        _transport.close()
        _transport = None


app = FastAPI(
    title="TripPlanner Relay",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],     # tighten in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_transport(settings: Settings = Depends(get_settings)) -> Transport:
    global _transport
    if _transport is None:
        _transport = Transport(timeout=settings.http_timeout, user_agent=settings.user_agent)
    return _transport


def get_weather_client(
    settings: Settings = Depends(get_settings),
    transport: Transport = Depends(get_transport),
) -> WeatherClient:
    return WeatherClient(settings, transport)


def get_photo_client(
    settings: Settings = Depends(get_settings),
    transport: Transport = Depends(get_transport),
) -> PhotoClient:
    return PhotoClient(settings, transport)


def get_resolver(
    settings: Settings = Depends(get_settings),
    transport: Transport = Depends(get_transport),
) -> DestinationResolver:
    return DestinationResolver(EncyclopediaClient(settings, transport))


def get_aggregator(
    settings: Settings = Depends(get_settings),
    transport: Transport = Depends(get_transport),
) -> ResultAggregator:
    return build_aggregator(settings, transport)


def require_destination(destination: str = Query(..., max_length=200)) -> str:
    destination = destination.strip()
    if not destination:
        raise InvalidDestination("Please enter a destination to search for.")
    return destination


@app.exception_handler(TripPlannerError)
async def trip_planner_error_handler(request: Request, exc: TripPlannerError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def relay_failure(exc: TransportFailure, what: str) -> JSONResponse:
    logger.error("Error fetching %s: %s", what, exc)
    return JSONResponse(status_code=500, content={"message": f"Failed to fetch {what}."})


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/weather")
async def weather_endpoint(
    destination: str = Depends(require_destination),
    client: WeatherClient = Depends(get_weather_client),
):
    try:
        resp = await client.fetch_raw(destination)
    except TransportFailure as exc:
        return relay_failure(exc, "weather data")
    return JSONResponse(status_code=resp.status, content=resp.body)


@app.get("/photos")
async def photos_endpoint(
    destination: str = Depends(require_destination),
    type: Literal["general", "attractions"] = "general",
    client: PhotoClient = Depends(get_photo_client),
):
    try:
        resp = await client.fetch_raw(destination, Intent(type))
    except TransportFailure as exc:
        return relay_failure(exc, "photos data")
    return JSONResponse(status_code=resp.status, content=resp.body)


@app.get("/destination-info")
async def destination_info_endpoint(
    destination: str = Depends(require_destination),
    resolver: DestinationResolver = Depends(get_resolver),
):
    try:
        resolution = await resolver.lookup(destination)
    except TransportFailure as exc:
        return relay_failure(exc, "destination information")
    return resolution.body


@app.get("/search", response_model=SearchResultBundle)
async def search_endpoint(
    destination: str = Depends(require_destination),
    intent: Intent = Intent.GENERAL,
    aggregator: ResultAggregator = Depends(get_aggregator),
):
    return await aggregator.search(destination, intent)
