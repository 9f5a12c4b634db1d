"""Constants for the TransportAPI adapter.

API Documentation: https://developer.transportapi.com/
Every request carries ``app_id`` and ``app_key`` query parameters.
"""

TRANSPORT_API_BASE_URL = "https://transportapi.com/v3/uk"
PLACES_PATH = "/places.json"  # GET /places.json?type=...&lat=...&lon=...
BUS_STOP_LIVE_PATH = "/bus/stop/{atco_code}/live.json"
TRAIN_STATION_LIVE_PATH = "/train/station/{crs_code}/live.json"

DEFAULT_TIMEOUT_SECONDS = 10.0
API_NAME = "Transport API"
