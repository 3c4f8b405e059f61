"""Application constants."""

USER_AGENT = "shelter-feed/0.1 (+public shelter data; contact: configured-email)"

SOURCE_NAME = "FEMA / ARC (National Shelter System)"
ARCGIS_SHELTERS_URL = "https://gis.fema.gov/arcgis/rest/services/NSS/OpenShelters/FeatureServer/0/query"
ARCGIS_SHELTERS_PARAMS = {
    "where": "1=1",
    "outFields": "*",
    "returnGeometry": "true",
    "f": "geojson",
}

DEFAULT_CONFIG_PATH = "./config/shelter_feed.yml"
DEFAULT_SHELTER_NAME = "Unknown Shelter"
SHELTER_STATUSES = ("OPEN", "CLOSED", "UNKNOWN")
UNKNOWN_STATUS = "UNKNOWN"

EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
