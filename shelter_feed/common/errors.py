"""Domain errors and failure typing."""


class ShelterFeedError(Exception):
    """Base class for shelter feed failures."""

    error_code = "SHELTER_FEED_ERROR"


class ConfigError(ShelterFeedError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class FetchError(ShelterFeedError):
    """Raised when the transport call fails or returns a non-success status."""

    error_code = "FETCH_ERROR"


class ParseError(ShelterFeedError):
    """Raised when the response body is not valid JSON."""

    error_code = "PARSE_ERROR"


class InvalidFormatError(ShelterFeedError):
    """Raised when the parsed payload is not a feature collection."""

    error_code = "INVALID_FORMAT"
