"""Error taxonomy for the brewery/weather search."""


class BrewcastError(Exception):
    """Base class for every error the CLI reports to the user."""


class InputError(BrewcastError):
    """Raised when an interactive prompt fails or is aborted."""


class NotFoundError(BrewcastError):
    """Raised when a state name or code cannot be resolved."""


class DataFormatError(BrewcastError):
    """Raised when an upstream payload is missing required fields."""


class UpstreamLookupError(BrewcastError):
    """Raised when an upstream HTTP lookup fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GeographyLookupError(UpstreamLookupError):
    pass


class BreweryLookupError(UpstreamLookupError):
    pass


class WeatherLookupError(UpstreamLookupError):
    pass


class FileWriteError(BrewcastError):
    """Raised when a debug dump or results page cannot be written."""
