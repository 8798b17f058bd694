GENERIC_FETCH_ERROR = "Failed to fetch weather data"


class WeatherServiceException(Exception):
    """Base exception for weather service."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExternalAPIException(WeatherServiceException):
    """Raised when the weather provider cannot be reached or its reply cannot be read."""

    def __init__(self, message: str = GENERIC_FETCH_ERROR):
        super().__init__(message)


class ProviderErrorException(ExternalAPIException):
    """Raised when the weather provider answers with an error message of its own."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class ValidationError(WeatherServiceException):
    """Raised when validation fails."""
