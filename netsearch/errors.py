"""Exception types raised by netsearch components."""


class NetSearchError(Exception):
    """Base class for netsearch failures."""


class ProviderError(NetSearchError):
    """Raised when a single search provider fails to produce results."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider} search failed: {message}")
        self.provider = provider


class FetchError(NetSearchError):
    """Raised when a result page cannot be loaded or read."""


class WeatherError(NetSearchError):
    """Raised when the forecast endpoint cannot be queried."""


class InvalidResponseShape(WeatherError):
    """Raised when the forecast response lacks ``data.forecast``."""


class CascadeError(NetSearchError):
    """Raised when the general search path fails as a whole."""
