class FridgewiseError(Exception):
    """Base class for errors raised by the backend."""


class ConfigurationError(FridgewiseError):
    """Missing API key, credentials or other startup configuration."""


class TemplateNotFoundError(ConfigurationError):
    """A prompt template file does not exist at its expected location."""

    def __init__(self, path: str):
        super().__init__(f"prompt template not found at {path}")
        self.path = path


class TemplateMarkerError(ConfigurationError):
    """A template's markers do not match the set the caller expects."""


class VendorTimeoutError(FridgewiseError):
    """An external call did not finish before its deadline."""

    def __init__(self, what: str, timeout: float):
        super().__init__(f"{what} timed out after {timeout:g}s")
        self.what = what
        self.timeout = timeout
