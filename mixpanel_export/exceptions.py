"""
Custom exceptions for the Mixpanel export client library.
"""


class MixpanelExportError(Exception):
    """Base exception for Mixpanel export client errors."""
    pass


class ConfigurationError(MixpanelExportError):
    """Raised when the client is constructed without credentials or with invalid config."""
    pass


class UnsupportedEndpointError(MixpanelExportError):
    """Raised when an endpoint is not part of the export API."""

    def __init__(self, endpoint: str):
        super().__init__(
            f'The end-point "{endpoint}" is not supported by the mixpanel export api.'
        )
        self.endpoint = endpoint


class MissingCallbackError(MixpanelExportError):
    """Raised when a request is made without a callback."""
    pass


class MissingRequiredArgumentError(MixpanelExportError):
    """Raised when the number of required arguments does not match the endpoint."""
    pass


class TransportError(MixpanelExportError):
    """Raised (or delivered to the callback) when the HTTP request fails."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ClientClosedError(MixpanelExportError):
    """Raised when a request is made on a closed client."""
    pass
