"""
Mixpanel Data Export API client

A Python client library that signs and sends requests to the Mixpanel data
export API, delivering results to an (error, body) callback.

Example usage:
    from mixpanel_export import MixpanelExportClient

    client = MixpanelExportClient("api-key", "api-secret")
    client.events_top({"type": "general"}, lambda err, body: print(err or body))
"""

from .client import MixpanelExportClient, create
from .exceptions import (
    MixpanelExportError,
    ConfigurationError,
    UnsupportedEndpointError,
    MissingCallbackError,
    MissingRequiredArgumentError,
    TransportError,
    ClientClosedError
)
from .params import CallRequest, assemble
from .signing import sign
from .specification import ENDPOINTS, Endpoint
from .transport import RequestsTransport, Transport
from .constants import (
    DEFAULT_CONFIG,
    SYSTEM_PARAMETERS
)

__version__ = "1.0.0"
__all__ = [
    "MixpanelExportClient",
    "create",
    "MixpanelExportError",
    "ConfigurationError",
    "UnsupportedEndpointError",
    "MissingCallbackError",
    "MissingRequiredArgumentError",
    "TransportError",
    "ClientClosedError",
    "CallRequest",
    "assemble",
    "sign",
    "ENDPOINTS",
    "Endpoint",
    "RequestsTransport",
    "Transport",
    "DEFAULT_CONFIG",
    "SYSTEM_PARAMETERS"
]
