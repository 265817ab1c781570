"""
Client for the Mixpanel data export API.

This module assembles, signs and dispatches export API requests. Results
are delivered to a callback with an ``(error, body)`` signature.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode, urlunsplit

from .constants import (
    CONFIG_ALIASES,
    DEFAULT_CONFIG,
    PARAM_SIGNATURE,
    SUPPORTED_PROTOCOLS,
)
from .endpoints import EndpointMethods
from .exceptions import ClientClosedError, ConfigurationError, TransportError
from .params import CallRequest, Callback, assemble
from .signing import format_value, sign
from .specification import lookup
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

# Accepted types of numeric configuration options
_NUMERIC_OPTIONS = {
    'expire': (int,),
    'timeout': (int, float),
    'max_workers': (int,),
}


class MixpanelExportClient(EndpointMethods):
    """
    Client for the Mixpanel data export API.

    The key and secret can be found in Mixpanel's project settings. Besides
    the generic ``request`` method, every endpoint has a convenience method
    named after its path (``events/properties/top`` -> ``events_properties_top``).

    Example:
        with MixpanelExportClient(key, secret) as client:
            client.funnels(12345, {'from_date': '2014-03-01'}, on_result)
    """

    def __init__(self, key: str, secret: str, transport: Optional[Transport] = None, **config):
        """
        Initialize the client.

        Args:
            key: Mixpanel API key
            secret: Mixpanel API secret, only ever used to sign requests
            transport: Transport used to perform requests, defaults to a
                RequestsTransport
            **config: Configuration options (domain, api_root, protocol,
                expire, timeout, max_workers)
        """
        if not key or not secret:
            raise ConfigurationError('Mixpanel export API requires a key and a secret to work.')

        self.key = key
        self._secret = secret

        config = {CONFIG_ALIASES.get(name, name): value for name, value in config.items()}
        self._validate_config(config)
        self.config = MappingProxyType({**DEFAULT_CONFIG, **config})

        self.transport = transport or RequestsTransport(timeout=self.config['timeout'])
        self.executor = ThreadPoolExecutor(
            max_workers=self.config['max_workers'],
            thread_name_prefix='mixpanel-export',
        )
        self.closed = False

    @staticmethod
    def _validate_config(config: Dict[str, Any]):
        """Validate configuration overrides."""
        unknown = sorted(set(config) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigurationError(f"Unknown configuration option(s): {', '.join(unknown)}")

        if config.get('protocol', DEFAULT_CONFIG['protocol']) not in SUPPORTED_PROTOCOLS:
            raise ConfigurationError(f"protocol must be one of {SUPPORTED_PROTOCOLS}")

        if not config.get('domain', DEFAULT_CONFIG['domain']):
            raise ConfigurationError("domain cannot be empty")

        for name, types in _NUMERIC_OPTIONS.items():
            value = config.get(name, DEFAULT_CONFIG[name])
            if isinstance(value, bool) or not isinstance(value, types):
                kind = 'an integer' if types == (int,) else 'a number'
                raise ConfigurationError(f"{name} must be {kind}, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive")

    def __repr__(self):
        return f"{self.__class__.__name__}(key={self.key!r}, domain={self.config['domain']!r})"

    def build_url(self, endpoint: str, parameters: Mapping[str, Any]) -> str:
        """Build the GET url of an endpoint for already signed parameters."""
        path = f"{self.config['api_root'].rstrip('/')}/{endpoint}"
        query = urlencode([(key, format_value(value)) for key, value in parameters.items()])
        return urlunsplit((self.config['protocol'], self.config['domain'], path, query, ''))

    def prepare(
        self,
        endpoint: str,
        required_values=(),
        options: Optional[Mapping[str, Any]] = None,
        now: Optional[float] = None,
    ) -> Tuple[str, Dict[str, Any]]:
        """
        Assemble and sign a request without sending it.

        Args:
            endpoint: Export API endpoint, e.g. "segmentation/average"
            required_values: Values of the endpoint's required arguments
            options: Extra query parameters
            now: Unix time the expiry is computed from, defaults to now

        Returns:
            Tuple of (url, signed parameters)

        Raises:
            UnsupportedEndpointError: If the endpoint is unknown
            MissingRequiredArgumentError: If the number of required values is wrong
        """
        parameters = assemble(
            endpoint,
            required_values,
            options,
            api_key=self.key,
            expire_seconds=self.config['expire'],
            now=now,
        )
        parameters[PARAM_SIGNATURE] = sign(parameters, self._secret)
        return self.build_url(endpoint, parameters), parameters

    def call(self, endpoint: str, call_request: CallRequest) -> Future:
        """
        Send a request to an export endpoint.

        Usage errors are raised before anything is sent. Transport errors are
        never raised; they are passed to the callback instead.

        Args:
            endpoint: Export API endpoint, e.g. "events/top"
            call_request: Required values, options and callback of the call

        Returns:
            Future resolving to the (error, body) pair given to the callback

        Raises:
            ClientClosedError: If the client was closed
            UnsupportedEndpointError: If the endpoint is unknown
            MissingCallbackError: If no callback was given
            MissingRequiredArgumentError: If the number of required values is wrong
        """
        self._check_open()
        lookup(endpoint)
        callback = call_request.require_callback()
        url, parameters = self.prepare(
            endpoint, call_request.required_values, call_request.options
        )

        logger.debug("Dispatching %s with parameters %s", endpoint, sorted(parameters))
        return self.executor.submit(self._dispatch, endpoint, url, callback)

    def _check_open(self):
        if self.closed:
            raise ClientClosedError("Cannot send requests on a closed client.")

    def _perform(self, endpoint: str, url: str):
        try:
            error, body = self.transport.perform(url)
        except Exception as e:
            logger.exception("Transport raised while requesting %s", endpoint)
            return TransportError(f"Transport failed: {e}"), None
        if error is not None:
            logger.warning("Request to %s failed: %s", endpoint, error)
        return error, body

    def _dispatch(self, endpoint: str, url: str, callback: Callback):
        error, body = self._perform(endpoint, url)
        callback(error, body)
        return error, body

    def request(self, endpoint: str, *args, options=None, callback=None) -> Future:
        """
        Produce a generic request to the export API.

        Positional arguments after the endpoint are the endpoint's required
        arguments, optionally followed by an options mapping and the
        callback, or options and callback can be given by keyword.

        Example:
            client.request(
                'funnels',
                12345,
                {'from_date': '2014-03-01', 'to_date': '2014-03-15'},
                lambda err, doc: print(err or doc),
            )
        """
        return self.call(endpoint, CallRequest.from_args(*args, options=options, callback=callback))

    def fetch(self, endpoint: str, *required_values, options=None) -> Any:
        """
        Send a request and wait for its decoded body.

        Raises:
            ClientClosedError: If the client was closed
            TransportError: If the request fails
        """
        self._check_open()
        url, _ = self.prepare(endpoint, required_values, options)
        error, body = self._perform(endpoint, url)
        if error is not None:
            raise error
        return body

    def close(self):
        """Wait for pending requests and close the transport."""
        if self.closed:
            return
        self.closed = True
        self.executor.shutdown(wait=True)
        self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def create(key: str, secret: str, **config) -> MixpanelExportClient:
    """Create a client, see MixpanelExportClient for the options."""
    return MixpanelExportClient(key, secret, **config)
