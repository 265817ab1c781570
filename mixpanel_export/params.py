"""
Assembly of export API request parameters.
"""

import time
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple

from .constants import (
    PARAM_API_KEY,
    PARAM_EXPIRE,
    PARAM_SIGNATURE,
    SYSTEM_PARAMETERS,
)
from .exceptions import MissingCallbackError, MissingRequiredArgumentError
from .specification import lookup

Callback = Callable[[Optional[Exception], Any], None]


class CallRequest(NamedTuple):
    """
    One call to an export endpoint.

    Attributes:
        required_values: Values of the endpoint's required arguments, in order
        options: Extra query parameters, or None
        callback: Called once with (error, body) when the request completes
    """
    required_values: Tuple[Any, ...]
    options: Optional[Mapping[str, Any]] = None
    callback: Optional[Callback] = None

    @classmethod
    def from_args(cls, *args, options=None, callback=None) -> 'CallRequest':
        """
        Build a request from positional arguments.

        Trailing arguments may carry the options and the callback, in the
        form ``(*required_values, options?, callback)``; a ``None`` in the
        options slot means no options. Keyword arguments take precedence
        over trailing ones.
        """
        values = list(args)
        if callback is None and values and callable(values[-1]):
            callback = values.pop()
        if options is None and values and (values[-1] is None or isinstance(values[-1], Mapping)):
            options = values.pop()
        return cls(tuple(values), options, callback)

    def require_callback(self) -> Callback:
        if self.callback is None or not callable(self.callback):
            raise MissingCallbackError('A callback is required.')
        return self.callback


def assemble(
    endpoint_name: str,
    required_values,
    options: Optional[Mapping[str, Any]],
    api_key: str,
    expire_seconds: int,
    now: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Merge everything sent with a request into one flat mapping.

    Later layers win on key collisions: api key, required arguments, caller
    options, then the system parameters and the expiry timestamp. Neither of
    the last two can be set through options; the expiry is always computed
    from ``now``.

    Args:
        endpoint_name: Export API endpoint, e.g. "events/top"
        required_values: Values matched positionally to the endpoint's
            required argument names
        options: Extra query parameters; None values are left out
        api_key: Mixpanel API key
        expire_seconds: Request validity from now, in seconds
        now: Current unix time, defaults to time.time()

    Returns:
        Parameter mapping without a signature

    Raises:
        UnsupportedEndpointError: If the endpoint is unknown
        MissingRequiredArgumentError: If the number of required values is wrong
    """
    endpoint = lookup(endpoint_name)
    required_values = tuple(required_values)

    if len(required_values) != len(endpoint.required):
        raise MissingRequiredArgumentError(
            f'Endpoint "{endpoint.name}" expects {len(endpoint.required)} required '
            f'argument(s) {list(endpoint.required)}, got {len(required_values)}.'
        )

    if now is None:
        now = time.time()

    parameters = {PARAM_API_KEY: api_key}
    parameters.update(zip(endpoint.required, required_values))
    for key, value in (options or {}).items():
        if value is not None and key != PARAM_SIGNATURE:
            parameters[key] = value
    parameters.update(SYSTEM_PARAMETERS)
    parameters[PARAM_EXPIRE] = int(now) + expire_seconds

    return parameters
