"""
Endpoints supported by the Mixpanel data export API.

Each endpoint lists the parameters it requires, in the order callers pass
them positionally. Every other parameter documented by Mixpanel can be sent
through the ``options`` mapping of a request.

See https://mixpanel.com/docs/api-documentation/data-export-api
"""

from typing import NamedTuple, Tuple

from .exceptions import UnsupportedEndpointError


class Endpoint(NamedTuple):
    """An export API endpoint and its ordered required argument names."""
    name: str
    required: Tuple[str, ...]

    @property
    def method_name(self) -> str:
        return method_name(self.name)


ENDPOINTS: Tuple[Endpoint, ...] = (
    Endpoint('annotations', ('from_date', 'to_date')),
    Endpoint('engage', ()),
    Endpoint('events', ('event', 'type', 'unit', 'interval')),
    Endpoint('events/top', ()),
    Endpoint('events/names', ('type',)),
    Endpoint('events/properties', ('event', 'name', 'type', 'unit', 'interval')),
    Endpoint('events/properties/top', ('event',)),
    Endpoint('events/properties/values', ('event', 'name')),
    Endpoint('funnels', ('funnel_id',)),
    Endpoint('funnels/list', ()),
    Endpoint('retention', ('from_date', 'to_date')),
    Endpoint('segmentation', ('event', 'from_date', 'to_date')),
    Endpoint('segmentation/numeric', ('event', 'from_date', 'to_date', 'on', 'buckets')),
    Endpoint('segmentation/sum', ('event', 'from_date', 'to_date', 'on')),
    Endpoint('segmentation/average', ('event', 'from_date', 'to_date', 'on')),
)

_BY_NAME = {endpoint.name: endpoint for endpoint in ENDPOINTS}


def method_name(endpoint_name: str) -> str:
    """Convert an endpoint path into a method name (events/top -> events_top)."""
    return endpoint_name.replace('/', '_')


def lookup(endpoint_name: str) -> Endpoint:
    """
    Find an endpoint by name.

    Raises:
        UnsupportedEndpointError: If the endpoint is not in ENDPOINTS
    """
    try:
        return _BY_NAME[endpoint_name]
    except (KeyError, TypeError):
        raise UnsupportedEndpointError(endpoint_name) from None
