"""
Per-endpoint convenience methods.

Each method forwards to ``request`` with its endpoint name prepended, e.g.
``client.events_top({'type': 'general'}, callback)`` is
``client.request('events/top', {'type': 'general'}, callback)``.
The method names are the endpoint paths with slashes replaced by
underscores; tests check they stay in sync with ``ENDPOINTS``.
"""


class EndpointMethods:
    """Mixin adding one method per export API endpoint."""

    def annotations(self, *args, options=None, callback=None):
        """Call annotations; required arguments: from_date, to_date."""
        return self.request('annotations', *args, options=options, callback=callback)

    def engage(self, *args, options=None, callback=None):
        """Call engage; no required arguments."""
        return self.request('engage', *args, options=options, callback=callback)

    def events(self, *args, options=None, callback=None):
        """Call events; required arguments: event, type, unit, interval."""
        return self.request('events', *args, options=options, callback=callback)

    def events_top(self, *args, options=None, callback=None):
        """Call events/top; no required arguments."""
        return self.request('events/top', *args, options=options, callback=callback)

    def events_names(self, *args, options=None, callback=None):
        """Call events/names; required arguments: type."""
        return self.request('events/names', *args, options=options, callback=callback)

    def events_properties(self, *args, options=None, callback=None):
        """Call events/properties; required arguments: event, name, type, unit, interval."""
        return self.request('events/properties', *args, options=options, callback=callback)

    def events_properties_top(self, *args, options=None, callback=None):
        """Call events/properties/top; required arguments: event."""
        return self.request('events/properties/top', *args, options=options, callback=callback)

    def events_properties_values(self, *args, options=None, callback=None):
        """Call events/properties/values; required arguments: event, name."""
        return self.request('events/properties/values', *args, options=options, callback=callback)

    def funnels(self, *args, options=None, callback=None):
        """Call funnels; required arguments: funnel_id."""
        return self.request('funnels', *args, options=options, callback=callback)

    def funnels_list(self, *args, options=None, callback=None):
        """Call funnels/list; no required arguments."""
        return self.request('funnels/list', *args, options=options, callback=callback)

    def retention(self, *args, options=None, callback=None):
        """Call retention; required arguments: from_date, to_date."""
        return self.request('retention', *args, options=options, callback=callback)

    def segmentation(self, *args, options=None, callback=None):
        """Call segmentation; required arguments: event, from_date, to_date."""
        return self.request('segmentation', *args, options=options, callback=callback)

    def segmentation_numeric(self, *args, options=None, callback=None):
        """Call segmentation/numeric; required arguments: event, from_date, to_date, on, buckets."""
        return self.request('segmentation/numeric', *args, options=options, callback=callback)

    def segmentation_sum(self, *args, options=None, callback=None):
        """Call segmentation/sum; required arguments: event, from_date, to_date, on."""
        return self.request('segmentation/sum', *args, options=options, callback=callback)

    def segmentation_average(self, *args, options=None, callback=None):
        """Call segmentation/average; required arguments: event, from_date, to_date, on."""
        return self.request('segmentation/average', *args, options=options, callback=callback)
