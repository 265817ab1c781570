#!/usr/bin/env python3
"""
Basic usage examples for the Mixpanel export client library.

Reads the API credentials from MIXPANEL_API_KEY and MIXPANEL_API_SECRET and
runs a few export requests against the project.
"""

import datetime
import logging
import os
import sys

from mixpanel_export import MixpanelExportClient, MixpanelExportError


def print_result(label):
    """Build a callback printing the outcome of a request."""
    def callback(err, body):
        if err is not None:
            print(f"   ✗ {label} failed: {err}")
        else:
            print(f"   ✓ {label}: {body}")
    return callback


def main(key, secret):
    """Run basic usage examples."""

    print("=== Mixpanel Export Client Usage Examples ===\n")

    today = datetime.date.today()
    week_ago = today - datetime.timedelta(days=7)

    try:
        with MixpanelExportClient(key, secret) as client:
            print(f"1. Client created for: {client.config['domain']}{client.config['api_root']}\n")

            # Example 1: Signed URL without sending it
            print("2. Preparing a signed request...")
            url, parameters = client.prepare("events/top", (), {"type": "general"})
            print(f"   URL: {url}")
            print(f"   Signature: {parameters['sig']}\n")

            # Example 2: Generic request with options and callback
            print("3. Top events (generic request)...")
            client.request("events/top", {"type": "general", "limit": 5}, print_result("events/top")).result()
            print()

            # Example 3: Vanity method with required arguments
            print("4. Event names (vanity method)...")
            client.events_names("general", print_result("events/names")).result()
            print()

            # Example 4: Synchronous fetch
            print("5. Retention over the last week (fetch)...")
            body = client.fetch("retention", week_ago.isoformat(), today.isoformat(), options={"unit": "day"})
            print(f"   ✓ {len(body)} cohort(s)\n")

            # Example 5: Usage errors are raised immediately
            print("6. Demonstrating error handling...")
            try:
                client.request("not/an/endpoint", print_result("invalid"))
            except MixpanelExportError as e:
                print(f"   ✓ Rejected before sending: {e}")
            try:
                client.funnels(print_result("funnels"))
            except MixpanelExportError as e:
                print(f"   ✓ Rejected before sending: {e}")
            print()

        print("=== All Examples Completed Successfully! ===")

    except MixpanelExportError as e:
        print(f"Mixpanel Export Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    api_key = os.environ.get("MIXPANEL_API_KEY")
    api_secret = os.environ.get("MIXPANEL_API_SECRET")
    if not api_key or not api_secret:
        print("Set MIXPANEL_API_KEY and MIXPANEL_API_SECRET first.")
        sys.exit(1)

    main(api_key, api_secret)
