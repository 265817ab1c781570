"""
Request signing for the Mixpanel data export API.

Mixpanel signs a request by:

1) Encoding every query parameter (except the signature) as "{key}={value}".
2) Sorting the encoded pairs in ascending order. The pairs are sorted as
   whole strings, not by key.
3) Concatenating the sorted pairs with no separator and appending the
   API secret.
4) Calculating the MD5 digest of the result and encoding it in hexadecimal.
"""

import hashlib
import json
from typing import Any, Mapping

from .constants import PARAM_SIGNATURE


def format_value(value: Any) -> str:
    """
    Render a parameter value the way it appears in the query string.

    The same rendering is used for signing and for building the URL, so the
    server recomputes the exact string that was signed.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(',', ':'))
    return str(value)


def canonical_string(parameters: Mapping[str, Any]) -> str:
    """Join the sorted "key=value" pairs of ``parameters``."""
    pairs = [f"{key}={format_value(value)}" for key, value in parameters.items()]
    return ''.join(sorted(pairs))


def sign(parameters: Mapping[str, Any], secret: str) -> str:
    """
    Compute the signature of a set of request parameters.

    Args:
        parameters: Query parameters, without a signature
        secret: Mixpanel API secret

    Returns:
        Lowercase hex MD5 digest (32 characters)

    Raises:
        ValueError: If parameters already contain a signature
    """
    if PARAM_SIGNATURE in parameters:
        raise ValueError(f"parameters must not contain '{PARAM_SIGNATURE}' before signing")

    md5 = hashlib.md5()
    md5.update((canonical_string(parameters) + secret).encode('utf-8'))
    return md5.hexdigest()
