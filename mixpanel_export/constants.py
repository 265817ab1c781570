"""
Constants for the Mixpanel export client library.
"""

# Default configuration values, overridable at construction time
DEFAULT_CONFIG = {
    'domain': 'mixpanel.com',
    'api_root': '/api/2.0',
    'protocol': 'https',
    'expire': 60,       # request validity in seconds
    'timeout': 30,      # HTTP timeout in seconds
    'max_workers': 4,   # threads dispatching requests
}

# Alternate spellings accepted for configuration keys
CONFIG_ALIASES = {
    'apiRoot': 'api_root',
}

# Parameters the client always sends; callers cannot override them
SYSTEM_PARAMETERS = {
    'format': 'json',
}

SUPPORTED_PROTOCOLS = ('http', 'https')

# Query string keys
PARAM_API_KEY = 'api_key'
PARAM_EXPIRE = 'expire'
PARAM_SIGNATURE = 'sig'
