"""
memocache Global Constants

Centralized location for constants shared by cache stores and the
memoization layer.
"""

import time

# Expiry sentinel: a payload with this expire_at never expires.
# Not a number, so no finite timestamp can be mistaken for it
NEVER_EXPIRES = None

# Prefix of every default memoization key
DEFAULT_KEY_PREFIX = "cache"


# Timestamp Functions
def get_current_timestamp() -> float:
    """Get current timestamp in seconds since the epoch.

    Returns:
        float: Current UNIX timestamp

    Note: Stores accept an injectable clock; this is the default one.
    """
    return time.time()

