"""
Core math modules для ringdecode

Границы uint256 и явное сужение больших целых.
"""

from ringdecode.core.math.uint import (
    MAX_SAFE_INTEGER,
    UINT64_MAX,
    UINT256_MAX,
    UintNarrowingError,
    narrow_uint,
    to_safe_integer,
    validate_uint256,
)

__all__ = [
    # Constants
    "MAX_SAFE_INTEGER",
    "UINT64_MAX",
    "UINT256_MAX",
    # Exceptions
    "UintNarrowingError",
    # Functions
    "narrow_uint",
    "to_safe_integer",
    "validate_uint256",
]
