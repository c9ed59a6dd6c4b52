"""
Domain models and value objects.

Contains the decoded entities: Mining, Order, Ring, DecodeResult.
"""

from ringdecode.core.domain.mining import Mining
from ringdecode.core.domain.order import OPTIONAL_FIELD_NAMES, Order
from ringdecode.core.domain.result import DecodeResult, Ring
from ringdecode.core.domain.types import ADDRESS_PATTERN, Address, Uint256

__all__ = [
    # Types
    "ADDRESS_PATTERN",
    "Address",
    "Uint256",
    # Models
    "Mining",
    "Order",
    "OPTIONAL_FIELD_NAMES",
    "Ring",
    "DecodeResult",
]
