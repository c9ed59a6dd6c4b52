"""
ringdecode — декодер буфера ring settlement.

Превращает плоский байтовый буфер от off-chain relayer'а в mining
метаданные, упорядоченные ордера и кольца ордеров.
"""

from ringdecode.codec import DeserializerConfig, ExchangeDeserializer, deserialize
from ringdecode.core.domain import DecodeResult, Mining, Order, Ring

__all__ = [
    "DeserializerConfig",
    "ExchangeDeserializer",
    "deserialize",
    "DecodeResult",
    "Mining",
    "Order",
    "Ring",
]
