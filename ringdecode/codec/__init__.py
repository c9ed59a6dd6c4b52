"""Codec — декодирование буфера settlement в mining, ордера и кольца.

Компоненты (от листьев):
- bitstream: чтение примитивов по абсолютным смещениям
- specs: флаговые слова и таблицы флаг → поле → пул
- pools: per-call курсоры пулов
- header: разбор заголовка и пулов
- mining_decoder / order_decoder / ring_assembler: этапы декодирования
- deserializer: оркестратор
"""

from .bitstream import ADDRESS_WIDTH, UINT_WIDTH, Bitstream
from .config import DeserializerConfig
from .deserializer import ExchangeDeserializer, deserialize
from .errors import (
    BadRingSizeError,
    ContractViolationError,
    DeserializationError,
    MalformedHeaderError,
    OrderIndexError,
    PoolExhaustedError,
    PoolNotExhaustedError,
    TrailingDataError,
    TruncatedBufferError,
)
from .header import Header, HeaderLayout, parse_header
from .pools import DecodeContext, PoolCursor, PoolUsage
from .specs import (
    ALL_OR_NONE_BIT,
    MAX_RING_SIZE,
    MIN_RING_SIZE,
    MINING_FIELDS,
    ORDER_FIELDS,
    ORDER_MANDATORY_FIELDS,
    EncodeSpec,
    FieldSpec,
    MiningSpec,
    OrderSpec,
    ParticipationSpec,
    PoolKind,
)

__all__ = [
    "ADDRESS_WIDTH",
    "UINT_WIDTH",
    "Bitstream",
    "DeserializerConfig",
    "ExchangeDeserializer",
    "deserialize",
    # Errors
    "DeserializationError",
    "MalformedHeaderError",
    "TruncatedBufferError",
    "TrailingDataError",
    "PoolExhaustedError",
    "PoolNotExhaustedError",
    "BadRingSizeError",
    "OrderIndexError",
    "ContractViolationError",
    # Header
    "Header",
    "HeaderLayout",
    "parse_header",
    # Pools
    "DecodeContext",
    "PoolCursor",
    "PoolUsage",
    # Specs
    "ALL_OR_NONE_BIT",
    "MAX_RING_SIZE",
    "MIN_RING_SIZE",
    "MINING_FIELDS",
    "ORDER_FIELDS",
    "ORDER_MANDATORY_FIELDS",
    "EncodeSpec",
    "FieldSpec",
    "MiningSpec",
    "OrderSpec",
    "ParticipationSpec",
    "PoolKind",
]
