"""
ExchangeDeserializer — оркестратор декодирования буфера settlement

Один проход без возвратов:
    header → mining → orders → rings → проверка пулов → (опционально) контракт результата

Экземпляр хранит только конфигурацию. Курсоры пулов создаются заново в
каждом вызове deserialize(), поэтому один экземпляр можно использовать
повторно и из нескольких потоков одновременно.
"""

import logging
from typing import Optional, Union

from jsonschema import ValidationError

from ringdecode.codec.bitstream import Bitstream, BufferLike
from ringdecode.codec.config import DeserializerConfig
from ringdecode.codec.errors import ContractViolationError
from ringdecode.codec.header import parse_header
from ringdecode.codec.mining_decoder import decode_mining
from ringdecode.codec.order_decoder import decode_orders
from ringdecode.codec.ring_assembler import assemble_rings
from ringdecode.core.contracts import validate_decode_result
from ringdecode.core.domain.result import DecodeResult

logger = logging.getLogger(__name__)


class ExchangeDeserializer:
    """Декодирование буфера в (Mining, Orders, Rings)."""

    def __init__(self, config: Optional[DeserializerConfig] = None):
        """
        Args:
            config: Конфигурация (default: DeserializerConfig())
        """
        self.config = config or DeserializerConfig()

    def deserialize(self, data: Union[BufferLike, Bitstream]) -> DecodeResult:
        """
        Декодирование одного буфера.

        Args:
            data: bytes / bytearray / memoryview, hex-строка или Bitstream

        Returns:
            DecodeResult (mining, orders, rings)

        Raises:
            DeserializationError: Любое структурное несоответствие; частичного
                результата нет
        """
        bitstream = Bitstream.coerce(data)
        header = parse_header(bitstream)
        ctx = header.new_context()

        mining = decode_mining(header.mining_spec, ctx)
        orders = decode_orders(header.order_specs, ctx)
        rings, orders = assemble_rings(header.ring_specs, orders)
        ctx.ensure_exhausted()

        result = DecodeResult(mining=mining, orders=tuple(orders), rings=tuple(rings))
        if self.config.validate_contract:
            try:
                validate_decode_result(result.model_dump(mode="json"))
            except ValidationError as e:
                raise ContractViolationError(e.message) from e

        logger.debug(
            "Decoded %d bytes: %d orders, %d rings", bitstream.length, len(orders), len(rings)
        )
        return result


def deserialize(
    data: Union[BufferLike, Bitstream], config: Optional[DeserializerConfig] = None
) -> DecodeResult:
    """
    Декодирование буфера с конфигурацией по умолчанию.

    Raises:
        DeserializationError: См. ExchangeDeserializer.deserialize
    """
    return ExchangeDeserializer(config).deserialize(data)
