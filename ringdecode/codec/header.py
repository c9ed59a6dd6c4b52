"""
Header interpreter — разбор заголовка и извлечение пулов

Порядок регионов буфера:
    encode specs → mining spec → order specs → ring specs →
    address pool → uint pool → bytes pool

Все смещения вычисляются из счётчиков EncodeSpec; любое чтение за концом
буфера → TruncatedBufferError.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ringdecode.codec.bitstream import ADDRESS_WIDTH, UINT_WIDTH, Bitstream
from ringdecode.codec.errors import TrailingDataError
from ringdecode.codec.pools import DecodeContext
from ringdecode.codec.specs import EncodeSpec, MiningSpec, OrderSpec, ParticipationSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderLayout:
    """Абсолютные смещения регионов буфера."""

    mining_spec_offset: int
    order_specs_offset: int
    ring_specs_offset: int
    address_list_offset: int
    uint_list_offset: int
    bytes_list_offset: int
    end_offset: int


@dataclass(frozen=True)
class Header:
    """Результат разбора заголовка."""

    encode_spec: EncodeSpec
    mining_spec: MiningSpec
    order_specs: Tuple[OrderSpec, ...]
    ring_specs: Tuple[Tuple[ParticipationSpec, ...], ...]
    address_list: Tuple[str, ...]
    uint_list: Tuple[int, ...]
    bytes_list: Tuple[bytes, ...]
    layout: HeaderLayout

    def new_context(self) -> DecodeContext:
        """Свежие курсоры для одного прохода декодирования."""
        return DecodeContext(self.address_list, self.uint_list, self.bytes_list)


def parse_header(bitstream: Bitstream) -> Header:
    """
    Разбор заголовка и копирование трёх пулов.

    Args:
        bitstream: Буфер целиком

    Returns:
        Header со specs, пулами и смещениями

    Raises:
        TruncatedBufferError: Буфер короче объявленного
        MalformedHeaderError: Счётчики противоречивы
        TrailingDataError: Лишние байты после конца bytes pool
    """
    encode_specs_len = bitstream.extract_uint16(0)
    offset = 2
    encode_spec = EncodeSpec(bitstream.copy_to_uint16_array(offset, encode_specs_len))
    offset += 2 * encode_specs_len

    mining_spec_offset = offset
    mining_spec = MiningSpec(bitstream.extract_uint16(offset))
    offset += 2

    order_specs_offset = offset
    order_count = encode_spec.order_spec_size()
    order_specs = tuple(OrderSpec(w) for w in bitstream.copy_to_uint16_array(offset, order_count))
    offset += 2 * order_count

    ring_specs_offset = offset
    ring_specs = tuple(
        tuple(ParticipationSpec(b) for b in ring)
        for ring in bitstream.copy_to_uint8_array_list(offset, encode_spec.ring_spec_size_array())
    )
    offset += encode_spec.ring_specs_data_len()

    address_list_offset = offset
    address_list = bitstream.copy_to_address_array(offset, encode_spec.address_list_size())
    offset += ADDRESS_WIDTH * encode_spec.address_list_size()

    uint_list_offset = offset
    uint_list = bitstream.copy_to_uint_array(offset, encode_spec.uint_list_size())
    offset += UINT_WIDTH * encode_spec.uint_list_size()

    bytes_list_offset = offset
    bytes_sizes = encode_spec.bytes_list_size_array()
    bytes_list: List[bytes] = bitstream.copy_to_bytes_array(offset, bytes_sizes)
    offset += sum(bytes_sizes)

    if offset != bitstream.length:
        raise TrailingDataError(offset, bitstream.length)

    logger.debug(
        "Header parsed: %d orders, %d rings, pools addr=%d uint=%d bytes=%d",
        order_count,
        len(ring_specs),
        len(address_list),
        len(uint_list),
        len(bytes_list),
    )

    return Header(
        encode_spec=encode_spec,
        mining_spec=mining_spec,
        order_specs=order_specs,
        ring_specs=ring_specs,
        address_list=tuple(address_list),
        uint_list=tuple(uint_list),
        bytes_list=tuple(bytes_list),
        layout=HeaderLayout(
            mining_spec_offset=mining_spec_offset,
            order_specs_offset=order_specs_offset,
            ring_specs_offset=ring_specs_offset,
            address_list_offset=address_list_offset,
            uint_list_offset=uint_list_offset,
            bytes_list_offset=bytes_list_offset,
            end_offset=offset,
        ),
    )
