"""
Bitstream — примитив чтения буфера по абсолютным смещениям

Извлекает из неизменяемого буфера:
- uint8 / uint16 (big-endian)
- адреса (20 байт) в виде '0x' + 40 hex
- большие целые (32 байта, big-endian) как int без потери точности
- байтовые blobs заданной длины

Каждое чтение проверяет границы и выбрасывает TruncatedBufferError,
никогда не дополняя буфер нулями.
"""

import struct
from typing import Final, List, Sequence, Union

from ringdecode.codec.errors import MalformedHeaderError, TruncatedBufferError

ADDRESS_WIDTH: Final[int] = 20
UINT_WIDTH: Final[int] = 32

BufferLike = Union[bytes, bytearray, memoryview, str]

_UINT16 = struct.Struct(">H")


class Bitstream:
    """Read-only обёртка над буфером с проверкой границ."""

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        self._data = bytes(data)

    @classmethod
    def from_hex(cls, text: str) -> "Bitstream":
        """
        Создание из hex-строки (с префиксом '0x' или без).

        Raises:
            MalformedHeaderError: Если строка не является корректным hex
        """
        body = text.strip()
        if body[:2] in ("0x", "0X"):
            body = body[2:]
        try:
            return cls(bytes.fromhex(body))
        except ValueError as e:
            raise MalformedHeaderError(f"buffer is not valid hex: {e}") from e

    @classmethod
    def coerce(cls, data: Union[BufferLike, "Bitstream"]) -> "Bitstream":
        if isinstance(data, Bitstream):
            return data
        if isinstance(data, str):
            return cls.from_hex(data)
        if isinstance(data, (bytes, bytearray, memoryview)):
            return cls(data)
        raise TypeError(f"unsupported buffer type: {type(data).__name__}")

    @property
    def length(self) -> int:
        return len(self._data)

    def _slice(self, offset: int, width: int) -> bytes:
        if offset < 0 or width < 0 or offset + width > len(self._data):
            raise TruncatedBufferError(offset, width, len(self._data))
        return self._data[offset : offset + width]

    # =========================================================================
    # SCALARS
    # =========================================================================

    def extract_uint8(self, offset: int) -> int:
        return self._slice(offset, 1)[0]

    def extract_uint16(self, offset: int) -> int:
        return _UINT16.unpack(self._slice(offset, 2))[0]

    def extract_uint(self, offset: int) -> int:
        """32-байтовое беззнаковое целое (uint256)."""
        return int.from_bytes(self._slice(offset, UINT_WIDTH), "big")

    def extract_address(self, offset: int) -> str:
        return "0x" + self._slice(offset, ADDRESS_WIDTH).hex()

    def extract_bytes(self, offset: int, length: int) -> bytes:
        return self._slice(offset, length)

    # =========================================================================
    # ARRAYS
    # =========================================================================

    def copy_to_uint16_array(self, offset: int, count: int) -> List[int]:
        raw = self._slice(offset, 2 * count)
        return list(struct.unpack(f">{count}H", raw))

    def copy_to_uint8_array_list(self, offset: int, sizes: Sequence[int]) -> List[List[int]]:
        """Последовательные списки uint8, длина каждого из sizes."""
        result = []
        for size in sizes:
            result.append(list(self._slice(offset, size)))
            offset += size
        return result

    def copy_to_address_array(self, offset: int, count: int) -> List[str]:
        self._slice(offset, ADDRESS_WIDTH * count)
        return [self.extract_address(offset + ADDRESS_WIDTH * i) for i in range(count)]

    def copy_to_uint_array(self, offset: int, count: int) -> List[int]:
        self._slice(offset, UINT_WIDTH * count)
        return [self.extract_uint(offset + UINT_WIDTH * i) for i in range(count)]

    def copy_to_bytes_array(self, offset: int, sizes: Sequence[int]) -> List[bytes]:
        result = []
        for size in sizes:
            result.append(self.extract_bytes(offset, size))
            offset += size
        return result
