"""
Тесты для Bitstream: чтение примитивов и проверка границ

Проверяет:
1. Big-endian uint8/uint16/uint256
2. Адреса как '0x' + 40 hex
3. Массивы и списки переменной длины
4. Hex вход с префиксом и без
5. TruncatedBufferError при чтении за концом буфера
"""

import pytest

from ringdecode.codec import Bitstream, MalformedHeaderError, TruncatedBufferError


class TestScalars:
    """Чтение скалярных значений"""

    def test_extract_uint16_big_endian(self) -> None:
        bs = Bitstream(b"\x01\x02\x03")
        assert bs.extract_uint16(0) == 0x0102
        assert bs.extract_uint16(1) == 0x0203

    def test_extract_uint8(self) -> None:
        assert Bitstream(b"\x00\xff").extract_uint8(1) == 255

    def test_extract_uint_keeps_full_precision(self) -> None:
        """uint256 не сужается до float/int64"""
        value = 2**256 - 1
        bs = Bitstream(value.to_bytes(32, "big"))
        assert bs.extract_uint(0) == value

    def test_extract_address(self) -> None:
        raw = bytes(range(20))
        bs = Bitstream(b"\xaa" + raw)
        assert bs.extract_address(1) == "0x" + raw.hex()

    def test_extract_bytes_zero_length(self) -> None:
        assert Bitstream(b"\x01").extract_bytes(1, 0) == b""


class TestArrays:
    """Чтение массивов"""

    def test_copy_to_uint16_array(self) -> None:
        bs = Bitstream(b"\x00\x01\x00\x02\x00\x03")
        assert bs.copy_to_uint16_array(2, 2) == [2, 3]

    def test_copy_to_uint8_array_list(self) -> None:
        bs = Bitstream(bytes([0, 1, 2, 3, 4]))
        assert bs.copy_to_uint8_array_list(0, [2, 0, 3]) == [[0, 1], [], [2, 3, 4]]

    def test_copy_to_address_array(self) -> None:
        data = bytes([1] * 20 + [2] * 20)
        assert Bitstream(data).copy_to_address_array(0, 2) == [
            "0x" + "01" * 20,
            "0x" + "02" * 20,
        ]

    def test_copy_to_uint_array(self) -> None:
        data = (5).to_bytes(32, "big") + (2**200).to_bytes(32, "big")
        assert Bitstream(data).copy_to_uint_array(0, 2) == [5, 2**200]

    def test_copy_to_bytes_array(self) -> None:
        assert Bitstream(b"abcdef").copy_to_bytes_array(1, [2, 3]) == [b"bc", b"def"]


class TestHexInput:
    """Создание из hex-строки"""

    @pytest.mark.parametrize("text", ["0x0102", "0X0102", "0102", "  0x0102\n"])
    def test_from_hex_variants(self, text: str) -> None:
        assert Bitstream.from_hex(text).extract_uint16(0) == 0x0102

    def test_from_hex_invalid(self) -> None:
        with pytest.raises(MalformedHeaderError, match="not valid hex"):
            Bitstream.from_hex("0xzz")

    def test_coerce_passthrough(self) -> None:
        bs = Bitstream(b"\x00")
        assert Bitstream.coerce(bs) is bs

    def test_coerce_rejects_unknown_type(self) -> None:
        with pytest.raises(TypeError):
            Bitstream.coerce(12345)  # type: ignore


class TestBounds:
    """Чтение за концом буфера всегда фатально"""

    def test_uint16_truncated(self) -> None:
        with pytest.raises(TruncatedBufferError) as exc_info:
            Bitstream(b"\x01").extract_uint16(0)
        assert exc_info.value.offset == 0
        assert exc_info.value.width == 2
        assert exc_info.value.length == 1

    def test_address_array_truncated(self) -> None:
        with pytest.raises(TruncatedBufferError):
            Bitstream(bytes(39)).copy_to_address_array(0, 2)

    def test_uint_array_truncated(self) -> None:
        with pytest.raises(TruncatedBufferError):
            Bitstream(bytes(63)).copy_to_uint_array(0, 2)

    def test_bytes_array_truncated(self) -> None:
        with pytest.raises(TruncatedBufferError):
            Bitstream(b"abc").copy_to_bytes_array(0, [2, 2])

    def test_empty_buffer(self) -> None:
        with pytest.raises(TruncatedBufferError, match="buffer too short"):
            Bitstream(b"").extract_uint16(0)
