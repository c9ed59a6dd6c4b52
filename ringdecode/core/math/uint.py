"""
Uint — границы и явное сужение больших целых

Пул uint256 декодируется в int без потери точности. Сужение до
фиксированной разрядности выполняет только вызывающая сторона и только
через функции этого модуля: переполнение → UintNarrowingError, никогда
не тихое усечение.
"""

from typing import Final

UINT256_MAX: Final[int] = 2**256 - 1
UINT64_MAX: Final[int] = 2**64 - 1

# Максимальное целое, точно представимое в IEEE-754 double
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1


class UintNarrowingError(OverflowError):
    """Значение не помещается в целевую разрядность."""

    pass


def validate_uint256(value: int) -> int:
    """
    Проверка диапазона uint256.

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне [0, 2**256)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"uint256 must be int, got {type(value).__name__}")
    if not 0 <= value <= UINT256_MAX:
        raise ValueError(f"value {value} out of uint256 range")
    return value


def narrow_uint(value: int, bits: int) -> int:
    """
    Сужение uint256 до `bits` бит.

    Args:
        value: Исходное значение (uint256)
        bits: Целевая разрядность (1..256)

    Returns:
        value без изменений, если помещается

    Raises:
        UintNarrowingError: Если value >= 2**bits

    Examples:
        >>> narrow_uint(255, 8)
        255
        >>> narrow_uint(256, 8)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        UintNarrowingError: ...
    """
    if not 1 <= bits <= 256:
        raise ValueError(f"bits must be in 1..256, got {bits}")
    validate_uint256(value)
    if value >> bits:
        raise UintNarrowingError(f"value {value} does not fit in uint{bits}")
    return value


def to_safe_integer(value: int) -> int:
    """Сужение до диапазона, точно представимого float/JS Number."""
    validate_uint256(value)
    if value > MAX_SAFE_INTEGER:
        raise UintNarrowingError(
            f"value {value} exceeds MAX_SAFE_INTEGER {MAX_SAFE_INTEGER}"
        )
    return value
