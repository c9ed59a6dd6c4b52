"""
Ошибки десериализации

Все ошибки фатальны для текущего вызова deserialize(): частичного результата
нет, повтор с тем же буфером даст ту же ошибку. Вызывающая сторона должна
трактовать любую из них как "буфер отклонён".

Таксономия:
- TruncatedBufferError / MalformedHeaderError / TrailingDataError — заголовок
- PoolExhaustedError / PoolNotExhaustedError — рассогласование флагов и пулов
- BadRingSizeError / OrderIndexError — структура колец
- ContractViolationError — результат не проходит JSON-контракт
"""


class DeserializationError(Exception):
    """Базовая ошибка декодирования буфера."""

    pass


# =============================================================================
# HEADER
# =============================================================================


class MalformedHeaderError(DeserializationError):
    """Заголовок противоречив: счётчики не согласуются с числом encode specs."""

    pass


class TruncatedBufferError(MalformedHeaderError):
    """
    Буфер короче, чем объявляет заголовок.

    Attributes:
        offset: Смещение, с которого начиналось чтение
        width: Сколько байт требовалось
        length: Фактическая длина буфера
    """

    def __init__(self, offset: int, width: int, length: int):
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"buffer too short: need {width} bytes at offset {offset}, "
            f"buffer length is {length}"
        )


class TrailingDataError(MalformedHeaderError):
    """После последнего blob остались байты, не описанные заголовком."""

    def __init__(self, end_offset: int, length: int):
        self.end_offset = end_offset
        self.length = length
        super().__init__(
            f"{length - end_offset} trailing bytes after declared data end "
            f"{end_offset} (buffer length {length})"
        )


# =============================================================================
# POOLS
# =============================================================================


class PoolExhaustedError(DeserializationError, IndexError):
    """
    Курсор пула продвинут за объявленный размер.

    Означает, что флаги требуют больше значений, чем encoder положил в пул.
    Никогда не возвращаем "нулевое" или устаревшее значение вместо ошибки.
    """

    def __init__(self, pool: str, size: int):
        self.pool = pool
        self.size = size
        super().__init__(f"{pool} pool exhausted: all {size} values already consumed")


class PoolNotExhaustedError(DeserializationError):
    """После декодирования в пуле остались непрочитанные значения."""

    def __init__(self, pool: str, size: int, consumed: int):
        self.pool = pool
        self.size = size
        self.consumed = consumed
        super().__init__(
            f"{pool} pool under-read: consumed {consumed} of {size} declared values"
        )


# =============================================================================
# RINGS
# =============================================================================


class BadRingSizeError(DeserializationError):
    """Число участников кольца вне допустимого диапазона."""

    def __init__(self, ring_no: int, size: int, min_size: int, max_size: int):
        self.ring_no = ring_no
        self.size = size
        super().__init__(
            f"bad ring size: ring {ring_no} has {size} orders, "
            f"expected {min_size}..{max_size}"
        )


class OrderIndexError(DeserializationError, IndexError):
    """Participation spec ссылается на несуществующий ордер."""

    def __init__(self, ring_no: int, slot: int, order_index: int, order_count: int):
        self.ring_no = ring_no
        self.slot = slot
        self.order_index = order_index
        self.order_count = order_count
        super().__init__(
            f"ring {ring_no} slot {slot} references order {order_index}, "
            f"but only {order_count} orders were decoded"
        )


# =============================================================================
# RESULT CONTRACT
# =============================================================================


class ContractViolationError(DeserializationError):
    """JSON-представление результата не проходит контракт decode_result.json."""

    pass
