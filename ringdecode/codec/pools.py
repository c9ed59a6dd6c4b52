"""
Pool cursors — независимые курсоры по пулам значений

Каждый вызов deserialize() создаёт новый DecodeContext: курсоры никогда не
хранятся на долгоживущем объекте и не переиспользуются между вызовами.

ИНВАРИАНТЫ:
1. Курсор продвигается ровно на одно значение за чтение, назад не двигается
2. Чтение одного пула не влияет на курсоры других пулов
3. Чтение за пределом пула → PoolExhaustedError
4. В конце декодирования каждый пул прочитан полностью
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Sequence, Tuple, TypeVar

from ringdecode.codec.errors import PoolExhaustedError, PoolNotExhaustedError
from ringdecode.codec.specs import PoolKind

T = TypeVar("T")


class PoolCursor(Generic[T]):
    """Курсор по одному пулу."""

    def __init__(self, kind: PoolKind, values: Sequence[T]):
        self.kind = kind
        self._values: Tuple[T, ...] = tuple(values)
        self._idx = 0

    @property
    def size(self) -> int:
        return len(self._values)

    @property
    def consumed(self) -> int:
        return self._idx

    @property
    def remaining(self) -> int:
        return len(self._values) - self._idx

    def next(self) -> T:
        if self._idx >= len(self._values):
            raise PoolExhaustedError(self.kind.value, len(self._values))
        value = self._values[self._idx]
        self._idx += 1
        return value

    def ensure_exhausted(self) -> None:
        if self.remaining:
            raise PoolNotExhaustedError(self.kind.value, self.size, self.consumed)


@dataclass(frozen=True)
class PoolUsage:
    """Снимок использования пулов: объявлено / прочитано."""

    declared: Dict[PoolKind, int]
    consumed: Dict[PoolKind, int]

    def is_exact(self) -> bool:
        return self.declared == self.consumed


class DecodeContext:
    """Состояние одного вызова декодирования: три курсора."""

    def __init__(self, addresses: Sequence[str], uints: Sequence[int], blobs: Sequence[bytes]):
        self._cursors: Dict[PoolKind, PoolCursor[Any]] = {
            PoolKind.ADDRESS: PoolCursor(PoolKind.ADDRESS, addresses),
            PoolKind.UINT: PoolCursor(PoolKind.UINT, uints),
            PoolKind.BYTES: PoolCursor(PoolKind.BYTES, blobs),
        }

    def cursor(self, pool: PoolKind) -> PoolCursor[Any]:
        return self._cursors[pool]

    def next_for(self, pool: PoolKind) -> Any:
        return self._cursors[pool].next()

    def next_address(self) -> str:
        return self.next_for(PoolKind.ADDRESS)

    def next_uint(self) -> int:
        return self.next_for(PoolKind.UINT)

    def next_bytes(self) -> bytes:
        return self.next_for(PoolKind.BYTES)

    def ensure_exhausted(self) -> None:
        """
        Проверка, что каждый пул прочитан полностью.

        Raises:
            PoolNotExhaustedError: Для первого недочитанного пула
        """
        for cursor in self._cursors.values():
            cursor.ensure_exhausted()

    def usage(self) -> PoolUsage:
        return PoolUsage(
            declared={k: c.size for k, c in self._cursors.items()},
            consumed={k: c.consumed for k, c in self._cursors.items()},
        )
