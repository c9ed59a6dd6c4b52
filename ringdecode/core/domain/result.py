"""
Ring и DecodeResult — результат декодирования буфера
"""

from typing import List, Tuple

from pydantic import BaseModel, Field

from .mining import Mining
from .order import Order


class Ring(BaseModel):
    """
    Кольцо: упорядоченные индексы ордеров.

    Ордера не копируются, кольцо хранит только позиции в DecodeResult.orders.
    """

    order_indices: Tuple[int, ...] = Field(..., description="Индексы ордеров по слотам")

    model_config = {"frozen": True}

    def size(self) -> int:
        return len(self.order_indices)

    def predecessor(self, slot: int) -> int:
        """Индекс ордера в предыдущем слоте (циклически)."""
        return self.order_indices[(slot - 1) % len(self.order_indices)]


class DecodeResult(BaseModel):
    """
    Результат одного вызова deserialize(): mining, ордера, кольца.

    Immutable модель (frozen=True).
    """

    mining: Mining
    orders: Tuple[Order, ...] = Field(default_factory=tuple)
    rings: Tuple[Ring, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    def as_tuple(self) -> Tuple[Mining, List[Order], List[List[int]]]:
        """Тройка (mining, orders, rings) с кольцами как списками индексов."""
        return (
            self.mining,
            list(self.orders),
            [list(ring.order_indices) for ring in self.rings],
        )

    def orders_in_ring(self, ring_no: int) -> List[Order]:
        return [self.orders[i] for i in self.rings[ring_no].order_indices]
