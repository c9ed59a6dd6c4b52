"""
Ring assembler — вывод buy-token ордеров из порядка в кольце

Для кольца из k ордеров [i0, i1, ..., i(k-1)]:
    token_b(i_j) = token_s(i_(j-1) mod k)

Слот 0 замыкает цикл: его buy-token — sell-token последнего слота.
Назначения пишутся в отдельный per-call список token_b (второй этап
построения ордеров); при участии ордера в нескольких кольцах побеждает
последняя запись. Ордера вне колец сохраняют token_b=None.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ringdecode.codec.errors import BadRingSizeError, OrderIndexError
from ringdecode.codec.specs import MAX_RING_SIZE, MIN_RING_SIZE, ParticipationSpec
from ringdecode.core.domain.order import Order
from ringdecode.core.domain.result import Ring

logger = logging.getLogger(__name__)


def assemble_ring(
    ring_no: int,
    participations: Sequence[ParticipationSpec],
    orders: Sequence[Order],
    token_b: List[Optional[str]],
) -> Ring:
    """
    Сборка одного кольца.

    Args:
        ring_no: Номер кольца (для сообщений об ошибках)
        participations: Participation specs по слотам
        orders: Декодированные ордера (не изменяются)
        token_b: Назначенные buy-tokens по индексу ордера (изменяется)

    Returns:
        Ring с индексами ордеров

    Raises:
        BadRingSizeError: Размер вне [MIN_RING_SIZE, MAX_RING_SIZE]
        OrderIndexError: Индекс ордера вне [0, len(orders))
    """
    size = len(participations)
    if not MIN_RING_SIZE <= size <= MAX_RING_SIZE:
        raise BadRingSizeError(ring_no, size, MIN_RING_SIZE, MAX_RING_SIZE)

    indices = []
    for slot, pspec in enumerate(participations):
        idx = pspec.order_index
        if idx >= len(orders):
            raise OrderIndexError(ring_no, slot, idx, len(orders))
        indices.append(idx)

    # Слоты 1..k-1 получают sell-token предшественника, слот 0 пишется последним
    for slot in range(1, size):
        token_b[indices[slot]] = orders[indices[slot - 1]].token_s
    token_b[indices[0]] = orders[indices[-1]].token_s

    return Ring(order_indices=tuple(indices))


def assemble_rings(
    ring_specs: Sequence[Sequence[ParticipationSpec]],
    orders: Sequence[Order],
) -> Tuple[List[Ring], List[Order]]:
    """
    Сборка всех колец и выдача ордеров с разрешённым token_b.

    Returns:
        (rings, orders), где orders — новые экземпляры; ордер вне колец
        возвращается как есть (token_b=None)
    """
    token_b: List[Optional[str]] = [None] * len(orders)
    rings = []
    for ring_no, participations in enumerate(ring_specs):
        ring = assemble_ring(ring_no, participations, orders, token_b)
        logger.debug("Ring %d assembled: %s", ring_no, ring.order_indices)
        rings.append(ring)

    resolved = [
        order if token is None else order.with_token_b(token)
        for order, token in zip(orders, token_b)
    ]
    return rings, resolved
