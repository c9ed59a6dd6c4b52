"""
Order decoder — сборка ордеров из пулов по флаговым словам

Для каждого OrderSpec:
1. Обязательный префикс (ORDER_MANDATORY_FIELDS): owner, token_s,
   amount_s, amount_b, fee_amount
2. token_b не читается, остаётся None до сборки колец
3. Опциональные поля (ORDER_FIELDS) только при установленном бите,
   в порядке таблицы
4. all_or_none берётся из флагового слова без чтения пула
"""

import logging
from typing import Any, Dict, List, Sequence

from ringdecode.codec.pools import DecodeContext
from ringdecode.codec.specs import ORDER_MANDATORY_FIELDS, OrderSpec
from ringdecode.core.domain.order import Order

logger = logging.getLogger(__name__)


def decode_order(spec: OrderSpec, ctx: DecodeContext) -> Order:
    values: Dict[str, Any] = {}
    for name, pool in ORDER_MANDATORY_FIELDS:
        values[name] = ctx.next_for(pool)
    for field in spec.present_fields():
        values[field.name] = ctx.next_for(field.pool)
    values["all_or_none"] = spec.all_or_none()
    return Order(**values)


def decode_orders(specs: Sequence[OrderSpec], ctx: DecodeContext) -> List[Order]:
    orders = []
    for i, spec in enumerate(specs):
        orders.append(decode_order(spec, ctx))
        logger.debug("Order %d decoded with %r", i, spec)
    return orders
