"""Mining decoder: 0–2 адреса и 0–1 blob по таблице MINING_FIELDS."""

from ringdecode.codec.pools import DecodeContext
from ringdecode.codec.specs import MiningSpec
from ringdecode.core.domain.mining import Mining


def decode_mining(spec: MiningSpec, ctx: DecodeContext) -> Mining:
    """
    Чтение mining полей в порядке fee recipient → miner → signature.

    Отсутствующий флаг не продвигает ни один курсор.
    """
    values = {field.name: ctx.next_for(field.pool) for field in spec.present_fields()}
    return Mining(**values)
