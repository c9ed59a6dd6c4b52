"""
Header / flag декодеры и таблицы соответствия флаг → поле → пул

Порядок чтения опциональных полей из пулов определяется ТОЛЬКО таблицами
MINING_FIELDS и ORDER_FIELDS. Декодеры обходят таблицы, а не пишут
условные чтения вручную: изменение таблицы меняет и encoder (в тестах),
и decoder одновременно.

Раскладка encode specs (uint16 слова):
    [0]              количество ордеров
    [1]              количество колец R
    [2 .. 2+R)       размер каждого кольца
    [2+R]            размер пула адресов
    [3+R]            размер пула uint256
    [4+R]            размер пула blobs B
    [5+R .. 5+R+B)   длина каждого blob
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, List, Sequence, Tuple

from ringdecode.codec.errors import MalformedHeaderError

UINT16_MAX: Final[int] = 0xFFFF
UINT8_MAX: Final[int] = 0xFF


# =============================================================================
# FIELD TABLES
# =============================================================================


class PoolKind(str, Enum):
    """Пул, из которого читается значение поля."""

    ADDRESS = "address"
    UINT = "uint"
    BYTES = "bytes"


@dataclass(frozen=True)
class FieldSpec:
    """Опциональное поле: имя атрибута модели, бит во флаговом слове, пул."""

    name: str
    bit: int
    pool: PoolKind

    @property
    def mask(self) -> int:
        return 1 << self.bit


MINING_FIELDS: Final[Tuple[FieldSpec, ...]] = (
    FieldSpec("fee_recipient", 0, PoolKind.ADDRESS),
    FieldSpec("miner", 1, PoolKind.ADDRESS),
    FieldSpec("sig", 2, PoolKind.BYTES),
)

# Бит 6 (all-or-none) не читает пул и в таблицу не входит
ORDER_FIELDS: Final[Tuple[FieldSpec, ...]] = (
    FieldSpec("dual_auth_addr", 0, PoolKind.ADDRESS),
    FieldSpec("broker", 1, PoolKind.ADDRESS),
    FieldSpec("order_interceptor", 2, PoolKind.ADDRESS),
    FieldSpec("wallet_addr", 3, PoolKind.ADDRESS),
    FieldSpec("valid_since", 4, PoolKind.UINT),
    FieldSpec("valid_until", 5, PoolKind.UINT),
    FieldSpec("sig", 7, PoolKind.BYTES),
    FieldSpec("dual_auth_sig", 8, PoolKind.BYTES),
)

ALL_OR_NONE_BIT: Final[int] = 6

# Размер кольца (включительно), вне диапазона → BadRingSizeError
MIN_RING_SIZE: Final[int] = 2
MAX_RING_SIZE: Final[int] = 8

# Обязательный префикс ордера, всегда в этом порядке
ORDER_MANDATORY_FIELDS: Final[Tuple[Tuple[str, PoolKind], ...]] = (
    ("owner", PoolKind.ADDRESS),
    ("token_s", PoolKind.ADDRESS),
    ("amount_s", PoolKind.UINT),
    ("amount_b", PoolKind.UINT),
    ("fee_amount", PoolKind.UINT),
)


# =============================================================================
# FLAG WORDS
# =============================================================================


class _FlagWord:
    """Флаговое слово uint16 с предикатами по таблице полей."""

    fields: Tuple[FieldSpec, ...] = ()

    def __init__(self, word: int):
        if not 0 <= word <= UINT16_MAX:
            raise MalformedHeaderError(f"{type(self).__name__} word {word} does not fit uint16")
        self.word = word

    def has(self, field: FieldSpec) -> bool:
        return bool(self.word & field.mask)

    def present_fields(self) -> List[FieldSpec]:
        """Поля, присутствующие в буфере, в порядке чтения из пулов."""
        return [f for f in self.fields if self.has(f)]

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.word == self.word

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.word))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self.word:04x})"


def _field(fields: Tuple[FieldSpec, ...], name: str) -> FieldSpec:
    for f in fields:
        if f.name == name:
            return f
    raise KeyError(name)


class MiningSpec(_FlagWord):
    """Флаги mining: fee recipient, miner, signature."""

    fields = MINING_FIELDS

    def has_fee_recipient(self) -> bool:
        return self.has(_field(MINING_FIELDS, "fee_recipient"))

    def has_miner(self) -> bool:
        return self.has(_field(MINING_FIELDS, "miner"))

    def has_signature(self) -> bool:
        return self.has(_field(MINING_FIELDS, "sig"))


class OrderSpec(_FlagWord):
    """Флаги ордера: 8 опциональных полей + all-or-none."""

    fields = ORDER_FIELDS

    def has_dual_auth(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "dual_auth_addr"))

    def has_broker(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "broker"))

    def has_order_interceptor(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "order_interceptor"))

    def has_wallet(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "wallet_addr"))

    def has_valid_since(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "valid_since"))

    def has_valid_until(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "valid_until"))

    def has_signature(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "sig"))

    def has_dual_auth_sig(self) -> bool:
        return self.has(_field(ORDER_FIELDS, "dual_auth_sig"))

    def all_or_none(self) -> bool:
        return bool(self.word & (1 << ALL_OR_NONE_BIT))


@dataclass(frozen=True)
class ParticipationSpec:
    """Участие ордера в слоте кольца (uint8)."""

    value: int

    def __post_init__(self):
        if not 0 <= self.value <= UINT8_MAX:
            raise MalformedHeaderError(f"participation spec {self.value} does not fit uint8")

    @property
    def order_index(self) -> int:
        return self.value


# =============================================================================
# ENCODE SPEC
# =============================================================================


class EncodeSpec:
    """
    Счётчики заголовка: размеры пулов, количество ордеров и колец.

    Raises:
        MalformedHeaderError: Если слов меньше, чем требуют объявленные счётчики
    """

    def __init__(self, words: Sequence[int]):
        self.words = tuple(words)
        if len(self.words) < 2:
            raise MalformedHeaderError(
                f"encode spec needs at least 2 words, got {len(self.words)}"
            )
        rings = self.words[1]
        if len(self.words) < 5 + rings:
            raise MalformedHeaderError(
                f"encode spec declares {rings} rings but has only {len(self.words)} words"
            )
        blobs = self.words[4 + rings]
        if len(self.words) < 5 + rings + blobs:
            raise MalformedHeaderError(
                f"encode spec declares {blobs} byte blobs but has only {len(self.words)} words"
            )

    def order_spec_size(self) -> int:
        return self.words[0]

    def ring_size(self) -> int:
        return self.words[1]

    def ring_spec_size_array(self) -> List[int]:
        return list(self.words[2 : 2 + self.ring_size()])

    def ring_specs_data_len(self) -> int:
        return sum(self.ring_spec_size_array())

    def address_list_size(self) -> int:
        return self.words[2 + self.ring_size()]

    def uint_list_size(self) -> int:
        return self.words[3 + self.ring_size()]

    def bytes_list_size(self) -> int:
        return self.words[4 + self.ring_size()]

    def bytes_list_size_array(self) -> List[int]:
        start = 5 + self.ring_size()
        return list(self.words[start : start + self.bytes_list_size()])
