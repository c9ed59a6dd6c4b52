"""
Тесты для флаговых слов и таблиц флаг → поле → пул

Проверяет:
1. Таблицы ORDER_FIELDS / MINING_FIELDS (порядок, биты, пулы)
2. Предикаты MiningSpec / OrderSpec
3. EncodeSpec счётчики и детекцию противоречивого заголовка
"""

import pytest

from ringdecode.codec import (
    ALL_OR_NONE_BIT,
    MINING_FIELDS,
    ORDER_FIELDS,
    EncodeSpec,
    MalformedHeaderError,
    MiningSpec,
    OrderSpec,
    ParticipationSpec,
    PoolKind,
)
from ringdecode.core.domain import OPTIONAL_FIELD_NAMES


# =============================================================================
# FIELD TABLES
# =============================================================================


class TestFieldTables:
    """Таблицы определяют порядок чтения пулов"""

    def test_order_fields_read_order(self) -> None:
        assert [f.name for f in ORDER_FIELDS] == list(OPTIONAL_FIELD_NAMES)

    def test_order_field_bits_unique_and_skip_all_or_none(self) -> None:
        bits = [f.bit for f in ORDER_FIELDS]
        assert len(set(bits)) == len(bits)
        assert ALL_OR_NONE_BIT not in bits
        assert bits == sorted(bits)

    def test_order_field_pools(self) -> None:
        pools = {f.name: f.pool for f in ORDER_FIELDS}
        assert pools["wallet_addr"] == PoolKind.ADDRESS
        assert pools["valid_since"] == PoolKind.UINT
        assert pools["dual_auth_sig"] == PoolKind.BYTES

    def test_mining_fields(self) -> None:
        assert [(f.name, f.bit, f.pool) for f in MINING_FIELDS] == [
            ("fee_recipient", 0, PoolKind.ADDRESS),
            ("miner", 1, PoolKind.ADDRESS),
            ("sig", 2, PoolKind.BYTES),
        ]


# =============================================================================
# FLAG WORDS
# =============================================================================


class TestOrderSpec:
    """Предикаты флагов ордера"""

    def test_empty_word(self) -> None:
        spec = OrderSpec(0)
        assert spec.present_fields() == []
        assert not spec.all_or_none()

    def test_wallet_and_valid_until(self) -> None:
        spec = OrderSpec((1 << 3) | (1 << 5))
        assert spec.has_wallet()
        assert spec.has_valid_until()
        assert not spec.has_valid_since()
        assert not spec.has_dual_auth()
        assert [f.name for f in spec.present_fields()] == ["wallet_addr", "valid_until"]

    def test_all_or_none_does_not_add_field(self) -> None:
        spec = OrderSpec(1 << ALL_OR_NONE_BIT)
        assert spec.all_or_none()
        assert spec.present_fields() == []

    def test_all_bits(self) -> None:
        spec = OrderSpec(0x1FF)
        assert all(
            [
                spec.has_dual_auth(),
                spec.has_broker(),
                spec.has_order_interceptor(),
                spec.has_wallet(),
                spec.has_valid_since(),
                spec.has_valid_until(),
                spec.has_signature(),
                spec.has_dual_auth_sig(),
                spec.all_or_none(),
            ]
        )
        assert len(spec.present_fields()) == 8

    @pytest.mark.parametrize("word", [-1, 0x10000])
    def test_out_of_range_word(self, word: int) -> None:
        with pytest.raises(MalformedHeaderError):
            OrderSpec(word)

    def test_equality_and_repr(self) -> None:
        assert OrderSpec(3) == OrderSpec(3)
        assert OrderSpec(3) != MiningSpec(3)
        assert repr(OrderSpec(3)) == "OrderSpec(0x0003)"


class TestMiningSpec:
    """Предикаты флагов mining"""

    def test_none_set(self) -> None:
        spec = MiningSpec(0)
        assert not spec.has_fee_recipient()
        assert not spec.has_miner()
        assert not spec.has_signature()

    def test_miner_and_signature(self) -> None:
        spec = MiningSpec(0b110)
        assert not spec.has_fee_recipient()
        assert spec.has_miner()
        assert spec.has_signature()


class TestParticipationSpec:
    def test_order_index(self) -> None:
        assert ParticipationSpec(7).order_index == 7

    def test_out_of_range(self) -> None:
        with pytest.raises(MalformedHeaderError):
            ParticipationSpec(256)


# =============================================================================
# ENCODE SPEC
# =============================================================================


class TestEncodeSpec:
    """Счётчики заголовка"""

    def test_counts(self) -> None:
        # 3 ордера, 2 кольца (2 и 3), 7 адресов, 9 uint, 2 blobs (65, 10)
        spec = EncodeSpec([3, 2, 2, 3, 7, 9, 2, 65, 10])
        assert spec.order_spec_size() == 3
        assert spec.ring_size() == 2
        assert spec.ring_spec_size_array() == [2, 3]
        assert spec.ring_specs_data_len() == 5
        assert spec.address_list_size() == 7
        assert spec.uint_list_size() == 9
        assert spec.bytes_list_size() == 2
        assert spec.bytes_list_size_array() == [65, 10]

    def test_no_rings_no_blobs(self) -> None:
        spec = EncodeSpec([0, 0, 0, 0, 0])
        assert spec.ring_spec_size_array() == []
        assert spec.bytes_list_size_array() == []

    def test_too_few_words(self) -> None:
        with pytest.raises(MalformedHeaderError, match="at least 2 words"):
            EncodeSpec([1])

    def test_ring_count_exceeds_words(self) -> None:
        with pytest.raises(MalformedHeaderError, match="declares 4 rings"):
            EncodeSpec([1, 4, 2, 2, 0, 0])

    def test_blob_count_exceeds_words(self) -> None:
        with pytest.raises(MalformedHeaderError, match="declares 3 byte blobs"):
            EncodeSpec([0, 0, 0, 0, 3, 65])
