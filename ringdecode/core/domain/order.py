"""
Order — Модель ордера из буфера settlement

Immutable Pydantic модель. Строится в два этапа:
1. Order decoder создаёт ордер с token_b=None (buy-token в буфере не хранится)
2. Ring assembler выдаёт новый экземпляр с token_b, выведенным из кольца

Ордер, не участвующий ни в одном кольце, сохраняет token_b=None.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from .types import Address, Uint256, blob_from_json, blob_to_json

OPTIONAL_FIELD_NAMES = (
    "dual_auth_addr",
    "broker",
    "order_interceptor",
    "wallet_addr",
    "valid_since",
    "valid_until",
    "sig",
    "dual_auth_sig",
)


class Order(BaseModel):
    """
    Ордер: что продаётся, что покупается, сколько и на каких условиях.

    Amounts и timestamps хранятся как uint256 без сужения.
    Immutable модель (frozen=True).
    """

    # Обязательные поля
    owner: Address = Field(..., description="Владелец ордера")
    token_s: Address = Field(..., description="Продаваемый токен")
    token_b: Optional[Address] = Field(
        None, description="Покупаемый токен (выводится из кольца, None если вне колец)"
    )
    amount_s: Uint256 = Field(..., description="Количество продаваемого токена")
    amount_b: Uint256 = Field(..., description="Количество покупаемого токена")
    fee_amount: Uint256 = Field(..., description="Комиссия")

    # Опциональные поля
    dual_auth_addr: Optional[Address] = Field(None, description="Адрес dual-auth")
    broker: Optional[Address] = Field(None, description="Брокер")
    order_interceptor: Optional[Address] = Field(None, description="Order interceptor")
    wallet_addr: Optional[Address] = Field(None, description="Кошелёк")
    valid_since: Optional[Uint256] = Field(None, description="Действует с (unix time)")
    valid_until: Optional[Uint256] = Field(None, description="Действует до (unix time)")
    sig: Optional[bytes] = Field(None, description="Подпись владельца")
    dual_auth_sig: Optional[bytes] = Field(None, description="Подпись dual-auth")

    all_or_none: bool = Field(False, description="Исполнять только полностью")

    model_config = {"frozen": True}

    @field_validator("sig", "dual_auth_sig", mode="before")
    @classmethod
    def parse_blob(cls, v):
        return blob_from_json(v)

    @field_serializer("sig", "dual_auth_sig", when_used="json")
    def serialize_blob(self, v: Optional[bytes]) -> Optional[str]:
        return blob_to_json(v)

    def is_resolved(self) -> bool:
        """True если token_b уже назначен кольцом."""
        return self.token_b is not None

    def with_token_b(self, token_b: Address) -> "Order":
        """Новый экземпляр с назначенным buy-token."""
        return self.model_copy(update={"token_b": token_b})

    def present_optional_fields(self) -> List[str]:
        """Имена опциональных полей, присутствующих в буфере."""
        return [name for name in OPTIONAL_FIELD_NAMES if getattr(self, name) is not None]
