"""
Mining — метаданные майнера колец

Immutable Pydantic модель. Каждое поле независимо опционально:
None означает "отсутствует в буфере", а не "пустое значение".
"""

from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from .types import Address, blob_from_json, blob_to_json


class Mining(BaseModel):
    """
    Получатель комиссии, майнер и подпись майнера.

    Immutable модель (frozen=True).
    """

    fee_recipient: Optional[Address] = Field(None, description="Получатель комиссий")
    miner: Optional[Address] = Field(None, description="Адрес майнера")
    sig: Optional[bytes] = Field(None, description="Подпись майнера")

    model_config = {"frozen": True}

    @field_validator("sig", mode="before")
    @classmethod
    def parse_sig(cls, v):
        return blob_from_json(v)

    @field_serializer("sig", when_used="json")
    def serialize_sig(self, v: Optional[bytes]) -> Optional[str]:
        return blob_to_json(v)

    def is_empty(self) -> bool:
        """True если ни одно поле не присутствует в буфере."""
        return self.fee_recipient is None and self.miner is None and self.sig is None
