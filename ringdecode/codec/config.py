"""Конфигурация десериализатора."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeserializerConfig:
    """
    Конфигурация ExchangeDeserializer.

    Структурные правила (размер кольца 2..8, точное чтение пулов, отсутствие
    лишних байт) не настраиваются. Конфигурация может только добавить проверки.
    """

    # Проверять JSON-представление результата контрактом decode_result.json
    validate_contract: bool = False
