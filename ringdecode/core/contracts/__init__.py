"""
Contract Validation Module

JSON Schema контракт результата декодирования.
"""

from .validators import (
    DECODE_RESULT_SCHEMA,
    SCHEMA_DIR,
    decode_result_errors,
    decode_result_validator,
    load_schema,
    validate_decode_result,
)

__all__ = [
    "DECODE_RESULT_SCHEMA",
    "SCHEMA_DIR",
    "load_schema",
    "decode_result_validator",
    "validate_decode_result",
    "decode_result_errors",
]
