"""
Общие аннотированные типы полей доменных моделей

- Address: '0x' + 40 hex в нижнем регистре
- Uint256: int в [0, 2**256)
- blobs хранятся как bytes, в JSON представляются '0x' + hex
"""

from typing import Annotated, Any, Final, Optional

from pydantic import AfterValidator, Field

from ringdecode.core.math.uint import validate_uint256

ADDRESS_PATTERN: Final[str] = r"^0x[0-9a-f]{40}$"

Address = Annotated[str, Field(pattern=ADDRESS_PATTERN, description="20-байтовый адрес")]
Uint256 = Annotated[int, AfterValidator(validate_uint256), Field(description="uint256")]


def blob_from_json(value: Any) -> Any:
    """'0x..' строка → bytes; остальное передаётся pydantic без изменений."""
    if isinstance(value, str):
        body = value[2:] if value[:2] in ("0x", "0X") else value
        return bytes.fromhex(body)
    return value


def blob_to_json(value: Optional[bytes]) -> Optional[str]:
    if value is None:
        return None
    return "0x" + value.hex()
