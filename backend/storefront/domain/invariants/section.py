from typing import Any, Dict

from storefront.domain.codec import decode, is_unparsable
from storefront.domain.exceptions import ValidationError


def assert_section_type(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Section type is required", field="type")
    return value.strip()


def assert_section_order(value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Section order must be an integer", field="order")
    return value


def assert_section_active(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValidationError("isActive must be a boolean", field="isActive")
    return value


def assert_section_content(value: Any) -> Dict[str, Any]:
    """Content is persisted only in its structured form."""
    content = decode(value)
    if is_unparsable(content):
        raise ValidationError(
            f"Section content must be a JSON object ({content.reason})",
            field="content",
        )
    return content
