from typing import Any, Callable, Dict
from flask import current_app
from storefront.models.section import Section
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.invariants.section import (
    assert_section_type,
    assert_section_order,
    assert_section_active,
    assert_section_content,
)
from storefront.utils.transaction import transactional


# payload key -> (model attribute, validator)
PATCHABLE_FIELDS: Dict[str, tuple[str, Callable[[Any], Any]]] = {
    "type": ("type", assert_section_type),
    "order": ("order", assert_section_order),
    "content": ("content", assert_section_content),
    "isActive": ("is_active", assert_section_active),
}


def patch_section(*, section_id: str, data: Dict[str, Any]) -> Section:
    """
    Merge the supplied fields into a section.

    Design rules:
    - Only the fields present in `data` are touched
    - `content` replaces the whole mapping
    - Last writer wins; there is no version check
    """
    section = Section.query.filter_by(id=section_id).first()
    if not section:
        raise NotFoundError(f"Section {section_id} not found")

    supplied = [key for key in PATCHABLE_FIELDS if key in data]
    if not supplied:
        raise ValidationError(
            "Provide at least one of: " + ", ".join(PATCHABLE_FIELDS)
        )

    # Validate everything before mutating anything
    updates = {}
    for key in supplied:
        attr, validate = PATCHABLE_FIELDS[key]
        updates[attr] = validate(data[key])

    changed_fields: list[str] = []

    with transactional():
        for attr, value in updates.items():
            if getattr(section, attr) != value:
                setattr(section, attr, value)
                changed_fields.append(attr)

        current_app.logger.info(
            "section.patch id=%s fields=%s", section.id, changed_fields
        )

    return section
