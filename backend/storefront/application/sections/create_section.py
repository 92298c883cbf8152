from typing import Any, Dict
from flask import current_app
from storefront.extensions import db
from storefront.models.section import Section
from storefront.domain.invariants.section import (
    assert_section_type,
    assert_section_order,
    assert_section_active,
    assert_section_content,
)
from storefront.utils.transaction import transactional


def create_section(
    *,
    type: Any,
    order: Any = None,
    content: Any = None,
    is_active: Any = True,
) -> Section:
    """
    Create a storefront section.

    Edge cases handled:
    - Missing / empty type
    - No order given: appended after the current maximum
    - Content submitted as JSON text is stored structured
    """
    section_type = assert_section_type(type)
    payload: Dict[str, Any] = assert_section_content({} if content is None else content)
    active = assert_section_active(is_active)

    if order is None:
        max_order = db.session.query(db.func.max(Section.order)).scalar()
        order = 0 if max_order is None else max_order + 1
    order = assert_section_order(order)

    max_position = db.session.query(db.func.max(Section.position)).scalar() or 0

    section = Section()
    section.type = section_type
    section.order = order
    section.is_active = active
    section.content = payload
    section.position = max_position + 1

    with transactional():
        db.session.add(section)
        db.session.flush()  # ensures section.id exists

        current_app.logger.info(
            "section.create id=%s type=%s order=%s", section.id, section.type, section.order
        )

    return section
