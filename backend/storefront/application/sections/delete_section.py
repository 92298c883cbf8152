from flask import current_app
from storefront.extensions import db
from storefront.models.section import Section
from storefront.domain.exceptions import NotFoundError
from storefront.utils.transaction import transactional


def delete_section(*, section_id: str) -> None:
    """Permanently remove a section. Remaining orders are left as they are."""
    section = Section.query.filter_by(id=section_id).first()
    if not section:
        raise NotFoundError(f"Section {section_id} not found")

    with transactional():
        db.session.delete(section)

        current_app.logger.info("section.delete id=%s type=%s", section_id, section.type)
