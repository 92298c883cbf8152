from typing import List
from storefront.models.section import Section


def list_sections() -> List[Section]:
    """
    All sections, active and inactive, in storage (insertion) order.

    Always a fresh query: admin edits must show up on the next read.
    """
    return Section.query.order_by(Section.position.asc()).all()


def get_section(section_id: str) -> Section | None:
    return Section.query.filter_by(id=section_id).first()
