import json

import pytest

from storefront.application.sections import (
    create_section,
    delete_section,
    get_section,
    list_sections,
    patch_section,
)
from storefront.domain.exceptions import NotFoundError, ValidationError


def test_create_assigns_unique_ids(app):
    a = create_section(type="hero", order=0, content={"title": "A"})
    b = create_section(type="hero", order=0, content={"title": "B"})

    assert a.id and b.id and a.id != b.id
    assert [s.id for s in list_sections()] == [a.id, b.id]


@pytest.mark.parametrize("bad_type", ["", "   ", None, 5])
def test_create_requires_type(app, bad_type):
    with pytest.raises(ValidationError) as exc:
        create_section(type=bad_type, order=0, content={})
    assert exc.value.field == "type"
    assert list_sections() == []


def test_create_rejects_non_integer_order(app):
    with pytest.raises(ValidationError) as exc:
        create_section(type="hero", order="first", content={})
    assert exc.value.field == "order"


def test_create_appends_when_order_omitted(app):
    create_section(type="hero", order=4, content={})
    section = create_section(type="banner", content={})
    assert section.order == 5


def test_create_stores_text_content_structured(app):
    section = create_section(type="hero", order=0, content=json.dumps({"title": "Hi"}))
    assert section.content == {"title": "Hi"}


def test_create_rejects_unparsable_content(app):
    with pytest.raises(ValidationError) as exc:
        create_section(type="hero", order=0, content="{broken")
    assert exc.value.field == "content"


def test_list_includes_inactive_sections(app):
    hidden = create_section(type="banner", order=0, content={}, is_active=False)
    assert hidden.id in [s.id for s in list_sections()]


def test_patch_order_only_preserves_other_fields(app):
    content = {"title": "Sale", "styles": {"textColor": "#fff"}, "limit": 4}
    section = create_section(type="product_grid", order=1, content=content)
    before = json.dumps(get_section(section.id).content, sort_keys=True)

    patch_section(section_id=section.id, data={"order": 9})

    after = get_section(section.id)
    assert after.order == 9
    assert after.type == "product_grid"
    assert after.is_active is True
    assert json.dumps(after.content, sort_keys=True) == before


def test_patch_replaces_content_and_toggles_active(app):
    section = create_section(type="hero", order=0, content={"title": "Old", "x": 1})

    patch_section(section_id=section.id, data={"content": {"title": "New"}, "isActive": False})

    updated = get_section(section.id)
    assert updated.content == {"title": "New"}
    assert updated.is_active is False


def test_patch_unknown_id(app):
    with pytest.raises(NotFoundError):
        patch_section(section_id="missing", data={"order": 1})


def test_patch_without_known_fields(app):
    section = create_section(type="hero", order=0, content={})
    with pytest.raises(ValidationError):
        patch_section(section_id=section.id, data={"colour": "red"})


def test_patch_validates_before_writing(app):
    section = create_section(type="hero", order=0, content={"title": "Keep"})

    with pytest.raises(ValidationError):
        patch_section(section_id=section.id, data={"order": 3, "isActive": "yes"})

    unchanged = get_section(section.id)
    assert unchanged.order == 0
    assert unchanged.is_active is True


def test_delete_removes_section(app):
    section = create_section(type="hero", order=0, content={})
    delete_section(section_id=section.id)

    assert get_section(section.id) is None
    assert list_sections() == []


def test_delete_unknown_id(app):
    with pytest.raises(NotFoundError):
        delete_section(section_id="missing")


def test_transactional_rolls_back_and_reraises(app, db, caplog):
    from storefront.models.section import Section
    from storefront.utils.transaction import transactional

    with pytest.raises(RuntimeError):
        with transactional() as session:
            session.add(Section(type="hero", order=0, content={}, position=1))
            session.flush()
            raise RuntimeError("boom")

    assert list_sections() == []
    assert "rolled back" not in caplog.text
