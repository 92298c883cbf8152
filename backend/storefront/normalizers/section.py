from storefront.domain.codec import decode, is_unparsable


def _isoformat(value):
    return value.isoformat() if value is not None else None


def normalize_section(section):
    content = decode(section.content)
    valid = not is_unparsable(content)

    data = {
        "id": section.id,
        "type": section.type,
        "order": section.order,
        "isActive": bool(section.is_active),
        "content": content if valid else {},
        "createdAt": _isoformat(section.created_at),
        "updatedAt": _isoformat(section.updated_at),
    }

    if not valid:
        data["contentValid"] = False

    return data
