from typing import Any, Dict, List, Optional
from flask import current_app
from storefront.extensions import db
from storefront.application.catalog import ProductCatalog
from storefront.application.sections import list_sections
from storefront.domain.codec import decode, is_unparsable
from storefront.domain.exceptions import ValidationError
from storefront.domain.sections import (
    CatalogSource,
    DEFAULT_GRID_LIMIT,
    MAX_GRID_LIMIT,
    RenderContext,
    render_section,
)


def _view(section, **fields) -> Dict[str, Any]:
    view = {
        "id": section.id,
        "type": section.type,
        "order": section.order,
        "content": {},
        "degraded": False,
    }
    view.update(fields)
    return view


def compose_active(
    *,
    base_url: str,
    catalog: Optional[CatalogSource] = None,
    default_limit: int = DEFAULT_GRID_LIMIT,
    max_limit: int = MAX_GRID_LIMIT,
) -> List[Dict[str, Any]]:
    """
    Build the home page from the currently active sections.

    Steps:
    - read a fresh snapshot (storage order)
    - drop inactive sections
    - stable sort by `order`, ties keep storage order
    - decode + dispatch each section by type

    A section that cannot be decoded or rendered is emitted as a degraded
    placeholder so later sections keep their positions.
    """
    ctx = RenderContext(
        catalog=catalog or ProductCatalog(),
        base_url=base_url,
        default_limit=default_limit,
        max_limit=max_limit,
    )

    active = [s for s in list_sections() if s.is_active]
    # sorted() is stable, so equal orders stay in storage order
    ordered = sorted(active, key=lambda s: s.order)

    views: List[Dict[str, Any]] = []

    for section in ordered:
        content = decode(section.content)

        if is_unparsable(content):
            current_app.logger.warning(
                "Section %s (%s) has unparsable content: %s",
                section.id, section.type, content.reason,
            )
            views.append(_view(section, degraded=True))
            continue

        try:
            fields = render_section(section.type, content, ctx)
        except ValidationError as exc:
            current_app.logger.warning(
                "Section %s (%s) could not be rendered: %s",
                section.id, section.type, exc,
            )
            views.append(_view(section, degraded=True))
            continue
        except Exception:
            # Any other handler failure still only costs this one section
            current_app.logger.exception(
                "Section %s (%s) failed to render", section.id, section.type,
            )
            db.session.rollback()  # a failed query must not poison later sections
            views.append(_view(section, degraded=True))
            continue

        views.append(_view(section, **fields))

    return views
