# app/crud/catalog/brand_templates_crud.py
import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.database import utc_now
from shared.helpers.json_response_helper import error_response, not_found
from ..common.query_helpers import build_search_filter
from ...models.catalog.brand_templates import BrandTemplate
from ...models.catalog.brands import Brand
from ...schemas.catalog.brand_templates_schemas import (
    BrandTemplateCreate, BrandTemplateRequest, BrandTemplateUpdate)

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " > "


def template_category_paths(brand_name: str, categories: List[Dict[str, Any]], parent_path: str = "") -> List[str]:
    """Flatten a template's category tree into "Brand > Category > Sub" paths, depth first."""
    paths = []
    for category in categories or []:
        name = category.get("name")
        if not name:
            continue
        current = f"{parent_path or brand_name}{PATH_SEPARATOR}{name}"
        paths.append(current)
        paths.extend(template_category_paths(
            brand_name, category.get("subcategories") or [], current))
    return paths


def get_brand_templates(db: Session, params: BrandTemplateRequest) -> List[BrandTemplate]:
    query = db.query(BrandTemplate)

    search_filter = build_search_filter([BrandTemplate.name], params.search)
    if search_filter is not None:
        query = query.filter(search_filter)

    return query.order_by(BrandTemplate.created_at.desc()).all()


def get_brand_template_by_id(db: Session, template_id: str) -> Optional[BrandTemplate]:
    return db.query(BrandTemplate).filter(BrandTemplate.id == template_id).first()


def get_brand_template(db: Session, template_id: str) -> BrandTemplate:
    db_template = get_brand_template_by_id(db, template_id)
    if not db_template:
        return not_found("Brand template")
    return db_template


def create_brand_template(db: Session, template: BrandTemplateCreate) -> BrandTemplate:
    db_template = BrandTemplate(**template.model_dump())
    db.add(db_template)
    db.commit()
    db.refresh(db_template)
    logger.info("Created brand template %s", db_template.id)
    return db_template


def update_brand_template(
        db: Session,
        template_id: str,
        template: Union[BrandTemplateUpdate, BrandTemplateCreate],
        replace: bool = False) -> BrandTemplate:
    db_template = get_brand_template(db, template_id)

    update_data = template.model_dump() if replace else template.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_template, field, value)
    db_template.updated_at = utc_now()

    db.commit()
    db.refresh(db_template)
    logger.info("Updated brand template %s", template_id)
    return db_template


def delete_brand_template(db: Session, template_id: str) -> dict:
    db_template = get_brand_template(db, template_id)

    brand_count = db.query(func.count(Brand.id)).filter(Brand.template_id == template_id).scalar()
    if brand_count > 0:
        return error_response(
            message=f"Cannot delete template. It is used by {brand_count} brands.")

    db.delete(db_template)
    db.commit()
    logger.info("Deleted brand template %s", template_id)
    return {"success": True}
