# app/crud/catalog/brands_crud.py
import logging
from collections import Counter
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from shared.core.database import utc_now
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found
from ..common.query_helpers import build_search_filter, count_list_values, ensure_valid_parent
from .brand_templates_crud import template_category_paths
from ...enum.catalog_enum import BrandIndustry
from ...models.catalog.brand_templates import BrandTemplate
from ...models.catalog.brands import Brand
from ...models.procurement.vendors import Vendor
from ...schemas.catalog.brands_schemas import BrandCreate, BrandOut, BrandRequest, BrandUpdate

logger = logging.getLogger(__name__)


def to_brand_out(brand: Brand, vendor_counts: Counter) -> BrandOut:
    out = BrandOut.model_validate(brand)
    return out.model_copy(update={"vendor_count": vendor_counts.get(brand.id, 0)})


def build_brand_filters(params: BrandRequest):
    filters = []

    if params.industry:
        filters.append(Brand.industry == params.industry)

    if params.is_generic is not None:
        filters.append(Brand.is_generic == params.is_generic)

    search_filter = build_search_filter([Brand.name], params.search)
    if search_filter is not None:
        filters.append(search_filter)

    return filters


def get_brands(db: Session, params: BrandRequest) -> List[BrandOut]:
    brands = (
        db.query(Brand)
        .filter(*build_brand_filters(params))
        .order_by(Brand.created_at.desc())
        .all()
    )
    vendor_counts = count_list_values(db, Vendor.brands)
    return [to_brand_out(b, vendor_counts) for b in brands]


def get_brand_by_id(db: Session, brand_id: str) -> Optional[Brand]:
    return db.query(Brand).filter(Brand.id == brand_id).first()


def get_brand(db: Session, brand_id: str) -> BrandOut:
    db_brand = get_brand_by_id(db, brand_id)
    if not db_brand:
        return not_found("Brand")
    return to_brand_out(db_brand, count_list_values(db, Vendor.brands))


def validate_brand_links(db: Session, brand_id: Optional[str], data: dict):
    if data.get("template_id") and not db.get(BrandTemplate, data["template_id"]):
        return error_response(message=f"Brand template '{data['template_id']}' does not exist")

    if data.get("parent_brand_id"):
        ensure_valid_parent(db, Brand, "parent_brand_id", brand_id, data["parent_brand_id"], "brand")


def create_brand(db: Session, brand: BrandCreate) -> BrandOut:
    brand_data = brand.model_dump()
    validate_brand_links(db, None, brand_data)

    db_brand = Brand(**brand_data)
    db.add(db_brand)
    db.commit()
    db.refresh(db_brand)
    logger.info("Created brand %s", db_brand.id)
    return get_brand(db, db_brand.id)


def update_brand(
        db: Session,
        brand_id: str,
        brand: Union[BrandUpdate, BrandCreate],
        replace: bool = False) -> BrandOut:
    db_brand = get_brand_by_id(db, brand_id)
    if not db_brand:
        return not_found("Brand")

    update_data = brand.model_dump() if replace else brand.model_dump(exclude_unset=True)
    validate_brand_links(db, brand_id, update_data)

    for field, value in update_data.items():
        setattr(db_brand, field, value)
    db_brand.updated_at = utc_now()

    db.commit()
    logger.info("Updated brand %s", brand_id)
    return get_brand(db, brand_id)


def delete_brand(db: Session, brand_id: str) -> dict:
    db_brand = get_brand_by_id(db, brand_id)
    if not db_brand:
        return not_found("Brand")

    # sub-brands outlive their parent
    db.query(Brand).filter(Brand.parent_brand_id == brand_id).update(
        {Brand.parent_brand_id: None}, synchronize_session=False)
    db.delete(db_brand)
    db.commit()
    logger.info("Deleted brand %s", brand_id)
    return {"success": True}

# ----------------- Template categories -----------------


def get_brand_categories(db: Session, brand_id: str) -> List[str]:
    db_brand = get_brand_by_id(db, brand_id)
    if not db_brand:
        return not_found("Brand")

    if not db_brand.template_id:
        return []

    template = db.get(BrandTemplate, db_brand.template_id)
    if not template or not template.template:
        return []

    return template_category_paths(db_brand.name, template.template.get("categories") or [])

# ----------------- Lookups -----------------


def brand_industry_lookup() -> List[Lookup]:
    return [
        Lookup(id=industry.value, name=industry.name.replace("_", " ").title())
        for industry in BrandIndustry
    ]
