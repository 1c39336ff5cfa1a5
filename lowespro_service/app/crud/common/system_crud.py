# app/crud/common/system_crud.py
import logging
from typing import Any, Dict, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import utc_now
from ..catalog import categories_crud
from ...models.catalog.categories import Category
from ...models.procurement.representatives import Representative
from ...models.procurement.vendors import Vendor
from ...schemas.procurement.representatives_schemas import RepresentativeOut
from ...schemas.procurement.vendors_schemas import VendorOut

logger = logging.getLogger(__name__)


def health_check(db: Session) -> Tuple[Dict[str, Any], int]:
    checks: Dict[str, Any] = {
        "timestamp": utc_now().isoformat(),
        "environment": settings.ENVIRONMENT,
        "databaseUrlSet": bool(settings.DATABASE_URL or settings.DB_HOST),
    }

    try:
        checks["vendorCount"] = db.query(func.count(Vendor.id)).scalar() or 0
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        checks.update(status="error", database="unavailable", error="Database unavailable")
        return checks, 500

    checks.update(status="ok", database="connected")
    return checks, 200


def _newest(db: Session, model):
    return db.query(model).order_by(model.created_at.desc()).first()


def _as_json(out) -> Dict[str, Any] | None:
    return out.model_dump(mode="json", by_alias=True) if out is not None else None


def debug_snapshot(db: Session) -> Dict[str, Any]:
    vendor = _newest(db, Vendor)
    rep = _newest(db, Representative)
    category = _newest(db, Category)

    return {
        "status": "ok",
        "vendorCount": db.query(func.count(Vendor.id)).scalar() or 0,
        "repCount": db.query(func.count(Representative.id)).scalar() or 0,
        "catCount": db.query(func.count(Category.id)).scalar() or 0,
        "sampleVendor": _as_json(vendor and VendorOut.model_validate(vendor)),
        "sampleRep": _as_json(rep and RepresentativeOut.model_validate(rep)),
        "sampleCategory": _as_json(category and categories_crud.get_category(db, category.id)),
    }
