# app/crud/procurement/representatives_crud.py
import logging
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from shared.core.database import utc_now
from shared.helpers.json_response_helper import error_response, not_found
from ..common.query_helpers import build_search_filter
from ...models.procurement.representatives import Representative
from ...models.procurement.vendors import Vendor
from ...schemas.procurement.representatives_schemas import (
    RepresentativeCreate, RepresentativeRequest, RepresentativeUpdate)

logger = logging.getLogger(__name__)


def build_representative_filters(params: RepresentativeRequest):
    filters = []

    if params.vendor_id:
        filters.append(Representative.vendor_id == params.vendor_id)

    search_filter = build_search_filter(
        [Representative.name, Representative.vendor_name], params.search)
    if search_filter is not None:
        filters.append(search_filter)

    return filters


def get_representatives(db: Session, params: RepresentativeRequest) -> List[Representative]:
    filters = build_representative_filters(params)
    return (
        db.query(Representative)
        .filter(*filters)
        .order_by(Representative.created_at.desc())
        .all()
    )


def get_representative_by_id(db: Session, representative_id: str) -> Optional[Representative]:
    return db.query(Representative).filter(Representative.id == representative_id).first()


def get_representative(db: Session, representative_id: str) -> Representative:
    db_rep = get_representative_by_id(db, representative_id)
    if not db_rep:
        return not_found("Representative")
    return db_rep


def resolve_vendor(db: Session, vendor_id: str) -> Vendor:
    vendor = db.get(Vendor, vendor_id)
    if not vendor:
        return error_response(message=f"Vendor '{vendor_id}' does not exist")
    return vendor


def create_representative(db: Session, representative: RepresentativeCreate) -> Representative:
    rep_data = representative.model_dump()

    if rep_data.get("vendor_id"):
        vendor = resolve_vendor(db, rep_data["vendor_id"])
        # snapshot only, later vendor renames do not propagate
        if not rep_data.get("vendor_name"):
            rep_data["vendor_name"] = vendor.company_name

    db_rep = Representative(**rep_data)
    db.add(db_rep)
    db.commit()
    db.refresh(db_rep)
    logger.info("Created representative %s for vendor %s", db_rep.id, db_rep.vendor_id)
    return db_rep


def update_representative(
        db: Session,
        representative_id: str,
        representative: Union[RepresentativeUpdate, RepresentativeCreate],
        replace: bool = False) -> Representative:
    db_rep = get_representative(db, representative_id)

    update_data = representative.model_dump() if replace else representative.model_dump(exclude_unset=True)

    new_vendor_id = update_data.get("vendor_id")
    if new_vendor_id and (replace or new_vendor_id != db_rep.vendor_id):
        vendor = resolve_vendor(db, new_vendor_id)
        if not update_data.get("vendor_name"):
            update_data["vendor_name"] = vendor.company_name

    for key, value in update_data.items():
        setattr(db_rep, key, value)
    db_rep.updated_at = utc_now()

    db.commit()
    db.refresh(db_rep)
    logger.info("Updated representative %s", representative_id)
    return db_rep


def delete_representative(db: Session, representative_id: str) -> dict:
    db_rep = get_representative(db, representative_id)
    db.delete(db_rep)
    db.commit()
    logger.info("Deleted representative %s", representative_id)
    return {"success": True}
