# app/crud/procurement/vendors_crud.py
import logging
import re
from typing import List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.core.database import utc_now
from shared.helpers.json_response_helper import not_found
from ..common.query_helpers import build_search_filter, json_list_contains
from ...models.procurement.representatives import Representative
from ...models.procurement.sequence_counters import SequenceCounter
from ...models.procurement.vendors import Vendor
from ...schemas.procurement.vendors_schemas import VendorCreate, VendorRequest, VendorUpdate

logger = logging.getLogger(__name__)

VENDOR_NUMBER_SEQUENCE = "vendor_number"
VENDOR_NUMBER_PATTERN = re.compile(r"^V#(\d+)$")
MAX_CREATE_ATTEMPTS = 3

# ----------------- Vendor numbers -----------------


def format_vendor_number(sequence: int) -> str:
    return f"V#{sequence:05d}"


def parse_vendor_number(vendor_number: Optional[str]) -> Optional[int]:
    match = VENDOR_NUMBER_PATTERN.match(vendor_number or "")
    return int(match.group(1)) if match else None


def highest_vendor_number(db: Session) -> int:
    numbers = [parse_vendor_number(n) for (n,) in db.query(Vendor.vendor_number).all()]
    return max([n for n in numbers if n is not None], default=0)


def next_vendor_number(db: Session) -> str:
    """Take the next value from the vendor-number counter inside the caller's transaction.

    The UPDATE locks the counter row until the caller commits or rolls back,
    so concurrent creates are handed distinct numbers. The counter is seeded
    from existing vendors the first time it is used.
    """
    updated = (
        db.query(SequenceCounter)
        .filter(SequenceCounter.name == VENDOR_NUMBER_SEQUENCE)
        .update({SequenceCounter.value: SequenceCounter.value + 1}, synchronize_session=False)
    )
    if not updated:
        db.add(SequenceCounter(name=VENDOR_NUMBER_SEQUENCE,
               value=highest_vendor_number(db) + 1))
        db.flush()

    value = (
        db.query(SequenceCounter.value)
        .filter(SequenceCounter.name == VENDOR_NUMBER_SEQUENCE)
        .scalar()
    )
    return format_vendor_number(value)


def resync_vendor_counter(db: Session):
    """Move the counter past any vendor number already taken, committed on its own."""
    highest = highest_vendor_number(db)
    (
        db.query(SequenceCounter)
        .filter(SequenceCounter.name == VENDOR_NUMBER_SEQUENCE, SequenceCounter.value < highest)
        .update({SequenceCounter.value: highest}, synchronize_session=False)
    )
    db.commit()

# ----------------- Build Filters for Vendors -----------------


def build_vendor_filters(db: Session, params: VendorRequest):
    filters = []

    search_filter = build_search_filter(
        [Vendor.company_name, Vendor.vendor_number], params.search)
    if search_filter is not None:
        filters.append(search_filter)

    if params.category:
        filters.append(json_list_contains(db, Vendor.categories, params.category))

    if params.service:
        filters.append(json_list_contains(db, Vendor.services, params.service))

    if params.brand_id:
        filters.append(json_list_contains(db, Vendor.brands, params.brand_id))

    return filters

# ----------------- Get All Vendors -----------------


def get_vendors(db: Session, params: VendorRequest) -> List[Vendor]:
    filters = build_vendor_filters(db, params)
    return (
        db.query(Vendor)
        .filter(*filters)
        .order_by(Vendor.created_at.desc())
        .all()
    )


def get_vendor_by_id(db: Session, vendor_id: str) -> Optional[Vendor]:
    return db.query(Vendor).filter(Vendor.id == vendor_id).first()


def get_vendor(db: Session, vendor_id: str) -> Vendor:
    db_vendor = get_vendor_by_id(db, vendor_id)
    if not db_vendor:
        return not_found("Vendor")
    return db_vendor


def create_vendor(db: Session, vendor: VendorCreate) -> Vendor:
    vendor_data = vendor.model_dump()

    for attempt in range(1, MAX_CREATE_ATTEMPTS + 1):
        try:
            db_vendor = Vendor(**vendor_data, vendor_number=next_vendor_number(db))
            db.add(db_vendor)
            db.commit()
        except IntegrityError:
            db.rollback()
            if attempt == MAX_CREATE_ATTEMPTS:
                raise
            logger.warning(
                "Vendor number collision, retrying (attempt %s of %s)", attempt, MAX_CREATE_ATTEMPTS)
            # the rollback undid the increment too
            resync_vendor_counter(db)
            continue

        db.refresh(db_vendor)
        logger.info("Created vendor %s (%s)", db_vendor.id, db_vendor.vendor_number)
        return db_vendor


def update_vendor(db: Session, vendor_id: str, vendor: Union[VendorUpdate, VendorCreate], replace: bool = False) -> Vendor:
    db_vendor = get_vendor(db, vendor_id)

    # PUT replaces every client-owned field, PATCH only the ones sent
    update_data = vendor.model_dump() if replace else vendor.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_vendor, key, value)
    db_vendor.updated_at = utc_now()

    db.commit()
    db.refresh(db_vendor)
    logger.info("Updated vendor %s", vendor_id)
    return db_vendor

# ----------------- Delete -----------------


def delete_vendor(db: Session, vendor_id: str) -> dict:
    db_vendor = get_vendor(db, vendor_id)

    # representatives keep their vendor_name snapshot but lose the link
    db.query(Representative).filter(Representative.vendor_id == vendor_id).update(
        {Representative.vendor_id: None, Representative.updated_at: utc_now()},
        synchronize_session=False)
    db.delete(db_vendor)
    db.commit()
    logger.info("Deleted vendor %s", vendor_id)
    return {"success": True}
