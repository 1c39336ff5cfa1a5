# app/crud/catalog/services_crud.py
import logging
from collections import Counter
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from shared.core.database import utc_now
from shared.helpers.json_response_helper import not_found
from ..common.query_helpers import build_search_filter, count_list_values
from ...models.catalog.services import Service
from ...models.procurement.vendors import Vendor
from ...schemas.catalog.services_schemas import ServiceCreate, ServiceOut, ServiceRequest, ServiceUpdate

logger = logging.getLogger(__name__)


def to_service_out(service: Service, vendor_counts: Counter) -> ServiceOut:
    out = ServiceOut.model_validate(service)
    return out.model_copy(update={"vendor_count": vendor_counts.get(service.name, 0)})


def get_services(db: Session, params: ServiceRequest) -> List[ServiceOut]:
    query = db.query(Service)

    search_filter = build_search_filter([Service.name, Service.description], params.search)
    if search_filter is not None:
        query = query.filter(search_filter)

    services = query.order_by(Service.created_at.desc()).all()
    vendor_counts = count_list_values(db, Vendor.services)
    return [to_service_out(s, vendor_counts) for s in services]


def get_service_by_id(db: Session, service_id: str) -> Optional[Service]:
    return db.query(Service).filter(Service.id == service_id).first()


def get_service(db: Session, service_id: str) -> ServiceOut:
    db_service = get_service_by_id(db, service_id)
    if not db_service:
        return not_found("Service")
    return to_service_out(db_service, count_list_values(db, Vendor.services))


def create_service(db: Session, service: ServiceCreate) -> ServiceOut:
    db_service = Service(**service.model_dump())
    db.add(db_service)
    db.commit()
    db.refresh(db_service)
    logger.info("Created service %s", db_service.id)
    return get_service(db, db_service.id)


def update_service(
        db: Session,
        service_id: str,
        service: Union[ServiceUpdate, ServiceCreate],
        replace: bool = False) -> ServiceOut:
    db_service = get_service_by_id(db, service_id)
    if not db_service:
        return not_found("Service")

    update_data = service.model_dump() if replace else service.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_service, field, value)
    db_service.updated_at = utc_now()

    db.commit()
    logger.info("Updated service %s", service_id)
    return get_service(db, service_id)


def delete_service(db: Session, service_id: str) -> dict:
    db_service = get_service_by_id(db, service_id)
    if not db_service:
        return not_found("Service")

    db.delete(db_service)
    db.commit()
    logger.info("Deleted service %s", service_id)
    return {"success": True}
