# app/crud/customers/pro_customers_crud.py
import logging
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from shared.core.database import utc_now
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import not_found
from ..common.query_helpers import build_search_filter, json_list_contains
from ...enum.customers_enum import PaymentPreference
from ...models.customers.pro_customers import ProCustomer
from ...schemas.customers.pro_customers_schemas import (
    ProCustomerCreate, ProCustomerRequest, ProCustomerUpdate)

logger = logging.getLogger(__name__)


def build_pro_customer_filters(db: Session, params: ProCustomerRequest):
    filters = []

    search_filter = build_search_filter(
        [ProCustomer.business_name, ProCustomer.contact_name], params.search)
    if search_filter is not None:
        filters.append(search_filter)

    if params.trade:
        filters.append(json_list_contains(db, ProCustomer.trades, params.trade))

    return filters


def get_pro_customers(db: Session, params: ProCustomerRequest) -> List[ProCustomer]:
    return (
        db.query(ProCustomer)
        .filter(*build_pro_customer_filters(db, params))
        .order_by(ProCustomer.created_at.desc())
        .all()
    )


def get_pro_customer_by_id(db: Session, customer_id: str) -> Optional[ProCustomer]:
    return db.query(ProCustomer).filter(ProCustomer.id == customer_id).first()


def get_pro_customer(db: Session, customer_id: str) -> ProCustomer:
    db_customer = get_pro_customer_by_id(db, customer_id)
    if not db_customer:
        return not_found("Pro customer")
    return db_customer


def create_pro_customer(db: Session, customer: ProCustomerCreate) -> ProCustomer:
    db_customer = ProCustomer(**customer.model_dump())
    db.add(db_customer)
    db.commit()
    db.refresh(db_customer)
    logger.info("Created pro customer %s", db_customer.id)
    return db_customer


def update_pro_customer(
        db: Session,
        customer_id: str,
        customer: Union[ProCustomerUpdate, ProCustomerCreate],
        replace: bool = False) -> ProCustomer:
    db_customer = get_pro_customer(db, customer_id)

    update_data = customer.model_dump() if replace else customer.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_customer, field, value)
    db_customer.updated_at = utc_now()

    db.commit()
    db.refresh(db_customer)
    logger.info("Updated pro customer %s", customer_id)
    return db_customer


def delete_pro_customer(db: Session, customer_id: str) -> dict:
    db_customer = get_pro_customer(db, customer_id)
    db.delete(db_customer)
    db.commit()
    logger.info("Deleted pro customer %s", customer_id)
    return {"success": True}


def payment_preference_lookup() -> List[Lookup]:
    return [
        Lookup(id=preference.value, name=preference.name.replace("_", " ").title())
        for preference in PaymentPreference
    ]
