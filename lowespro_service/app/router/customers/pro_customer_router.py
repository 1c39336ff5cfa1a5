# app/router/customers/pro_customer_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse, Lookup
from shared.helpers.json_response_helper import invalid_id
from ...schemas.customers.pro_customers_schemas import (
    ProCustomerCreate, ProCustomerOut, ProCustomerRequest, ProCustomerUpdate)
from ...crud.customers import pro_customers_crud as crud

router = APIRouter(prefix="/api/pro-customers", tags=["pro_customers"])


@router.get("", response_model=Union[ProCustomerOut, List[ProCustomerOut]])
def get_pro_customers(
    customer_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    trade: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    if customer_id:
        return crud.get_pro_customer(db, customer_id)
    return crud.get_pro_customers(db, ProCustomerRequest(search=search, trade=trade))


@router.get("/payment-preference-lookup", response_model=List[Lookup])
def payment_preference_lookup():
    return crud.payment_preference_lookup()


@router.post("", response_model=ProCustomerOut, status_code=201)
def create_pro_customer(customer: ProCustomerCreate, db: Session = Depends(get_db)):
    return crud.create_pro_customer(db, customer)


@router.patch("", response_model=ProCustomerOut)
def patch_pro_customer_by_query(
    customer: ProCustomerUpdate,
    customer_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not customer_id:
        return invalid_id("customer")
    return crud.update_pro_customer(db, customer_id, customer)


@router.put("", response_model=ProCustomerOut)
def replace_pro_customer_by_query(
    customer: ProCustomerCreate,
    customer_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not customer_id:
        return invalid_id("customer")
    return crud.update_pro_customer(db, customer_id, customer, replace=True)


@router.delete("", response_model=DeleteResponse)
def delete_pro_customer_by_query(
    customer_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not customer_id:
        return invalid_id("customer")
    return crud.delete_pro_customer(db, customer_id)


@router.get("/{customer_id}", response_model=ProCustomerOut)
def get_pro_customer(customer_id: str, db: Session = Depends(get_db)):
    return crud.get_pro_customer(db, customer_id)


@router.patch("/{customer_id}", response_model=ProCustomerOut)
def patch_pro_customer(customer_id: str, customer: ProCustomerUpdate, db: Session = Depends(get_db)):
    return crud.update_pro_customer(db, customer_id, customer)


@router.put("/{customer_id}", response_model=ProCustomerOut)
def replace_pro_customer(customer_id: str, customer: ProCustomerCreate, db: Session = Depends(get_db)):
    return crud.update_pro_customer(db, customer_id, customer, replace=True)


@router.delete("/{customer_id}", response_model=DeleteResponse)
def delete_pro_customer(customer_id: str, db: Session = Depends(get_db)):
    return crud.delete_pro_customer(db, customer_id)
