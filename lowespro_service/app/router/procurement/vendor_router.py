# app/router/procurement/vendor_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse
from shared.helpers.json_response_helper import invalid_id
from ...schemas.procurement.vendors_schemas import VendorCreate, VendorOut, VendorRequest, VendorUpdate
from ...crud.procurement import vendors_crud as crud

router = APIRouter(prefix="/api/vendors", tags=["vendors"])

# ---------------- List / get by ?id= ----------------


@router.get("", response_model=Union[VendorOut, List[VendorOut]])
def get_vendors(
    vendor_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    service: Optional[str] = Query(None),
    brand_id: Optional[str] = Query(None, alias="brandId"),
    db: Session = Depends(get_db)
):
    if vendor_id:
        return crud.get_vendor(db, vendor_id)
    params = VendorRequest(search=search, category=category, service=service, brand_id=brand_id)
    return crud.get_vendors(db, params)

# -------create-------------------------------


@router.post("", response_model=VendorOut, status_code=201)
def create_vendor(vendor: VendorCreate, db: Session = Depends(get_db)):
    return crud.create_vendor(db, vendor)

# ---------------- Update / delete by ?id= ----------------


@router.patch("", response_model=VendorOut)
def patch_vendor_by_query(
    vendor: VendorUpdate,
    vendor_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not vendor_id:
        return invalid_id("vendor")
    return crud.update_vendor(db, vendor_id, vendor)


@router.put("", response_model=VendorOut)
def replace_vendor_by_query(
    vendor: VendorCreate,
    vendor_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not vendor_id:
        return invalid_id("vendor")
    return crud.update_vendor(db, vendor_id, vendor, replace=True)


@router.delete("", response_model=DeleteResponse)
def delete_vendor_by_query(
    vendor_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not vendor_id:
        return invalid_id("vendor")
    return crud.delete_vendor(db, vendor_id)

# ---------------- Item routes ----------------


@router.get("/{vendor_id}", response_model=VendorOut)
def get_vendor(vendor_id: str, db: Session = Depends(get_db)):
    return crud.get_vendor(db, vendor_id)


@router.patch("/{vendor_id}", response_model=VendorOut)
def patch_vendor(vendor_id: str, vendor: VendorUpdate, db: Session = Depends(get_db)):
    return crud.update_vendor(db, vendor_id, vendor)


@router.put("/{vendor_id}", response_model=VendorOut)
def replace_vendor(vendor_id: str, vendor: VendorCreate, db: Session = Depends(get_db)):
    return crud.update_vendor(db, vendor_id, vendor, replace=True)


@router.delete("/{vendor_id}", response_model=DeleteResponse)
def delete_vendor(vendor_id: str, db: Session = Depends(get_db)):
    return crud.delete_vendor(db, vendor_id)
