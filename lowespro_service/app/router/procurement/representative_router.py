# app/router/procurement/representative_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse
from shared.helpers.json_response_helper import invalid_id
from ...schemas.procurement.representatives_schemas import (
    RepresentativeCreate, RepresentativeOut, RepresentativeRequest, RepresentativeUpdate)
from ...crud.procurement import representatives_crud as crud

router = APIRouter(prefix="/api/representatives", tags=["representatives"])


@router.get("", response_model=Union[RepresentativeOut, List[RepresentativeOut]])
def get_representatives(
    representative_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    vendor_id: Optional[str] = Query(None, alias="vendorId"),
    db: Session = Depends(get_db)
):
    if representative_id:
        return crud.get_representative(db, representative_id)
    params = RepresentativeRequest(search=search, vendor_id=vendor_id)
    return crud.get_representatives(db, params)


@router.post("", response_model=RepresentativeOut, status_code=201)
def create_representative(representative: RepresentativeCreate, db: Session = Depends(get_db)):
    return crud.create_representative(db, representative)


@router.patch("", response_model=RepresentativeOut)
def patch_representative_by_query(
    representative: RepresentativeUpdate,
    representative_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not representative_id:
        return invalid_id("representative")
    return crud.update_representative(db, representative_id, representative)


@router.put("", response_model=RepresentativeOut)
def replace_representative_by_query(
    representative: RepresentativeCreate,
    representative_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not representative_id:
        return invalid_id("representative")
    return crud.update_representative(db, representative_id, representative, replace=True)


@router.delete("", response_model=DeleteResponse)
def delete_representative_by_query(
    representative_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not representative_id:
        return invalid_id("representative")
    return crud.delete_representative(db, representative_id)


@router.get("/{representative_id}", response_model=RepresentativeOut)
def get_representative(representative_id: str, db: Session = Depends(get_db)):
    return crud.get_representative(db, representative_id)


@router.patch("/{representative_id}", response_model=RepresentativeOut)
def patch_representative(
    representative_id: str,
    representative: RepresentativeUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_representative(db, representative_id, representative)


@router.put("/{representative_id}", response_model=RepresentativeOut)
def replace_representative(
    representative_id: str,
    representative: RepresentativeCreate,
    db: Session = Depends(get_db)
):
    return crud.update_representative(db, representative_id, representative, replace=True)


@router.delete("/{representative_id}", response_model=DeleteResponse)
def delete_representative(representative_id: str, db: Session = Depends(get_db)):
    return crud.delete_representative(db, representative_id)
