# app/router/catalog/brand_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse, Lookup
from shared.helpers.json_response_helper import invalid_id
from ...schemas.catalog.brands_schemas import BrandCreate, BrandOut, BrandRequest, BrandUpdate
from ...crud.catalog import brands_crud as crud

router = APIRouter(prefix="/api/brands", tags=["brands"])


@router.get("", response_model=Union[BrandOut, List[BrandOut]])
def get_brands(
    brand_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    industry: Optional[str] = Query(None),
    is_generic: Optional[bool] = Query(None, alias="isGeneric"),
    db: Session = Depends(get_db)
):
    if brand_id:
        return crud.get_brand(db, brand_id)
    params = BrandRequest(search=search, industry=industry, is_generic=is_generic)
    return crud.get_brands(db, params)


@router.get("/industry-lookup", response_model=List[Lookup])
def brand_industry_lookup():
    return crud.brand_industry_lookup()


@router.post("", response_model=BrandOut, status_code=201)
def create_brand(brand: BrandCreate, db: Session = Depends(get_db)):
    return crud.create_brand(db, brand)


@router.patch("", response_model=BrandOut)
def patch_brand_by_query(
    brand: BrandUpdate,
    brand_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not brand_id:
        return invalid_id("brand")
    return crud.update_brand(db, brand_id, brand)


@router.put("", response_model=BrandOut)
def replace_brand_by_query(
    brand: BrandCreate,
    brand_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not brand_id:
        return invalid_id("brand")
    return crud.update_brand(db, brand_id, brand, replace=True)


@router.delete("", response_model=DeleteResponse)
def delete_brand_by_query(
    brand_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not brand_id:
        return invalid_id("brand")
    return crud.delete_brand(db, brand_id)


@router.get("/{brand_id}", response_model=BrandOut)
def get_brand(brand_id: str, db: Session = Depends(get_db)):
    return crud.get_brand(db, brand_id)


@router.get("/{brand_id}/categories", response_model=List[str])
def get_brand_categories(brand_id: str, db: Session = Depends(get_db)):
    return crud.get_brand_categories(db, brand_id)


@router.patch("/{brand_id}", response_model=BrandOut)
def patch_brand(brand_id: str, brand: BrandUpdate, db: Session = Depends(get_db)):
    return crud.update_brand(db, brand_id, brand)


@router.put("/{brand_id}", response_model=BrandOut)
def replace_brand(brand_id: str, brand: BrandCreate, db: Session = Depends(get_db)):
    return crud.update_brand(db, brand_id, brand, replace=True)


@router.delete("/{brand_id}", response_model=DeleteResponse)
def delete_brand(brand_id: str, db: Session = Depends(get_db)):
    return crud.delete_brand(db, brand_id)
