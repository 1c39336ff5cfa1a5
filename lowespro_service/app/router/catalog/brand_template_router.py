# app/router/catalog/brand_template_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse
from shared.helpers.json_response_helper import invalid_id
from ...schemas.catalog.brand_templates_schemas import (
    BrandTemplateCreate, BrandTemplateOut, BrandTemplateRequest, BrandTemplateUpdate)
from ...crud.catalog import brand_templates_crud as crud

router = APIRouter(prefix="/api/brand-templates", tags=["brand_templates"])


@router.get("", response_model=Union[BrandTemplateOut, List[BrandTemplateOut]])
def get_brand_templates(
    template_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    if template_id:
        return crud.get_brand_template(db, template_id)
    return crud.get_brand_templates(db, BrandTemplateRequest(search=search))


@router.post("", response_model=BrandTemplateOut, status_code=201)
def create_brand_template(template: BrandTemplateCreate, db: Session = Depends(get_db)):
    return crud.create_brand_template(db, template)


@router.patch("", response_model=BrandTemplateOut)
def patch_brand_template_by_query(
    template: BrandTemplateUpdate,
    template_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not template_id:
        return invalid_id("brand template")
    return crud.update_brand_template(db, template_id, template)


@router.put("", response_model=BrandTemplateOut)
def replace_brand_template_by_query(
    template: BrandTemplateCreate,
    template_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not template_id:
        return invalid_id("brand template")
    return crud.update_brand_template(db, template_id, template, replace=True)


@router.delete("", response_model=DeleteResponse)
def delete_brand_template_by_query(
    template_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not template_id:
        return invalid_id("brand template")
    return crud.delete_brand_template(db, template_id)


@router.get("/{template_id}", response_model=BrandTemplateOut)
def get_brand_template(template_id: str, db: Session = Depends(get_db)):
    return crud.get_brand_template(db, template_id)


@router.patch("/{template_id}", response_model=BrandTemplateOut)
def patch_brand_template(template_id: str, template: BrandTemplateUpdate, db: Session = Depends(get_db)):
    return crud.update_brand_template(db, template_id, template)


@router.put("/{template_id}", response_model=BrandTemplateOut)
def replace_brand_template(template_id: str, template: BrandTemplateCreate, db: Session = Depends(get_db)):
    return crud.update_brand_template(db, template_id, template, replace=True)


@router.delete("/{template_id}", response_model=DeleteResponse)
def delete_brand_template(template_id: str, db: Session = Depends(get_db)):
    return crud.delete_brand_template(db, template_id)
