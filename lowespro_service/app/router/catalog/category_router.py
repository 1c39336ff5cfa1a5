# app/router/catalog/category_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse
from shared.helpers.json_response_helper import invalid_id
from ...schemas.catalog.categories_schemas import (
    CategoryCreate, CategoryOut, CategoryRequest, CategoryTreeNode, CategoryUpdate)
from ...crud.catalog import categories_crud as crud

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=Union[CategoryOut, List[CategoryOut]])
def get_categories(
    category_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    parent_id: Optional[str] = Query(None, alias="parentId"),
    db: Session = Depends(get_db)
):
    if category_id:
        return crud.get_category(db, category_id)
    return crud.get_categories(db, CategoryRequest(search=search, parent_id=parent_id))

#  static routes above the parameterized ones


@router.get("/tree", response_model=List[CategoryTreeNode])
def get_category_tree(db: Session = Depends(get_db)):
    return crud.get_category_tree(db)


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    return crud.create_category(db, category)


@router.patch("", response_model=CategoryOut)
def patch_category_by_query(
    category: CategoryUpdate,
    category_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not category_id:
        return invalid_id("category")
    return crud.update_category(db, category_id, category)


@router.put("", response_model=CategoryOut)
def replace_category_by_query(
    category: CategoryCreate,
    category_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not category_id:
        return invalid_id("category")
    return crud.update_category(db, category_id, category, replace=True)


@router.delete("", response_model=DeleteResponse)
def delete_category_by_query(
    category_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not category_id:
        return invalid_id("category")
    return crud.delete_category(db, category_id)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: str, db: Session = Depends(get_db)):
    return crud.get_category(db, category_id)


@router.patch("/{category_id}", response_model=CategoryOut)
def patch_category(category_id: str, category: CategoryUpdate, db: Session = Depends(get_db)):
    return crud.update_category(db, category_id, category)


@router.put("/{category_id}", response_model=CategoryOut)
def replace_category(category_id: str, category: CategoryCreate, db: Session = Depends(get_db)):
    return crud.update_category(db, category_id, category, replace=True)


@router.delete("/{category_id}", response_model=DeleteResponse)
def delete_category(category_id: str, db: Session = Depends(get_db)):
    return crud.delete_category(db, category_id)
