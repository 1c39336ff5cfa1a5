# app/router/catalog/service_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse
from shared.helpers.json_response_helper import invalid_id
from ...schemas.catalog.services_schemas import ServiceCreate, ServiceOut, ServiceRequest, ServiceUpdate
from ...crud.catalog import services_crud as crud

router = APIRouter(prefix="/api/services", tags=["services"])


@router.get("", response_model=Union[ServiceOut, List[ServiceOut]])
def get_services(
    service_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    if service_id:
        return crud.get_service(db, service_id)
    return crud.get_services(db, ServiceRequest(search=search))


@router.post("", response_model=ServiceOut, status_code=201)
def create_service(service: ServiceCreate, db: Session = Depends(get_db)):
    return crud.create_service(db, service)


@router.patch("", response_model=ServiceOut)
def patch_service_by_query(
    service: ServiceUpdate,
    service_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not service_id:
        return invalid_id("service")
    return crud.update_service(db, service_id, service)


@router.put("", response_model=ServiceOut)
def replace_service_by_query(
    service: ServiceCreate,
    service_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not service_id:
        return invalid_id("service")
    return crud.update_service(db, service_id, service, replace=True)


@router.delete("", response_model=DeleteResponse)
def delete_service_by_query(
    service_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not service_id:
        return invalid_id("service")
    return crud.delete_service(db, service_id)


@router.get("/{service_id}", response_model=ServiceOut)
def get_service(service_id: str, db: Session = Depends(get_db)):
    return crud.get_service(db, service_id)


@router.patch("/{service_id}", response_model=ServiceOut)
def patch_service(service_id: str, service: ServiceUpdate, db: Session = Depends(get_db)):
    return crud.update_service(db, service_id, service)


@router.put("/{service_id}", response_model=ServiceOut)
def replace_service(service_id: str, service: ServiceCreate, db: Session = Depends(get_db)):
    return crud.update_service(db, service_id, service, replace=True)


@router.delete("/{service_id}", response_model=DeleteResponse)
def delete_service(service_id: str, db: Session = Depends(get_db)):
    return crud.delete_service(db, service_id)
