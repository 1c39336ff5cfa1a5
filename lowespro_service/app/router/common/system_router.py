# app/router/common/system_router.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ...crud.common import system_crud as crud

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    checks, status_code = crud.health_check(db)
    return JSONResponse(content=checks, status_code=status_code)


@router.get("/debug")
def debug(db: Session = Depends(get_db)):
    return crud.debug_snapshot(db)
