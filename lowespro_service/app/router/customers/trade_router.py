# app/router/customers/trade_router.py
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DeleteResponse
from shared.helpers.json_response_helper import invalid_id
from ...schemas.customers.trades_schemas import TradeActivityOut, TradeCreate, TradeOut, TradeRequest
from ...crud.customers import trades_crud as crud

router = APIRouter(prefix="/api/trades", tags=["trades"])


@router.get("", response_model=Union[TradeOut, List[TradeOut]])
def get_trades(
    trade_id: Optional[str] = Query(None, alias="id"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    if trade_id:
        return crud.get_trade(db, trade_id)
    return crud.get_trades(db, TradeRequest(search=search))


@router.get("/activity", response_model=List[TradeActivityOut])
def get_trade_activity(db: Session = Depends(get_db)):
    return crud.get_trade_activity(db)


@router.post("", response_model=TradeOut, status_code=201)
def create_trade(trade: TradeCreate, db: Session = Depends(get_db)):
    return crud.create_trade(db, trade)


@router.delete("", response_model=DeleteResponse)
def delete_trade_by_query(
    trade_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    if not trade_id:
        return invalid_id("trade")
    return crud.delete_trade(db, trade_id)


@router.get("/{trade_id}", response_model=TradeOut)
def get_trade(trade_id: str, db: Session = Depends(get_db)):
    return crud.get_trade(db, trade_id)


@router.delete("/{trade_id}", response_model=DeleteResponse)
def delete_trade(trade_id: str, db: Session = Depends(get_db)):
    return crud.delete_trade(db, trade_id)
