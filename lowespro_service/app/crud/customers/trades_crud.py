# app/crud/customers/trades_crud.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import not_found
from ..common.query_helpers import build_search_filter, count_list_values
from ...models.customers.pro_customers import ProCustomer
from ...models.customers.trades import Trade
from ...models.procurement.vendors import Vendor
from ...schemas.customers.trades_schemas import TradeActivityOut, TradeCreate, TradeRequest

logger = logging.getLogger(__name__)


def get_trades(db: Session, params: TradeRequest) -> List[Trade]:
    query = db.query(Trade)

    search_filter = build_search_filter([Trade.name], params.search)
    if search_filter is not None:
        query = query.filter(search_filter)

    return query.order_by(Trade.created_at.desc()).all()


def get_trade_by_id(db: Session, trade_id: str) -> Optional[Trade]:
    return db.query(Trade).filter(Trade.id == trade_id).first()


def get_trade(db: Session, trade_id: str) -> Trade:
    db_trade = get_trade_by_id(db, trade_id)
    if not db_trade:
        return not_found("Trade")
    return db_trade


def create_trade(db: Session, trade: TradeCreate) -> Trade:
    # duplicate names fail on the unique constraint
    db_trade = Trade(**trade.model_dump())
    db.add(db_trade)
    db.commit()
    db.refresh(db_trade)
    logger.info("Created trade %s (%s)", db_trade.id, db_trade.name)
    return db_trade


def delete_trade(db: Session, trade_id: str) -> dict:
    db_trade = get_trade(db, trade_id)
    db.delete(db_trade)
    db.commit()
    logger.info("Deleted trade %s", trade_id)
    return {"success": True}

# ----------------- Activity -----------------


def trade_matches_category(trade_name: str, category: str) -> bool:
    needle = trade_name.replace("-", "", 1).lower()
    return needle in category.lower()


def get_trade_activity(db: Session) -> List[TradeActivityOut]:
    """Per trade: pro customers working it and vendors carrying a matching category."""
    customer_counts = count_list_values(db, ProCustomer.trades)
    vendor_categories = [set(c or []) for (c,) in db.query(Vendor.categories).all()]

    activity = []
    for trade in db.query(Trade).order_by(Trade.name.asc()).all():
        customer_count = customer_counts.get(trade.name, 0)
        vendor_count = sum(
            1 for categories in vendor_categories
            if any(trade_matches_category(trade.name, c) for c in categories)
        )
        activity.append(TradeActivityOut(
            id=trade.id,
            name=trade.name,
            is_default=trade.is_default,
            customer_count=customer_count,
            vendor_count=vendor_count,
            is_active=customer_count > 0 or vendor_count > 0,
        ))

    activity.sort(key=lambda a: a.customer_count, reverse=True)
    return activity
