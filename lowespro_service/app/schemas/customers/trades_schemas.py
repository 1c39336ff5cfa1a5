from typing import Optional
from datetime import datetime
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class TradeBase(EmptyStringModel):
    name: str
    is_default: bool = False


class TradeRequest(CommonQueryParams):
    pass


class TradeCreate(TradeBase):
    pass


class TradeOut(TradeBase):
    id: str
    created_at: Optional[datetime] = None


class TradeActivityOut(EmptyStringModel):
    id: str
    name: str
    is_default: Optional[bool] = False
    customer_count: int = 0
    vendor_count: int = 0
    is_active: bool = False
