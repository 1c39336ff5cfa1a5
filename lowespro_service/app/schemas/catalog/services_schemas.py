from typing import ClassVar, Optional, Tuple
from datetime import datetime
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class ServiceBase(EmptyStringModel):
    name: str
    description: Optional[str] = None


class ServiceRequest(CommonQueryParams):
    pass


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(EmptyStringModel):
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ("name",)

    name: Optional[str] = None
    description: Optional[str] = None


class ServiceOut(ServiceBase):
    id: str
    vendor_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
