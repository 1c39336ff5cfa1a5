from typing import ClassVar, Optional, Tuple
from datetime import datetime
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class BrandBase(EmptyStringModel):
    name: str
    description: Optional[str] = None
    is_generic: bool = False
    industry: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    template_id: Optional[str] = None
    parent_brand_id: Optional[str] = None


class BrandRequest(CommonQueryParams):
    industry: Optional[str] = None
    is_generic: Optional[bool] = None


class BrandCreate(BrandBase):
    pass


class BrandUpdate(EmptyStringModel):
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ("name", "is_generic")

    name: Optional[str] = None
    description: Optional[str] = None
    is_generic: Optional[bool] = None
    industry: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    template_id: Optional[str] = None
    parent_brand_id: Optional[str] = None


class BrandOut(BrandBase):
    id: str
    vendor_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
