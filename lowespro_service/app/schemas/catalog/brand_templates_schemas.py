from typing import ClassVar, List, Optional, Tuple
from datetime import datetime
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class TemplateCategory(EmptyStringModel):
    name: str
    description: Optional[str] = None
    subcategories: Optional[List["TemplateCategory"]] = None


class TemplateDefinition(EmptyStringModel):
    categories: List[TemplateCategory] = []


class BrandTemplateBase(EmptyStringModel):
    name: str
    description: Optional[str] = None
    template: Optional[TemplateDefinition] = None


class BrandTemplateRequest(CommonQueryParams):
    pass


class BrandTemplateCreate(BrandTemplateBase):
    pass


class BrandTemplateUpdate(EmptyStringModel):
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ("name",)

    name: Optional[str] = None
    description: Optional[str] = None
    template: Optional[TemplateDefinition] = None


class BrandTemplateOut(BrandTemplateBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
