from typing import ClassVar, List, Optional, Tuple
from datetime import datetime
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class CategoryBase(EmptyStringModel):
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = None
    level: Optional[str] = None
    subcategories: Optional[List[str]] = None


class CategoryRequest(CommonQueryParams):
    # "root" limits the list to top-level categories
    parent_id: Optional[str] = None


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(EmptyStringModel):
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ("name",)

    name: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[str] = None
    level: Optional[str] = None
    subcategories: Optional[List[str]] = None


class CategoryOut(CategoryBase):
    id: str
    vendor_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryTreeNode(CategoryOut):
    children: List["CategoryTreeNode"] = []
