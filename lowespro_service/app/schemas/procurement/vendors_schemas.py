from typing import ClassVar, List, Optional, Tuple
from datetime import datetime
from shared.core.schemas import CommonQueryParams, EmailContact, PhoneContact
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# ---------------- Base Vendor ----------------


class VendorBase(EmptyStringModel):
    company_name: str
    phone: Optional[str] = None
    phone_extension: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    categories: Optional[List[str]] = None
    brands: Optional[List[str]] = None  # brand ids
    services: Optional[List[str]] = None
    phones: Optional[List[PhoneContact]] = None
    emails: Optional[List[EmailContact]] = None


# ---------------- Vendor Request ----------------
class VendorRequest(CommonQueryParams):
    category: Optional[str] = None
    service: Optional[str] = None
    brand_id: Optional[str] = None


# ---------------- Vendor Create/Update ----------------
class VendorCreate(VendorBase):
    pass


class VendorUpdate(EmptyStringModel):
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ("company_name",)

    company_name: Optional[str] = None
    phone: Optional[str] = None
    phone_extension: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    categories: Optional[List[str]] = None
    brands: Optional[List[str]] = None
    services: Optional[List[str]] = None
    phones: Optional[List[PhoneContact]] = None
    emails: Optional[List[EmailContact]] = None


# ---------------- Vendor Output ----------------
class VendorOut(VendorBase):
    id: str
    vendor_number: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
