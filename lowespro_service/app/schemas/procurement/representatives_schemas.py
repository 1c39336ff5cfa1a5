from typing import ClassVar, List, Optional, Tuple
from datetime import datetime
from shared.core.schemas import CommonQueryParams, EmailContact, PhoneContact
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class RepresentativeBase(EmptyStringModel):
    name: str
    position: Optional[str] = None
    vendor_id: Optional[str] = None
    vendor_name: Optional[str] = None
    cell_phone: Optional[str] = None
    cell_phone_extension: Optional[str] = None
    office_phone: Optional[str] = None
    office_phone_extension: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    phones: Optional[List[PhoneContact]] = None
    emails: Optional[List[EmailContact]] = None


class RepresentativeRequest(CommonQueryParams):
    vendor_id: Optional[str] = None


class RepresentativeCreate(RepresentativeBase):
    pass


class RepresentativeUpdate(EmptyStringModel):
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ("name",)

    name: Optional[str] = None
    position: Optional[str] = None
    vendor_id: Optional[str] = None
    vendor_name: Optional[str] = None
    cell_phone: Optional[str] = None
    cell_phone_extension: Optional[str] = None
    office_phone: Optional[str] = None
    office_phone_extension: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    phones: Optional[List[PhoneContact]] = None
    emails: Optional[List[EmailContact]] = None


class RepresentativeOut(RepresentativeBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
