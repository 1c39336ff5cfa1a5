from typing import ClassVar, List, Optional, Tuple
from datetime import datetime
from shared.core.schemas import CommonQueryParams, EmailContact, PhoneContact
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class ProCustomerBase(EmptyStringModel):
    business_name: str
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    phone_extension: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    trades: Optional[List[str]] = None
    preferred_brands: Optional[List[str]] = None
    notes: Optional[str] = None
    payment_preference: Optional[str] = None
    mvp_rewards_program: bool = False
    phones: Optional[List[PhoneContact]] = None
    emails: Optional[List[EmailContact]] = None


class ProCustomerRequest(CommonQueryParams):
    trade: Optional[str] = None


class ProCustomerCreate(ProCustomerBase):
    pass


class ProCustomerUpdate(EmptyStringModel):
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ("business_name", "mvp_rewards_program")

    business_name: Optional[str] = None
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    phone_extension: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    trades: Optional[List[str]] = None
    preferred_brands: Optional[List[str]] = None
    notes: Optional[str] = None
    payment_preference: Optional[str] = None
    mvp_rewards_program: Optional[bool] = None
    phones: Optional[List[PhoneContact]] = None
    emails: Optional[List[EmailContact]] = None


class ProCustomerOut(ProCustomerBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
