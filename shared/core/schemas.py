from pydantic import BaseModel, model_serializer
from typing import Optional

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class CommonQueryParams(EmptyStringModel):
    search: Optional[str] = None


class PhoneContact(EmptyStringModel):
    number: str
    label: str
    extension: Optional[str] = None

    # omit absent members so contact lists read back as written
    @model_serializer(mode="wrap")
    def drop_empty(self, handler):
        return {k: v for k, v in handler(self).items() if v is not None}


class EmailContact(EmptyStringModel):
    address: str
    label: str


class Lookup(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class DeleteResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
