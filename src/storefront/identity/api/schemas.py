"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "full_name": "Ana Souza",
                    "email": "ana.souza@example.com",
                    "birth_date": "1990-03-15",
                    "tax_id": "529.982.247-25",
                    "phone": "(11) 98765-4321",
                }
            ]
        }
    }

    full_name: str = Field(..., max_length=150)
    email: str = Field(..., max_length=254)
    birth_date: str | None = Field(None, max_length=10)
    tax_id: str | None = Field(None, max_length=18)
    phone: str | None = Field(None, max_length=20)


class AddAddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "street": "Rua das Flores",
                    "number": "120",
                    "district": "Centro",
                    "city": "Campinas",
                    "complement": "Apto 12",
                    "is_default": True,
                }
            ]
        }
    }

    street: str = Field(..., max_length=200)
    number: str | None = Field(None, max_length=20)
    district: str = Field(..., max_length=100)
    city: str = Field(..., max_length=100)
    complement: str | None = Field(None, max_length=200)
    is_default: bool = False


class UpdateAddressRequest(BaseModel):
    street: str | None = Field(None, max_length=200)
    number: str | None = Field(None, max_length=20)
    district: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    complement: str | None = Field(None, max_length=200)
    is_default: bool | None = None


class AgeConsentRequest(BaseModel):
    is_adult: bool


# --- Response Schemas ---


class StatusResponse(BaseModel):
    status: str = "ok"


class CustomerIdResponse(BaseModel):
    customer_id: str


class AddressIdResponse(BaseModel):
    address_id: str


class AddressResponse(BaseModel):
    address_id: str
    street: str
    number: str | None = None
    district: str
    city: str
    complement: str | None = None
    is_default: bool = False
    formatted: str = ""


class CustomerResponse(BaseModel):
    customer_id: str
    full_name: str
    email: str
    birth_date: str | None = None
    tax_id: str
    phone: str
    registered_at: str | None = None
    addresses: list[AddressResponse] = []


class AgeConsentResponse(BaseModel):
    is_adult: bool | None = None
