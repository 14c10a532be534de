"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.identity.api.schemas import (
    AddAddressRequest,
    AddressIdResponse,
    AddressResponse,
    CustomerIdResponse,
    CustomerResponse,
    RegisterCustomerRequest,
    StatusResponse,
    UpdateAddressRequest,
)
from storefront.identity.customer.addresses import (
    AddAddress,
    RemoveAddress,
    SetDefaultAddress,
    UpdateAddress,
)
from storefront.identity.customer.registration import RegisterCustomer
from storefront.identity.queries import get_customer, list_addresses
from storefront.shared.formatting import format_address

router = APIRouter(prefix="/customers", tags=["customers"])


def _address_response(address) -> AddressResponse:
    return AddressResponse(
        address_id=str(address.id),
        street=address.street,
        number=address.number,
        district=address.district,
        city=address.city,
        complement=address.complement,
        is_default=bool(address.is_default),
        formatted=format_address(address),
    )


@router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        full_name=body.full_name,
        email=body.email,
        birth_date=body.birth_date,
        tax_id=body.tax_id,
        phone=body.phone,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer_profile(customer_id: str) -> CustomerResponse:
    customer = get_customer(customer_id)
    return CustomerResponse(
        customer_id=str(customer.id),
        full_name=customer.full_name,
        email=customer.email,
        birth_date=str(customer.birth_date) if customer.birth_date else None,
        tax_id=customer.tax_id,
        phone=customer.phone,
        registered_at=str(customer.registered_at) if customer.registered_at else None,
        addresses=[_address_response(a) for a in customer.sorted_addresses],
    )


@router.get("/{customer_id}/addresses", response_model=list[AddressResponse])
async def get_addresses(customer_id: str) -> list[AddressResponse]:
    return [_address_response(a) for a in list_addresses(customer_id)]


@router.post("/{customer_id}/addresses", status_code=201, response_model=AddressIdResponse)
async def add_address(customer_id: str, body: AddAddressRequest) -> AddressIdResponse:
    command = AddAddress(
        customer_id=customer_id,
        street=body.street,
        number=body.number,
        district=body.district,
        city=body.city,
        complement=body.complement,
        is_default=body.is_default,
    )
    address_id = current_domain.process(command, asynchronous=False)
    return AddressIdResponse(address_id=address_id)


@router.put("/{customer_id}/addresses/{address_id}", response_model=StatusResponse)
async def update_address(customer_id: str, address_id: str, body: UpdateAddressRequest) -> StatusResponse:
    command = UpdateAddress(
        customer_id=customer_id,
        address_id=address_id,
        street=body.street,
        number=body.number,
        district=body.district,
        city=body.city,
        complement=body.complement,
        is_default=body.is_default,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{customer_id}/addresses/{address_id}", response_model=StatusResponse)
async def remove_address(customer_id: str, address_id: str) -> StatusResponse:
    command = RemoveAddress(
        customer_id=customer_id,
        address_id=address_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.put("/{customer_id}/addresses/{address_id}/default", response_model=StatusResponse)
async def set_default_address(customer_id: str, address_id: str) -> StatusResponse:
    command = SetDefaultAddress(
        customer_id=customer_id,
        address_id=address_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
