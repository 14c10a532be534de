"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateCartRequest(BaseModel):
    customer_id: str | None = None


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    quantity: int


class DeliveryAddressSchema(BaseModel):
    street: str | None = Field(None, max_length=200)
    number: str | None = Field(None, max_length=20)
    district: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    complement: str | None = Field(None, max_length=200)


class OrderLineSchema(BaseModel):
    product_id: str
    quantity: int


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "cust-001",
                    "items": [{"product_id": "prod-001", "quantity": 2}],
                    "address": {
                        "street": "Rua das Flores",
                        "number": "120",
                        "district": "Centro",
                        "city": "Campinas",
                        "complement": "Apto 12",
                    },
                    "shipping_fee": 15.0,
                }
            ]
        }
    }

    customer_id: str | None = None
    items: list[OrderLineSchema] = []
    address: DeliveryAddressSchema | None = None
    shipping_fee: float = 0.0


class CheckoutCartRequest(BaseModel):
    customer_id: str | None = None
    address: DeliveryAddressSchema | None = None
    shipping_fee: float = 0.0


class UpdateOrderStatusRequest(BaseModel):
    status: str  # Processing, Confirmed, Preparing, Shipped, Delivered, Cancelled


# --- Response Schemas ---


class StatusResponse(BaseModel):
    status: str = "ok"


class CartIdResponse(BaseModel):
    cart_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class CartItemResponse(BaseModel):
    product_id: str
    name: str
    unit_price: float
    quantity: int
    subtotal: float
    image_url: str | None = None


class CartResponse(BaseModel):
    cart_id: str
    customer_id: str | None = None
    items: list[CartItemResponse] = []
    total: float = 0.0
    item_count: int = 0


class OrderItemResponse(BaseModel):
    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    subtotal: float


class OrderResponse(BaseModel):
    order_id: str
    customer_id: str
    status: str
    status_label: str
    items: list[OrderItemResponse] = []
    delivery_address: DeliveryAddressSchema | None = None
    formatted_address: str = ""
    shipping_fee: float = 0.0
    total: float
    placed_at: str | None = None
