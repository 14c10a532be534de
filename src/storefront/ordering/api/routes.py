"""FastAPI routes for the Ordering domain: carts, checkout and order history."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.ordering.api.schemas import (
    AddToCartRequest,
    CartIdResponse,
    CartItemResponse,
    CartResponse,
    CheckoutCartRequest,
    CreateCartRequest,
    DeliveryAddressSchema,
    OrderIdResponse,
    OrderItemResponse,
    OrderResponse,
    PlaceOrderRequest,
    StatusResponse,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
)
from storefront.ordering.cart.cart import ShoppingCart
from storefront.ordering.cart.items import (
    AddToCart,
    ClearCart,
    CreateCart,
    RemoveFromCart,
    UpdateCartItemQuantity,
)
from storefront.ordering.order.history import get_customer_order, list_all_orders, list_orders_for_customer
from storefront.ordering.order.placement import CheckoutCart, PlaceOrder
from storefront.ordering.order.status import UpdateOrderStatus

cart_router = APIRouter(prefix="/carts", tags=["carts"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _address_fields(address: DeliveryAddressSchema | None) -> dict:
    if address is None:
        return {}
    return address.model_dump()


def _cart_response(cart) -> CartResponse:
    return CartResponse(
        cart_id=str(cart.id),
        customer_id=str(cart.customer_id) if cart.customer_id else None,
        items=[
            CartItemResponse(
                product_id=str(item.product_id),
                name=item.name,
                unit_price=item.unit_price,
                quantity=item.quantity,
                subtotal=item.subtotal,
                image_url=item.image_url,
            )
            for item in cart.items
        ],
        total=cart.total,
        item_count=cart.item_count,
    )


def _order_response(order) -> OrderResponse:
    address = order.delivery_address
    return OrderResponse(
        order_id=str(order.id),
        customer_id=str(order.customer_id),
        status=order.status,
        status_label=order.status_label,
        items=[
            OrderItemResponse(
                product_id=str(item.product_id),
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
            )
            for item in order.items
        ],
        delivery_address=(
            DeliveryAddressSchema(
                street=address.street,
                number=address.number,
                district=address.district,
                city=address.city,
                complement=address.complement,
            )
            if address
            else None
        ),
        formatted_address=address.formatted() if address else "",
        shipping_fee=order.shipping_fee,
        total=order.total,
        placed_at=str(order.placed_at) if order.placed_at else None,
    )


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    cart_id = current_domain.process(CreateCart(customer_id=body.customer_id), asynchronous=False)
    return CartIdResponse(cart_id=cart_id)


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str) -> CartResponse:
    return _cart_response(current_domain.repository_for(ShoppingCart).get(cart_id))


@cart_router.post("/{cart_id}/items", status_code=201, response_model=StatusResponse)
async def add_to_cart(cart_id: str, body: AddToCartRequest) -> StatusResponse:
    command = AddToCart(cart_id=cart_id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.put("/{cart_id}/items/{product_id}", response_model=StatusResponse)
async def update_cart_item(cart_id: str, product_id: str, body: UpdateCartItemRequest) -> StatusResponse:
    command = UpdateCartItemQuantity(cart_id=cart_id, product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items/{product_id}", response_model=StatusResponse)
async def remove_from_cart(cart_id: str, product_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(cart_id=cart_id, product_id=product_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items", response_model=StatusResponse)
async def clear_cart(cart_id: str) -> StatusResponse:
    current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)
    return StatusResponse()


@cart_router.post("/{cart_id}/checkout", status_code=201, response_model=OrderIdResponse)
async def checkout_cart(cart_id: str, body: CheckoutCartRequest) -> OrderIdResponse:
    """Turn the cart into an order and empty it."""
    command = CheckoutCart(
        cart_id=cart_id,
        customer_id=body.customer_id,
        shipping_fee=body.shipping_fee,
        **_address_fields(body.address),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.post("/checkout", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(
        customer_id=body.customer_id,
        items=json.dumps([line.model_dump() for line in body.items]),
        shipping_fee=body.shipping_fee,
        **_address_fields(body.address),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


@order_router.get("", response_model=list[OrderResponse])
async def get_all_orders() -> list[OrderResponse]:
    """Back-office listing, newest first."""
    return [_order_response(order) for order in list_all_orders()]


@order_router.get("/customer/{customer_id}", response_model=list[OrderResponse])
async def get_customer_orders(customer_id: str) -> list[OrderResponse]:
    return [_order_response(order) for order in list_orders_for_customer(customer_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, customer_id: str) -> OrderResponse:
    return _order_response(get_customer_order(order_id, customer_id))


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return StatusResponse()
