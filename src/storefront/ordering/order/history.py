"""Order read queries for customers and the back-office."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.ordering.order.order import Order
from storefront.shared.paging import fetch_all


def _newest_first(orders):
    return sorted(orders, key=lambda o: o.placed_at, reverse=True)


def list_orders_for_customer(customer_id) -> list:
    if not customer_id or not str(customer_id).strip():
        return []
    orders = fetch_all(current_domain.repository_for(Order)._dao.query.filter(customer_id=str(customer_id)))
    return _newest_first(orders)


def list_all_orders() -> list:
    return _newest_first(fetch_all(current_domain.repository_for(Order)._dao.query))


def get_order(order_id) -> Order:
    return current_domain.repository_for(Order).get(order_id)


def get_customer_order(order_id, customer_id) -> Order:
    """An order as seen by its owner; other customers get a not-found."""
    order = get_order(order_id)
    if str(order.customer_id) != str(customer_id):
        raise ObjectNotFoundError(f"Order {order_id} not found")
    return order
