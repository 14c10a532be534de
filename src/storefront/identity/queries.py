"""Customer read queries."""

from protean.utils.globals import current_domain

from storefront.identity.customer.customer import Customer


def get_customer(customer_id) -> Customer:
    """Load a customer; raises ObjectNotFoundError for unknown ids."""
    return current_domain.repository_for(Customer).get(customer_id)


def list_addresses(customer_id) -> list:
    return get_customer(customer_id).sorted_addresses
