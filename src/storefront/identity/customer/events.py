"""Domain events for the Customer aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A new customer account was created."""

    __version__ = 1

    customer_id: Identifier(required=True)
    email: String(required=True)
    full_name: String(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="Customer")
class AddressAdded:
    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    street: String(required=True)
    district: String(required=True)
    city: String(required=True)
    is_default: Boolean(default=False)


@storefront.event(part_of="Customer")
class AddressUpdated:
    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@storefront.event(part_of="Customer")
class AddressRemoved:
    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@storefront.event(part_of="Customer")
class DefaultAddressChanged:
    """A different address was designated as the customer's default."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    previous_default_address_id: Identifier()
