"""Customer address book — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.customer.customer import Customer


@storefront.command(part_of="Customer")
class AddAddress:
    """Add a new address to a customer's address book."""

    customer_id: Identifier(required=True)
    street: String(required=True, max_length=200)
    number: String(max_length=20)
    district: String(required=True, max_length=100)
    city: String(required=True, max_length=100)
    complement: String(max_length=200)
    is_default: Boolean(default=False)


@storefront.command(part_of="Customer")
class UpdateAddress:
    """Modify fields of an existing address; omitted fields stay as they are."""

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    street: String(max_length=200)
    number: String(max_length=20)
    district: String(max_length=100)
    city: String(max_length=100)
    complement: String(max_length=200)
    is_default: Boolean()


@storefront.command(part_of="Customer")
class RemoveAddress:
    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@storefront.command(part_of="Customer")
class SetDefaultAddress:
    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@storefront.command_handler(part_of=Customer)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        address = customer.add_address(
            street=command.street,
            number=command.number,
            district=command.district,
            city=command.city,
            complement=command.complement,
            is_default=bool(command.is_default),
        )
        repo.add(customer)
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        updates = {}
        for field in ("street", "number", "district", "city", "complement", "is_default"):
            value = getattr(command, field, None)
            if value is not None:
                updates[field] = value

        customer.update_address(command.address_id, **updates)
        repo.add(customer)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.remove_address(command.address_id)
        repo.add(customer)

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.set_default_address(command.address_id)
        repo.add(customer)
