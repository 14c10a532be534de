"""Customer registration — command and handler."""

from datetime import date

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.customer.customer import Customer
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Customer")
class RegisterCustomer:
    """Create a customer account from the sign-up form."""

    full_name: String(required=True, max_length=150)
    email: String(required=True, max_length=254)
    birth_date: String(max_length=10)
    tax_id: String(max_length=18)
    phone: String(max_length=20)


def _parse_birth_date(value):
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError({"birth_date": ["Enter a valid date (YYYY-MM-DD)."]}) from None


@storefront.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(
            full_name=command.full_name,
            email=command.email,
            birth_date=_parse_birth_date(command.birth_date),
            tax_id=command.tax_id,
            phone=command.phone,
        )

        repo = current_domain.repository_for(Customer)
        if repo._dao.query.filter(email=customer.email).all().total:
            raise ValidationError({"email": ["This email is already registered."]})

        repo.add(customer)
        logger.info("customer_registered", customer_id=str(customer.id))
        return str(customer.id)
