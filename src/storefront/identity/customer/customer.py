"""Customer aggregate root with its Address book entity."""

from datetime import date, datetime

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Date, DateTime, HasMany, String

from storefront.constants import MINIMUM_CUSTOMER_AGE
from storefront.domain import storefront
from storefront.shared.documents import digits_only, phone_error, tax_id_error
from storefront.shared.email import email_error

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


def age_on(birth_date: date, today: date) -> int:
    """Whole years between ``birth_date`` and ``today``."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


@storefront.entity(part_of="Customer")
class Address:
    """A delivery location in the customer's address book.

    At most one address carries the default flag; checkout pre-fills from it.
    """

    street: String(required=True, max_length=200)
    number: String(max_length=20)
    district: String(required=True, max_length=100)
    city: String(required=True, max_length=100)
    complement: String(max_length=200)
    is_default: Boolean(default=False)
    created_at: DateTime(default=datetime.now)


@storefront.aggregate
class Customer:
    """A registered shopper.

    Holds the contact and tax details collected at sign-up together with the
    address book, so the "single default address" rule is enforced in one place.
    """

    full_name: String(required=True, max_length=150)
    email: String(required=True, max_length=254)
    birth_date: Date(required=True)
    tax_id: String(required=True, max_length=14)
    phone: String(required=True, max_length=11)
    addresses: HasMany(Address)
    registered_at: DateTime(default=datetime.now)

    @invariant.post
    def at_most_one_default_address(self):
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) > 1:
            raise ValidationError({"addresses": ["Only one address can be the default"]})

    @classmethod
    def register(cls, full_name, email, birth_date, tax_id, phone, today=None):
        from storefront.identity.customer.events import CustomerRegistered

        errors = {}
        if not full_name or not full_name.strip():
            errors["full_name"] = ["Enter your full name."]

        message = email_error(email)
        if message:
            errors["email"] = [message]

        if birth_date is None:
            errors["birth_date"] = ["Enter your date of birth."]
        elif age_on(birth_date, today or date.today()) < MINIMUM_CUSTOMER_AGE:
            errors["birth_date"] = [f"You must be at least {MINIMUM_CUSTOMER_AGE} years old to register."]

        message = tax_id_error(tax_id)
        if message:
            errors["tax_id"] = [message]

        message = phone_error(phone)
        if message:
            errors["phone"] = [message]

        if errors:
            raise ValidationError(errors)

        now = datetime.now()
        customer = cls(
            full_name=full_name.strip(),
            email=email.strip().lower(),
            birth_date=birth_date,
            tax_id=digits_only(tax_id),
            phone=digits_only(phone),
            registered_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                email=customer.email,
                full_name=customer.full_name,
                registered_at=now,
            )
        )
        return customer

    @property
    def sorted_addresses(self) -> list:
        """Default first, then in the order they were added."""
        return sorted(
            self.addresses,
            key=lambda a: (not a.is_default, a.created_at or datetime.min),
        )

    def _address(self, address_id):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ObjectNotFoundError(f"Address {address_id} not found")
        return address

    def _clear_default(self, keep=None):
        for addr in self.addresses:
            if addr is not keep and addr.is_default:
                addr.is_default = False

    def add_address(self, street, district, city, number=None, complement=None, is_default=False):
        from storefront.identity.customer.events import AddressAdded

        with atomic_change(self):
            if is_default:
                self._clear_default()

            address = Address(
                street=street,
                number=number,
                district=district,
                city=city,
                complement=complement,
                is_default=bool(is_default),
                created_at=datetime.now(),
            )
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                customer_id=self.id,
                address_id=address.id,
                street=street,
                district=district,
                city=city,
                is_default=bool(is_default),
            )
        )
        return address

    def update_address(
        self,
        address_id,
        street=_UNSET,
        number=_UNSET,
        district=_UNSET,
        city=_UNSET,
        complement=_UNSET,
        is_default=_UNSET,
    ):
        from storefront.identity.customer.events import AddressUpdated

        address = self._address(address_id)
        changes = {
            "street": street,
            "number": number,
            "district": district,
            "city": city,
            "complement": complement,
        }

        with atomic_change(self):
            for field, value in changes.items():
                if value is not _UNSET:
                    setattr(address, field, value)

            if is_default is not _UNSET:
                if is_default:
                    self._clear_default(keep=address)
                address.is_default = bool(is_default)

        self.raise_(AddressUpdated(customer_id=self.id, address_id=address.id))

    def remove_address(self, address_id):
        from storefront.identity.customer.events import AddressRemoved

        address = self._address(address_id)
        was_default = address.is_default

        with atomic_change(self):
            self.remove_addresses(address)

            remaining = self.sorted_addresses
            if was_default and remaining:
                remaining[0].is_default = True

        self.raise_(AddressRemoved(customer_id=self.id, address_id=address_id))

    def set_default_address(self, address_id):
        from storefront.identity.customer.events import DefaultAddressChanged

        address = self._address(address_id)
        previous = next((a for a in self.addresses if a.is_default), None)

        with atomic_change(self):
            self._clear_default(keep=address)
            address.is_default = True

        self.raise_(
            DefaultAddressChanged(
                customer_id=self.id,
                address_id=address.id,
                previous_default_address_id=previous.id if previous else None,
            )
        )
