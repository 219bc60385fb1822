"""Customer storage for the storefront cart"""

import threading
import uuid
from typing import Optional

from ..engine.errors import UnknownCustomerError
from ..models.customer import Address, Customer

CUSTOMERS: dict[int, Customer] = {
    1: Customer(
        id=1,
        customer_guid=uuid.UUID("8f7a3c52-1d8e-4a39-9a51-0c2b5f6e7d10"),
        first_name="Jordan",
        last_name="Lee",
        shipping_address=Address(
            country_id=1,
            state_province_id=33,
            zip_postal_code="10001",
            city="New York",
        ),
        discount_coupon_code="SAVE10",
        reward_points_balance=500,
    ),
    2: Customer(
        id=2,
        customer_guid=uuid.UUID("0b6f1e7a-9d5c-4c3e-8f2a-6a1d2e3f4b5c"),
        is_guest=True,
    ),
}


class CustomerDatabase:
    """In-memory customer storage"""

    def __init__(self):
        self.customers = CUSTOMERS.copy()
        self._lock = threading.Lock()

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Get a customer by ID"""
        return self.customers.get(customer_id)

    def get_customer_by_guid(self, customer_guid: uuid.UUID) -> Optional[Customer]:
        """Get a customer by GUID"""
        return next(
            (c for c in self.customers.values() if c.customer_guid == customer_guid),
            None,
        )

    def save_checkout_attributes(self, customer_id: int, encoded: str) -> Customer:
        """
        Replace the customer's checkout attribute selection.

        The customer record is swapped as a whole, so concurrent readers see
        either the old or the new selection, never a partial one.
        """
        with self._lock:
            customer = self.customers.get(customer_id)
            if customer is None:
                raise UnknownCustomerError(customer_id)

            updated = customer.model_copy(update={"checkout_attributes": encoded})
            self.customers[customer_id] = updated
            return updated


# Singleton instance
customer_db = CustomerDatabase()
