"""Discount lookup and validation"""

from typing import Optional

from ..database.discounts import DiscountDatabase
from ..models.customer import Customer, Discount


class DiscountService:
    def __init__(self, discounts: DiscountDatabase):
        self.discounts = discounts

    def find_by_coupon_code(self, coupon_code: str) -> Optional[Discount]:
        if not coupon_code or not coupon_code.strip():
            return None
        return self.discounts.get_by_coupon_code(coupon_code)

    def is_valid(self, discount: Discount, customer: Customer) -> bool:
        """Check that a discount is active and may be used by the customer"""
        if not discount.is_active:
            return False
        if discount.limited_to_customer_ids and customer.id not in discount.limited_to_customer_ids:
            return False
        return True
