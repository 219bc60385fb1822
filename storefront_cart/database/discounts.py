"""Discount storage for the storefront cart"""

from typing import Optional

from ..models.customer import Discount

DISCOUNTS: list[Discount] = [
    Discount(id=1, name="Ten percent off", coupon_code="SAVE10", requires_coupon_code=True),
    Discount(id=2, name="Spring sale", coupon_code="SPRING", requires_coupon_code=True, is_active=False),
    Discount(id=3, name="Members only", coupon_code="MEMBER", requires_coupon_code=True, limited_to_customer_ids=[42]),
]


class DiscountDatabase:
    """In-memory discount storage"""

    def __init__(self):
        self.discounts = list(DISCOUNTS)

    def get_by_coupon_code(self, coupon_code: str) -> Optional[Discount]:
        """Get a discount by its coupon code, case insensitive"""
        code = coupon_code.strip().lower()
        return next(
            (d for d in self.discounts if d.coupon_code and d.coupon_code.lower() == code),
            None,
        )


# Singleton instance
discount_db = DiscountDatabase()
