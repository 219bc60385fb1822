"""Customer models for the storefront cart"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


class Address(BaseModel):
    """Customer address, only the parts estimate shipping needs"""
    country_id: Optional[int] = None
    state_province_id: Optional[int] = None
    zip_postal_code: Optional[str] = None
    city: Optional[str] = None


class Customer(BaseModel):
    """Storefront customer owning a cart"""
    id: int
    customer_guid: uuid.UUID = Field(default_factory=uuid.uuid4)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_guest: bool = False
    shipping_address: Optional[Address] = None

    # Generic attributes
    checkout_attributes: str = ""
    discount_coupon_code: Optional[str] = None
    reward_points_balance: int = 0
    use_reward_points_during_checkout: bool = False
    selected_shipping_option: Optional[str] = None
    selected_payment_method: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


class Country(BaseModel):
    id: int
    name: str
    two_letter_iso_code: str
    allows_shipping: bool = True
    display_order: int = 0


class StateProvince(BaseModel):
    id: int
    country_id: int
    name: str
    abbreviation: Optional[str] = None
    display_order: int = 0


class Discount(BaseModel):
    """Discount as far as the discount box is concerned"""
    id: int
    name: str
    coupon_code: Optional[str] = None
    requires_coupon_code: bool = False
    is_active: bool = True
    limited_to_customer_ids: list[int] = []
