"""Checkout attribute definitions of the store"""

from decimal import Decimal
from typing import Optional

from ..models.attributes import CheckoutAttributeDefinition, CheckoutAttributeValue, ControlType

CHECKOUT_ATTRIBUTES: list[CheckoutAttributeDefinition] = [
    CheckoutAttributeDefinition(
        id=1,
        name="Gift Wrapping",
        text_prompt="Would you like your order gift wrapped?",
        control_type=ControlType.RADIO_LIST,
        is_required=True,
        tax_category_id=1,
        display_order=1,
        values=[
            CheckoutAttributeValue(id=101, name="No", is_pre_selected=True, display_order=1),
            CheckoutAttributeValue(id=102, name="Yes", price_adjustment=Decimal("4.99"), display_order=2),
        ],
    ),
    CheckoutAttributeDefinition(
        id=2,
        name="Delivery Instructions",
        control_type=ControlType.MULTILINE_TEXTBOX,
        display_order=2,
    ),
    CheckoutAttributeDefinition(
        id=3,
        name="Preferred Delivery Date",
        control_type=ControlType.DATEPICKER,
        shippable_product_required=True,
        display_order=3,
    ),
    CheckoutAttributeDefinition(
        id=4,
        name="Extras",
        control_type=ControlType.CHECKBOXES,
        tax_category_id=1,
        display_order=4,
        values=[
            CheckoutAttributeValue(id=401, name="Greeting Card", price_adjustment=Decimal("1.50")),
            CheckoutAttributeValue(id=402, name="Eco Packaging", color="#2e7d32"),
        ],
    ),
    CheckoutAttributeDefinition(
        id=5,
        name="Purchase Order File",
        control_type=ControlType.FILE_UPLOAD,
        display_order=5,
    ),
    CheckoutAttributeDefinition(
        id=6,
        name="Logo Color",
        control_type="color_squares",
        display_order=6,
    ),
]


class CheckoutAttributeDatabase:
    """In-memory checkout attribute definitions"""

    def __init__(self):
        self.attributes = list(CHECKOUT_ATTRIBUTES)

    def get_all(self) -> list[CheckoutAttributeDefinition]:
        """Get all checkout attributes ordered for display"""
        return sorted(self.attributes, key=lambda a: a.display_order)

    def get_attribute_of_value(self, value_id: int) -> Optional[CheckoutAttributeDefinition]:
        """Get the checkout attribute a value belongs to"""
        return next(
            (a for a in self.attributes if any(v.id == value_id for v in a.values)),
            None,
        )


# Singleton instance
checkout_attribute_db = CheckoutAttributeDatabase()
