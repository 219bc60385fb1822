"""Checkout attribute models for the storefront cart"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class ControlType(str, Enum):
    """Input widget kind governing how attribute raw values are parsed"""
    DROPDOWN_LIST = "dropdown_list"
    RADIO_LIST = "radio_list"
    BOXES = "boxes"
    CHECKBOXES = "checkboxes"
    TEXT_BOX = "text_box"
    MULTILINE_TEXTBOX = "multiline_textbox"
    DATEPICKER = "datepicker"
    FILE_UPLOAD = "file_upload"


LIST_CONTROL_TYPES = frozenset({
    ControlType.DROPDOWN_LIST,
    ControlType.RADIO_LIST,
    ControlType.BOXES,
    ControlType.CHECKBOXES,
})


class CheckoutAttributeValue(BaseModel):
    """Predefined value of a list-typed checkout attribute"""
    id: int
    name: str
    is_pre_selected: bool = False
    price_adjustment: Decimal = Decimal("0")
    weight_adjustment: Decimal = Decimal("0")
    color: Optional[str] = None
    media_file_id: Optional[int] = None
    display_order: int = 0


class CheckoutAttributeDefinition(BaseModel):
    """Order level attribute defined by the store"""
    id: int
    name: str
    text_prompt: Optional[str] = None
    # Control types this store version does not know are kept as plain strings
    control_type: Union[ControlType, str] = Field(union_mode="left_to_right")
    is_required: bool = False
    shippable_product_required: bool = False
    tax_category_id: Optional[int] = None
    display_order: int = 0
    values: list[CheckoutAttributeValue] = []

    @property
    def is_list_type(self) -> bool:
        return self.control_type in LIST_CONTROL_TYPES


class RawAttributeValue(BaseModel):
    """One raw value submitted for a checkout attribute"""
    attribute_id: int
    value: Optional[str] = None
    date: Optional[dt.date] = None


class CheckoutAttributesRequest(BaseModel):
    """Request to resolve and save checkout attributes"""
    values: list[RawAttributeValue] = []


class CheckoutAttributesResponse(BaseModel):
    """Resolved checkout attribute selection"""
    attributes: dict[int, list[str]]
    encoded: str
