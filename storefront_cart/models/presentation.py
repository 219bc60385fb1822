"""Presentation models produced by the cart aggregator"""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from .attributes import ControlType
from .customer import Address
from .product import DeliveryTimesPresentation, ProductType


class SelectListItem(BaseModel):
    text: str
    value: str
    selected: bool = False


class ImageModel(BaseModel):
    """Image reference of a cart item, URL resolution happens downstream"""
    media_file_id: Optional[int] = None
    thumb_size: int
    title: str
    alt: str
    no_fallback: bool = False


class BundleItemModel(BaseModel):
    id: int = 0
    display_order: int = 0
    hide_thumbnail: bool = False
    price_with_discount: Optional[str] = None


class CartItemModelBase(BaseModel):
    """Fields shared by shopping cart and wishlist items"""
    id: int
    product_id: int
    product_name: str
    sku: Optional[str] = None
    short_desc: Optional[str] = None
    product_type: ProductType = ProductType.SIMPLE
    visible_individually: bool = True
    entered_quantity: int
    min_order_amount: int = 1
    max_order_amount: int = 10000
    quantity_step: int = 1
    allowed_quantities: list[SelectListItem] = []
    quantity_unit_name: Optional[str] = None
    recurring_info: Optional[str] = None
    attribute_info: str = ""
    unit_price: Optional[str] = None
    sub_total: Optional[str] = None
    discount: Optional[str] = None
    bundle_item: BundleItemModel = Field(default_factory=BundleItemModel)
    bundle_per_item_pricing: bool = False
    bundle_per_item_shopping_cart: bool = False
    image: Optional[ImageModel] = None
    warnings: list[str] = []
    created_on_utc: Optional[datetime] = None


class ShoppingCartItemModel(CartItemModelBase):
    weight: Decimal = Decimal("0")
    is_ship_enabled: bool = True
    is_download: bool = False
    is_esd: bool = False
    has_user_agreement: bool = False
    disable_wishlist_button: bool = False
    delivery_time_name: Optional[str] = None
    delivery_time_hex_value: Optional[str] = None
    delivery_time_date: Optional[str] = None
    base_price: Optional[str] = None
    child_items: list["ShoppingCartItemModel"] = []


class WishlistItemModel(CartItemModelBase):
    disable_buy_button: bool = False
    child_items: list["WishlistItemModel"] = []


class CheckoutAttributeValueModel(BaseModel):
    id: int
    name: str
    is_pre_selected: bool = False
    color: Optional[str] = None
    media_file_id: Optional[int] = None
    price_adjustment: Optional[str] = None


class CheckoutAttributeModel(BaseModel):
    id: int
    name: str
    text_prompt: Optional[str] = None
    is_required: bool = False
    control_type: Union[ControlType, str] = Field(union_mode="left_to_right")
    values: list[CheckoutAttributeValueModel] = []
    text_value: Optional[str] = None
    selected_day: Optional[int] = None
    selected_month: Optional[int] = None
    selected_year: Optional[int] = None
    uploaded_file_guid: Optional[str] = None


class DiscountBoxModel(BaseModel):
    display: bool = False
    current_code: Optional[str] = None


class GiftCardBoxModel(BaseModel):
    display: bool = False


class RewardPointsBoxModel(BaseModel):
    display_reward_points: bool = False
    reward_points_balance: int = 0
    reward_points_amount: Optional[str] = None
    use_reward_points: bool = False


class EstimateShippingState(str, Enum):
    NO_COUNTRY_SELECTED = "no_country_selected"
    COUNTRY_SELECTED_NO_STATES = "country_selected_no_states"
    COUNTRY_SELECTED_WITH_STATES = "country_selected_with_states"


class EstimateShippingModel(BaseModel):
    enabled: bool = False
    state: EstimateShippingState = EstimateShippingState.NO_COUNTRY_SELECTED
    country_id: Optional[int] = None
    state_province_id: Optional[int] = None
    zip_postal_code: Optional[str] = None
    available_countries: list[SelectListItem] = []
    available_states: list[SelectListItem] = []


class OrderReviewDataModel(BaseModel):
    display: bool = False
    is_shippable: bool = False
    shipping_address: Optional[Address] = None
    shipping_method: Optional[str] = None
    display_shipping_method_change_option: bool = True
    payment_method: Optional[str] = None
    display_payment_method_change_option: bool = True
    payment_summary: Optional[str] = None
    is_payment_selection_skipped: bool = False


class ShoppingCartModel(BaseModel):
    """Fully resolved shopping cart"""
    is_editable: bool = True
    items: list[ShoppingCartItemModel] = []
    warnings: list[str] = []

    display_short_desc: bool = False
    show_product_images: bool = False
    show_product_bundle_images: bool = False
    show_sku: bool = False
    display_weight: bool = False
    display_base_price: bool = False
    display_comment_box: bool = False
    display_esd_revocation_waiver_box: bool = False
    terms_of_service_enabled: bool = False
    media_dimensions: int = 0
    bundle_thumb_size: int = 0
    measure_unit_name: Optional[str] = None
    delivery_times_presentation: DeliveryTimesPresentation = DeliveryTimesPresentation.NONE

    checkout_attributes: list[CheckoutAttributeModel] = []
    checkout_attribute_info: Optional[str] = None
    discount_box: DiscountBoxModel = Field(default_factory=DiscountBoxModel)
    gift_card_box: GiftCardBoxModel = Field(default_factory=GiftCardBoxModel)
    reward_points: RewardPointsBoxModel = Field(default_factory=RewardPointsBoxModel)
    estimate_shipping: EstimateShippingModel = Field(default_factory=EstimateShippingModel)
    order_review_data: OrderReviewDataModel = Field(default_factory=OrderReviewDataModel)

    total_products: int = 0
    sub_total: Optional[str] = None


class WishlistModel(BaseModel):
    """Resolved wishlist"""
    customer_guid: Optional[uuid.UUID] = None
    customer_fullname: Optional[str] = None
    is_editable: bool = True
    email_wishlist_enabled: bool = False
    show_items_from_wishlist_to_cart_button: bool = False
    display_add_to_cart: bool = True
    display_short_desc: bool = False
    show_product_images: bool = False
    show_product_bundle_images: bool = False
    show_sku: bool = False
    bundle_thumb_size: int = 0
    items: list[WishlistItemModel] = []
    warnings: list[str] = []


class MiniCartBundleItemModel(BaseModel):
    product_id: int
    product_name: str


class MiniCartItemModel(BaseModel):
    id: int
    product_id: int
    product_name: str
    short_desc: Optional[str] = None
    entered_quantity: int
    min_order_amount: int = 1
    max_order_amount: int = 10000
    quantity_step: int = 1
    attribute_info: str = ""
    unit_price: Optional[str] = None
    base_price_info: Optional[str] = None
    image: Optional[ImageModel] = None
    bundle_items: list[MiniCartBundleItemModel] = []
    created_on_utc: Optional[datetime] = None


class MiniShoppingCartModel(BaseModel):
    """Compact cart shown in the off-canvas panel"""
    show_product_images: bool = False
    thumb_size: int = 0
    current_customer_is_guest: bool = False
    anonymous_checkout_allowed: bool = False
    show_base_price: bool = False
    total_products: int = 0
    sub_total: Optional[str] = None
    display_checkout_button: bool = False
    items: list[MiniCartItemModel] = []
