"""Storefront Cart Configuration"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.product import DeliveryTimesPresentation


class ShoppingCartSettings(BaseModel):
    """Display switches for cart, wishlist and mini cart"""
    show_short_desc: bool = True
    show_product_images: bool = True
    show_product_bundle_images: bool = True
    show_product_images_in_mini_cart: bool = True
    show_sku: bool = True
    show_weight: bool = True
    show_base_price: bool = False
    show_comment_box: bool = False
    show_esd_revocation_waiver_box: bool = False
    show_discount_box: bool = True
    show_gift_card_box: bool = True
    email_wishlist_enabled: bool = True
    show_items_from_wishlist_to_cart_button: bool = True
    mini_cart_enabled: bool = True
    display_prices: bool = True
    delivery_times_presentation: DeliveryTimesPresentation = DeliveryTimesPresentation.LABEL_AND_DATE


class MediaSettings(BaseModel):
    """Thumbnail sizes used by cart item images"""
    cart_thumb_picture_size: int = 250
    cart_thumb_bundle_item_picture_size: int = 32
    mini_cart_thumb_picture_size: int = 120
    hide_product_default_pictures: bool = False


class RewardPointsSettings(BaseModel):
    """Reward points program"""
    enabled: bool = False
    exchange_rate: Decimal = Decimal("0.01")


class ShippingSettings(BaseModel):
    """Estimate shipping box"""
    estimate_shipping_enabled: bool = True


class OrderSettings(BaseModel):
    """Checkout behaviour"""
    terms_of_service_enabled: bool = False
    anonymous_checkout_allowed: bool = True


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Storefront Cart"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Currencies
    primary_currency_code: str = "USD"
    currency_rates: dict[str, Decimal] = {
        "USD": Decimal("1"),
        "EUR": Decimal("0.92"),
        "GBP": Decimal("0.79"),
    }

    # Tax: rate per tax category, applied to primary currency prices
    prices_include_tax: bool = False
    display_prices_with_tax: bool = True
    tax_rates: dict[int, Decimal] = {}
    default_tax_category_id: Optional[int] = None

    # Weight unit shown next to item weights
    base_weight_name: str = "lb(s)"

    cart: ShoppingCartSettings = ShoppingCartSettings()
    media: MediaSettings = MediaSettings()
    reward_points: RewardPointsSettings = RewardPointsSettings()
    shipping: ShippingSettings = ShippingSettings()
    orders: OrderSettings = OrderSettings()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
