# Collaborator services and engine wiring

from functools import lru_cache

from ..core.config import get_settings
from ..database import (
    checkout_attribute_db,
    customer_db,
    delivery_time_db,
    discount_db,
    product_db,
    shipping_db,
)
from ..engine.aggregator import CartAggregator
from ..engine.checkout_attributes import CheckoutAttributeResolver
from .attributes import CheckoutAttributeMaterializer, ProductAttributeMaterializer
from .catalog import CatalogService
from .currency import CurrencyService
from .discounts import DiscountService
from .localization import LocalizationService
from .pricing import PriceCalculationService
from .tax import TaxService
from .validation import CartValidator


@lru_cache()
def get_currency_service() -> CurrencyService:
    return CurrencyService(get_settings())


@lru_cache()
def get_cart_aggregator() -> CartAggregator:
    """Build the cart aggregator with the in-memory collaborators"""
    settings = get_settings()
    currency = get_currency_service()
    localizer = LocalizationService()
    tax = TaxService(settings, currency, checkout_attribute_db)
    materializer = ProductAttributeMaterializer(product_db)
    attribute_provider = CheckoutAttributeMaterializer(checkout_attribute_db)

    return CartAggregator(
        settings=settings,
        pricing=PriceCalculationService(settings, currency, tax, materializer),
        tax=tax,
        currency=currency,
        validator=CartValidator(attribute_provider, localizer),
        materializer=materializer,
        attribute_provider=attribute_provider,
        discounts=DiscountService(discount_db),
        shipping_catalog=shipping_db,
        localizer=localizer,
        catalog=CatalogService(product_db, delivery_time_db),
    )


@lru_cache()
def get_attribute_resolver() -> CheckoutAttributeResolver:
    return CheckoutAttributeResolver(
        CheckoutAttributeMaterializer(checkout_attribute_db),
        customer_db,
    )


__all__ = [
    "CurrencyService",
    "CatalogService",
    "TaxService",
    "PriceCalculationService",
    "ProductAttributeMaterializer",
    "CheckoutAttributeMaterializer",
    "CartValidator",
    "DiscountService",
    "LocalizationService",
    "get_currency_service",
    "get_cart_aggregator",
    "get_attribute_resolver",
]
