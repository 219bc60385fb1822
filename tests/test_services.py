"""Tests for the collaborator services backed by the in-memory databases"""

from datetime import date
from decimal import Decimal

import pytest

from storefront_cart.core import Settings
from storefront_cart.core.config import RewardPointsSettings
from storefront_cart.database import (
    CartDatabase,
    CheckoutAttributeDatabase,
    DeliveryTimeDatabase,
    DiscountDatabase,
    ProductDatabase,
)
from storefront_cart.engine import (
    AttributeSelection,
    CartItemTreeBuilder,
    Money,
    UnknownCurrencyError,
    decode,
)
from storefront_cart.services import (
    CartValidator,
    CatalogService,
    CheckoutAttributeMaterializer,
    CurrencyService,
    DiscountService,
    LocalizationService,
    PriceCalculationService,
    ProductAttributeMaterializer,
    TaxService,
)


@pytest.fixture
def products():
    return ProductDatabase()


@pytest.fixture
def checkout_attributes():
    return CheckoutAttributeDatabase()


@pytest.fixture
def currency_service(settings):
    return CurrencyService(settings)


@pytest.fixture
def materializer(products):
    return ProductAttributeMaterializer(products)


@pytest.fixture
def make_pricing(currency_service, checkout_attributes, materializer):
    def factory(settings=None):
        settings = settings or Settings()
        tax = TaxService(settings, currency_service, checkout_attributes)
        return PriceCalculationService(settings, currency_service, tax, materializer)

    return factory


@pytest.fixture
def cart(products):
    """Organized cart of the first sample customer"""
    return CartItemTreeBuilder().organize(CartDatabase(products).get_cart_items(1))


# Currency

def test_currency_lookup_is_case_insensitive(currency_service):
    eur = currency_service.get_currency("eur")

    assert eur.code == "EUR"
    assert eur.rate == Decimal("0.92")
    assert currency_service.get_currency(None).code == "USD"


def test_unknown_currency_raises(currency_service):
    with pytest.raises(UnknownCurrencyError):
        currency_service.get_currency("XYZ")


def test_conversion_both_ways(currency_service):
    eur = currency_service.get_currency("EUR")

    converted = currency_service.convert_from_primary(Decimal("100"), eur)

    assert converted == Money(Decimal("92.00"), eur)
    assert str(converted) == "€92.00"
    assert currency_service.convert_to_primary(converted).amount == Decimal("100.00")


# Tax

@pytest.mark.parametrize(
    "prices_include_tax, display_prices_with_tax, expected",
    [
        (False, True, Decimal("110.00")),
        (True, False, Decimal("90.91")),
        (True, True, Decimal("100.00")),
        (False, False, Decimal("100.00")),
    ],
)
def test_product_tax_adjustment(
    currency_service, checkout_attributes, products, prices_include_tax, display_prices_with_tax, expected
):
    settings = Settings(
        tax_rates={1: Decimal("10")},
        prices_include_tax=prices_include_tax,
        display_prices_with_tax=display_prices_with_tax,
    )
    tax = TaxService(settings, currency_service, checkout_attributes)
    primary = currency_service.primary_currency()

    taxed = tax.product_price(products.get_product(1), Money(Decimal("100"), primary))

    assert primary.round(taxed.price.amount) == expected
    assert taxed.tax_rate == Decimal("10")


def test_untaxed_category_keeps_price(currency_service, checkout_attributes, products):
    tax = TaxService(Settings(tax_rates={1: Decimal("10")}), currency_service, checkout_attributes)
    price = Money(Decimal("24.99"), currency_service.primary_currency())

    assert tax.product_price(products.get_product(7), price).price == price


def test_checkout_attribute_uses_attribute_tax_category(currency_service, checkout_attributes):
    tax = TaxService(Settings(tax_rates={1: Decimal("10")}), currency_service, checkout_attributes)
    [wrapping] = [a for a in checkout_attributes.get_all() if a.id == 1]

    taxed = tax.checkout_attribute_price(wrapping.values[1])

    assert taxed.price.amount == Decimal("5.489")


# Attributes

def test_materialize_values_skips_mismatched_ids(materializer):
    selection = decode('[{"id":1,"values":["12","21","999"]}]')

    values = materializer.materialize_values(selection)

    assert [v.name for v in values] == ["Silver"]


def test_merge_combination_overrides_sku_and_media(materializer, products):
    product = products.get_product(1)

    merged = materializer.merge_combination(product, decode('[{"id":1,"values":["12"]}]'))

    assert merged.sku == "AUR-ANC700-SLV"
    assert merged.media_file_ids == [1012]
    assert merged.price == product.price
    assert materializer.merge_combination(product, AttributeSelection()) is product


def test_shippable_only_attributes_dropped_for_non_shippable_cart(checkout_attributes, products, make_item):
    provider = CheckoutAttributeMaterializer(checkout_attributes)
    service_only = CartItemTreeBuilder().organize([make_item(product=products.get_product(6))])

    assert 3 not in [a.id for a in provider.valid_attributes_for(service_only)]
    assert [a.id for a in provider.valid_attributes_for([])] == [1, 2, 4, 5, 6]


# Pricing

def test_unit_price_includes_attribute_adjustments(make_pricing, cart):
    headphones = cart[0]

    assert make_pricing().unit_price(headphones, True).amount == Decimal("359.99")


def test_unit_price_discount(make_pricing, cart):
    airpods = cart[2]
    pricing = make_pricing()

    assert pricing.unit_price(airpods, True).amount == Decimal("229.00")
    assert pricing.subtotal(airpods, False).amount == Decimal("498.00")


def test_bundle_priced_per_item_sums_children(make_pricing, cart):
    bundle = cart[1]
    pricing = make_pricing()

    assert pricing.unit_price(bundle, True).amount == Decimal("139.98")
    assert pricing.unit_price(bundle, False).amount == Decimal("149.98")


def test_reward_points_amount(make_pricing):
    pricing = make_pricing(Settings(reward_points=RewardPointsSettings(enabled=True)))

    assert pricing.reward_points_to_amount(500).amount == Decimal("5.00")
    assert pricing.reward_points_to_amount(0).amount == Decimal("0")


def test_base_price_info(make_pricing, currency_service, make_product):
    product = make_product(
        price=Decimal("4.00"),
        base_price_enabled=True,
        base_price_amount=Decimal("250"),
        base_price_base_amount=1000,
        base_price_measure_unit="g",
    )
    pricing = make_pricing()

    assert pricing.base_price_info(product, currency_service.primary_currency(), Decimal("1")) == "$20.00 / 1000 g"
    assert pricing.base_price_info(make_product(), currency_service.primary_currency(), Decimal("0")) is None


# Validation

@pytest.fixture
def validator(checkout_attributes):
    return CartValidator(CheckoutAttributeMaterializer(checkout_attributes), LocalizationService())


def test_valid_cart_has_no_warnings(validator, cart):
    result = validator.validate(cart)

    assert result.is_valid
    assert result.warnings == []


def test_item_warnings(validator, make_product, make_item):
    items = [
        make_item(product=make_product(name="Lamp", published=False)),
        make_item(product=make_product(name="Pen", order_minimum_quantity=5), quantity=2),
        make_item(product=make_product(name="Mug", allowed_quantities="1,6"), quantity=2),
        make_item(product=make_product(name="Chair", stock_quantity=1), quantity=2),
    ]

    result = validator.validate(CartItemTreeBuilder().organize(items))

    assert not result.is_valid
    assert result.warnings == [
        "Product 'Lamp' is not available.",
        "The minimum quantity allowed for 'Pen' is 5.",
        "Allowed quantities for 'Mug' are: 1, 6.",
        "Only 1 of 'Chair' are in stock.",
    ]


def test_mixed_recurring_cart_warns(validator, products, make_item):
    items = [make_item(product=products.get_product(7)), make_item(product=products.get_product(8))]

    result = validator.validate(CartItemTreeBuilder().organize(items))

    assert result.warnings == ["Your cart has auto-ship items together with standard items."]


def test_required_checkout_attributes(validator, cart):
    assert validator.validate(cart, validate_checkout_attributes=True).warnings == [
        "Please select Gift Wrapping."
    ]
    selected = decode('[{"id":1,"values":["101"]}]')
    assert validator.validate(cart, True, selected).is_valid


# Discounts and resources

def test_discount_validity(customer):
    discounts = DiscountService(DiscountDatabase())

    assert discounts.is_valid(discounts.find_by_coupon_code("save10"), customer)
    assert not discounts.is_valid(discounts.find_by_coupon_code("SPRING"), customer)
    assert not discounts.is_valid(discounts.find_by_coupon_code("MEMBER"), customer)
    assert discounts.find_by_coupon_code("  ") is None
    assert discounts.find_by_coupon_code("NOPE") is None


def test_resources_are_formatted():
    localizer = LocalizationService()

    assert localizer.get_resource("ShoppingCart.RecurringPeriod", 1, "months") == "[Auto-ship, Every 1 months]"
    assert localizer.get_resource("Products.CallForPrice") == "Call for price"
    assert localizer.get_resource("Unknown.Key") == "Unknown.Key"


# Catalog

@pytest.fixture
def catalog(products):
    return CatalogService(products, DeliveryTimeDatabase())


def test_catalog_lookups(catalog):
    assert catalog.get_product(10).parent_grouped_product_id == 9
    assert catalog.get_product(999) is None
    assert catalog.get_delivery_time(2).color_hex_value == "#FFFF00"
    assert catalog.get_delivery_time(None) is None
    assert catalog.get_delivery_time(99) is None


def test_formatted_delivery_date(catalog):
    today = date(2026, 10, 18)

    assert catalog.formatted_delivery_date(catalog.get_delivery_time(1), today) == "Oct 19"
    assert catalog.formatted_delivery_date(catalog.get_delivery_time(2), today) == "Oct 20 - Oct 23"
    assert catalog.formatted_delivery_date(catalog.get_delivery_time(4), today) is None
