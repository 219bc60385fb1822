"""Shared fixtures: fake collaborators and builders for cart items"""

from decimal import Decimal
from itertools import count

import pytest

from storefront_cart.core.config import Settings
from storefront_cart.engine import (
    CartAggregator,
    Currency,
    Money,
    TaxedPrice,
    ValidationResult,
    decode,
)
from storefront_cart.models import (
    BundleItem,
    CartLineItem,
    Country,
    Customer,
    Discount,
    Product,
    ProductType,
    StateProvince,
)

USD = Currency(code="USD", rate=Decimal("1"), symbol="$")
EUR = Currency(code="EUR", rate=Decimal("0.5"), symbol="€")


class FakeCurrency:
    def primary_currency(self):
        return USD

    def convert_from_primary(self, amount, target):
        return Money(target.round(amount * target.rate), target)

    def convert_to_primary(self, money):
        return Money(USD.round(money.amount / money.currency.rate), USD)


class FakeTax:
    """Adds a percentage per tax category"""

    def __init__(self, rates=None):
        self.rates = rates or {}

    def product_price(self, product, price):
        rate = Decimal(self.rates.get(product.tax_category_id, 0))
        return TaxedPrice(Money(price.amount * (1 + rate / 100), price.currency), rate)

    def checkout_attribute_price(self, value):
        return TaxedPrice(Money(value.price_adjustment, USD), Decimal("0"))


class FailingTax(FakeTax):
    def product_price(self, product, price):
        raise RuntimeError("tax service unavailable")


class FailingCurrency(FakeCurrency):
    def convert_from_primary(self, amount, target):
        raise RuntimeError("exchange rates unavailable")


class FakePricing:
    """Product price minus product discount, bundles priced per item sum their children"""

    def unit_price(self, item, include_discounts):
        product = item.item.product
        if product.product_type == ProductType.BUNDLE and product.bundle_per_item_pricing:
            amount = sum(
                (self.subtotal(child, include_discounts).amount for child in item.children),
                Decimal("0"),
            )
            return Money(amount, USD)

        amount = product.price
        if include_discounts:
            amount = max(amount - product.discount_amount, Decimal("0"))
        return Money(amount, USD)

    def subtotal(self, item, include_discounts):
        return self.unit_price(item, include_discounts) * item.item.quantity

    def final_price(self, product):
        return Money(product.price, USD)

    def reward_points_to_amount(self, points):
        return Money(Decimal(points) * Decimal("0.01"), USD)

    def base_price_info(self, product, currency, price_adjustment):
        return f"base price of {product.id}"


class FakeValidator:
    """Returns the configured warnings of every validated item"""

    def __init__(self):
        self.item_warnings = {}
        self.cart_warnings = []
        self.calls = []

    def validate(self, items, validate_checkout_attributes=False, checkout_attributes=None):
        self.calls.append([node.id for tree in items for node in tree.walk()])
        warnings = [
            warning
            for tree in items
            for node in tree.walk()
            for warning in self.item_warnings.get(node.id, [])
        ]
        if validate_checkout_attributes:
            warnings.extend(self.cart_warnings)
        return ValidationResult(is_valid=not warnings, warnings=warnings)


class FakeMaterializer:
    def __init__(self):
        self.values = {}
        self.combinations = []

    def materialize_values(self, selection):
        return [
            self.values[value_id]
            for attribute_id in selection.attribute_ids
            for value_id in selection.value_ids(attribute_id)
            if value_id in self.values
        ]

    def find_combination(self, product_id, selection):
        for combination in self.combinations:
            if combination.product_id == product_id and decode(combination.attributes) == selection:
                return combination
        return None

    def merge_combination(self, product, selection):
        combination = self.find_combination(product.id, selection)
        if combination is not None and combination.price is not None:
            return product.model_copy(update={"price": combination.price})
        return product


class FakeAttributeProvider:
    def __init__(self):
        self.attributes = []

    def valid_attributes_for(self, cart):
        return list(self.attributes)


class FakeCustomerStore:
    def __init__(self):
        self.saved = {}

    def save_checkout_attributes(self, customer_id, encoded):
        self.saved[customer_id] = encoded
        return Customer(id=customer_id, checkout_attributes=encoded)


class FakeDiscounts:
    def __init__(self):
        self.discounts = {}

    def find_by_coupon_code(self, coupon_code):
        return self.discounts.get(coupon_code.upper())

    def is_valid(self, discount, customer):
        return discount.is_active


class FakeShippingCatalog:
    def countries_for_shipping(self):
        return [
            Country(id=1, name="United States", two_letter_iso_code="US"),
            Country(id=3, name="Germany", two_letter_iso_code="DE"),
        ]

    def states_for(self, country_id):
        if country_id == 1:
            return [
                StateProvince(id=5, country_id=1, name="California"),
                StateProvince(id=33, country_id=1, name="New York"),
            ]
        return []


class FakeLocalizer:
    def get_resource(self, key, *args):
        if args:
            return f"{key}({', '.join(str(a) for a in args)})"
        return key


class FakeCatalog:
    def __init__(self):
        self.products = {}
        self.delivery_times = {}

    def get_product(self, product_id):
        return self.products.get(product_id)

    def get_delivery_time(self, delivery_time_id):
        return self.delivery_times.get(delivery_time_id)

    def formatted_delivery_date(self, delivery_time):
        return f"in {delivery_time.min_days} day(s)"


@pytest.fixture
def make_product():
    ids = count(100)

    def factory(**kwargs):
        kwargs.setdefault("id", next(ids))
        kwargs.setdefault("name", f"Product {kwargs['id']}")
        return Product(**kwargs)

    return factory


@pytest.fixture
def make_item(make_product):
    ids = count(1)

    def factory(product=None, **kwargs):
        kwargs.setdefault("id", next(ids))
        kwargs.setdefault("customer_id", 1)
        kwargs.setdefault("quantity", 1)
        return CartLineItem(product=product or make_product(), **kwargs)

    return factory


@pytest.fixture
def make_bundle(make_product, make_item):
    """Bundle parent referencing itself plus one child per (price, discount) pair"""

    def factory(child_prices, per_item_pricing=True, per_item_shopping_cart=True, parent_id=50):
        bundle_product = make_product(
            product_type=ProductType.BUNDLE,
            bundle_per_item_pricing=per_item_pricing,
            bundle_per_item_shopping_cart=per_item_shopping_cart,
        )
        parent = make_item(product=bundle_product, id=parent_id, parent_item_id=parent_id)
        children = [
            make_item(
                product=make_product(price=Decimal(price), discount_amount=Decimal(discount)),
                id=parent_id + index + 1,
                parent_item_id=parent_id,
                bundle_item=BundleItem(
                    id=index + 1,
                    bundle_product_id=bundle_product.id,
                    display_order=index,
                    per_item_pricing=per_item_pricing,
                    per_item_shopping_cart=per_item_shopping_cart,
                ),
            )
            for index, (price, discount) in enumerate(child_prices)
        ]
        return [parent, *children]

    return factory


@pytest.fixture
def customer():
    return Customer(id=1, first_name="Jordan", last_name="Lee")


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fakes():
    class Fakes:
        pricing = FakePricing()
        tax = FakeTax()
        currency = FakeCurrency()
        validator = FakeValidator()
        materializer = FakeMaterializer()
        attribute_provider = FakeAttributeProvider()
        customer_store = FakeCustomerStore()
        discounts = FakeDiscounts()
        shipping_catalog = FakeShippingCatalog()
        localizer = FakeLocalizer()
        catalog = FakeCatalog()

    return Fakes()


@pytest.fixture
def make_aggregator(fakes):
    def factory(settings=None):
        return CartAggregator(
            settings=settings or Settings(),
            pricing=fakes.pricing,
            tax=fakes.tax,
            currency=fakes.currency,
            validator=fakes.validator,
            materializer=fakes.materializer,
            attribute_provider=fakes.attribute_provider,
            discounts=fakes.discounts,
            shipping_catalog=fakes.shipping_catalog,
            localizer=fakes.localizer,
            catalog=fakes.catalog,
        )

    return factory


@pytest.fixture
def aggregator(make_aggregator):
    return make_aggregator()


@pytest.fixture
def active_discount():
    return Discount(id=1, name="Ten off", coupon_code="SAVE10", requires_coupon_code=True)
