# Database modules

from .products import product_db, ProductDatabase
from .carts import cart_db, CartDatabase
from .customers import customer_db, CustomerDatabase
from .checkout_attributes import checkout_attribute_db, CheckoutAttributeDatabase
from .countries import shipping_db, ShippingDatabase
from .discounts import discount_db, DiscountDatabase
from .delivery_times import delivery_time_db, DeliveryTimeDatabase

__all__ = [
    "product_db",
    "ProductDatabase",
    "cart_db",
    "CartDatabase",
    "customer_db",
    "CustomerDatabase",
    "checkout_attribute_db",
    "CheckoutAttributeDatabase",
    "shipping_db",
    "ShippingDatabase",
    "discount_db",
    "DiscountDatabase",
    "delivery_time_db",
    "DeliveryTimeDatabase",
]
