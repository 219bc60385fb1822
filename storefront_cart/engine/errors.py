"""Errors raised by the cart resolution engine"""


class CartResolutionError(Exception):
    """Base class for cart resolution failures"""


class UnknownCustomerError(CartResolutionError):
    def __init__(self, customer_id):
        super().__init__(f"Customer not found: {customer_id}")
        self.customer_id = customer_id


class UnknownCurrencyError(CartResolutionError):
    def __init__(self, currency_code: str):
        super().__init__(f"Unknown currency: {currency_code}")
        self.currency_code = currency_code
