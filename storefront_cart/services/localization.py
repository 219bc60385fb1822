"""String resources"""

import logging

logger = logging.getLogger(__name__)

RESOURCES: dict[str, str] = {
    "Products.CallForPrice": "Call for price",
    "Address.OtherNonUS": "Other (Non US)",
    "ShoppingCart.RecurringPeriod": "[Auto-ship, Every {0} {1}]",
    "Media.Product.ImageLinkTitleFormat": "Show details for {0}",
    "Media.Product.ImageAlternateTextFormat": "Picture of {0}",
    "ShoppingCart.ProductUnpublished": "Product '{0}' is not available.",
    "ShoppingCart.MinimumQuantity": "The minimum quantity allowed for '{0}' is {1}.",
    "ShoppingCart.MaximumQuantity": "The maximum quantity allowed for '{0}' is {1}.",
    "ShoppingCart.AllowedQuantities": "Allowed quantities for '{0}' are: {1}.",
    "ShoppingCart.OutOfStock": "Only {0} of '{1}' are in stock.",
    "ShoppingCart.RecurringMixed": "Your cart has auto-ship items together with standard items.",
    "ShoppingCart.SelectAttribute": "Please select {0}.",
}


class LocalizationService:
    """Looks up string resources, falling back to the key itself"""

    def __init__(self, resources: dict[str, str] = None):
        self.resources = dict(RESOURCES if resources is None else resources)

    def get_resource(self, key: str, *args) -> str:
        template = self.resources.get(key)
        if template is None:
            logger.debug(f"Missing string resource: {key}")
            return key
        return template.format(*args) if args else template
