"""Product and checkout attribute lookups"""

import logging
from typing import Optional, Sequence

from ..database.checkout_attributes import CheckoutAttributeDatabase
from ..database.products import ProductDatabase
from ..engine.selection import AttributeSelection, decode
from ..engine.tree import ResolvedCartItem
from ..models.attributes import CheckoutAttributeDefinition
from ..models.product import AttributeCombination, Product, ProductAttributeValue

logger = logging.getLogger(__name__)


class ProductAttributeMaterializer:
    """Turns encoded product attribute selections into values and combinations"""

    def __init__(self, products: ProductDatabase):
        self.products = products

    def materialize_values(self, selection: AttributeSelection) -> list[ProductAttributeValue]:
        values = []
        for attribute_id in selection.attribute_ids:
            for value_id in selection.value_ids(attribute_id):
                value = self.products.get_attribute_value(value_id)
                if value is None or value.attribute_id != attribute_id:
                    logger.debug(f"Ignoring unknown value {value_id} of attribute {attribute_id}")
                    continue
                values.append(value)
        return values

    def find_combination(
        self, product_id: int, selection: AttributeSelection
    ) -> Optional[AttributeCombination]:
        """Combination whose attributes match the selection exactly"""
        if not selection:
            return None

        target = selection.to_dict()
        for combination in self.products.get_combinations(product_id):
            if decode(combination.attributes).to_dict() == target:
                return combination
        return None

    def merge_combination(self, product: Product, selection: AttributeSelection) -> Product:
        """Product with the overrides of the matching combination applied"""
        combination = self.find_combination(product.id, selection)
        if combination is None:
            return product

        overrides = {
            "sku": combination.sku,
            "price": combination.price,
            "weight": combination.weight,
        }
        updates = {key: value for key, value in overrides.items() if value is not None}
        if combination.media_file_ids:
            updates["media_file_ids"] = list(combination.media_file_ids)

        return product.model_copy(update=updates)


class CheckoutAttributeMaterializer:
    """Provides the checkout attributes that apply to a cart"""

    def __init__(self, attributes: CheckoutAttributeDatabase):
        self.attributes = attributes

    def valid_attributes_for(
        self, cart: Sequence[ResolvedCartItem]
    ) -> list[CheckoutAttributeDefinition]:
        requires_shipping = any(
            node.item.product.is_shipping_enabled for tree in cart for node in tree.walk()
        )
        return [
            attribute for attribute in self.attributes.get_all()
            if requires_shipping or not attribute.shippable_product_required
        ]
