"""
Checkout attribute resolution

Turns raw submitted values into the customer's checkout attribute
selection, and builds the checkout attribute view models shown with the
cart.
"""

import logging
from typing import Sequence

from ..models.attributes import CheckoutAttributeDefinition, ControlType, RawAttributeValue
from ..models.customer import Customer
from ..models.presentation import CheckoutAttributeModel, CheckoutAttributeValueModel
from .collaborators import (
    CheckoutAttributeProvider,
    CurrencyCollaborator,
    CustomerStore,
    TaxCollaborator,
)
from .control_types import get_handler
from .money import Currency
from .selection import AttributeSelection, encode
from .tree import ResolvedCartItem

logger = logging.getLogger(__name__)


class CheckoutAttributeResolver:
    """Resolves raw checkout attribute input into a selection"""

    def __init__(self, provider: CheckoutAttributeProvider, customer_store: CustomerStore):
        self.provider = provider
        self.customer_store = customer_store

    def resolve(
        self,
        cart: Sequence[ResolvedCartItem],
        raw_values: Sequence[RawAttributeValue],
    ) -> AttributeSelection:
        """Build a fresh selection from the raw values of all valid attributes"""
        selection = AttributeSelection()

        for attribute in self.provider.valid_attributes_for(cart):
            handler = get_handler(attribute.control_type)
            if handler is None:
                logger.debug(
                    f"Ignoring checkout attribute {attribute.id} with "
                    f"unsupported control type {attribute.control_type!r}"
                )
                continue

            selected = [raw for raw in raw_values if raw.attribute_id == attribute.id]
            handler.resolve(attribute.id, selected, selection)

        return selection

    def resolve_and_save(
        self,
        customer: Customer,
        cart: Sequence[ResolvedCartItem],
        raw_values: Sequence[RawAttributeValue],
    ) -> tuple[AttributeSelection, Customer]:
        """
        Resolve raw values and replace the customer's selection.

        Attributes missing from the input are dropped; the stored selection
        is replaced, never merged.
        """
        selection = self.resolve(cart, raw_values)
        updated = self.customer_store.save_checkout_attributes(customer.id, encode(selection))
        logger.info(
            f"Saved {len(selection)} checkout attribute(s) for customer {customer.id}"
        )
        return selection, updated


class CheckoutAttributePresenter:
    """Builds checkout attribute view models, including pre-selection"""

    def __init__(self, tax: TaxCollaborator, currency: CurrencyCollaborator):
        self.tax = tax
        self.currency = currency

    def prepare(
        self,
        attributes: Sequence[CheckoutAttributeDefinition],
        selection: AttributeSelection,
        working_currency: Currency,
        display_prices: bool = True,
    ) -> list[CheckoutAttributeModel]:
        models = []
        for attribute in attributes:
            model = CheckoutAttributeModel(
                id=attribute.id,
                name=attribute.name,
                text_prompt=attribute.text_prompt,
                is_required=attribute.is_required,
                control_type=attribute.control_type,
            )

            if attribute.is_list_type:
                for value in attribute.values:
                    value_model = CheckoutAttributeValueModel(
                        id=value.id,
                        name=value.name,
                        is_pre_selected=value.is_pre_selected,
                        color=value.color,
                        media_file_id=value.media_file_id,
                    )
                    if display_prices:
                        value_model.price_adjustment = self._price_adjustment(value, working_currency)
                    model.values.append(value_model)

            handler = get_handler(attribute.control_type)
            if handler is not None:
                handler.apply_selection(model, selection)

            models.append(model)

        return models

    def _price_adjustment(self, value, working_currency: Currency):
        price_base = self.tax.checkout_attribute_price(value).price
        if price_base.amount == 0:
            return None

        price = self.currency.convert_from_primary(abs(price_base.amount), working_currency)
        sign = "+" if price_base.amount > 0 else "-"
        return f"{sign}{price}"


def format_checkout_attributes(
    attributes: Sequence[CheckoutAttributeDefinition],
    selection: AttributeSelection,
) -> str:
    """
    Summary of the selected checkout attributes, e.g. "Gift Wrapping: Yes, Note: Ring twice".

    List attributes show the names of their selected values, all other
    known control types show the stored value as entered.
    """
    parts = []
    for attribute in attributes:
        if attribute.id not in selection or not isinstance(attribute.control_type, ControlType):
            continue

        if attribute.is_list_type:
            names = {value.id: value.name for value in attribute.values}
            entered = [names[value_id] for value_id in selection.value_ids(attribute.id) if value_id in names]
        else:
            entered = [value for value in selection.values_for(attribute.id) if value]

        parts.extend(f"{attribute.name}: {value}" for value in entered)

    return ", ".join(parts)
