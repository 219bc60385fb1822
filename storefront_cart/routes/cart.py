"""Cart API routes for the storefront"""

import datetime as dt
import logging
import re

from fastapi import APIRouter, Depends, HTTPException, Request

from ..context import WorkContext, work_context
from ..core.config import get_settings
from ..database import cart_db
from ..engine.aggregator import ShoppingCartRequest
from ..engine.selection import encode
from ..models.attributes import (
    CheckoutAttributesRequest,
    CheckoutAttributesResponse,
    RawAttributeValue,
)
from ..models.presentation import MiniShoppingCartModel, ShoppingCartModel
from ..services import get_attribute_resolver, get_cart_aggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])

CHECKOUT_ATTRIBUTE_PARAM = re.compile(r"^ca_(\d+)(_date)?$")


def parse_checkout_attribute_params(request: Request) -> list[RawAttributeValue]:
    """Collect ca_<id> and ca_<id>_date query parameters as raw attribute values"""
    raw_values = []
    for key, value in request.query_params.multi_items():
        match = CHECKOUT_ATTRIBUTE_PARAM.match(key)
        if not match:
            continue

        attribute_id = int(match.group(1))
        if match.group(2):
            try:
                raw_values.append(
                    RawAttributeValue(attribute_id=attribute_id, date=dt.date.fromisoformat(value))
                )
            except ValueError:
                logger.debug(f"Skipping invalid date {value!r} for checkout attribute {attribute_id}")
        else:
            raw_values.append(RawAttributeValue(attribute_id=attribute_id, value=value))

    return raw_values


@router.get("", response_model=ShoppingCartModel)
async def get_cart(
    request: Request,
    validate_checkout_attributes: bool = False,
    order_review: bool = False,
    context: WorkContext = Depends(work_context),
):
    """Get the shopping cart of the current customer"""
    aggregator = get_cart_aggregator()
    customer = context.customer
    items = cart_db.get_cart_items(customer.id)

    raw_values = parse_checkout_attribute_params(request)
    if raw_values:
        cart = aggregator.tree_builder.organize(items)
        _, customer = get_attribute_resolver().resolve_and_save(customer, cart, raw_values)

    return aggregator.prepare_shopping_cart(
        ShoppingCartRequest(
            customer=customer,
            items=items,
            currency=context.currency,
            validate_checkout_attributes=validate_checkout_attributes,
            prepare_order_review_data=order_review,
        )
    )


@router.post("/checkout-attributes", response_model=CheckoutAttributesResponse)
async def save_checkout_attributes(
    request: CheckoutAttributesRequest,
    context: WorkContext = Depends(work_context),
):
    """Resolve and save the checkout attributes of the current customer"""
    aggregator = get_cart_aggregator()
    cart = aggregator.tree_builder.organize(cart_db.get_cart_items(context.customer.id))

    selection, _ = get_attribute_resolver().resolve_and_save(context.customer, cart, request.values)
    return CheckoutAttributesResponse(attributes=selection.to_dict(), encoded=encode(selection))


@router.get("/mini", response_model=MiniShoppingCartModel)
async def get_mini_cart(context: WorkContext = Depends(work_context)):
    """Get the compact off-canvas cart"""
    if not get_settings().cart.mini_cart_enabled:
        raise HTTPException(status_code=404, detail="Mini cart is disabled")

    items = cart_db.get_cart_items(context.customer.id)
    return get_cart_aggregator().prepare_mini_cart(context.customer, items, context.currency)
