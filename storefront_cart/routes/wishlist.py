"""Wishlist API routes for the storefront"""

import uuid

from fastapi import APIRouter, Depends, HTTPException

from ..context import WorkContext, work_context
from ..database import cart_db, customer_db
from ..models.cart import ShoppingCartType
from ..models.presentation import WishlistModel
from ..services import get_cart_aggregator

router = APIRouter(prefix="/api/wishlist", tags=["Wishlist"])


@router.get("", response_model=WishlistModel)
async def get_wishlist(context: WorkContext = Depends(work_context)):
    """Get the wishlist of the current customer"""
    items = cart_db.get_cart_items(context.customer.id, ShoppingCartType.WISHLIST)
    return get_cart_aggregator().prepare_wishlist(context.customer, items, context.currency)


@router.get("/{customer_guid}", response_model=WishlistModel)
async def get_shared_wishlist(
    customer_guid: uuid.UUID,
    context: WorkContext = Depends(work_context),
):
    """Get another customer's wishlist, read only"""
    owner = customer_db.get_customer_by_guid(customer_guid)
    if not owner:
        raise HTTPException(status_code=404, detail="Wishlist not found")

    items = cart_db.get_cart_items(owner.id, ShoppingCartType.WISHLIST)
    is_editable = owner.id == context.customer.id
    return get_cart_aggregator().prepare_wishlist(owner, items, context.currency, is_editable=is_editable)
