"""
Cart aggregation

Walks the organized cart, composes prices per item and assembles the
shopping cart, wishlist and mini cart presentation models.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Sequence, Union

from ..core.checkout_state import CheckoutState
from ..core.config import Settings
from ..models.cart import CartLineItem
from ..models.customer import Customer
from ..models.presentation import (
    BundleItemModel,
    CartItemModelBase,
    EstimateShippingModel,
    ImageModel,
    MiniCartBundleItemModel,
    MiniCartItemModel,
    MiniShoppingCartModel,
    RewardPointsBoxModel,
    DiscountBoxModel,
    SelectListItem,
    ShoppingCartItemModel,
    ShoppingCartModel,
    WishlistItemModel,
    WishlistModel,
)
from ..models.product import DeliveryTimesPresentation, Product, ProductVisibility
from .checkout_attributes import CheckoutAttributePresenter, format_checkout_attributes
from .collaborators import (
    AttributeMaterializer,
    CheckoutAttributeProvider,
    CurrencyCollaborator,
    DiscountCollaborator,
    Localizer,
    PricingCollaborator,
    ProductCatalog,
    ShippingCatalog,
    TaxCollaborator,
    ValidationCollaborator,
)
from .money import Currency, Money
from .pricing import PriceBreakdown, PriceComposer
from .selection import AttributeSelection, decode
from .shipping import EstimateShippingBuilder
from .tree import CartItemTreeBuilder, ResolvedCartItem

logger = logging.getLogger(__name__)


@dataclass
class ShoppingCartRequest:
    """Everything needed to prepare a shopping cart model"""
    customer: Customer
    items: Sequence[CartLineItem]
    currency: Currency
    checkout_state: CheckoutState = field(default_factory=CheckoutState)
    estimate_shipping: Optional[EstimateShippingModel] = None
    is_editable: bool = True
    validate_checkout_attributes: bool = False
    prepare_estimate_shipping: bool = True
    set_estimate_shipping_default_address: bool = True
    prepare_order_review_data: bool = False


class CartAggregator:
    """Assembles cart presentation models from flat line items"""

    def __init__(
        self,
        settings: Settings,
        pricing: PricingCollaborator,
        tax: TaxCollaborator,
        currency: CurrencyCollaborator,
        validator: ValidationCollaborator,
        materializer: AttributeMaterializer,
        attribute_provider: CheckoutAttributeProvider,
        discounts: DiscountCollaborator,
        shipping_catalog: ShippingCatalog,
        localizer: Localizer,
        catalog: ProductCatalog,
        tree_builder: Optional[CartItemTreeBuilder] = None,
    ):
        self.settings = settings
        self.pricing = pricing
        self.tax = tax
        self.currency = currency
        self.validator = validator
        self.materializer = materializer
        self.attribute_provider = attribute_provider
        self.discounts = discounts
        self.localizer = localizer
        self.catalog = catalog
        self.tree_builder = tree_builder or CartItemTreeBuilder()
        self.composer = PriceComposer(pricing, tax, currency, materializer, localizer)
        self.attribute_presenter = CheckoutAttributePresenter(tax, currency)
        self.estimate_shipping = EstimateShippingBuilder(shipping_catalog, localizer)

    # Shopping cart

    def prepare_shopping_cart(self, request: ShoppingCartRequest) -> ShoppingCartModel:
        """Prepare the full shopping cart model"""
        if not request.items:
            return ShoppingCartModel()

        customer = request.customer
        currency = request.currency
        cart_settings = self.settings.cart
        cart = self.tree_builder.organize(request.items)
        selection = decode(customer.checkout_attributes)

        model = ShoppingCartModel(
            is_editable=request.is_editable,
            media_dimensions=self.settings.media.cart_thumb_picture_size,
            display_weight=cart_settings.show_weight,
            display_base_price=cart_settings.show_base_price,
            display_comment_box=cart_settings.show_comment_box,
            display_esd_revocation_waiver_box=cart_settings.show_esd_revocation_waiver_box,
            terms_of_service_enabled=self.settings.orders.terms_of_service_enabled,
            measure_unit_name=self.settings.base_weight_name,
            delivery_times_presentation=cart_settings.delivery_times_presentation,
        )
        self._prepare_model_base(model)

        self._prepare_discount_box(model.discount_box, customer)
        model.gift_card_box.display = cart_settings.show_gift_card_box
        self._prepare_reward_points(model.reward_points, cart, customer, currency)

        result = self.validator.validate(cart, request.validate_checkout_attributes, selection)
        if not result.is_valid:
            model.warnings.extend(result.warnings)

        attributes = self.attribute_provider.valid_attributes_for(cart)
        model.checkout_attributes = self.attribute_presenter.prepare(
            attributes, selection, currency, display_prices=cart_settings.display_prices
        )
        model.checkout_attribute_info = format_checkout_attributes(attributes, selection) or None

        if request.prepare_estimate_shipping:
            if self.settings.shipping.estimate_shipping_enabled and _requires_shipping(cart):
                model.estimate_shipping = self.estimate_shipping.prepare(
                    customer,
                    request.estimate_shipping,
                    use_customer_address=request.set_estimate_shipping_default_address,
                )

        root_breakdowns = []
        for node in cart:
            item_model, breakdown = self._prepare_cart_item(node, currency)
            model.items.append(item_model)
            root_breakdowns.append(breakdown)

        model.total_products = sum(node.item.quantity for node in cart)
        model.sub_total = self._format_total(
            [b.sub_total_with_discount_base for b in root_breakdowns], currency
        )

        if request.prepare_order_review_data:
            self._prepare_order_review_data(model, cart, customer, request.checkout_state)

        logger.debug(
            f"Prepared cart for customer {customer.id}: {len(model.items)} item(s), "
            f"{len(model.warnings)} warning(s)"
        )
        return model

    def _prepare_cart_item(
        self,
        node: ResolvedCartItem,
        currency: Currency,
    ) -> tuple[ShoppingCartItemModel, PriceBreakdown]:
        item = node.item
        breakdown = self.composer.compose(node, currency)
        product = breakdown.product

        model = ShoppingCartItemModel(
            id=item.id,
            product_id=product.id,
            product_name=product.name,
            entered_quantity=item.quantity,
            weight=breakdown.weight,
            is_ship_enabled=product.is_shipping_enabled,
            is_download=product.is_download,
            is_esd=product.is_esd,
            has_user_agreement=product.has_user_agreement,
            disable_wishlist_button=product.disable_wishlist_button,
        )
        self._prepare_delivery_time(model, product)
        self._prepare_item_base(node, model, breakdown, currency, include_attribute_prices=True)

        if self.settings.cart.show_base_price and not breakdown.call_for_price:
            model.base_price = self.pricing.base_price_info(
                product, currency, breakdown.base_price_adjustment
            )

        model.child_items = [self._prepare_cart_item(child, currency)[0] for child in node.children]
        return model, breakdown

    def _prepare_delivery_time(self, model: ShoppingCartItemModel, product: Product) -> None:
        presentation = self.settings.cart.delivery_times_presentation
        if presentation == DeliveryTimesPresentation.NONE:
            return

        delivery_time = self.catalog.get_delivery_time(product.delivery_time_id)
        if delivery_time is None:
            return

        model.delivery_time_name = delivery_time.name
        model.delivery_time_hex_value = delivery_time.color_hex_value
        if presentation in (DeliveryTimesPresentation.DATE_ONLY, DeliveryTimesPresentation.LABEL_AND_DATE):
            model.delivery_time_date = self.catalog.formatted_delivery_date(delivery_time)

    def _prepare_order_review_data(
        self,
        model: ShoppingCartModel,
        cart: Sequence[ResolvedCartItem],
        customer: Customer,
        checkout_state: CheckoutState,
    ) -> None:
        review = model.order_review_data
        review.display = True

        if _requires_shipping(cart):
            review.is_shippable = True
            review.shipping_address = customer.shipping_address
            review.shipping_method = customer.selected_shipping_option
            if checkout_state.has_only_one_active_shipping_method is not None:
                review.display_shipping_method_change_option = (
                    not checkout_state.has_only_one_active_shipping_method
                )

        if checkout_state.has_only_one_active_payment_method is not None:
            review.display_payment_method_change_option = (
                not checkout_state.has_only_one_active_payment_method
            )

        review.payment_method = customer.selected_payment_method
        review.payment_summary = checkout_state.payment_summary
        review.is_payment_selection_skipped = checkout_state.is_payment_selection_skipped

    def _prepare_discount_box(self, box: DiscountBoxModel, customer: Customer) -> None:
        box.display = self.settings.cart.show_discount_box
        if not customer.discount_coupon_code:
            return

        discount = self.discounts.find_by_coupon_code(customer.discount_coupon_code)
        if (
            discount is not None
            and discount.requires_coupon_code
            and self.discounts.is_valid(discount, customer)
        ):
            box.current_code = discount.coupon_code

    def _prepare_reward_points(
        self,
        box: RewardPointsBoxModel,
        cart: Sequence[ResolvedCartItem],
        customer: Customer,
        currency: Currency,
    ) -> None:
        if not self.settings.reward_points.enabled or customer.is_guest:
            return
        if any(node.item.product.is_recurring for tree in cart for node in tree.walk()):
            return

        balance = customer.reward_points_balance
        amount_base = self.pricing.reward_points_to_amount(balance)
        amount = self.currency.convert_from_primary(amount_base.amount, currency)

        if amount.amount > 0:
            box.display_reward_points = True
            box.reward_points_amount = str(amount)
            box.reward_points_balance = balance
            box.use_reward_points = customer.use_reward_points_during_checkout

    # Wishlist

    def prepare_wishlist(
        self,
        customer: Customer,
        items: Sequence[CartLineItem],
        currency: Currency,
        is_editable: bool = True,
    ) -> WishlistModel:
        """Prepare the wishlist model of a customer"""
        cart_settings = self.settings.cart
        model = WishlistModel(
            is_editable=is_editable,
            email_wishlist_enabled=cart_settings.email_wishlist_enabled,
        )
        if not items:
            return model

        model.customer_guid = customer.customer_guid
        model.customer_fullname = customer.full_name
        model.show_items_from_wishlist_to_cart_button = (
            cart_settings.show_items_from_wishlist_to_cart_button
        )
        self._prepare_model_base(model)

        cart = self.tree_builder.organize(items)

        result = self.validator.validate(cart)
        if not result.is_valid:
            model.warnings.extend(result.warnings)

        model.items = [self._prepare_wishlist_item(node, currency) for node in cart]
        return model

    def _prepare_wishlist_item(self, node: ResolvedCartItem, currency: Currency) -> WishlistItemModel:
        item = node.item
        breakdown = self.composer.compose(node, currency)

        model = WishlistItemModel(
            id=item.id,
            product_id=breakdown.product.id,
            product_name=breakdown.product.name,
            entered_quantity=item.quantity,
            disable_buy_button=breakdown.product.disable_buy_button,
        )
        self._prepare_item_base(node, model, breakdown, currency, include_attribute_prices=False)
        model.quantity_unit_name = None

        model.child_items = [self._prepare_wishlist_item(child, currency) for child in node.children]
        return model

    # Mini cart

    def prepare_mini_cart(
        self,
        customer: Customer,
        items: Sequence[CartLineItem],
        currency: Currency,
    ) -> MiniShoppingCartModel:
        """Prepare the compact off-canvas cart"""
        cart_settings = self.settings.cart
        media = self.settings.media
        model = MiniShoppingCartModel(
            show_product_images=cart_settings.show_product_images_in_mini_cart,
            thumb_size=media.mini_cart_thumb_picture_size,
            current_customer_is_guest=customer.is_guest,
            anonymous_checkout_allowed=self.settings.orders.anonymous_checkout_allowed,
            show_base_price=cart_settings.show_base_price,
        )

        cart = self.tree_builder.organize(items)
        model.total_products = sum(node.item.quantity for node in cart)
        if not cart:
            return model

        # Customers have to visit the cart first when a checkout attribute is required
        attributes = self.attribute_provider.valid_attributes_for(cart)
        model.display_checkout_button = not any(a.is_required for a in attributes)

        sub_totals = []
        for node in cart:
            item = node.item
            breakdown = self.composer.compose(node, currency)
            product = breakdown.product
            sub_totals.append(breakdown.sub_total_without_discount_base)

            item_model = MiniCartItemModel(
                id=item.id,
                product_id=product.id,
                product_name=product.name,
                short_desc=product.short_description,
                entered_quantity=item.quantity,
                min_order_amount=product.order_minimum_quantity,
                max_order_amount=product.order_maximum_quantity,
                quantity_step=product.quantity_step if product.quantity_step > 0 else 1,
                attribute_info=self._format_attributes(product, breakdown.selection, currency, False),
                unit_price=breakdown.unit_price,
                created_on_utc=item.updated_at,
            )

            if cart_settings.show_product_bundle_images:
                item_model.bundle_items = [
                    MiniCartBundleItemModel(
                        product_id=child.item.product.id,
                        product_name=child.item.product.name,
                    )
                    for child in node.children
                    if child.item.bundle_item is not None and not child.item.bundle_item.hide_thumbnail
                ]

            if (
                model.show_base_price
                and breakdown.unit_price_value is not None
                and breakdown.unit_price_value.amount != 0
            ):
                item_model.base_price_info = self.pricing.base_price_info(
                    product, currency, Decimal("0")
                )

            if cart_settings.show_product_images_in_mini_cart:
                item_model.image = self._prepare_image(
                    product, breakdown.selection, media.mini_cart_thumb_picture_size, item_model.product_name
                )

            model.items.append(item_model)

        model.sub_total = self._format_total(sub_totals, currency)
        return model

    # Shared helpers

    def _prepare_model_base(self, model: Union[ShoppingCartModel, WishlistModel]) -> None:
        cart_settings = self.settings.cart
        model.display_short_desc = cart_settings.show_short_desc
        model.show_product_images = cart_settings.show_product_images
        model.show_product_bundle_images = cart_settings.show_product_bundle_images
        model.show_sku = cart_settings.show_sku
        model.bundle_thumb_size = self.settings.media.cart_thumb_bundle_item_picture_size

    def _prepare_item_base(
        self,
        node: ResolvedCartItem,
        model: CartItemModelBase,
        breakdown: PriceBreakdown,
        currency: Currency,
        include_attribute_prices: bool,
    ) -> None:
        item = node.item
        product = breakdown.product

        model.sku = product.sku
        model.short_desc = product.short_description
        model.product_type = product.product_type
        model.visible_individually = product.visibility != ProductVisibility.HIDDEN
        model.min_order_amount = product.order_minimum_quantity
        model.max_order_amount = product.order_maximum_quantity
        model.quantity_step = product.quantity_step if product.quantity_step > 0 else 1
        model.created_on_utc = item.updated_at

        bundle_item = item.bundle_item
        if bundle_item is not None:
            model.bundle_item = BundleItemModel(
                id=bundle_item.id,
                display_order=bundle_item.display_order,
                hide_thumbnail=bundle_item.hide_thumbnail,
                price_with_discount=breakdown.bundle_item_price_with_discount,
            )
            model.bundle_per_item_pricing = bundle_item.per_item_pricing
            model.bundle_per_item_shopping_cart = bundle_item.per_item_shopping_cart
            model.attribute_info = self._format_attributes(
                product, breakdown.selection, currency, False
            )
            if bundle_item.name:
                model.product_name = bundle_item.name
            if bundle_item.short_description:
                model.short_desc = bundle_item.short_description
        else:
            model.attribute_info = self._format_attributes(
                product, breakdown.selection, currency, include_attribute_prices
            )

        model.allowed_quantities = [
            SelectListItem(text=str(quantity), value=str(quantity), selected=item.quantity == quantity)
            for quantity in product.parse_allowed_quantities()
        ]
        model.quantity_unit_name = product.quantity_unit_name

        if product.is_recurring:
            model.recurring_info = self.localizer.get_resource(
                "ShoppingCart.RecurringPeriod",
                product.recurring_cycle_length,
                product.recurring_cycle_period.value,
            )

        model.unit_price = breakdown.unit_price
        model.sub_total = breakdown.sub_total
        model.discount = breakdown.discount

        media = self.settings.media
        if bundle_item is not None:
            if self.settings.cart.show_product_bundle_images:
                model.image = self._prepare_image(
                    product, breakdown.selection, media.cart_thumb_bundle_item_picture_size, model.product_name
                )
        elif self.settings.cart.show_product_images:
            model.image = self._prepare_image(
                product, breakdown.selection, media.cart_thumb_picture_size, model.product_name
            )

        # Validate each item on its own so one item's warnings do not hide another's
        result = self.validator.validate([ResolvedCartItem(item=item)])
        if not result.is_valid:
            model.warnings.extend(result.warnings)

    def _format_attributes(
        self,
        product: Product,
        selection: AttributeSelection,
        currency: Currency,
        include_prices: bool,
    ) -> str:
        parts = []
        for value in self.materializer.materialize_values(selection):
            text = f"{value.attribute_name}: {value.name}"
            if include_prices and value.price_adjustment != 0:
                primary = self.currency.primary_currency()
                adjustment_base = self.tax.product_price(
                    product, Money(abs(value.price_adjustment), primary)
                ).price
                adjustment = self.currency.convert_from_primary(adjustment_base.amount, currency)
                sign = "+" if value.price_adjustment > 0 else "-"
                text = f"{text} [{sign}{adjustment}]"
            parts.append(text)
        return ", ".join(parts)

    def _prepare_image(
        self,
        product: Product,
        selection: AttributeSelection,
        thumb_size: int,
        product_name: str,
    ) -> ImageModel:
        media_file_id = None
        combination = self.materializer.find_combination(product.id, selection)
        if combination is not None and combination.media_file_ids:
            media_file_id = combination.media_file_ids[0]
        elif product.media_file_ids:
            media_file_id = product.media_file_ids[0]
        elif product.visibility == ProductVisibility.HIDDEN and product.parent_grouped_product_id > 0:
            # Associated products of a grouped product fall back to the parent's picture
            parent = self.catalog.get_product(product.parent_grouped_product_id)
            if parent is not None and parent.media_file_ids:
                media_file_id = parent.media_file_ids[0]

        return ImageModel(
            media_file_id=media_file_id,
            thumb_size=thumb_size,
            title=self.localizer.get_resource("Media.Product.ImageLinkTitleFormat", product_name),
            alt=self.localizer.get_resource("Media.Product.ImageAlternateTextFormat", product_name),
            no_fallback=self.settings.media.hide_product_default_pictures,
        )

    def _format_total(self, amounts: Sequence[Optional[Money]], currency: Currency) -> Optional[str]:
        total = None
        for amount in amounts:
            if amount is None:
                continue
            total = amount if total is None else total + amount
        if total is None:
            return None
        return str(self.currency.convert_from_primary(total.amount, currency))


def _requires_shipping(cart: Sequence[ResolvedCartItem]) -> bool:
    return any(node.item.product.is_shipping_enabled for tree in cart for node in tree.walk())
