"""Estimate shipping country/state cascade"""

from typing import Optional

from ..models.customer import Customer
from ..models.presentation import EstimateShippingModel, EstimateShippingState, SelectListItem
from .collaborators import Localizer, ShippingCatalog

OTHER_NON_US_RESOURCE = "Address.OtherNonUS"


class EstimateShippingBuilder:
    """Prepares the estimate shipping box and its country -> state cascade"""

    def __init__(self, catalog: ShippingCatalog, localizer: Localizer):
        self.catalog = catalog
        self.localizer = localizer

    def prepare(
        self,
        customer: Customer,
        inbound: Optional[EstimateShippingModel] = None,
        use_customer_address: bool = True,
    ) -> EstimateShippingModel:
        """
        Build an enabled estimate shipping model.

        The customer's shipping address provides the defaults only when
        requested; otherwise the inbound values are kept.
        """
        model = inbound.model_copy(deep=True) if inbound else EstimateShippingModel()
        model.enabled = True

        address = customer.shipping_address if use_customer_address else None
        country_id = address.country_id if address else model.country_id
        state_id = address.state_province_id if address else model.state_province_id

        model.available_countries = [
            SelectListItem(text=country.name, value=str(country.id))
            for country in self.catalog.countries_for_shipping()
        ]
        self.select_country(model, country_id, state_id)

        if address:
            model.zip_postal_code = address.zip_postal_code

        return model

    def select_country(
        self,
        model: EstimateShippingModel,
        country_id: Optional[int],
        state_id: Optional[int] = None,
    ) -> EstimateShippingModel:
        """Select a country and rebuild the state list from scratch"""
        model.country_id = country_id
        for country in model.available_countries:
            country.selected = country_id is not None and country.value == str(country_id)

        states = self.catalog.states_for(country_id) if country_id else []
        if states:
            model.state = EstimateShippingState.COUNTRY_SELECTED_WITH_STATES
            model.state_province_id = state_id
            model.available_states = [
                SelectListItem(text=state.name, value=str(state.id), selected=state.id == state_id)
                for state in states
            ]
        else:
            model.state = (
                EstimateShippingState.COUNTRY_SELECTED_NO_STATES
                if country_id
                else EstimateShippingState.NO_COUNTRY_SELECTED
            )
            model.state_province_id = None
            model.available_states = [
                SelectListItem(text=self.localizer.get_resource(OTHER_NON_US_RESOURCE), value="0")
            ]

        return model
